from typing import Mapping  # noqa:F401
from typing import Optional  # noqa:F401

from ..internal.constants import DEFAULT_ENCODING
from ..internal.constants import DEFAULT_MAX_PAYLOAD_SIZE
from ..internal.constants import ENCODINGS
from ..internal.env import get_config as _get_config
from ..internal.logger import get_logger


log = get_logger(__name__)


class Config(object):
    """Configuration object for tracebatch.

    Values are read once, from the environment unless an explicit ``source``
    mapping is given.
    """

    def __init__(self, source=None):
        # type: (Optional[Mapping[str, str]]) -> None
        self.encoding = _get_config("TRACEBATCH_ENCODING", DEFAULT_ENCODING, str.lower, source)
        if self.encoding not in ENCODINGS:
            log.error(
                "Setting TRACEBATCH_ENCODING to %r is not supported. The default %r encoding will be used.",
                self.encoding,
                DEFAULT_ENCODING,
            )
            self.encoding = DEFAULT_ENCODING

        self.max_payload_size = _get_config(
            ["TRACEBATCH_MAX_PAYLOAD_SIZE_BYTES", "TRACEBATCH_MAX_PAYLOAD_SIZE"], DEFAULT_MAX_PAYLOAD_SIZE, int, source
        )
        if self.max_payload_size <= 0:
            raise ValueError("TRACEBATCH_MAX_PAYLOAD_SIZE_BYTES must be greater than 0, got %r" % self.max_payload_size)

    def __repr__(self):
        return "{0}(encoding={1!r}, max_payload_size={2})".format(
            self.__class__.__name__, self.encoding, self.max_payload_size
        )


config = Config()

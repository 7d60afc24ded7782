from typing import List  # noqa:F401
from typing import TYPE_CHECKING

from .internal.constants import DEFAULT_MAX_PAYLOAD_SIZE


if TYPE_CHECKING:  # pragma: no cover
    from .internal.encoding import _EncoderBase  # noqa:F401


class Payload(object):
    """
    In-flight batch of encoded traces

    This class stores traces that were already encoded on their own so the
    batch planner can tell, before appending, whether the next trace still
    fits under the max payload size.

    DEV: We buffer encoded traces rather than spans so that we can reliably
         determine the size of the payload without re-encoding it.
    """

    __slots__ = ("traces", "size", "encoder", "max_size")

    def __init__(self, encoder, max_size=DEFAULT_MAX_PAYLOAD_SIZE):
        # type: (_EncoderBase, int) -> None
        """
        Constructor for Payload

        :param encoder: The encoder whose ``join`` builds the final payload
        :type encoder: ``tracebatch.encoding.Encoder``
        :param max_size: The max number of bytes the encoded traces may add up to (default: 5 MiB)
        """
        self.max_size = max_size
        self.encoder = encoder
        self.traces = []  # type: List[bytes]
        self.size = 0

    def fits(self, encoded):
        # type: (bytes) -> bool
        """
        Whether an encoded trace can be appended without going over the max size

        The limit is inclusive: a payload whose size ends up exactly at
        ``max_size`` is accepted.
        """
        return self.size + len(encoded) <= self.max_size

    def add_encoded(self, encoded):
        # type: (bytes) -> None
        """
        Append an already encoded trace to this payload

        :param encoded: A trace previously encoded by ``self.encoder``
        """
        self.traces.append(encoded)
        self.size += len(encoded)

    @property
    def length(self):
        # type: () -> int
        """
        Get the number of traces in this payload
        """
        return len(self.traces)

    @property
    def empty(self):
        # type: () -> bool
        """
        Whether this payload is empty or not
        """
        return self.length == 0

    def get_payload(self):
        # type: () -> bytes
        """
        Get the fully encoded payload

        :returns: The joined payload, ready to be transmitted
        :rtype: bytes
        """
        # DEV: `self.traces` is a list of encoded traces, `join` wraps them without re-encoding
        return self.encoder.join(self.traces)

    def __repr__(self):
        return "{0}(length={1}, size={2}b, max_size={3}b)".format(
            self.__class__.__name__, self.length, self.size, self.max_size
        )

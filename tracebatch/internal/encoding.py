from collections.abc import Mapping
import json
import logging  # noqa:F401
from typing import Any
from typing import Callable  # noqa:F401
from typing import Dict
from typing import List
from typing import Optional  # noqa:F401
from typing import Sequence

import msgpack

from ..settings import config
from .batching import encode_traces
from .compat import ensure_text
from .constants import ENCODING_JSON
from .constants import ENCODING_MSGPACK
from .logger import get_logger


__all__ = ["EncodingError", "JSONEncoder", "MsgpackEncoder", "ENCODERS", "get_encoder"]


log = get_logger(__name__)

Trace = Sequence[Any]


class EncodingError(RuntimeError):
    """Raised when a trace holds data the wire format cannot represent."""


class _EncoderBase(object):
    """
    Encoder interface that provides the logic to encode traces.

    An encoder serializes one trace at a time with ``encode`` and wraps any
    number of those encodings into a single payload with ``join``.
    """

    @property
    def content_type(self):
        # type: () -> str
        """MIME type the transport sends along with payloads of this format."""
        raise NotImplementedError()

    def encode_traces(self, traces, sink, max_size=None, logger=None):
        # type: (Sequence[Trace], Callable[[bytes, int], Any], Optional[int], Optional[logging.Logger]) -> List[Any]
        """
        Encodes a list of traces in batches, expecting a list of items where
        each item is a list of spans. A serialized batch payload will not
        exceed ``max_size``. Single traces larger than ``max_size`` are
        discarded. The trace nesting is not changed.

        :param traces: A list of traces that should be serialized
        :param sink: Called with ``(payload, trace_count)`` for every batch
        :param max_size: Maximum payload size in bytes, defaults to the configured one
        :param logger: Where to report dropped traces, defaults to the batching module logger
        :returns: The return values of ``sink``, one per batch
        """
        return encode_traces(self, traces, sink, max_size=max_size, logger=logger)

    def encode(self, trace):
        # type: (Trace) -> bytes
        """
        Serializes a single trace into bytes suitable for network transmission.
        This method must be implemented by every format.
        """
        raise NotImplementedError()

    def join(self, encoded_traces):
        # type: (Sequence[bytes]) -> bytes
        """
        Concatenates a list of traces previously encoded by ``encode`` into
        a payload that decodes as a list of traces.
        """
        raise NotImplementedError()

    def decode(self, data):
        # type: (bytes) -> Any
        raise NotImplementedError()

    @staticmethod
    def _span_to_dict(span):
        # type: (Any) -> Dict[str, Any]
        if isinstance(span, Mapping):
            return dict(span)

        to_dict = getattr(span, "to_dict", None)
        if to_dict is None:
            raise TypeError("span %r is neither a mapping nor has a to_dict() method" % (span,))
        return dict(to_dict())

    def _encoding_failed(self, trace, exc):
        # type: (Trace, Exception) -> EncodingError
        return EncodingError(
            "failed to encode trace with %d spans to %s: %s" % (len(trace), self.content_type, exc)
        )


class JSONEncoder(_EncoderBase):
    content_type = "application/json"

    def encode(self, trace):
        try:
            normalized = [JSONEncoder._normalize_span(self._span_to_dict(span)) for span in trace]
            return json.dumps(normalized, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError, OverflowError) as e:
            raise self._encoding_failed(trace, e) from e

    def join(self, encoded_traces):
        return b"[" + b",".join(encoded_traces) + b"]"

    def decode(self, data):
        return json.loads(data)

    @staticmethod
    def _normalize_span(span):
        # Ensure the string attributes are actually strings and not bytes
        # DEV: Other fields are left alone, bytes anywhere else are an encoding error
        for key in ("name", "service", "resource"):
            if key in span:
                span[key] = JSONEncoder._normalize_str(span[key])
        return span

    @staticmethod
    def _normalize_str(obj):
        if isinstance(obj, bytes):
            return ensure_text(obj, errors="backslashreplace")
        return obj


class MsgpackEncoder(_EncoderBase):
    content_type = "application/msgpack"

    def encode(self, trace):
        try:
            return msgpack.packb([self._span_to_dict(span) for span in trace], use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise self._encoding_failed(trace, e) from e

    def join(self, encoded_traces):
        # DEV: Packer is not thread-safe, build one per call
        packer = msgpack.Packer(use_bin_type=True)
        return packer.pack_array_header(len(encoded_traces)) + b"".join(encoded_traces)

    def decode(self, data):
        return msgpack.unpackb(data, raw=False, strict_map_key=False)


ENCODERS = {
    ENCODING_JSON: JSONEncoder,
    ENCODING_MSGPACK: MsgpackEncoder,
}


def get_encoder(name=None):
    # type: (Optional[str]) -> _EncoderBase
    """
    Build the encoder registered under ``name``, ``TRACEBATCH_ENCODING`` by default.
    """
    if name is None:
        name = config.encoding
    try:
        encoder_cls = ENCODERS[name]
    except KeyError:
        raise ValueError("unknown encoding %r, expected one of %s" % (name, ", ".join(sorted(ENCODERS))))
    log.debug("using %s encoder for %s payloads", name, encoder_cls.content_type)
    return encoder_cls()

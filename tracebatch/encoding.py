from .internal.batching import encode_traces
from .internal.batching import iter_batches
from .internal.constants import DEFAULT_MAX_PAYLOAD_SIZE
from .internal.encoding import ENCODERS
from .internal.encoding import EncodingError
from .internal.encoding import JSONEncoder
from .internal.encoding import MsgpackEncoder
from .internal.encoding import get_encoder


Encoder = MsgpackEncoder


__all__ = (
    "DEFAULT_MAX_PAYLOAD_SIZE",
    "ENCODERS",
    "Encoder",
    "EncodingError",
    "JSONEncoder",
    "MsgpackEncoder",
    "encode_traces",
    "get_encoder",
    "iter_batches",
)

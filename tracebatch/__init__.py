import importlib.metadata

from .encoding import DEFAULT_MAX_PAYLOAD_SIZE
from .encoding import Encoder
from .encoding import EncodingError
from .encoding import JSONEncoder
from .encoding import MsgpackEncoder
from .encoding import encode_traces
from .encoding import get_encoder
from .encoding import iter_batches
from .payload import Payload
from .settings import config


try:
    __version__ = importlib.metadata.version("tracebatch")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "DEFAULT_MAX_PAYLOAD_SIZE",
    "Encoder",
    "EncodingError",
    "JSONEncoder",
    "MsgpackEncoder",
    "Payload",
    "config",
    "encode_traces",
    "get_encoder",
    "iter_batches",
    "__version__",
]

"""
Greedy batching of encoded traces under a maximum payload size.

Traces are encoded one by one and appended to an in-flight ``Payload`` in
arrival order. Whenever the next trace would push the payload over the
limit, the payload is joined and flushed, and a new one is started. A trace
is never split across payloads, and a trace that alone is larger than the
limit is dropped.
"""
import logging
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import TYPE_CHECKING
from typing import Tuple
from typing import TypeVar

from ..payload import Payload
from ..settings import config
from .logger import get_logger


if TYPE_CHECKING:  # pragma: no cover
    from .encoding import _EncoderBase  # noqa:F401


log = get_logger(__name__)

R = TypeVar("R")


def _max_size_or_default(max_size: Optional[int]) -> int:
    if max_size is None:
        return config.max_payload_size
    if max_size <= 0:
        raise ValueError("max_size must be a positive number of bytes, got %r" % (max_size,))
    return max_size


def iter_batches(
    encoder: "_EncoderBase",
    traces: Iterable[Sequence[Any]],
    max_size: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> Iterator[Tuple[bytes, int]]:
    """
    Encode ``traces`` and yield ``(payload, trace_count)`` for every batch.

    Batches are yielded as soon as they are complete, so a consumer sees the
    first payload before later traces are encoded. Traces keep their input
    order, within and across batches.

    :param encoder: The encoder used for every trace and for joining batches
    :param traces: The traces to encode, each one a list of spans
    :param max_size: Maximum payload size in bytes, defaults to ``config.max_payload_size``
    :param logger: Where to report dropped traces, defaults to this module's logger
    """
    return _iter_batches(encoder, traces, _max_size_or_default(max_size), logger or log)


def _iter_batches(encoder, traces, max_size, logger):
    # type: (_EncoderBase, Iterable[Sequence[Any]], int, logging.Logger) -> Iterator[Tuple[bytes, int]]
    payload = Payload(encoder, max_size)
    for trace in traces:
        encoded = encoder.encode(trace)
        if len(encoded) > max_size:
            # This single trace is too large, we can't flush it
            logger.warning(
                "trace (%db, %d spans) larger than max payload size (%db), dropping",
                len(encoded),
                len(trace),
                max_size,
            )
            continue

        if not payload.fits(encoded):
            logger.debug("flushing %r to make room for a %db trace", payload, len(encoded))
            yield payload.get_payload(), payload.length
            payload = Payload(encoder, max_size)

        payload.add_encoded(encoded)

    if not payload.empty:
        yield payload.get_payload(), payload.length


def encode_traces(
    encoder: "_EncoderBase",
    traces: Iterable[Sequence[Any]],
    sink: Callable[[bytes, int], R],
    max_size: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> List[R]:
    """
    Encode ``traces`` in batches and hand each batch to ``sink``.

    ``sink`` is called with the joined payload and the number of traces it
    holds, once per batch and in order. An exception raised by ``sink`` or by
    the encoder stops the traversal and propagates; batches already handed to
    ``sink`` stay sent.

    :returns: The return values of ``sink``, one per batch
    """
    return [sink(payload, count) for payload, count in iter_batches(encoder, traces, max_size, logger)]

"""
Rate limited loggers for tracebatch.

The batch planner reports every trace it drops for being larger than the max
payload size. A misbehaving producer can hit that path for each trace it
sends, so records are limited per call site: one record every
``TRACEBATCH_LOGGING_RATE`` seconds (60 by default, 0 disables the limit).
When the next record from the same call site goes through, it carries the
number of records swallowed in the meantime, rendered by
``TraceBatchFormatter`` as a ``[N skipped]`` suffix.

Loggers at DEBUG level are never limited.
"""

import collections
import logging
import time
from typing import DefaultDict
from typing import Tuple

from .constants import DEFAULT_LOGGING_RATE
from .env import get_config


CallSite = Tuple[str, int]


def get_logger(name: str) -> logging.Logger:
    """Return the ``name`` logger with the call site rate limit installed."""
    logger = logging.getLogger(name)
    # addFilter is a no-op when the filter is already installed
    logger.addFilter(log_filter)
    return logger


class RateLimitBucket:
    """Time window of one call site and the records dropped during it."""

    __slots__ = ("window_start", "skipped")

    def __init__(self, window_start: float, skipped: int = 0):
        self.window_start = window_start
        self.skipped = skipped

    def __repr__(self):
        return f"RateLimitBucket(window_start={self.window_start}, skipped={self.skipped})"

    def allow(self, record: logging.LogRecord, rate: float) -> bool:
        now = time.monotonic()
        if now - self.window_start < rate:
            self.skipped += 1
            return False
        record.skipped = self.skipped
        self.window_start = now
        self.skipped = 0
        return True


_buckets: DefaultDict[CallSite, RateLimitBucket] = collections.defaultdict(
    lambda: RateLimitBucket(float("-inf"))
)

_rate_limit = get_config("TRACEBATCH_LOGGING_RATE", DEFAULT_LOGGING_RATE, int)


def _call_site(record: logging.LogRecord) -> CallSite:
    return record.pathname, record.lineno


def log_filter(record: logging.LogRecord) -> bool:
    if not _rate_limit or logging.getLogger(record.name).getEffectiveLevel() == logging.DEBUG:
        return True
    return _buckets[_call_site(record)].allow(record, _rate_limit)


class TraceBatchFormatter(logging.Formatter):
    """Prefix records with their level and append how many were rate limited."""

    def format(self, record: logging.LogRecord) -> str:
        message = "%s %s" % (record.levelname, super().format(record))
        skipped = getattr(record, "skipped", 0)
        if skipped:
            message += " [%d skipped]" % skipped
        return message


_handler = logging.StreamHandler()
_handler.setFormatter(TraceBatchFormatter())
logging.getLogger("tracebatch").addHandler(_handler)

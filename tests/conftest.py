import pytest

import tracebatch.internal.logger
from tracebatch.internal.encoding import JSONEncoder
from tracebatch.internal.encoding import MsgpackEncoder


@pytest.fixture(autouse=True)
def reset_log_buckets():
    # DEV: the rate limiter is keyed by call site, so a warning logged by one test would silence the next one
    tracebatch.internal.logger._buckets.clear()
    yield
    tracebatch.internal.logger._buckets.clear()


@pytest.fixture(params=[JSONEncoder, MsgpackEncoder], ids=["json", "msgpack"])
def encoder(request):
    return request.param()

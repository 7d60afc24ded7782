import random
import string


def rands(size=6, chars=string.ascii_uppercase + string.digits):
    return "".join(random.choice(chars) for _ in range(size))


def gen_trace(nspans=10, ntags=5, key_size=15, value_size=20, nmetrics=2, name="span_name"):
    """Build a trace of span mappings, the first span being the root."""
    trace_id = random.getrandbits(63)
    root_id = None
    trace = []
    for i in range(0, nspans):
        span_id = random.getrandbits(63)
        span = {
            "trace_id": trace_id,
            "span_id": span_id,
            "parent_id": root_id or 0,
            "name": name,
            "service": "myservice",
            "resource": "/fsdlajfdlaj/afdasd%s" % i,
            "start": 1600000000000000000 + i,
            "duration": random.randint(1, 10**9),
            "error": 0,
            "meta": {rands(key_size): rands(value_size) for _ in range(0, ntags)},
            "metrics": {rands(key_size): random.randint(0, 2**32) for _ in range(0, nmetrics)},
        }
        if root_id is None:
            span["type"] = "web"
            root_id = span_id
        trace.append(span)
    return trace


def padded_trace(pad, name="padded"):
    """Build a single span trace whose encoded size grows with ``pad``."""
    return [{"name": name, "meta": {"pad": "x" * pad}}]

# Trace agent limit payload size of 10 MiB (since agent v5.11.0).
# We set the value to a conservative 5 MiB, in case network speed is slow.
DEFAULT_MAX_PAYLOAD_SIZE = 5 << 20  # 5 MiB

ENCODING_JSON = "json"
ENCODING_MSGPACK = "msgpack"
ENCODINGS = (ENCODING_JSON, ENCODING_MSGPACK)
DEFAULT_ENCODING = ENCODING_MSGPACK

# Allow 1 log record per call site every 60 seconds by default
DEFAULT_LOGGING_RATE = 60

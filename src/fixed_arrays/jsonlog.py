"""
Structured JSON event log.

Each call writes one JSON record per line to stdout, flushed immediately:

    {"ts": 1640995200.0, "event": "buffer_grow", "old_capacity": 16, "new_capacity": 32}

Only the buffer layer logs, and only when asked to; the core primitives never
log.
"""

import json, sys, time


def log(event: str, **fields):
    """
    Write a timestamped JSON record for ``event`` with arbitrary extra fields.

    Example:
        >>> log("buffer_grow", old_capacity=4, new_capacity=8, op="push")
    """
    rec = {"ts": time.time(), "event": event}
    rec.update(fields)
    sys.stdout.write(json.dumps(rec) + "\n")
    sys.stdout.flush()

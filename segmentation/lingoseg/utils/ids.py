"""Segment identifier generation."""

import itertools
import random
import string
import time
import uuid
from typing import Callable

IdFactory = Callable[[], str]

_BASE36 = string.digits + string.ascii_lowercase
_counter = itertools.count(1)


def new_id() -> str:
    """Return a random collision-resistant identifier."""
    return uuid.uuid4().hex


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def timestamp_id() -> str:
    """Return a time-based identifier: millis, a process counter and random suffix.

    Unique within one process for practical purposes; use ``new_id`` when a
    random source is available.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=5))
    return _to_base36(millis) + _to_base36(next(_counter)) + suffix

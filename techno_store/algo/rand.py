from __future__ import annotations

import random
import string

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def generate_random_string(n: int) -> str:
    """Random alphanumeric string of length n (empty for n <= 0)."""
    return "".join(random.choice(CHARSET) for _ in range(max(n, 0)))


def generate_random_integer(lo: int, hi: int) -> int:
    """Random integer in [lo, hi], both inclusive. Bounds are swapped if reversed."""
    if lo > hi:
        lo, hi = hi, lo
    return random.randint(lo, hi)

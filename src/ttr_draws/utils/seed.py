"""Seed parsing for the command line."""

import re

SEED_MAX = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")


class SeedError(ValueError):
    """Raised for a missing, non-numeric or out-of-range seed."""


def parse_seed(text: str) -> int:
    """Parse an unsigned decimal seed in ``[0, 2**32 - 1]``.

    Only ASCII digits are accepted: no sign, whitespace, underscores or
    base prefixes.
    """
    if text is None or not _DIGITS.fullmatch(text):
        raise SeedError(f"Seed must be an unsigned decimal integer, received {text!r}")
    value = int(text)
    if value > SEED_MAX:
        raise SeedError(f"Seed {value} does not fit in 32 bits (max {SEED_MAX})")
    return value

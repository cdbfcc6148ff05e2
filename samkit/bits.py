"""Small bit-twiddling helpers for sizes and masks."""

from __future__ import annotations

_SIZE_BITS = 64
_SIZE_LIMIT = 1 << (_SIZE_BITS - 1)


def _check_unsigned(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def is_power_of_2(x: int) -> bool:
    """Return True if ``x`` is a power of two. Zero is not a power of two."""
    _check_unsigned(x, "x")
    return x != 0 and not (x & (x - 1))


def power_of_2(size: int) -> int:
    """Round ``size`` up to the next power of two.

    A size that is already a power of two is returned unchanged.  A size of
    zero gives zero, as the unsigned arithmetic wraps round.  Sizes that
    would need more than 64 bits raise OverflowError.
    """
    _check_unsigned(size, "size")
    if size == 0:
        return 0
    if size > _SIZE_LIMIT:
        raise OverflowError(f"no {_SIZE_BITS}-bit power of two holds {size}")
    return 1 << (size - 1).bit_length()
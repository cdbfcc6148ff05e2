"""The xorshift128+ pseudo-random number generator.

Each call gives a full 64-bit value.  A process-wide generator seeds itself
from the operating system the first time it is used; independent generators
for use in threads are made with :class:`XorShift128Plus`.
"""

from __future__ import annotations

import getopt
import os
import random
import struct
import sys
import time
from typing import Iterable, Iterator, Optional, Sequence, Tuple

_MASK64 = (1 << 64) - 1
_SEED_STRUCT = struct.Struct("=QQ")
_OUTPUT_STRUCT = struct.Struct("=Q")

Seed = Tuple[int, int]

_USAGE = (
    "bitgen [-h] [-b bits]\n"
    "where:\t-h\tis this help\n"
    "\t-b bits\tgenerates at least the specified bits (rounded up to 64).\n"
    "Normal case is to produce bits until EOF.\n"
)


def _random_seed() -> Seed:
    """Draw a fresh seed from the OS, falling back to a time-seeded PRNG."""
    try:
        raw = os.urandom(_SEED_STRUCT.size)
    except NotImplementedError:
        now = time.time()
        secs = int(now)
        usecs = int((now - secs) * 1_000_000)
        fallback = random.Random(secs ^ (usecs << 8))
        raw = bytes(fallback.randrange(256) for _ in range(_SEED_STRUCT.size))
    return _SEED_STRUCT.unpack(raw)


def _check_seed(seed: Sequence[int]) -> Seed:
    values = tuple(seed)
    if len(values) != 2:
        raise ValueError(f"seed must hold two values, got {len(values)}")
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"seed values must be integers, got {value!r}")
        if not 0 <= value <= _MASK64:
            raise ValueError(f"seed value {value} is not a 64-bit unsigned integer")
    return values[0], values[1]


class XorShift128Plus:
    """An independent xorshift128+ generator with its own 128-bit state."""

    __slots__ = ("state",)

    def __init__(self, seed: Optional[Iterable[int]] = None) -> None:
        self.state: Seed = _random_seed() if seed is None else _check_seed(list(seed))

    def __repr__(self) -> str:
        return f"XorShift128Plus(state=({self.state[0]:#x}, {self.state[1]:#x}))"

    def reseed(self) -> Seed:
        """Replace the state with a fresh random seed and return it."""
        self.state = _random_seed()
        return self.state

    def next(self) -> int:
        """Advance the generator and return the next 64-bit value."""
        x, y = self.state
        x ^= (x << 23) & _MASK64
        s1 = x ^ y ^ (x >> 17) ^ (y >> 26)
        self.state = (y, s1)
        return (s1 + y) & _MASK64

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


_global_generator: Optional[XorShift128Plus] = None


def xorshift_seed() -> Seed:
    """Reseed the process-wide generator from the OS and return the new seed."""
    global _global_generator
    _global_generator = XorShift128Plus()
    return _global_generator.state


def xorshift128plus() -> int:
    """Next value of the process-wide generator, seeding it on first use."""
    if _global_generator is None:
        xorshift_seed()
    return _global_generator.next()


def sam_srand() -> Seed:
    """Alias of :func:`xorshift_seed`."""
    return xorshift_seed()


def sam_rand() -> int:
    """Alias of :func:`xorshift128plus`."""
    return xorshift128plus()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write raw random bits to standard output.

    With ``-b bits`` at least that many bits are written, rounded up to a
    multiple of 64; otherwise output continues until the stream is closed.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        opts, _ = getopt.getopt(args, "hb:")
    except getopt.GetoptError:
        print("Sorry!")
        return 1

    length = 0
    for opt, value in opts:
        if opt == "-h":
            sys.stderr.write(_USAGE)
            return 0
        try:
            length = int(value, 0)
        except ValueError:
            length = 0

    out = sys.stdout.buffer
    if length:
        try:
            while length > 0:
                out.write(_OUTPUT_STRUCT.pack(xorshift128plus()))
                length -= _OUTPUT_STRUCT.size * 8
            out.flush()
        except OSError:
            print("write error")
            return 1
        return 0

    try:
        while True:
            out.write(_OUTPUT_STRUCT.pack(xorshift128plus()))
    except (OSError, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
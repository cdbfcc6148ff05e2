# samkit

A handful of small building blocks for Python programs, with no dependencies
outside the standard library.

## Modules

### `samkit.linuxlist`

`ListHead` is a node of a circular doubly linked list that lives inside the
object it links (its `owner`). A bare `ListHead()` with no owner serves as the
head of a list; an empty head points at itself in both directions.

- Adding and removing: `add(entry)` inserts after the head (stack order),
  `add_tail(entry)` before it (queue order); `delete()` unlinks a node and
  clears its links to `None`, `delete_init()` unlinks it and makes it an empty
  list again. `replace(new)` / `replace_init(new)` put another node in its
  place; `move(head)` / `move_tail(head)` take a node off its list and add it
  to another.
- Whole lists: `rotate_left()`, `cut_position(head, entry)`, `splice(head)`,
  `splice_tail(head)`, `splice_init(head)`, `splice_tail_init(head)`.
- Queries: `is_empty()`, `is_empty_careful()`, `is_singular()`,
  `is_last(head)`, `first_entry()` and `last_entry()` (both raise
  `IndexError` on an empty list), `first_entry_or_none()`, `next_entry()`,
  `prev_entry()`.
- Iteration, safe against removing the current node: `nodes()`,
  `nodes_reversed()`, `entries()`, `entries_reversed()`,
  `entries_from(start)`, `entries_after(start)`, `entries_before(start)`.
  Iterating a head yields the owners; `reversed()` and `len()` work too.

```python
from samkit.linuxlist import ListHead

class Job:
    def __init__(self, name):
        self.name = name
        self.link = ListHead(self)

queue = ListHead()
for name in ("a", "b", "c"):
    queue.add_tail(Job(name).link)

[job.name for job in queue]      # ['a', 'b', 'c']
queue.rotate_left()
[job.name for job in queue]      # ['b', 'c', 'a']
len(queue)                       # 3
```

### `samkit.circleq`

`CircleQueue` is a circular queue of arbitrary objects with `insert_head()`,
`insert_tail()`, `remove()`, `first()` and `last()` (both raise `IndexError`
when empty), iteration in both directions, `len()` and `in`. Elements are
tracked by identity: inserting an object that is already queued, or removing
one that is not, raises `ValueError`. Unhashable objects are accepted.

```python
from samkit.circleq import CircleQueue

a, b, c = object(), object(), object()
queue = CircleQueue()
queue.insert_tail(b)
queue.insert_head(a)
queue.insert_tail(c)
list(queue) == [a, b, c]            # True
queue.remove(b)
list(reversed(queue)) == [c, a]     # True
```

### `samkit.xorshift`

The xorshift128+ generator, producing full 64-bit unsigned values.

- `XorShift128Plus(seed=None)` is an independent generator. `seed` is a pair
  of 64-bit unsigned integers; without one it seeds itself from
  `os.urandom`. `next()` returns the next value, `reseed()` draws a fresh seed
  and returns it, and the object is an endless iterator.
- `xorshift_seed()` reseeds the shared module-level generator and returns the
  seed; `xorshift128plus()` returns its next value, seeding it on first use.
  `sam_srand()` and `sam_rand()` are aliases of these two.

```python
from samkit.xorshift import XorShift128Plus, sam_rand

rng = XorShift128Plus((1, 2))     # reproducible sequence
first = rng.next()
value = sam_rand()                # an integer in range(2**64)
```

### `samkit.bits`

- `is_power_of_2(x)` – `True` if `x` is a power of two; zero is not.
- `power_of_2(size)` – rounds `size` up to the next power of two; a power of
  two is returned unchanged and zero gives zero. Sizes above `2**63` raise
  `OverflowError`. Both functions raise `ValueError` for negative numbers.

```python
from samkit.bits import is_power_of_2, power_of_2

is_power_of_2(64)   # True
power_of_2(100)     # 128
```

### `samkit.netaddr`

- `get_address(hostname)` resolves a host name and returns an `Addresses`
  named tuple `(ipv4, ipv6)` of address strings, either of which may be
  `None`. If several addresses of one family come back, the last is kept.
  Resolution failures raise `socket.gaierror`.
- `get_address4(hostname)` returns the IPv4 address as an integer in host
  order, or `0` if the name cannot be resolved.

```python
from samkit.netaddr import get_address4

get_address4("127.0.0.1")   # 2130706433
```

## Random bits on standard output

`samkit-bitgen` writes xorshift128+ output to standard output as raw 64-bit
words in native byte order, for feeding statistical test tools:

```
samkit-bitgen -b 10000000 > test.bits
```

With `-b bits` it writes at least that many bits, rounded up to a multiple of
64; without it, it keeps writing until the output is closed. `-h` prints a
short help text to standard error.

## What it does not do

The network helpers only look up host names. There is nothing here for
listing network interfaces or reading an interface's address, mask or
gateway.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```
"""Intrusive circular doubly linked list.

A ``ListHead`` is embedded in an object (its *owner*) and links that object
into a list.  A list is itself represented by a bare ``ListHead`` whose owner
is usually ``None``.  An empty list head points at itself in both directions.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class ListHead:
    """A node of a circular doubly linked list, or the head of one.

    After :meth:`delete` a node's links are cleared to ``None``; the node must
    be re-initialised or re-added before it is used again.
    """

    __slots__ = ("owner", "next", "prev")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.next: Optional[ListHead] = self
        self.prev: Optional[ListHead] = self

    def __repr__(self) -> str:
        return f"ListHead(owner={self.owner!r})"

    # -- internal link manipulation -------------------------------------

    @staticmethod
    def _link(new: "ListHead", prev: "ListHead", nxt: "ListHead") -> None:
        nxt.prev = new
        new.next = nxt
        new.prev = prev
        prev.next = new

    @staticmethod
    def _unlink(prev: "ListHead", nxt: "ListHead") -> None:
        nxt.prev = prev
        prev.next = nxt

    def _unlink_self(self) -> None:
        if self.prev is None or self.next is None:
            raise ValueError("node is not on a list")
        self._unlink(self.prev, self.next)

    @staticmethod
    def _splice_between(
        lst: "ListHead", prev: "ListHead", nxt: "ListHead"
    ) -> None:
        first = lst.next
        last = lst.prev
        first.prev = prev
        prev.next = first
        last.next = nxt
        nxt.prev = last

    # -- construction and mutation --------------------------------------

    def init(self) -> None:
        """Make this head an empty list (links point to itself)."""
        self.next = self
        self.prev = self

    def add(self, entry: "ListHead") -> None:
        """Insert ``entry`` right after this head (stack order)."""
        self._link(entry, self, self.next)

    def add_tail(self, entry: "ListHead") -> None:
        """Insert ``entry`` right before this head (queue order)."""
        self._link(entry, self.prev, self)

    def delete(self) -> None:
        """Remove this node from its list and clear its links."""
        self._unlink_self()
        self.next = None
        self.prev = None

    def delete_init(self) -> None:
        """Remove this node from its list and make it an empty list."""
        self._unlink_self()
        self.init()

    def replace(self, new: "ListHead") -> None:
        """Put ``new`` in this node's place. This node's links are left stale."""
        new.next = self.next
        new.next.prev = new
        new.prev = self.prev
        new.prev.next = new

    def replace_init(self, new: "ListHead") -> None:
        """Put ``new`` in this node's place and reinitialise this node."""
        self.replace(new)
        self.init()

    def move(self, head: "ListHead") -> None:
        """Remove this node and add it right after ``head``."""
        self._unlink_self()
        head.add(self)

    def move_tail(self, head: "ListHead") -> None:
        """Remove this node and add it right before ``head``."""
        self._unlink_self()
        head.add_tail(self)

    def rotate_left(self) -> None:
        """Move the first entry of this list to its tail."""
        if not self.is_empty():
            self.next.move_tail(self)

    def cut_position(self, head: "ListHead", entry: "ListHead") -> None:
        """Move the part of ``head`` up to and including ``entry`` into this list.

        This list's previous contents are discarded.  If ``entry`` is ``head``
        itself, this list simply becomes empty.
        """
        if head.is_empty():
            return
        if head.is_singular() and head.next is not entry and head is not entry:
            return
        if entry is head:
            self.init()
            return
        new_first = entry.next
        self.next = head.next
        self.next.prev = self
        self.prev = entry
        entry.next = self
        head.next = new_first
        new_first.prev = head

    def splice(self, head: "ListHead") -> None:
        """Join this list's entries in after ``head``. This head is left stale."""
        if not self.is_empty():
            self._splice_between(self, head, head.next)

    def splice_tail(self, head: "ListHead") -> None:
        """Join this list's entries in before ``head``. This head is left stale."""
        if not self.is_empty():
            self._splice_between(self, head.prev, head)

    def splice_init(self, head: "ListHead") -> None:
        """Join this list's entries in after ``head`` and empty this list."""
        if not self.is_empty():
            self._splice_between(self, head, head.next)
            self.init()

    def splice_tail_init(self, head: "ListHead") -> None:
        """Join this list's entries in before ``head`` and empty this list."""
        if not self.is_empty():
            self._splice_between(self, head.prev, head)
            self.init()

    # -- queries --------------------------------------------------------

    def is_last(self, head: "ListHead") -> bool:
        """True if this node is the last entry of the list ``head``."""
        return self.next is head

    def is_empty(self) -> bool:
        """True if this list has no entries."""
        return self.next is self

    def is_empty_careful(self) -> bool:
        """True if empty and both links agree."""
        nxt = self.next
        return nxt is self and nxt is self.prev

    def is_singular(self) -> bool:
        """True if this list has exactly one entry."""
        return not self.is_empty() and self.next is self.prev

    def first_entry(self) -> Any:
        """Owner of the first entry; raises IndexError on an empty list."""
        if self.is_empty():
            raise IndexError("list is empty")
        return self.next.owner

    def last_entry(self) -> Any:
        """Owner of the last entry; raises IndexError on an empty list."""
        if self.is_empty():
            raise IndexError("list is empty")
        return self.prev.owner

    def first_entry_or_none(self) -> Any:
        """Owner of the first entry, or None if the list is empty."""
        return None if self.is_empty() else self.next.owner

    def next_entry(self) -> Any:
        """Owner of the node following this one."""
        return self.next.owner

    def prev_entry(self) -> Any:
        """Owner of the node preceding this one."""
        return self.prev.owner

    # -- iteration (all safe against removal of the current node) -------

    def nodes(self) -> Iterator["ListHead"]:
        """Yield the nodes of this list from first to last."""
        pos = self.next
        while pos is not self:
            nxt = pos.next
            yield pos
            pos = nxt

    def nodes_reversed(self) -> Iterator["ListHead"]:
        """Yield the nodes of this list from last to first."""
        pos = self.prev
        while pos is not self:
            prv = pos.prev
            yield pos
            pos = prv

    def entries(self) -> Iterator[Any]:
        """Yield the owners of this list's entries from first to last."""
        for node in self.nodes():
            yield node.owner

    def entries_reversed(self) -> Iterator[Any]:
        """Yield the owners of this list's entries from last to first."""
        for node in self.nodes_reversed():
            yield node.owner

    def _forward_from(self, pos: "ListHead") -> Iterator[Any]:
        while pos is not self:
            nxt = pos.next
            yield pos.owner
            pos = nxt

    def entries_from(self, start: "ListHead") -> Iterator[Any]:
        """Yield owners starting at node ``start`` up to the end of this list."""
        return self._forward_from(start)

    def entries_after(self, start: "ListHead") -> Iterator[Any]:
        """Yield owners of the nodes after ``start`` up to the end of this list."""
        return self._forward_from(start.next)

    def entries_before(self, start: "ListHead") -> Iterator[Any]:
        """Yield owners of the nodes before ``start``, walking backwards."""
        pos = start.prev
        while pos is not self:
            prv = pos.prev
            yield pos.owner
            pos = prv

    def __iter__(self) -> Iterator[Any]:
        return self.entries()

    def __reversed__(self) -> Iterator[Any]:
        return self.entries_reversed()

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())
"""A circular doubly linked queue of arbitrary elements.

Elements are tracked by identity, so the same object can be on the queue at
most once; unhashable objects are fine.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional


class _Node:
    __slots__ = ("elm", "next", "prev")

    def __init__(self, elm: Any) -> None:
        self.elm = elm
        self.next: "_Node" = self
        self.prev: "_Node" = self


class CircleQueue:
    """Queue supporting insertion at either end and removal of any element."""

    def __init__(self) -> None:
        self._head = _Node(None)
        self._nodes: Dict[int, _Node] = {}

    def __repr__(self) -> str:
        return f"CircleQueue({list(self)!r})"

    def _new_node(self, elm: Any) -> _Node:
        if id(elm) in self._nodes:
            raise ValueError("element is already on the queue")
        node = _Node(elm)
        self._nodes[id(elm)] = node
        return node

    def insert_head(self, elm: Any) -> None:
        """Put ``elm`` at the front of the queue."""
        node = self._new_node(elm)
        head = self._head
        node.next = head.next
        node.prev = head
        head.next.prev = node
        head.next = node

    def insert_tail(self, elm: Any) -> None:
        """Put ``elm`` at the back of the queue."""
        node = self._new_node(elm)
        head = self._head
        node.prev = head.prev
        node.next = head
        head.prev.next = node
        head.prev = node

    def remove(self, elm: Any) -> None:
        """Take ``elm`` off the queue; raises ValueError if it is not on it."""
        node = self._nodes.pop(id(elm), None)
        if node is None:
            raise ValueError("element is not on the queue")
        node.next.prev = node.prev
        node.prev.next = node.next
        node.next = node.prev = node

    def first(self) -> Any:
        """The element at the front; raises IndexError if empty."""
        if not self._nodes:
            raise IndexError("queue is empty")
        return self._head.next.elm

    def last(self) -> Any:
        """The element at the back; raises IndexError if empty."""
        if not self._nodes:
            raise IndexError("queue is empty")
        return self._head.prev.elm

    def __iter__(self) -> Iterator[Any]:
        node: Optional[_Node] = self._head.next
        while node is not self._head:
            nxt = node.next
            yield node.elm
            node = nxt

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            prv = node.prev
            yield node.elm
            node = prv

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, elm: Any) -> bool:
        return id(elm) in self._nodes
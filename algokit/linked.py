"""Linked list nodes, a doubly linked list and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class ListNode:
    """A list node; ``prev`` is used only by doubly linked lists."""

    value: Any
    next: ListNode | None = None
    prev: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class DoublyLinkedList:
    """A list linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def insert_beginning(self, value: Any) -> ListNode:
        """Put ``value`` in front of the list and return its node."""
        node = ListNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._size += 1
        return node

    def insert_end(self, value: Any) -> ListNode:
        """Put ``value`` at the end of the list and return its node."""
        node = ListNode(value, prev=self.tail)
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._size += 1
        return node


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Singly linked list holding ``values``; None when empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, next=head)
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def to_list(head: ListNode | None) -> list:
    """Values of the list starting at ``head``."""
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous
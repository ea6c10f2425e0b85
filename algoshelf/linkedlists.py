"""Doubly linked lists: a classic node-based list and an intrusive list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

__all__ = ["Node", "DoublyLinkedList", "Person", "IntrusiveList"]

T = TypeVar("T")


@dataclass(eq=False)
class Node:
    """A node of a doubly linked list."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that hands out its nodes for positional inserts."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    def insert_front(self, data: Any) -> Node:
        """Insert ``data`` at the front and return its node."""
        node = Node(data, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return node

    def insert_end(self, data: Any) -> Node:
        """Insert ``data`` at the end and return its node."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        node.prev = last
        return node

    def insert_after(self, node: Optional[Node], data: Any) -> Node:
        """Insert ``data`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("previous node is required, it cannot be None")
        new_node = Node(data, next=node.next, prev=node)
        node.next = new_node
        if new_node.next is not None:
            new_node.next.prev = new_node
        return new_node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def format(self) -> str:
        """Render the list as ``a<==>b<==>NULL``."""
        return "".join(f"{data}<==>" for data in self) + "NULL"


@dataclass
class Person:
    """A record carried by an intrusive list."""

    name: str
    age: int
    weight: int
    height: int

    def format(self) -> str:
        """Render the person's details as a block of lines."""
        return (
            f"Name: {self.name}\n"
            f"Height: {self.height}\n"
            f"Age: {self.age}\n"
            f"Weight: {self.weight}\n"
            "------------\n"
        )


@dataclass(eq=False)
class _Link(Generic[T]):
    item: T
    next: Optional["_Link[T]"] = field(default=None, repr=False)
    prev: Optional["_Link[T]"] = field(default=None, repr=False)


class IntrusiveList(Generic[T]):
    """A doubly linked list whose links are glued to the items themselves."""

    def __init__(self) -> None:
        self._head: Optional[_Link[T]] = None
        self._size = 0

    def push_front(self, item: T) -> None:
        """Insert ``item`` at the front of the list."""
        link = _Link(item, next=self._head)
        if self._head is not None:
            self._head.prev = link
        self._head = link
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the item at the front of the list."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        link = self._head
        self._head = link.next
        if self._head is not None:
            self._head.prev = None
        self._size -= 1
        return link.item

    def __iter__(self) -> Iterator[T]:
        link = self._head
        while link is not None:
            following = link.next
            yield link.item
            link = following

    def __len__(self) -> int:
        return self._size
"""Treaps: an ordered multiset with sums and an implicit-key sequence."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    priority: float
    size: int = 1
    total: int = 0
    left: _Node | None = None
    right: _Node | None = None
    flipped: bool = False


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _total(node: _Node | None) -> int:
    return node.total if node else 0


def _pull(node: _Node) -> None:
    node.size = _size(node.left) + 1 + _size(node.right)
    node.total = _total(node.left) + node.value + _total(node.right)


def _push(node: _Node | None) -> None:
    if node and node.flipped:
        node.left, node.right = node.right, node.left
        node.flipped = False
        for child in (node.left, node.right):
            if child:
                child.flipped = not child.flipped


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    _push(left)
    _push(right)
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        _pull(left)
        return left
    right.left = _merge(left, right.left)
    _pull(right)
    return right


def _split_by_value(node: _Node | None, value: int) -> tuple[_Node | None, _Node | None]:
    """Split into values below ``value`` and the rest."""
    if node is None:
        return None, None
    if value > node.value:
        less, rest = _split_by_value(node.right, value)
        node.right = less
        _pull(node)
        return node, rest
    less, rest = _split_by_value(node.left, value)
    node.left = rest
    _pull(node)
    return less, node


def _split_at(node: _Node | None, count: int) -> tuple[_Node | None, _Node | None]:
    """Split off the first ``count`` elements."""
    if node is None:
        return None, None
    _push(node)
    left_size = _size(node.left)
    if count > left_size:
        first, rest = _split_at(node.right, count - left_size - 1)
        node.right = first
        _pull(node)
        return node, rest
    first, rest = _split_at(node.left, count)
    node.left = rest
    _pull(node)
    return first, node


class OrderedTreap:
    """Sorted multiset with order statistics and prefix sums."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._rng = random.Random()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        node = _Node(value, self._rng.random(), total=value)
        less, rest = _split_by_value(self._root, value)
        self._root = _merge(_merge(less, node), rest)

    def erase(self, value: int) -> bool:
        """Remove one occurrence of ``value``; report whether one was found."""

        def remove(node: _Node | None) -> tuple[_Node | None, bool]:
            if node is None:
                return None, False
            if value == node.value:
                return _merge(node.left, node.right), True
            if value < node.value:
                node.left, removed = remove(node.left)
            else:
                node.right, removed = remove(node.right)
            _pull(node)
            return node, removed

        self._root, removed = remove(self._root)
        return removed

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node:
            if node.value == value:
                return True
            node = node.right if node.value < value else node.left
        return False

    def __len__(self) -> int:
        return _size(self._root)

    def kth(self, k: int) -> int:
        """The k-th smallest value, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(f"rank {k} out of range for {len(self)} values")
        node = self._root
        while True:
            left_size = _size(node.left)
            if k == left_size + 1:
                return node.value
            if k <= left_size:
                node = node.left
            else:
                k -= left_size + 1
                node = node.right

    def count_less(self, x: int) -> int:
        count = 0
        node = self._root
        while node:
            if x <= node.value:
                node = node.left
            else:
                count += _size(node.left) + 1
                node = node.right
        return count

    def sum_less(self, x: int) -> int:
        total = 0
        node = self._root
        while node:
            if x <= node.value:
                node = node.left
            else:
                total += _total(node.left) + node.value
                node = node.right
        return total


class ImplicitTreap:
    """Sequence with positional insert, range reversal and range sums."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._rng = random.Random()
        for value in values:
            self._root = _merge(self._root, self._node(value))

    def _node(self, value: int) -> _Node:
        return _Node(value, self._rng.random(), total=value)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < len(self):
            raise IndexError(f"range [{left}, {right}] out of bounds for length {len(self)}")

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} out of bounds for length {len(self)}")
        first, rest = _split_at(self._root, index)
        self._root = _merge(_merge(first, self._node(value)), rest)

    def reverse(self, left: int, right: int) -> None:
        """Reverse the elements at positions ``left..right`` inclusive."""
        self._check(left, right)
        first, rest = _split_at(self._root, left)
        middle, last = _split_at(rest, right - left + 1)
        middle.flipped = not middle.flipped
        self._root = _merge(_merge(first, middle), last)

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements at positions ``left..right`` inclusive."""
        self._check(left, right)
        first, rest = _split_at(self._root, left)
        middle, last = _split_at(rest, right - left + 1)
        total = middle.total
        self._root = _merge(_merge(first, middle), last)
        return total
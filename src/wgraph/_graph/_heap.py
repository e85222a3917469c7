"""Binary min-heap that tracks each key's slot for decrease-key."""

from collections.abc import Hashable
from typing import Any


class IndexedMinHeap[K: Hashable, P]:
    """A min-heap of unique keys ordered by a comparable priority.

    Each key's position in the backing list is tracked, so the priority of a
    queued key can be lowered in O(log n) instead of rebuilding the heap.

    Example:
        >>> heap = IndexedMinHeap()
        >>> heap.push("a", 5)
        >>> heap.push("b", 3)
        >>> heap.decrease_key("a", 1)
        >>> heap.pop()
        ('a', 1)

    """

    __slots__ = ("_keys", "_positions", "_priorities")

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._positions: dict[K, int] = {}
        self._priorities: dict[K, P] = {}

    def push(self, key: K, priority: P) -> None:
        """Insert a new key.

        Raises:
            ValueError: If the key is already queued.

        """
        if key in self._positions:
            msg = f"Key {key!r} is already in the heap"
            raise ValueError(msg)
        self._keys.append(key)
        self._positions[key] = len(self._keys) - 1
        self._priorities[key] = priority
        self._sift_up(len(self._keys) - 1)

    def peek(self) -> tuple[K, P]:
        """Return the minimum key and its priority without removing it.

        Raises:
            IndexError: If the heap is empty.

        """
        if not self._keys:
            msg = "peek from an empty heap"
            raise IndexError(msg)
        key = self._keys[0]
        return key, self._priorities[key]

    def pop(self) -> tuple[K, P]:
        """Remove and return the minimum key and its priority.

        Raises:
            IndexError: If the heap is empty.

        """
        if not self._keys:
            msg = "pop from an empty heap"
            raise IndexError(msg)
        top = self._keys[0]
        last = self._keys.pop()
        del self._positions[top]
        if self._keys:
            self._keys[0] = last
            self._positions[last] = 0
            self._sift_down(0)
        return top, self._priorities.pop(top)

    def decrease_key(self, key: K, priority: P) -> None:
        """Lower the priority of a queued key.

        Raises:
            KeyError: If the key is not in the heap.
            ValueError: If the new priority is greater than the current one.

        """
        if key not in self._positions:
            msg = f"Key {key!r} is not in the heap"
            raise KeyError(msg)
        if self._less(self._priorities[key], priority):
            msg = f"New priority {priority!r} for {key!r} is greater than the current one"
            raise ValueError(msg)
        self._priorities[key] = priority
        self._sift_up(self._positions[key])

    def priority(self, key: K) -> P:
        """Get the current priority of a queued key."""
        return self._priorities[key]

    @staticmethod
    def _less(a: Any, b: Any) -> bool:
        return a < b

    def _swap(self, i: int, j: int) -> None:
        keys = self._keys
        keys[i], keys[j] = keys[j], keys[i]
        self._positions[keys[i]] = i
        self._positions[keys[j]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(self._priorities[self._keys[index]], self._priorities[self._keys[parent]]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._keys)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._less(
                    self._priorities[self._keys[child]],
                    self._priorities[self._keys[smallest]],
                ):
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

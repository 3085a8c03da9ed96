"""
FIFO queue model for the Linked Toolbox.

Exposes only front-removal and back-insertion, so algorithms written against
it cannot fall back to random access or an auxiliary buffer.
"""

from collections import deque
from typing import Iterable

import numpy as np


class FifoQueue:
    """
    First-in-first-out queue of integers.
    
    Operations: remove_front, insert_back, size.
    Time: O(1) per operation.
    """
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = deque()

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "FifoQueue":
        """
        Build a queue holding values in the given order (first value at the front).
        
        Args:
            values: Initial contents
            
        Returns:
            New FifoQueue
        """
        queue = cls()
        for value in values:
            queue.insert_back(value)
        return queue

    def remove_front(self) -> int:
        """
        Remove and return the oldest element.
        
        Raises:
            IndexError: If the queue is empty
        """
        if not self._items:
            raise IndexError("remove_front from empty queue")
        return self._items.popleft()

    def insert_back(self, value: int) -> None:
        """Append value as the newest element."""
        self._items.append(value)

    def size(self) -> int:
        """Number of elements currently queued."""
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> np.ndarray:
        """
        Copy the contents in FIFO order for inspection.
        
        Returns:
            Read-only integer array (front first)
        """
        values = np.array(list(self._items), dtype=int)
        values.setflags(write=False)
        return values

    def __repr__(self) -> str:
        return f"FifoQueue({list(self._items)})"

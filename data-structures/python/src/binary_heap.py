"""Binary heap with a min or max ordering chosen at construction.

The tree is stored densely in a list: node i has children at 2i+1 and 2i+2
and its parent at (i-1)//2.
"""

import operator
from enum import Enum
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

T = TypeVar('T')


class HeapOrder(Enum):
    MIN = "min"
    MAX = "max"


_COMPARATORS = {
    HeapOrder.MIN: operator.lt,
    HeapOrder.MAX: operator.gt,
}


def _resolve_order(order: Union[HeapOrder, str]) -> HeapOrder:
    if isinstance(order, HeapOrder):
        return order
    try:
        return HeapOrder(order)
    except ValueError:
        raise ValueError("order must be 'min' or 'max'") from None


class BinaryHeap(Generic[T]):
    def __init__(self, order: Union[HeapOrder, str] = HeapOrder.MIN) -> None:
        self._order: HeapOrder = _resolve_order(order)
        # True when the first argument must sit above the second.
        self._higher_priority: Callable[[T, T], bool] = _COMPARATORS[self._order]
        self._data: List[T] = []

    @property
    def order(self) -> HeapOrder:
        return self._order

    @classmethod
    def from_list(cls, items: Iterable[T],
                  order: Union[HeapOrder, str] = HeapOrder.MIN) -> 'BinaryHeap[T]':
        """Build a heap in O(n) by sifting down every internal node.

        Note: a list argument is taken over and reordered in place; any other
        iterable is copied into a new list first.
        """
        heap: BinaryHeap[T] = cls(order)
        heap._data = items if isinstance(items, list) else list(items)
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def insert(self, value: T) -> None:
        self._data.append(value)
        if len(self._data) > 1:
            self._sift_up(len(self._data) - 1)

    def extract_root(self) -> Optional[T]:
        """Remove and return the root, or None when the heap is empty."""
        if not self._data:
            return None
        if len(self._data) == 1:
            return self._data.pop()
        last = len(self._data) - 1
        self._data[0], self._data[last] = self._data[last], self._data[0]
        result = self._data.pop()
        self._sift_down(0)
        return result

    def root(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def collect_all_sorted(self) -> List[T]:
        """Drain the heap, returning its elements in priority order."""
        output: List[T] = []
        while self._data:
            output.append(self.extract_root())
        return output

    def get(self, index: int) -> Optional[T]:
        if index < 0 or index >= len(self._data):
            return None
        return self._data[index]

    def raw(self) -> List[T]:
        return list(self._data)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = type(self)(self._order)
        clone._data = self._data.copy()
        return clone

    def is_heap(self) -> bool:
        data = self._data
        for child in range(1, len(data)):
            if self._higher_priority(data[child], data[(child - 1) // 2]):
                return False
        return True

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher_priority(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            best = index
            left = 2 * index + 1
            right = 2 * index + 2
            # Ties keep the parent; right only wins if strictly above left.
            if left < size and self._higher_priority(data[left], data[best]):
                best = left
            if right < size and self._higher_priority(data[right], data[best]):
                best = right
            if best == index:
                break
            data[index], data[best] = data[best], data[index]
            index = best

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._order.value}, {self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(order={self._order.value}, size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.extract_root()

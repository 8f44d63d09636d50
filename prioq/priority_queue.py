import logging
from typing import TypeVar, Optional, List, Iterator, Iterable, Generic, Callable, Any

from prioq import config_provider
from prioq.config_provider import CastFn
from prioq.ordering import Ordering

# YAML config keys, relative to the key path handed to `from_config`
ASCENDING_KEY = "ascending"

T = TypeVar('T')


class PriorityQueue(Generic[T]):
    """
    A binary heap over a python list.  Elements are popped in the order they would be sorted: largest first by default,
    smallest first when constructed with `ascending=True`.  `push` and `pop` are O(lg n), `peek` is O(1).

    The ordering is fixed at construction.  Equal elements are popped in an unspecified order.

    Iterating over the queue (`for x in queue`) and indexing (`queue[i]`) expose the raw heap order, which is *not*
    sorted order; only index 0 is guaranteed to hold the highest priority element.  Use `drain` to consume the queue in
    priority order or `sorted` for a non-destructive sorted snapshot.

    Not thread safe.  Wrap in a lock if it must be shared.
    """

    def __init__(self, ascending: bool = False, starting_values: Iterable[T] = ()):
        self._log = logging.getLogger(type(self).__name__)
        self._ordering = Ordering.of(ascending)
        self._ordered: Callable[[T, T], bool] = self._ordering.comparator()
        self._heap: List[T] = list()
        for value in starting_values:
            self.push(value)
        self._log.debug(f"Created {self._ordering.value} queue with {self.count} starting value(s).")

    @classmethod
    def from_config(cls, key_path: List[str], starting_values: Iterable[T] = ()) -> 'PriorityQueue[T]':
        """
        Construct a queue whose direction is read from the loaded config.  Uses `config_provider.get_value` under the
        hood, see that function for key path details.
        :param key_path: List[str] path to the queue's config section i.e. ["queue"]
        :param starting_values: values pushed into the new queue
        :return:
        """
        ascending = config_provider.get_value([*key_path, ASCENDING_KEY], default=False, cast_fn=CastFn.to_bool)
        return cls(ascending=ascending, starting_values=starting_values)

    @property
    def ordering(self) -> Ordering:
        return self._ordering

    @property
    def count(self) -> int:
        """
        How many elements the queue holds
        """
        return len(self._heap)

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def push(self, element: T) -> None:
        """
        Add an element to the queue. O(lg n)
        :param element: the element to insert
        """
        self._heap.append(element)
        self._swim(len(self._heap) - 1)

    def pop(self) -> Optional[T]:
        """
        Remove and return the highest priority element (lowest when ascending). O(lg n)
        :return: the removed element or `None` if the queue is empty
        """
        if not self._heap:
            return None
        last = len(self._heap) - 1
        self._swap(0, last)
        popped = self._heap.pop()
        self._sink(0)
        return popped

    def peek(self) -> Optional[T]:
        """
        Look at the highest priority element without removing it. O(1)
        :return: the element or `None` if the queue is empty
        """
        return self._heap[0] if self._heap else None

    def clear(self) -> None:
        self._log.debug(f"Clearing {self.count} element(s).")
        self._heap = list()

    def drain(self) -> Iterator[T]:
        """
        Lazily pops every element in priority order.  This consumes the queue, once exhausted the queue is empty and
        draining again yields nothing.  Elements pushed while draining are picked up by later steps.
        :return: a generator of popped elements
        """
        while self._heap:
            yield self.pop()

    def sorted(self) -> List[T]:
        """
        Snapshot of the elements in the order they would be popped.  The queue is not modified.
        :return:
        """
        return [*self.copy().drain()]

    def copy(self) -> 'PriorityQueue[T]':
        duplicate = type(self).__new__(type(self))
        duplicate._log = self._log
        duplicate._ordering = self._ordering
        duplicate._ordered = self._ordered
        duplicate._heap = [*self._heap]
        return duplicate

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self._heap)

    def _sink(self, index: int) -> None:
        size = len(self._heap)
        while 2 * index + 1 < size:
            child = 2 * index + 1
            if child < size - 1 and self._ordered(self._heap[child], self._heap[child + 1]):
                child += 1
            if not self._ordered(self._heap[index], self._heap[child]):
                break
            self._swap(index, child)
            index = child

    def _swim(self, index: int) -> None:
        while index > 0 and self._ordered(self._heap[(index - 1) // 2], self._heap[index]):
            parent = (index - 1) // 2
            self._swap(parent, index)
            index = parent

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def __getitem__(self, index: int) -> T:
        if type(index) is not int:
            raise TypeError(f"Queue indices must be integers, not {type(index).__name__}.")
        if not 0 <= index < len(self._heap):
            raise IndexError(f"Index {index} out of range for queue of {len(self._heap)} element(s).")
        return self._heap[index]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __iter__(self) -> Iterator[T]:
        return iter([*self._heap])

    def __contains__(self, item: Any) -> bool:
        return item in self._heap

    def __copy__(self) -> 'PriorityQueue[T]':
        return self.copy()

    def __str__(self) -> str:
        return str(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(ascending={self._ordering is Ordering.ASCENDING}, heap={self._heap!r})"

import operator
from enum import Enum
from typing import Any, Callable


class Ordering(Enum):
    """
    Direction of a `PriorityQueue`.  `DESCENDING` pops the largest element first (max-heap), `ASCENDING` pops the
    smallest element first (min-heap).
    """
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @staticmethod
    def of(ascending: bool) -> 'Ordering':
        return Ordering.ASCENDING if ascending else Ordering.DESCENDING

    def comparator(self) -> Callable[[Any, Any], bool]:
        """
        The `ordered(a, b)` predicate used by the heap.  It is `True` when `b` outranks `a`, that is
        when `a` must sit below `b` in the heap.
        :return: a two argument predicate
        """
        match self:
            case Ordering.ASCENDING:
                return operator.gt
            case Ordering.DESCENDING:
                return operator.lt
            case _:
                raise ValueError(f"Unrecognized ordering: {self}")

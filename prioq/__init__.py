from prioq.ordering import Ordering
from prioq.priority_queue import PriorityQueue

__all__ = ["Ordering", "PriorityQueue"]

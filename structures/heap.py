"""
Array-backed binary heaps (max and min) over one shared implementation.

Key design choices:
- **One algorithm, two orders:** `BinaryHeap` is parameterized by the
  `Comparison` an element must have against its parent to move above it
  (GREATER for a max-heap, LESS for a min-heap). `MaxHeap` and `MinHeap` only
  fix that parameter.
- **Dense buffer:** the heap is a plain list; index 0 is the root, the children
  of i live at 2i+1 / 2i+2 and the parent of i > 0 at (i-1)//2.
- **Strict moves:** sift-up and sift-down only swap when an element is strictly
  better than the one above it, so equal elements stay put.


Functions
---------
parent_index, left_child_index, right_child_index
    Index arithmetic shared by every heap.

Classes
-------
BinaryHeap
    insert, peek, pop, is_empty, copy.
MaxHeap, MinHeap
    Concrete orders.
"""

from __future__ import annotations

from .comparison import Comparison, resolve_comparator


def parent_index(index: int) -> int:
  """Index of the parent of `index`; the root is its own parent."""
  if index <= 0:
    return 0
  return (index - 1) // 2


def left_child_index(index: int) -> int:
  return 2 * index + 1


def right_child_index(index: int) -> int:
  return 2 * index + 2


class BinaryHeap:
  __slots__ = ("_heap", "_comparator", "_compare", "_prefer")

  def __init__(self, elements=None, comparator=None, *, prefer=Comparison.GREATER):
    """Create a heap, optionally seeded from `elements` or copied from another heap.

    Parameters
    ----------
    elements : Iterable | BinaryHeap | None
        Items inserted left to right. Passing another heap copies its buffer
        and comparator instead.
    comparator : Callable[[T, T], int] | None
        Explicit ordering; takes priority over the elements' intrinsic order.
    prefer : Comparison
        Relation a child must have with its parent to be moved above it.
    """
    if prefer is Comparison.EQUAL:
      raise ValueError("prefer must be Comparison.GREATER or Comparison.LESS")
    self._prefer = prefer

    if isinstance(elements, BinaryHeap):
      if comparator is None:
        comparator = elements._comparator
      if elements._prefer is prefer and comparator is elements._comparator:
        self._comparator = comparator
        self._compare = resolve_comparator(comparator)
        self._heap = list(elements._heap)
        return
      # different order: the buffer has to be re-heapified
      elements = list(elements._heap)

    self._comparator = comparator
    self._compare = resolve_comparator(comparator)
    self._heap = []
    if elements is not None:
      for element in elements:
        self.insert(element)

  def __len__(self):
    return len(self._heap)

  def copy(self):
    """Return an independent heap with the same elements and comparator."""
    if type(self) is BinaryHeap:
      return BinaryHeap(self, prefer=self._prefer)
    return type(self)(self)

  __copy__ = copy

  def _better(self, lhs, rhs):
    return self._compare(lhs, rhs) is self._prefer

  def insert(self, element):
    """Append `element` and sift it up while it beats its parent.

    Complexity
    ----------
    O(log n).
    """
    heap = self._heap
    heap.append(element)
    index = len(heap) - 1
    while index > 0:
      parent = parent_index(index)
      if not self._better(element, heap[parent]):
        break
      heap[index] = heap[parent]
      heap[parent] = element
      index = parent

  def peek(self):
    """Return the root element without removing it, or None when empty."""
    if not self._heap:
      return None
    return self._heap[0]

  def pop(self):
    """Remove and return the root element, or None when empty.

    The last element takes the root slot and is sifted down, swapping with the
    better of its children until neither child beats it.
    """
    heap = self._heap
    if not heap:
      return None

    top = heap[0]
    last = heap.pop()
    if not heap:
      return top

    heap[0] = last
    size = len(heap)
    index = 0
    while True:
      left = left_child_index(index)
      if left >= size:
        break
      right = right_child_index(index)
      best = left
      if right < size and self._better(heap[right], heap[left]):
        best = right
      if not self._better(heap[best], last):
        break
      heap[index] = heap[best]
      heap[best] = last
      index = best
    return top

  def is_empty(self):
    return not self._heap


class MaxHeap(BinaryHeap):
  """Heap whose root is the greatest element under the active order."""

  __slots__ = ()

  def __init__(self, elements=None, comparator=None):
    super().__init__(elements, comparator, prefer=Comparison.GREATER)


class MinHeap(BinaryHeap):
  """Heap whose root is the smallest element under the active order."""

  __slots__ = ()

  def __init__(self, elements=None, comparator=None):
    super().__init__(elements, comparator, prefer=Comparison.LESS)

"""
Unbalanced binary search tree with parent back-references.

Key design choices:
- **Textbook ordering:** an inserted item that compares LESS-or-EQUAL to a node
  goes left, GREATER goes right. Duplicates therefore collect in left subtrees.
- **Non-owning parents:** `BSTNode` keeps its parent through a `weakref.ref`.
  Children are owned by their parent's `left` / `right` slots; the parent link
  is only used to splice nodes during removal and never keeps a node alive.
- **Relink, never copy:** removing a node with two children promotes the in-order
  successor node itself rather than copying its item upward.
- **No rebalancing:** sorted input degenerates into a linked list, so every
  operation is O(h) with h up to n.


Classes
-------
BSTNode
    Node holding `item`, `left`, `right` and a weak `parent` link.
BinarySearchTree
    Public API: insert, has, get_minimum, get_maximum, remove, copy.


Conventions & Notes
-------------------
- **Ordering:** pass `comparator=(lhs, rhs) -> int` to order elements yourself;
  otherwise the elements' own `<` / `>` are used. A missing order surfaces as
  `InvalidOperation`.
- **Absence:** `remove` of an absent item is a no-op; `get_minimum` and
  `get_maximum` return None on an empty tree.
- **Mutation during descent:** the tree is not thread-safe and must not be
  mutated by another caller while an operation is in progress.
"""

from __future__ import annotations

import weakref

from .comparison import Comparison, resolve_comparator
from .log import get_logger

logger = get_logger("bst")


class BSTNode:
  __slots__ = ("item", "left", "right", "_parent", "__weakref__")

  def __init__(self, item, parent=None):
    self.item = item
    self.left = None
    self.right = None
    self._parent = None
    self.parent = parent

  @property
  def parent(self):
    return None if self._parent is None else self._parent()

  @parent.setter
  def parent(self, node):
    self._parent = None if node is None else weakref.ref(node)


class BinarySearchTree:
  __slots__ = ("root", "_size", "_comparator", "_compare")

  def __init__(self, elements=None, comparator=None):
    """Create a tree, optionally seeded from `elements` or copied from another tree.

    Parameters
    ----------
    elements : Iterable | BinarySearchTree | None
        Items inserted left to right. When another `BinarySearchTree` is passed,
        its structure is deep-copied and its comparator shared; with a
        different `comparator` its items are re-inserted instead.
    comparator : Callable[[T, T], int] | None
        Explicit ordering; takes priority over the elements' intrinsic order.
    """
    self.root = None
    self._size = 0

    if isinstance(elements, BinarySearchTree):
      if comparator is None:
        comparator = elements._comparator
      self._comparator = comparator
      self._compare = resolve_comparator(comparator)
      if comparator is elements._comparator:
        self._copy_from(elements)
      else:
        # a different order invalidates the node layout
        for item in elements._in_order_items():
          self.insert(item)
      return

    self._comparator = comparator
    self._compare = resolve_comparator(comparator)
    if elements is not None:
      for item in elements:
        self.insert(item)

  def __len__(self):
    return self._size

  def copy(self):
    """Return a structurally identical tree sharing this tree's comparator."""
    return BinarySearchTree(self)

  __copy__ = copy

  def _in_order_items(self):
    items = []
    stack = []
    node = self.root
    while stack or node is not None:
      while node is not None:
        stack.append(node)
        node = node.left
      node = stack.pop()
      items.append(node.item)
      node = node.right
    return items

  def _copy_from(self, other):
    if other.root is None:
      return
    self.root = BSTNode(other.root.item)
    stack = [(other.root, self.root)]
    while stack:
      src, dst = stack.pop()
      if src.left is not None:
        dst.left = BSTNode(src.left.item, dst)
        stack.append((src.left, dst.left))
      if src.right is not None:
        dst.right = BSTNode(src.right.item, dst)
        stack.append((src.right, dst.right))
    self._size = other._size

  def insert(self, item):
    """Insert `item`; equal items are routed into the left subtree.

    Complexity
    ----------
    O(h) where h is the current height.
    """
    if self.root is None:
      self.root = BSTNode(item)
      self._size = 1
      return

    node = self.root
    while True:
      if self._compare(item, node.item) is Comparison.GREATER:
        if node.right is None:
          node.right = BSTNode(item, node)
          break
        node = node.right
      else:
        if node.left is None:
          node.left = BSTNode(item, node)
          break
        node = node.left
    self._size += 1

  def has(self, item):
    """Return True iff an element comparing EQUAL to `item` is stored."""
    return self._find_node(item) is not None

  def get_minimum(self):
    """Return the smallest item, or None on an empty tree."""
    node = self.root
    if node is None:
      return None
    while node.left is not None:
      node = node.left
    return node.item

  def get_maximum(self):
    """Return the largest item, or None on an empty tree."""
    node = self.root
    if node is None:
      return None
    while node.right is not None:
      node = node.right
    return node.item

  def remove(self, item):
    """Remove one node storing `item`; absent items are ignored.

    Implementation detail
    ---------------------
    - 0 or 1 child: the child (possibly None) takes the node's slot.
    - 2 children: the in-order successor (leftmost node of the right subtree)
      is unlinked from its position and spliced into the removed node's slot,
      adopting the removed node's subtrees. When the successor is the direct
      right child it keeps its own right subtree and only adopts the left one.
    """
    node = self._find_node(item)
    if node is None:
      logger.debug("remove: %r not present", item)
      return

    if node.right is None:
      replacement = node.left
    elif node.left is None:
      replacement = node.right
    else:
      replacement = self._find_successor(node)
      if replacement is not node.right:
        successor_parent = replacement.parent
        successor_parent.left = replacement.right
        if replacement.right is not None:
          replacement.right.parent = successor_parent
        replacement.right = node.right
        node.right.parent = replacement
      replacement.left = node.left
      node.left.parent = replacement

    parent = node.parent
    if replacement is not None:
      replacement.parent = parent

    if parent is None:
      self.root = replacement
    elif parent.left is node:
      parent.left = replacement
    else:
      parent.right = replacement

    node.left = node.right = None
    node.parent = None
    self._size -= 1

  def _find_node(self, item):
    node = self.root
    while node is not None:
      comparison = self._compare(item, node.item)
      if comparison is Comparison.EQUAL:
        return node
      node = node.left if comparison is Comparison.LESS else node.right
    return None

  @staticmethod
  def _find_successor(node):
    successor = node.right
    if successor is None:
      return None
    while successor.left is not None:
      successor = successor.left
    return successor

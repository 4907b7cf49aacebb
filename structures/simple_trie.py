"""
Fixed-alphabet Trie (array-indexed children) with upward pruning on delete.

This is the trie found in most introductory texts: every node owns one child
slot per letter of a fixed alphabet. The caller supplies the alphabet size and a
`char_to_index` function, so reduced alphabets (digits, lowercase ASCII, DNA
bases, ...) only pay for the slots they need.

Key design choices:
- **Lazy slot arrays:** `SimpleTrieNode.children` stays None until the node
  gets its first child; only then is the `[None] * alphabet_size` list created.
- **Child counting:** each node keeps `total_children`, the number of occupied
  slots, so "is this a leaf?" is O(1) during pruning instead of an O(alphabet)
  scan.
- **Weak parents:** nodes point back to their parent through `weakref.ref`.
  `remove` climbs these links from the tail of the string and detaches every
  node that has become a childless, non-terminal leaf.
- **No duplicates:** adding a stored string again is a no-op.


Classes
-------
SimpleTrieNode
    Node holding `children`, `is_terminal`, `total_children` and a weak parent.
SimpleTrie
    Public API: add, has, contains, remove, batch_add, batch_remove,
    count_nodes, copy.


Conventions & Notes
-------------------
- **Alphabet contract:** `char_to_index(ch)` must return an int in
  `[0, alphabet_size)` for every character ever passed to this trie. Anything
  else, floats included, raises `IndexOutOfRange`; negative indices are
  rejected rather than wrapping around.
- **Normalization:** an optional `normalize` callable (e.g. `str.casefold`) is
  applied to every string at the API boundary. Default: identity.
- **Empty string:** adding `""` marks the root terminal.
- **None:** every string argument must be a `str`; None raises `NullInput`.
"""

from __future__ import annotations

import weakref

from .errors import IndexOutOfRange, InternalInconsistency, NullInput
from .log import get_logger

logger = get_logger("simple_trie")


class SimpleTrieNode:
  __slots__ = ("children", "is_terminal", "total_children", "_parent", "__weakref__")

  def __init__(self, parent=None):
    self.children = None
    self.is_terminal = False
    self.total_children = 0
    self._parent = None if parent is None else weakref.ref(parent)

  @property
  def parent(self):
    return None if self._parent is None else self._parent()

  def get_child(self, index):
    children = self.children
    return None if children is None else children[index]

  def add_child(self, index, child, alphabet_size):
    if self.children is None:
      self.children = [None] * alphabet_size
    elif self.children[index] is not None:
      raise InternalInconsistency(f"Node already exists for index {index}.")
    self.children[index] = child
    self.total_children += 1

  def remove_child(self, index):
    if self.children is None or self.children[index] is None:
      return
    self.children[index] = None
    self.total_children -= 1
    if self.total_children == 0:
      self.children = None

  def has_children(self):
    return self.total_children > 0


def _identity(word):
  return word


class SimpleTrie:
  __slots__ = ("alphabet_size", "char_to_index", "normalize", "root", "_size")

  def __init__(self, alphabet_size, char_to_index=None, words=None, *, normalize=None):
    """Create a trie, optionally seeded from `words`, or copy another `SimpleTrie`.

    Parameters
    ----------
    alphabet_size : int | SimpleTrie
        Number of legal characters. Passing another `SimpleTrie` here
        deep-copies it instead.
    char_to_index : Callable[[str], int]
        Maps a legal character to its slot in `[0, alphabet_size)`.
    words : Iterable[str] | None, default=None
        Strings added left to right after construction.
    normalize : Callable[[str], str] | None, default=None
        Applied to every string before use. A copy keeps the source trie's
        normalizer; the slot indices cannot be mapped back to characters, so a
        different one is rejected with `ValueError`.
    """
    if isinstance(alphabet_size, SimpleTrie):
      other = alphabet_size
      if normalize is not None and normalize is not other.normalize:
        raise ValueError("a SimpleTrie copy cannot change the normalizer")
      self.alphabet_size = other.alphabet_size
      self.char_to_index = other.char_to_index
      self.normalize = other.normalize
      self.root = SimpleTrieNode()
      self._size = 0
      self._copy_from(other)
      if words is not None:
        self.batch_add(words)
      return

    if not isinstance(alphabet_size, int) or alphabet_size <= 0:
      raise ValueError(f"alphabet_size must be a positive int, got {alphabet_size!r}")
    if not callable(char_to_index):
      raise TypeError("char_to_index must be callable")
    self.alphabet_size = alphabet_size
    self.char_to_index = char_to_index
    self.normalize = _identity if normalize is None else normalize
    self.root = SimpleTrieNode()
    self._size = 0
    if words is not None:
      self.batch_add(words)

  def __len__(self):
    return self._size

  def copy(self):
    """Return a deep copy sharing the alphabet mapping and normalizer."""
    return SimpleTrie(self)

  __copy__ = copy

  def _copy_from(self, other):
    self.root.is_terminal = other.root.is_terminal
    stack = [(other.root, self.root)]
    while stack:
      src, dst = stack.pop()
      if not src.children:
        continue
      for index, child in enumerate(src.children):
        if child is None:
          continue
        clone = SimpleTrieNode(dst)
        clone.is_terminal = child.is_terminal
        dst.add_child(index, clone, self.alphabet_size)
        stack.append((child, clone))
    self._size = other._size

  def _prepare(self, word):
    if word is None:
      raise NullInput("SimpleTrie does not accept None strings")
    return self.normalize(word)

  def _index(self, ch):
    index = self.char_to_index(ch)
    if not isinstance(index, int) or not 0 <= index < self.alphabet_size:
      raise IndexOutOfRange(
        f"char_to_index({ch!r}) returned {index!r}, not an int in [0, {self.alphabet_size})"
      )
    return index

  def _walk(self, word):
    """Return the node at the end of `word`, or None if the path is missing."""
    node = self.root
    for ch in word:
      node = node.get_child(self._index(ch))
      if node is None:
        return None
    return node

  def add(self, word):
    """Insert `word`; inserting a stored word again changes nothing.

    Complexity
    ----------
    O(L) time, O(new_nodes * alphabet_size) space where L = len(word).
    """
    word = self._prepare(word)
    indices = [self._index(ch) for ch in word]

    node = self.root
    for index in indices:
      nxt = node.get_child(index)
      if nxt is None:
        nxt = SimpleTrieNode(node)
        node.add_child(index, nxt, self.alphabet_size)
      node = nxt

    if not node.is_terminal:
      node.is_terminal = True
      self._size += 1

  def has(self, word):
    """Return True iff `word` itself was added."""
    node = self._walk(self._prepare(word))
    return node is not None and node.is_terminal

  def contains(self, word):
    """Return True iff `word` is a prefix of (or equal to) some added word."""
    return self._walk(self._prepare(word)) is not None

  def remove(self, word):
    """Remove `word` and prune the branch that only it was using.

    Returns
    -------
    bool
        True if the word was stored and has been removed.

    Implementation detail
    ---------------------
    After clearing the terminal flag, climb from the last node towards the root
    via the parent links, detaching each node that has no children and is not
    terminal. The climb stops at the first node still in use, or at the root.
    """
    word = self._prepare(word)
    node = self._walk(word)
    if node is None or not node.is_terminal:
      logger.debug("remove: %r not present", word)
      return False

    node.is_terminal = False
    self._size -= 1

    depth = len(word)
    while node is not self.root:
      if node.has_children() or node.is_terminal:
        break
      parent = node.parent
      depth -= 1
      parent.remove_child(self._index(word[depth]))
      node = parent
    if depth < len(word):
      logger.debug("remove: pruned %d node(s) for %r", len(word) - depth, word)
    return True

  def batch_add(self, words):
    """Add every word in `words`, left to right."""
    for word in words:
      self.add(word)

  def batch_remove(self, words):
    """Remove every word in `words`.

    Returns
    -------
    tuple[int, int]
        (removed_count, missing_count)
    """
    removed = 0
    missing = 0
    for word in words:
      if self.remove(word):
        removed += 1
      else:
        missing += 1
    return removed, missing

  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If True, return `sum(total_children) / (# internal nodes)` instead.

    Complexity
    ----------
    O(#nodes * alphabet_size) time, O(depth) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      if node.total_children:
        total_deg += node.total_children
        internal += 1
        stack.extend(child for child in node.children if child is not None)
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes

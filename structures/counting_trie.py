"""
Counting Trie (character-per-edge) with duplicate counts and path pruning.

Unlike `SimpleTrie`, this trie accepts any character and remembers how many
times each string was added. Every node counts the strings whose path runs
through it, so removal can tell exactly when a branch stops being used.

Key design choices:
- **Lazy child dicts:** `CountingTrieNode.children` is None until the first
  child is added, as in the standard trie.
- **Two counters per node:**
  - `occurrence_count`: strings whose path passes through (or ends at) this
    node, i.e. how often the edge into it was traversed by `add`.
  - `terminal_count`: strings ending exactly here; duplicates bump it.
  The root has no incoming edge and never tracks an occurrence count.
- **Path-based pruning:** removal records the descent path (nodes and edge
  characters), then walks it backwards decrementing occurrence counts and
  dropping each node whose count reaches zero. Nodes keep no parent links.
- **Check before mutate:** counters are validated along the whole path before
  anything is decremented, so an `InternalInconsistency` leaves the trie as it
  was.


Classes
-------
CountingTrieNode
    Node holding `children`, `occurrence_count` and `terminal_count`.
CountingTrie
    Public API: add, has, contains, count_occurrences, remove, remove_all,
    batch_add, batch_remove, count_nodes, copy.


Complexity (typical)
--------------------
- add / has / contains / count_occurrences / remove / remove_all: O(L)
- count_nodes: O(#nodes)
"""

from __future__ import annotations

from .errors import InternalInconsistency, NullInput
from .log import get_logger

logger = get_logger("counting_trie")


class CountingTrieNode:
  __slots__ = ("children", "occurrence_count", "terminal_count")

  def __init__(self):
    self.children = None
    self.occurrence_count = 0
    self.terminal_count = 0

  def add_child(self, ch, child):
    children = self.children
    if children is None:
      self.children = {ch: child}
      return
    if ch in children:
      raise InternalInconsistency(f"Node already exists for character {ch!r}.")
    children[ch] = child

  def remove_child(self, ch):
    children = self.children
    if children:
      children.pop(ch, None)
      if not children:
        self.children = None


def _identity(word):
  return word


class CountingTrie:
  __slots__ = ("root", "normalize", "_size")

  def __init__(self, words=None, *, normalize=None):
    """Create a trie, optionally seeded from `words` or copied from another trie.

    Parameters
    ----------
    words : Iterable[str] | CountingTrie | None
        Strings added left to right, duplicates included. Passing another
        `CountingTrie` deep-copies it; with a different `normalize` its stored
        strings are re-added through the new normalizer instead.
    normalize : Callable[[str], str] | None, default=None
        Applied to every string before use.
    """
    self.root = CountingTrieNode()
    self._size = 0

    if isinstance(words, CountingTrie):
      if normalize is None or normalize is words.normalize:
        self.normalize = words.normalize
        self._copy_from(words)
      else:
        self.normalize = normalize
        for word, count in words._stored_words():
          for _ in range(count):
            self.add(word)
      return

    self.normalize = _identity if normalize is None else normalize
    if words is not None:
      self.batch_add(words)

  def __len__(self):
    return self._size

  def copy(self):
    """Return a deep copy sharing the normalizer."""
    return CountingTrie(self)

  __copy__ = copy

  def _copy_from(self, other):
    self.root.terminal_count = other.root.terminal_count
    stack = [(other.root, self.root)]
    while stack:
      src, dst = stack.pop()
      if not src.children:
        continue
      for ch, child in src.children.items():
        clone = CountingTrieNode()
        clone.occurrence_count = child.occurrence_count
        clone.terminal_count = child.terminal_count
        dst.add_child(ch, clone)
        stack.append((child, clone))
    self._size = other._size

  def _stored_words(self):
    """Yield `(word, terminal_count)` for every stored string, depth first."""
    stack = [(self.root, "")]
    while stack:
      node, prefix = stack.pop()
      if node.terminal_count:
        yield prefix, node.terminal_count
      if node.children:
        for ch, child in node.children.items():
          stack.append((child, prefix + ch))

  def _prepare(self, word):
    if word is None:
      raise NullInput("CountingTrie does not accept None strings")
    return self.normalize(word)

  def _walk(self, word):
    node = self.root
    for ch in word:
      children = node.children
      node = None if children is None else children.get(ch)
      if node is None:
        return None
    return node

  def add(self, word):
    """Insert one occurrence of `word`.

    Notes
    -----
    - Each node on the path (root excluded) gets `occurrence_count += 1`.
    - The final node gets `terminal_count += 1`; duplicates are counted, never
      rejected.
    """
    word = self._prepare(word)
    node = self.root

    for ch in word:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = CountingTrieNode()
        node.add_child(ch, nxt)
      nxt.occurrence_count += 1
      node = nxt
    node.terminal_count += 1
    self._size += 1

  def has(self, word):
    """Return True iff at least one occurrence of `word` is stored."""
    node = self._walk(self._prepare(word))
    return node is not None and node.terminal_count > 0

  def contains(self, word):
    """Return True iff `word` is a prefix of (or equal to) some stored string."""
    return self._walk(self._prepare(word)) is not None

  def count_occurrences(self, word):
    """Return how many times `word` itself is stored (prefix uses not counted)."""
    node = self._walk(self._prepare(word))
    return 0 if node is None else node.terminal_count

  def remove(self, word):
    """Remove a single occurrence of `word`.

    Returns
    -------
    bool
        True if an occurrence was removed.
    """
    return self._remove(word, remove_all=False) > 0

  def remove_all(self, word):
    """Remove every occurrence of `word`.

    Returns
    -------
    int
        Number of occurrences removed.
    """
    return self._remove(word, remove_all=True)

  def _remove(self, word, remove_all):
    word = self._prepare(word)

    path_nodes = [self.root]
    node = self.root
    for ch in word:
      children = node.children
      node = None if children is None else children.get(ch)
      if node is None:
        logger.debug("remove: %r not present", word)
        return 0
      path_nodes.append(node)

    if node.terminal_count <= 0:
      logger.debug("remove: %r is only a prefix", word)
      return 0

    amount = node.terminal_count if remove_all else 1
    for idx in range(1, len(path_nodes)):
      if path_nodes[idx].occurrence_count < amount:
        logger.error(
          "occurrence count %d below %d at depth %d of %r",
          path_nodes[idx].occurrence_count, amount, idx, word,
        )
        raise InternalInconsistency("Occurrence count cannot be negative.")

    node.terminal_count -= amount
    self._size -= amount

    pruned = 0
    idx = len(path_nodes) - 1
    while idx > 0:
      cur = path_nodes[idx]
      cur.occurrence_count -= amount
      if cur.occurrence_count == 0:
        path_nodes[idx - 1].remove_child(word[idx - 1])
        pruned += 1
      idx -= 1
    if pruned:
      logger.debug("remove: pruned %d node(s) for %r", pruned, word)
    return amount

  def batch_add(self, words):
    """Add every word in `words`, left to right."""
    for word in words:
      self.add(word)

  def batch_remove(self, words):
    """Remove one occurrence of every word in `words`.

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
    """Return total node count, or average branching factor over internal nodes."""
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes

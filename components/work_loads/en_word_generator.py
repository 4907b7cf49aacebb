"""Word workloads for the trie benchmarks.

Words come from Faker's English lorem list, narrowed to lowercase ASCII so the
26-slot `SimpleTrie` can store every one of them. `gen_words_with_prefix_freq`
emits runs of words sharing their first two letters, which is the shape that
lets a trie reuse paths.
"""
import math
import random
from collections import defaultdict

from faker.providers.lorem.en_US import Provider as LoremProvider

PREFIX_WIDTH = 2
# unique clustered draws stop short of the full list so runs can still find unused words
UNIQUE_HEADROOM = 1.1

WORDS_COMMON = sorted({w for w in LoremProvider.word_list if w.isascii() and w.isalpha() and w.islower()})


def _group_by_prefix(words, width=PREFIX_WIDTH):
  groups = defaultdict(list)
  for word in words:
    groups[word[:width]].append(word)
  return groups


PREFIX_GROUPS = _group_by_prefix(WORDS_COMMON)
PREFIXES = list(PREFIX_GROUPS)
PREFIX_WEIGHTS = [len(PREFIX_GROUPS[p]) for p in PREFIXES]


def _check_count(num_words, ceiling, unique):
  if num_words < 1 or (unique and num_words > ceiling):
    raise ValueError(f"num_words must be between 1 and {ceiling}")


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return `num_words` words drawn uniformly from WORDS_COMMON.
  - unique=False: draw with replacement
  - unique=True: draw without replacement (num_words <= len(WORDS_COMMON))
  """
  _check_count(num_words, len(WORDS_COMMON), unique)
  rng = random.Random(seed)
  if unique:
    return rng.sample(WORDS_COMMON, num_words)
  return rng.choices(WORDS_COMMON, k=num_words)


def cluster_probability(prefix_freq, max_mean=100) -> float:
  """Chance that a run of same-prefix words grows by one more word.

  The slider value is mapped as ``1 - max_mean ** -prefix_freq``, so the mean
  run length climbs geometrically towards `max_mean` as `prefix_freq` nears 1.
  """
  if not 0 <= prefix_freq < 1:
    raise ValueError("prefix_freq must be between 0 and 1")
  return min(1.0 - math.exp(-math.log(max_mean) * prefix_freq), 0.999999)


class _GroupPicker:
  """Draws words out of a prefix group, never repeating one when `unique`."""

  def __init__(self, rng, unique):
    self.rng = rng
    self.unique = unique
    self.used = set()
    self.spent_prefixes = set()

  def _unused(self, prefix):
    unused = [w for w in PREFIX_GROUPS[prefix] if w not in self.used]
    if not unused:
      self.spent_prefixes.add(prefix)
    return unused

  def opening(self, prefix):
    """First word of a run, or None when the draw must be retried."""
    word = self.rng.choice(PREFIX_GROUPS[prefix])
    if not self.unique:
      return word
    if prefix in self.spent_prefixes:
      return None
    if word in self.used:
      self._unused(prefix)
      return None
    self.used.add(word)
    return word

  def extension(self, prefix):
    """Next word of a run, or None when the group has nothing left to give."""
    word = self.rng.choice(PREFIX_GROUPS[prefix])
    if not self.unique:
      return word
    if word in self.used:
      unused = self._unused(prefix)
      if not unused:
        return None
      word = self.rng.choice(unused)
    self.used.add(word)
    return word


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generate words in runs that share a two-letter prefix.

  Each run opens on a prefix picked in proportion to its group size and keeps
  going with probability `cluster_probability(prefix_freq)`. At 0 every word is
  independent; close to 1 runs average nearly 100 words.
  """
  p_extend = cluster_probability(prefix_freq)
  _check_count(num_words, int(len(WORDS_COMMON) // UNIQUE_HEADROOM), unique)
  rng = random.Random(seed)
  picker = _GroupPicker(rng, unique)

  words = []
  while len(words) < num_words:
    prefix = rng.choices(PREFIXES, weights=PREFIX_WEIGHTS)[0]
    word = picker.opening(prefix)
    if word is None:
      continue
    words.append(word)

    while len(words) < num_words and rng.random() < p_extend:
      word = picker.extension(prefix)
      if word is None:
        break
      words.append(word)
  return words

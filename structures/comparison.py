"""
Three-way comparison shared by the ordered structures.

`Comparison` hides the magnitude of an integer comparator result and leaves only
the relation between the two operands. `resolve_comparator` turns the optional
comparator a structure is constructed with into a single callable returning a
`Comparison`, so the choice between an explicit comparator and the elements'
intrinsic order is made once instead of on every comparison.

Comparator contract
-------------------
A comparator is any callable ``(lhs, rhs) -> int`` following the usual
convention: negative when ``lhs`` sorts before ``rhs``, zero when they are
equal, positive otherwise. ``functools.cmp_to_key`` uses the same contract.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .errors import InvalidOperation

Comparator = Callable[[Any, Any], int]


class Comparison(enum.Enum):
  GREATER = 1
  EQUAL = 0
  LESS = -1

  @classmethod
  def from_int(cls, value: int) -> "Comparison":
    """Map a comparator result onto LESS / EQUAL / GREATER."""
    if value < 0:
      return cls.LESS
    if value > 0:
      return cls.GREATER
    return cls.EQUAL


def natural_compare(lhs: Any, rhs: Any) -> Comparison:
  """Compare two values through their own ``<`` and ``>`` operators.

  Raises
  ------
  InvalidOperation
      If the operands do not define an order between each other.
  """
  try:
    if lhs < rhs:
      return Comparison.LESS
    if lhs > rhs:
      return Comparison.GREATER
  except TypeError as exc:
    raise InvalidOperation(
      f"Element cannot be compared: {type(lhs).__name__} vs {type(rhs).__name__}"
    ) from exc
  return Comparison.EQUAL


def resolve_comparator(comparator: Optional[Comparator] = None) -> Callable[[Any, Any], Comparison]:
  """Return the comparison function a structure should use.

  An explicit `comparator` takes priority; otherwise the elements' intrinsic
  order is used through `natural_compare`. A comparator result that cannot be
  ordered against zero raises `InvalidOperation` when it is used.
  """
  if comparator is None:
    return natural_compare
  if not callable(comparator):
    raise InvalidOperation(f"comparator must be callable, got {type(comparator).__name__}")

  def compare(lhs, rhs):
    result = comparator(lhs, rhs)
    try:
      return Comparison.from_int(result)
    except TypeError as exc:
      raise InvalidOperation(
        f"comparator must return a number, got {type(result).__name__}"
      ) from exc

  return compare

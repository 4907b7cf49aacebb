"""
Error types raised by the structures package.

Absence is never an error here: a missing item or an empty container is
reported through ``False``, ``0`` or ``None``. The classes below cover the
remaining failure modes, and each one also derives from the builtin exception
a Python caller would naturally catch for it.
"""


class StructureError(Exception):
  """Base class for every error raised by the structures package."""


class InvalidOperation(StructureError, TypeError):
  """No usable ordering exists between two elements."""


class NullInput(StructureError, TypeError):
  """A required string argument was ``None``."""


class IndexOutOfRange(StructureError, IndexError):
  """A fixed-alphabet mapping produced an index outside the alphabet."""


class InternalInconsistency(StructureError, AssertionError):
  """A counter would go negative or a node invariant was broken.

  This signals a programming error, not a condition to recover from.
  """

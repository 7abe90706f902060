# src/groebnerwalk/errors.py

"""
Error kinds raised by the walk.

All of them derive from :class:`WalkError` and from the builtin exception a
caller would naturally catch (``ValueError`` for bad input, ``RuntimeError``
for engine failures). A walk that does not converge is not detected; it is a
known limitation of non-generic inputs.
"""

__all__ = [
    "WalkError",
    "InvalidOrder",
    "DimensionMismatch",
    "UnknownStrategy",
    "WeightOverflow",
    "EngineFailure",
]


class WalkError(Exception):
    """Base class of every error raised by :mod:`groebnerwalk`."""


class InvalidOrder(WalkError, ValueError):
    """An order matrix is not square, not of full rank, or not global."""


class DimensionMismatch(WalkError, ValueError):
    """Two vectors (or a vector and a ring) disagree in length."""


class UnknownStrategy(WalkError, ValueError):
    """The strategy selector does not name a known walk."""


class WeightOverflow(WalkError, ArithmeticError):
    """An intermediate weight exceeds the safe bound and cannot be truncated."""

    def __init__(self, weight, limit: int):
        self.weight = tuple(weight)
        self.limit = limit
        super().__init__(
            f"Some entries of the intermediate weight vector {list(self.weight)} "
            f"exceed {limit} and no truncation keeps the current cone"
        )


class EngineFailure(WalkError, RuntimeError):
    """The basis / normal-form engine failed or returned an inconsistent result."""

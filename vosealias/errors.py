from __future__ import annotations


class AliasTableError(ValueError):
    """Base class for alias-table construction failures."""


class EmptyInputError(AliasTableError):
    """The weight sequence has length zero."""


class InvalidWeightError(AliasTableError):
    """A weight is negative or non-finite, or the weights do not have a finite positive sum."""

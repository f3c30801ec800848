"""Errors raised by tree construction and queries."""


class KDTreeError(Exception):
    """Base class for all kdneighbors errors."""


class EmptyInputError(KDTreeError, ValueError):
    """Raised when a tree is built from zero points."""


class DimensionMismatchError(KDTreeError, ValueError):
    """Raised when points (or a query) do not share the tree's dimension."""


class EmptyTreeError(KDTreeError, LookupError):
    """Raised when a query runs against a tree that holds no leaves."""


class InvalidArgumentError(KDTreeError, ValueError):
    """Raised for a non-positive k or a negative radius."""

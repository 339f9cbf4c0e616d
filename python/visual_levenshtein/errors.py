class LevenshteinError(Exception):
    """Base class for errors raised by visual_levenshtein."""


class InvariantViolation(LevenshteinError, AssertionError):
    """
    Raised when the cost matrix or a raw edit sequence breaks an internal invariant.
    This always points at a bug in the matrix builder or the grouper, never at caller input.
    """

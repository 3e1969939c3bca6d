"""
Domain errors raised by the analysis engines.

Every error derives from GenekitError (a ValueError), so callers can render a
message and let the user correct the input.
"""


class GenekitError(ValueError):
    """Base class for all GENEKIT input errors."""
    pass


class InvalidSequenceError(GenekitError):
    """Raised when a sequence contains characters outside A/T/C/G."""

    def __init__(self, message: str = "Invalid DNA sequence. Use only A, T, C and G."):
        super().__init__(message)


class InvalidMutationError(GenekitError):
    """Raised when a substitution does not match the sequence."""
    pass


class SequenceTooShortError(GenekitError):
    """Raised when a sequence is shorter than an operation requires."""

    def __init__(self, length: int, minimum: int, operation: str = "this operation"):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Sequence of {length} nt is too short for {operation} "
            f"(minimum {minimum} nt)"
        )


class SequenceLengthMismatchError(GenekitError):
    """Raised when aligned sequences do not share the same length."""
    pass


class PhylogenyInputError(GenekitError):
    """Raised when taxa or sequences for tree building are inconsistent."""
    pass


class IncompleteDistanceMatrixError(PhylogenyInputError):
    """Raised when a distance matrix lacks, or has invalid, pairwise entries."""

    def __init__(self, problems: list):
        self.problems = list(problems)
        shown = "; ".join(self.problems[:5])
        more = f" (+{len(self.problems) - 5} more)" if len(self.problems) > 5 else ""
        super().__init__(f"Distance matrix is incomplete: {shown}{more}")

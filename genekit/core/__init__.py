"""Core utilities package."""

from genekit.core.errors import (
    GenekitError,
    InvalidSequenceError,
    InvalidMutationError,
    SequenceTooShortError,
    SequenceLengthMismatchError,
    PhylogenyInputError,
    IncompleteDistanceMatrixError,
)
from genekit.core.checks import (
    PrimerPairChecker,
    check_primer_pair,
    summarize_recommendations,
)

__all__ = [
    "GenekitError",
    "InvalidSequenceError",
    "InvalidMutationError",
    "SequenceTooShortError",
    "SequenceLengthMismatchError",
    "PhylogenyInputError",
    "IncompleteDistanceMatrixError",
    "PrimerPairChecker",
    "check_primer_pair",
    "summarize_recommendations",
]

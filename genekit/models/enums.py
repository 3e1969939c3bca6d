"""
Core enumerations for GENEKIT.
"""

from enum import Enum


class MutationType(str, Enum):
    """Kind of low-level sequence edit."""
    POINT = "point"
    INSERTION = "insertion"
    DELETION = "deletion"


class MutationEffect(str, Enum):
    """Effect of a substitution on the ORF protein length."""
    NO_EFFECT = "no effect"
    CHANGED_LENGTH = "changed protein length"
    INVALID = "invalid mutation"


class BaseRole(str, Enum):
    """Role of a base in an annotated display."""
    FLANK = "flank"        # Untranslated, before the start or after the stop
    START = "start"        # First ATG
    CODING = "coding"      # Between start and stop codons
    STOP = "stop"          # First in-frame stop codon


class PrimerDirection(str, Enum):
    """Primer orientation relative to the template."""
    FORWARD = "forward"
    REVERSE = "reverse"


class RecommendationLevel(str, Enum):
    """Severity of a primer design recommendation."""
    SUCCESS = "success"
    WARNING = "warning"


class MissingDistancePolicy(str, Enum):
    """How UPGMA treats an absent entry in a distance matrix."""
    ERROR = "error"    # Reject the matrix before clustering
    ZERO = "zero"      # Legacy behaviour: missing distances read as 0

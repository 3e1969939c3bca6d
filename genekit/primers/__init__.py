"""Primer design package."""

from genekit.primers.designer import (
    PrimerDesigner,
    melting_temp,
    format_primer,
    design_simple,
    design_detailed,
    find_optimal_length,
)
from genekit.sequence.utils import gc_content, reverse_complement

__all__ = [
    "PrimerDesigner",
    "melting_temp",
    "format_primer",
    "design_simple",
    "design_detailed",
    "find_optimal_length",
    "gc_content",
    "reverse_complement",
]

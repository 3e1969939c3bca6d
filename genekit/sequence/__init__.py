"""Sequence utilities package."""

from genekit.sequence.genetic_code import (
    DNA_ALPHABET,
    GENETIC_CODE,
    START_CODON,
    STOP_CODONS,
)
from genekit.sequence.utils import (
    clean,
    is_valid_dna,
    require_dna,
    find_start,
    translate,
    orf_protein,
    protein_length,
    gc_content,
    reverse_complement,
    count_motif,
    format_blocks,
    format_with_numbers,
    annotate,
    format_with_annotation,
)

__all__ = [
    "DNA_ALPHABET",
    "GENETIC_CODE",
    "START_CODON",
    "STOP_CODONS",
    "clean",
    "is_valid_dna",
    "require_dna",
    "find_start",
    "translate",
    "orf_protein",
    "protein_length",
    "gc_content",
    "reverse_complement",
    "count_motif",
    "format_blocks",
    "format_with_numbers",
    "annotate",
    "format_with_annotation",
]

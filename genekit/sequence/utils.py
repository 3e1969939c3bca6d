"""
Sequence utilities.

Cleaning, validation, translation and display helpers for nucleotide text.
Every function cleans its input first, so raw user text (mixed case,
spaces, line breaks) can be passed directly.
"""

from __future__ import annotations

import re
from typing import List, Optional

from genekit.config import get_config
from genekit.core.errors import InvalidSequenceError
from genekit.models.enums import BaseRole
from genekit.models.data_classes import SequenceAnnotation
from genekit.sequence.genetic_code import (
    COMPLEMENT,
    GENETIC_CODE,
    START_CODON,
    STOP_CODONS,
    STOP_SYMBOL,
    UNKNOWN_SYMBOL,
)

_WHITESPACE = re.compile(r"\s+")
_DNA_PATTERN = re.compile(r"^[ATCG]+$")

# Rich markup per base role; flanks are left unstyled
ROLE_STYLES = {
    BaseRole.START: "bold green",
    BaseRole.CODING: "blue",
    BaseRole.STOP: "bold red",
}


def clean(sequence: str) -> str:
    """Remove all whitespace and uppercase."""
    return _WHITESPACE.sub("", sequence).upper()


def is_valid_dna(sequence: str) -> bool:
    """True if the cleaned sequence is non-empty and only A/T/C/G."""
    return bool(_DNA_PATTERN.match(clean(sequence)))


def require_dna(sequence: str) -> str:
    """Clean a sequence, raising InvalidSequenceError if it is not DNA."""
    cleaned = clean(sequence)
    if not _DNA_PATTERN.match(cleaned):
        invalid = sorted(set(cleaned) - set(COMPLEMENT))
        if invalid:
            raise InvalidSequenceError(
                f"Invalid bases in sequence: {', '.join(invalid)}. Only A, T, C, G allowed."
            )
        raise InvalidSequenceError("Sequence is empty")
    return cleaned


def find_start(sequence: str) -> int:
    """Index of the first ATG, or -1 (not reading-frame aware)."""
    return clean(sequence).find(START_CODON)


def translate(sequence: str) -> str:
    """
    Translate from position 0 in non-overlapping codons.

    Stop codons become '*', unknown triplets '?'; a trailing partial codon
    is dropped.
    """
    cleaned = clean(sequence)
    return "".join(
        GENETIC_CODE.get(cleaned[i:i + 3], UNKNOWN_SYMBOL)
        for i in range(0, len(cleaned) - 2, 3)
    )


def orf_protein(sequence: str) -> str:
    """Residues from the first ATG up to (not including) the first stop."""
    cleaned = clean(sequence)
    start = cleaned.find(START_CODON)
    if start == -1:
        return ""
    protein = translate(cleaned[start:])
    stop = protein.find(STOP_SYMBOL)
    return protein if stop == -1 else protein[:stop]


def protein_length(sequence: str) -> int:
    """Length of the protein encoded from the first ATG; 0 without ATG."""
    return len(orf_protein(sequence))


def gc_content(sequence: str) -> float:
    """GC content as a percentage."""
    cleaned = clean(sequence)
    if not cleaned:
        return 0.0
    return (cleaned.count("G") + cleaned.count("C")) / len(cleaned) * 100


def reverse_complement(sequence: str) -> str:
    """Reverse complement; raises InvalidSequenceError on non-ATCG bases."""
    cleaned = clean(sequence)
    try:
        return "".join(COMPLEMENT[base] for base in reversed(cleaned))
    except KeyError as e:
        raise InvalidSequenceError(
            f"Cannot complement base {e.args[0]!r}. Only A, T, C, G allowed."
        ) from e


def count_motif(sequence: str, motif: str) -> int:
    """Non-overlapping occurrences of a motif (case-insensitive)."""
    motif = clean(motif)
    if not motif:
        return 0
    return clean(sequence).count(motif)


def _chunks(sequence: str, chunk_size: int) -> List[str]:
    return [sequence[i:i + chunk_size] for i in range(0, len(sequence), chunk_size)]


def format_blocks(sequence: str, chunk_size: Optional[int] = None) -> str:
    """Split into space-separated blocks of ten bases."""
    chunk_size = chunk_size or get_config().sequence.chunk_size
    return " ".join(_chunks(clean(sequence), chunk_size))


def format_with_numbers(sequence: str) -> str:
    """
    Numbered display: one chunk per line, prefixed by its 1-based start.

    Example:
        >>> print(format_with_numbers("ATGAAATAAATGCCC"))
          1 ATGAAATAAA
         11 TGCCC
    """
    settings = get_config().sequence
    cleaned = clean(sequence)
    return "\n".join(
        f"{index * settings.chunk_size + 1:>{settings.position_width}} {chunk}"
        for index, chunk in enumerate(_chunks(cleaned, settings.chunk_size))
    )


def annotate(sequence: str) -> SequenceAnnotation:
    """
    Locate the first ATG and the first in-frame stop codon after it.

    If no stop codon follows the start, everything from the start codon to
    the end of the sequence is coding.
    """
    cleaned = clean(sequence)
    roles = [BaseRole.FLANK] * len(cleaned)
    start = cleaned.find(START_CODON)
    if start == -1:
        return SequenceAnnotation(sequence=cleaned, roles=roles)

    stop = -1
    for i in range(start + 3, len(cleaned) - 2, 3):
        if cleaned[i:i + 3] in STOP_CODONS:
            stop = i
            break

    coding_end = stop if stop != -1 else len(cleaned)
    for i in range(start, coding_end):
        roles[i] = BaseRole.CODING
    for i in range(start, start + 3):
        roles[i] = BaseRole.START
    if stop != -1:
        for i in range(stop, stop + 3):
            roles[i] = BaseRole.STOP

    return SequenceAnnotation(
        sequence=cleaned,
        start_index=start,
        stop_index=stop,
        stop_codon=cleaned[stop:stop + 3] if stop != -1 else None,
        roles=roles,
    )


def _render_chunk(bases: str, roles: List[BaseRole]) -> str:
    """Wrap runs of same-role bases in rich markup."""
    parts = []
    i = 0
    while i < len(bases):
        j = i
        while j < len(bases) and roles[j] == roles[i]:
            j += 1
        style = ROLE_STYLES.get(roles[i])
        run = bases[i:j]
        parts.append(f"[{style}]{run}[/{style}]" if style else run)
        i = j
    return "".join(parts)


def format_with_annotation(sequence: str) -> str:
    """
    Numbered display with the ORF highlighted using rich console markup.

    Start codon is bold green, stop codon bold red, the coding interior
    blue; untranslated flanks are plain.
    """
    settings = get_config().sequence
    annotation = annotate(sequence)
    size = settings.chunk_size
    lines = []
    for index, chunk in enumerate(_chunks(annotation.sequence, size)):
        offset = index * size
        body = _render_chunk(chunk, annotation.roles[offset:offset + len(chunk)])
        lines.append(f"{offset + 1:>{settings.position_width}} {body}")
    return "\n".join(lines)

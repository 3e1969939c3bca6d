"""
Single-sequence analysis report.

Runs the sequence, restriction and primer engines over one input and gathers
the results the analysis page displays.
"""

from __future__ import annotations

import logging
from typing import Optional

from genekit.config import get_config
from genekit.core.errors import SequenceTooShortError
from genekit.models.data_classes import SequenceReport
from genekit.primers.designer import PrimerDesigner
from genekit.restriction.analyzer import count_sites
from genekit.restriction.enzymes import get_enzyme
from genekit.sequence.utils import (
    clean,
    count_motif,
    format_with_numbers,
    is_valid_dna,
    orf_protein,
)

logger = logging.getLogger(__name__)


def analyze_sequence(
    sequence: str,
    enzyme: Optional[str] = None,
    motif: Optional[str] = None,
) -> SequenceReport:
    """
    Analyze a raw sequence.

    Invalid input is reported with is_valid=False rather than raised.
    Primers are omitted when the sequence is shorter than one primer.
    Raises ValueError only for an unknown enzyme name.
    """
    enzyme_def = get_enzyme(enzyme or get_config().restriction.default_enzyme)
    cleaned = clean(sequence)

    if not is_valid_dna(cleaned):
        return SequenceReport(
            length=len(cleaned),
            is_valid=False,
            enzyme=enzyme_def.name,
            motif=motif,
            error="Invalid DNA sequence. Use only A, T, C and G.",
        )

    protein = orf_protein(cleaned)
    sites = count_sites(cleaned, enzyme_def.site)

    primers = None
    try:
        primers = PrimerDesigner().design_simple(cleaned)
    except SequenceTooShortError as e:
        logger.info(f"Skipping primers: {e}")

    return SequenceReport(
        length=len(cleaned),
        is_valid=True,
        formatted=format_with_numbers(cleaned),
        protein=protein,
        protein_length=len(protein),
        enzyme=enzyme_def.name,
        restriction_sites=sites,
        restriction_fragments=sites + 1,
        motif=clean(motif) if motif else None,
        motif_occurrences=count_motif(cleaned, motif) if motif else None,
        primers=primers,
    )

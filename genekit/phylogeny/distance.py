"""
Pairwise distances between aligned sequences.
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from genekit.core.errors import (
    InvalidSequenceError,
    PhylogenyInputError,
    SequenceLengthMismatchError,
)
from genekit.models.data_classes import DistanceMatrix, TaxonSequence
from genekit.sequence.utils import clean, require_dna

logger = logging.getLogger(__name__)


def hamming_distance(seq1: str, seq2: str) -> int:
    """Number of positions at which two aligned sequences differ."""
    a, b = clean(seq1), clean(seq2)
    if len(a) != len(b):
        raise SequenceLengthMismatchError(
            f"Sequences must have the same length ({len(a)} != {len(b)})"
        )
    return sum(1 for x, y in zip(a, b) if x != y)


def distance_matrix_from_sequences(sequences: List[TaxonSequence]) -> DistanceMatrix:
    """
    All-pairs Hamming distance matrix keyed by taxon id.

    Sequences must already be aligned: every cleaned sequence must have the
    same length. No alignment is attempted.

    Raises:
        PhylogenyInputError: on duplicate taxon ids
        InvalidSequenceError: if a sequence is empty or not DNA
        SequenceLengthMismatchError: if cleaned lengths differ
    """
    ids = [s.id for s in sequences]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise PhylogenyInputError(f"Duplicate taxon ids: {', '.join(duplicates)}")
    if not sequences:
        return {}

    cleaned = []
    for taxon in sequences:
        try:
            cleaned.append(require_dna(taxon.sequence))
        except InvalidSequenceError as e:
            raise InvalidSequenceError(f"Invalid sequence for {taxon.name}: {e}") from e

    lengths = {len(s) for s in cleaned}
    if len(lengths) > 1:
        detail = ", ".join(f"{t.name}={len(s)}" for t, s in zip(sequences, cleaned))
        raise SequenceLengthMismatchError(
            f"All sequences must have the same length ({detail})"
        )

    # One row of byte codes per sequence, compared all-against-all
    n, length = len(cleaned), lengths.pop()
    codes = np.frombuffer("".join(cleaned).encode("ascii"), dtype=np.uint8).reshape(n, length)
    differences = (codes[:, None, :] != codes[None, :, :]).sum(axis=2)
    logger.debug(f"Computed {n}x{n} Hamming matrix over {length} aligned sites")

    return {
        ids[i]: {ids[j]: int(differences[i, j]) for j in range(n)}
        for i in range(n)
    }

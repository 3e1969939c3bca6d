"""
Mutation engine.

Validates and applies single-base substitutions and measures their effect on
the ORF protein length. Positions in the public API are 1-based; the
low-level edit primitives at the bottom of the module are 0-based.
"""

from __future__ import annotations

import logging
from typing import Optional

from genekit.core.errors import InvalidMutationError
from genekit.models.enums import MutationEffect, MutationType
from genekit.models.data_classes import Mutation, MutationAnalysis
from genekit.sequence.genetic_code import DNA_ALPHABET
from genekit.sequence.utils import clean, protein_length

logger = logging.getLogger(__name__)


def _find_problem(sequence: str, mutation: Mutation) -> Optional[str]:
    """Return why a mutation is invalid, or None if it applies cleanly."""
    cleaned = clean(sequence)
    if mutation.position < 1 or mutation.position > len(cleaned):
        return (
            f"Position {mutation.position} is outside the sequence "
            f"(1-{len(cleaned)})"
        )

    found = cleaned[mutation.position - 1]
    if found != mutation.original.upper():
        return (
            f"Expected base {mutation.original.upper()} at position "
            f"{mutation.position}, found {found}"
        )

    replacement = mutation.replacement.upper()
    if len(replacement) != 1 or replacement not in DNA_ALPHABET:
        return f"Replacement {mutation.replacement!r} must be a single A, T, C or G"

    return None


def validate(sequence: str, mutation: Mutation) -> bool:
    """Check a substitution against the sequence."""
    return _find_problem(sequence, mutation) is None


def apply(sequence: str, mutation: Mutation) -> str:
    """
    Apply a substitution to the cleaned sequence.

    Raises:
        InvalidMutationError: if the position or original base does not
            match, or the replacement is not a nucleotide.
    """
    problem = _find_problem(sequence, mutation)
    if problem is not None:
        raise InvalidMutationError(f"Invalid mutation: {problem}")
    return apply_point_mutation(
        clean(sequence),
        mutation.position - 1,
        mutation.replacement.upper(),
    )


def analyze(sequence: str, mutation: Mutation) -> MutationAnalysis:
    """
    Apply a substitution and compare protein lengths before and after.

    Never raises: an invalid mutation is reported with is_valid=False.
    """
    try:
        mutated = apply(sequence, mutation)
    except InvalidMutationError as e:
        logger.debug(f"Rejected mutation {mutation}: {e}")
        return MutationAnalysis(
            is_valid=False,
            effect=MutationEffect.INVALID,
            error=str(e),
        )

    original_length = protein_length(sequence)
    mutated_length = protein_length(mutated)
    effect = (
        MutationEffect.NO_EFFECT
        if original_length == mutated_length
        else MutationEffect.CHANGED_LENGTH
    )
    return MutationAnalysis(
        is_valid=True,
        effect=effect,
        mutated_sequence=mutated,
        original_protein_length=original_length,
        mutated_protein_length=mutated_length,
    )


# =============================================================================
# Low-level edit primitives (0-based, out-of-range edits are no-ops)
# =============================================================================

def apply_point_mutation(sequence: str, position: int, new_base: str) -> str:
    if position < 0 or position >= len(sequence):
        return sequence
    return sequence[:position] + new_base + sequence[position + 1:]


def apply_insertion(sequence: str, position: int, inserted: str) -> str:
    if position < 0 or position > len(sequence):
        return sequence
    return sequence[:position] + inserted + sequence[position:]


def apply_deletion(sequence: str, position: int) -> str:
    if position < 0 or position >= len(sequence):
        return sequence
    return sequence[:position] + sequence[position + 1:]


def mutation_effect(
    sequence: str,
    mutation_type: MutationType,
    position: int,
    new_base: Optional[str] = None,
) -> int:
    """Protein length after a point, insertion or deletion edit."""
    cleaned = clean(sequence)
    mutated = cleaned
    if mutation_type == MutationType.POINT:
        if new_base:
            mutated = apply_point_mutation(cleaned, position, new_base.upper())
    elif mutation_type == MutationType.INSERTION:
        if new_base:
            mutated = apply_insertion(cleaned, position, new_base.upper())
    elif mutation_type == MutationType.DELETION:
        mutated = apply_deletion(cleaned, position)
    return protein_length(mutated)

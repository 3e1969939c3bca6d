"""Mutation engine package."""

from genekit.mutation.engine import (
    validate,
    apply,
    analyze,
    apply_point_mutation,
    apply_insertion,
    apply_deletion,
    mutation_effect,
)

__all__ = [
    "validate",
    "apply",
    "analyze",
    "apply_point_mutation",
    "apply_insertion",
    "apply_deletion",
    "mutation_effect",
]

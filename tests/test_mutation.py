"""Tests for the mutation engine."""

import pytest

from genekit.core.errors import InvalidMutationError
from genekit.models.data_classes import Mutation
from genekit.models.enums import MutationEffect, MutationType
from genekit.mutation import (
    analyze,
    apply,
    apply_deletion,
    apply_insertion,
    apply_point_mutation,
    mutation_effect,
    validate,
)


class TestValidation:
    """Tests for substitution validation."""

    def test_valid_substitution(self, orf_sequence: str) -> None:
        assert validate(orf_sequence, Mutation(position=4, original="A", replacement="T"))

    def test_original_base_is_case_insensitive(self, orf_sequence: str) -> None:
        assert validate(orf_sequence, Mutation(position=1, original="a", replacement="c"))

    @pytest.mark.parametrize("position", [0, -1, 16])
    def test_position_out_of_range(self, orf_sequence: str, position: int) -> None:
        assert not validate(orf_sequence, Mutation(position=position, original="A", replacement="T"))

    def test_original_mismatch(self, orf_sequence: str) -> None:
        assert not validate(orf_sequence, Mutation(position=3, original="A", replacement="T"))

    @pytest.mark.parametrize("replacement", ["N", "", "AT"])
    def test_replacement_must_be_nucleotide(self, orf_sequence: str, replacement: str) -> None:
        assert not validate(orf_sequence, Mutation(position=4, original="A", replacement=replacement))


class TestApply:
    """Tests for applying substitutions."""

    def test_apply_changes_single_base(self, orf_sequence: str) -> None:
        mutated = apply(orf_sequence, Mutation(position=4, original="A", replacement="t"))
        assert mutated == "ATGTAATAAATGCCC"
        assert len(mutated) == len(orf_sequence)

    def test_apply_cleans_input(self) -> None:
        assert apply("atg aaa", Mutation(position=6, original="A", replacement="G")) == "ATGAAG"

    def test_apply_invalid_raises(self, orf_sequence: str) -> None:
        with pytest.raises(InvalidMutationError, match="Invalid mutation"):
            apply(orf_sequence, Mutation(position=3, original="A", replacement="T"))

    def test_inverse_restores_sequence(self, orf_sequence: str) -> None:
        mutation = Mutation(position=7, original="T", replacement="C")
        mutated = apply(orf_sequence, mutation)
        assert apply(mutated, mutation.inverse()) == orf_sequence


class TestAnalyze:
    """Tests for mutation effect analysis."""

    def test_premature_stop_changes_length(self, orf_sequence: str) -> None:
        result = analyze(orf_sequence, Mutation(position=4, original="A", replacement="T"))
        assert result.is_valid
        assert result.effect == MutationEffect.CHANGED_LENGTH
        assert result.original_protein_length == 2
        assert result.mutated_protein_length == 1

    def test_missense_has_no_effect_on_length(self, orf_sequence: str) -> None:
        result = analyze(orf_sequence, Mutation(position=5, original="A", replacement="G"))
        assert result.effect == MutationEffect.NO_EFFECT
        assert result.mutated_sequence == "ATGAGATAAATGCCC"
        assert result.original_protein_length == result.mutated_protein_length == 2

    def test_invalid_mutation_reported_not_raised(self, orf_sequence: str) -> None:
        result = analyze(orf_sequence, Mutation(position=99, original="A", replacement="T"))
        assert not result.is_valid
        assert result.effect == MutationEffect.INVALID
        assert result.mutated_sequence is None
        assert "outside the sequence" in result.error


class TestPrimitives:
    """Tests for 0-based edit primitives."""

    def test_point_mutation(self) -> None:
        assert apply_point_mutation("AAAA", 1, "G") == "AGAA"

    def test_insertion(self) -> None:
        assert apply_insertion("AAAA", 4, "G") == "AAAAG"
        assert apply_insertion("AAAA", 0, "G") == "GAAAA"

    def test_deletion(self) -> None:
        assert apply_deletion("ATGC", 0) == "TGC"

    @pytest.mark.parametrize("position", [-1, 4, 10])
    def test_out_of_range_is_noop(self, position: int) -> None:
        assert apply_point_mutation("AAAA", position, "G") == "AAAA"
        assert apply_deletion("AAAA", position) == "AAAA"

    def test_insertion_past_end_is_noop(self) -> None:
        assert apply_insertion("AAAA", 5, "G") == "AAAA"

    def test_mutation_effect(self, orf_sequence: str) -> None:
        assert mutation_effect(orf_sequence, MutationType.POINT, 3, "T") == 1
        assert mutation_effect(orf_sequence, MutationType.DELETION, 3) == 4
        assert mutation_effect(orf_sequence, MutationType.INSERTION, 3, "C") == 5

    def test_mutation_effect_without_base_is_unchanged(self, orf_sequence: str) -> None:
        assert mutation_effect(orf_sequence, MutationType.POINT, 3) == 2

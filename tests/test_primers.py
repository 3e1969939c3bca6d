"""
Tests for primer design.
"""

import pytest
from pydantic import ValidationError

from genekit.config import PrimerConfig
from genekit.core.errors import InvalidSequenceError, SequenceTooShortError
from genekit.models.enums import RecommendationLevel
from genekit.primers import (
    PrimerDesigner,
    design_detailed,
    design_simple,
    find_optimal_length,
    format_primer,
    melting_temp,
)


class TestMeltingTemp:
    """Tests for Tm estimation."""

    def test_wallace_rule_for_short_primers(self) -> None:
        assert melting_temp("AAATTTGGCC") == 28.0
        assert melting_temp("A" * 13) == 26.0

    def test_gc_formula_from_fourteen_nt(self) -> None:
        assert melting_temp("A" * 14) == pytest.approx(64.9 + 41 * (0 - 16.4) / 14)

    def test_gc_formula_twenty_mer(self) -> None:
        assert melting_temp("ATGC" * 5) == pytest.approx(133.78)

    def test_empty_primer(self) -> None:
        assert melting_temp("") == 0.0

    def test_format_primer(self) -> None:
        assert format_primer("ATGC") == "5'ATGC3'"


class TestSimpleDesign:
    """Tests for the fixed 20-nt design."""

    def test_forward_and_reverse(self) -> None:
        pair = design_simple("ATGC" * 10)
        assert pair.forward == "5'ATGCATGCATGCATGCATGC3'"
        assert pair.reverse == "5'GCATGCATGCATGCATGCAT3'"

    def test_exactly_twenty_nt(self) -> None:
        pair = design_simple("AAAAAAAAAACCCCCCCCCC")
        assert pair.forward == "5'AAAAAAAAAACCCCCCCCCC3'"
        assert pair.reverse == "5'GGGGGGGGGGTTTTTTTTTT3'"

    def test_too_short(self) -> None:
        with pytest.raises(SequenceTooShortError, match="minimum 20 nt"):
            design_simple("ATGC" * 4)

    def test_invalid_sequence(self) -> None:
        with pytest.raises(InvalidSequenceError):
            design_simple("ATGX" * 10)


class TestOptimalLength:
    """Tests for the Tm-targeted length search."""

    def test_longest_fitting_length_near_sixty(self) -> None:
        # Every candidate runs well above 60°C, so the coolest one wins
        assert find_optimal_length("ATGC" * 25, 0) == 25
        assert find_optimal_length("GC" * 10, 0) == 20

    def test_high_target_prefers_shortest(self) -> None:
        assert find_optimal_length("GC" * 30, 0, target_tm=300.0) == 18

    def test_result_within_bounds(self) -> None:
        for start in range(0, 40, 7):
            length = find_optimal_length("ATGCGGTACCTTAG" * 5, start)
            assert 18 <= length <= 25

    def test_no_length_fits(self) -> None:
        with pytest.raises(SequenceTooShortError):
            find_optimal_length("ATGC" * 5, 10)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError):
            find_optimal_length("ATGC" * 10, -1)

    def test_custom_settings(self) -> None:
        designer = PrimerDesigner(PrimerConfig(min_length=18, max_length=19))
        assert designer.find_optimal_length("GC" * 20, 0) == 19


class TestDetailedDesign:
    """Tests for the stepwise design."""

    def test_repeat_template(self, repeat_template: str) -> None:
        result = design_detailed(repeat_template)

        assert result.cleaned_length == 100
        assert (result.window_start, result.window_end) == (10, 90)
        assert result.amplification_length == 80

        assert result.forward.length == 24
        assert result.forward.gc_content == 50.0
        assert result.forward.melting_temp == pytest.approx(64.9 + 41 * 33.6 / 24)
        assert (result.forward.position.start, result.forward.position.end) == (10, 34)

        assert result.reverse.sequence == "ATGC" * 6
        assert (result.reverse.position.start, result.reverse.position.end) == (70, 94)

        assert result.tm_difference == 0.0
        assert len(result.steps) == 5
        assert [s.step for s in result.steps] == [1, 2, 3, 4, 5]
        assert result.is_optimal
        assert len(result.recommendations) == 1
        assert result.recommendations[0].level == RecommendationLevel.SUCCESS

    def test_whitespace_counts_in_original_length(self, repeat_template: str) -> None:
        result = design_detailed(" " + repeat_template.lower() + "\n")
        assert result.original_length == 102
        assert result.cleaned_length == 100

    def test_low_gc_warnings(self) -> None:
        result = design_detailed("A" * 100)
        warnings = [r for r in result.recommendations if r.level == RecommendationLevel.WARNING]
        assert len(warnings) == 2
        assert not result.is_optimal
        assert all("GC content" in w.message for w in warnings)

    def test_unbalanced_pair(self) -> None:
        result = design_detailed("A" * 50 + "GC" * 25)
        warnings = [r for r in result.recommendations if r.level == RecommendationLevel.WARNING]
        assert len(warnings) == 3
        assert any("Melting temperature difference" in w.message for w in warnings)
        assert result.annealing_temp == pytest.approx(64.9 - 41 * 16.4 / 25)
        assert result.annealing_temp == min(result.forward.melting_temp, result.reverse.melting_temp)

    def test_long_amplicon(self) -> None:
        result = design_detailed("ATGC" * 1000)
        assert result.amplification_length == 3200
        assert result.forward.length == result.reverse.length == 25
        assert result.forward.gc_content == pytest.approx(48.0)
        assert result.reverse.gc_content == pytest.approx(48.0)
        warnings = [r for r in result.recommendations if r.level == RecommendationLevel.WARNING]
        assert len(warnings) == 1
        assert "3200 bp" in warnings[0].message

    def test_too_short(self) -> None:
        with pytest.raises(SequenceTooShortError, match="detailed primer design"):
            design_detailed("A" * 39)

    def test_steps_are_frozen(self, repeat_template: str) -> None:
        result = design_detailed(repeat_template)
        with pytest.raises(ValidationError):
            result.steps[0].title = "changed"

"""Tests for sequence utilities."""

import pytest

from genekit.core.errors import InvalidSequenceError
from genekit.models.enums import BaseRole
from genekit.sequence import (
    annotate,
    clean,
    count_motif,
    find_start,
    format_blocks,
    format_with_annotation,
    format_with_numbers,
    gc_content,
    is_valid_dna,
    orf_protein,
    protein_length,
    require_dna,
    reverse_complement,
    translate,
)


class TestCleaning:
    """Tests for cleaning and validation."""

    def test_clean_strips_whitespace_and_uppercases(self) -> None:
        assert clean(" at g\n\tc ") == "ATGC"

    def test_valid_dna(self) -> None:
        assert is_valid_dna("atg c")
        assert not is_valid_dna("")
        assert not is_valid_dna("   ")
        assert not is_valid_dna("ATGN")

    def test_require_dna_reports_invalid_bases(self) -> None:
        with pytest.raises(InvalidSequenceError, match="N"):
            require_dna("ATGN")
        with pytest.raises(InvalidSequenceError, match="empty"):
            require_dna(" ")


class TestTranslation:
    """Tests for codon translation and ORF length."""

    def test_find_start_first_match(self) -> None:
        assert find_start("cc ATG aa ATG") == 2
        assert find_start("CCC") == -1

    def test_translate_with_stop(self) -> None:
        assert translate("ATGAAATAA") == "MK*"

    def test_translate_drops_partial_codon(self) -> None:
        assert translate("ATGAA") == "M"
        assert translate("AT") == ""

    @pytest.mark.parametrize("seq", ["", "ATG", "GGGCCCAAATTT", "TAGTGATAA" * 3])
    def test_translation_length_is_one_third(self, seq: str) -> None:
        assert len(translate(seq)) == len(seq) // 3

    def test_protein_length_scenario(self, orf_sequence: str) -> None:
        assert find_start(orf_sequence) == 0
        assert orf_protein(orf_sequence) == "MK"
        assert protein_length(orf_sequence) == 2

    def test_protein_length_without_atg(self) -> None:
        assert protein_length("CCCGGGTTTAAA") == 0

    def test_protein_length_without_stop(self) -> None:
        assert protein_length("ATGAAAGGG") == 3

    def test_protein_length_reads_from_first_atg(self) -> None:
        # ATG at index 1 is off frame 0; translation starts there anyway
        assert protein_length("CATGAAATGA") == 2


class TestComposition:
    """Tests for GC content, complements and motifs."""

    def test_gc_content(self) -> None:
        assert gc_content("GGCC") == 100.0
        assert gc_content("ATGC") == 50.0
        assert gc_content("") == 0.0

    def test_reverse_complement(self) -> None:
        assert reverse_complement("ATGC") == "GCAT"
        assert reverse_complement("aacg") == "CGTT"

    def test_reverse_complement_rejects_unknown_bases(self) -> None:
        with pytest.raises(InvalidSequenceError):
            reverse_complement("ATGN")

    def test_count_motif(self) -> None:
        motif = "cacccgaaacgacgtcgtaa"
        assert count_motif(motif * 2, motif.upper()) == 2
        assert count_motif("ATGC", "") == 0


class TestDisplay:
    """Tests for numbered and annotated display."""

    def test_format_with_numbers(self, orf_sequence: str) -> None:
        assert format_with_numbers(orf_sequence) == "  1 ATGAAATAAA\n 11 TGCCC"

    def test_format_with_numbers_chunk_starts(self) -> None:
        lines = format_with_numbers("A" * 25).split("\n")
        assert [line.split()[0] for line in lines] == ["1", "11", "21"]

    def test_format_blocks(self) -> None:
        assert format_blocks("A" * 25) == "AAAAAAAAAA AAAAAAAAAA AAAAA"

    def test_annotate_roles(self, orf_sequence: str) -> None:
        annotation = annotate(orf_sequence)
        assert annotation.start_index == 0
        assert annotation.stop_index == 6
        assert annotation.stop_codon == "TAA"
        assert annotation.roles[0:3] == [BaseRole.START] * 3
        assert annotation.roles[3:6] == [BaseRole.CODING] * 3
        assert annotation.roles[6:9] == [BaseRole.STOP] * 3
        assert annotation.roles[9:] == [BaseRole.FLANK] * 6

    def test_annotate_ignores_out_of_frame_stop(self) -> None:
        # TAA at index 4 is not in frame with the start codon
        annotation = annotate("ATGCTAAG")
        assert annotation.stop_index == -1
        assert annotation.stop_codon is None
        assert annotation.roles[3:] == [BaseRole.CODING] * 5

    def test_annotate_without_start(self) -> None:
        annotation = annotate("CCCTAA")
        assert not annotation.has_orf
        assert set(annotation.roles) == {BaseRole.FLANK}

    def test_format_with_annotation(self, orf_sequence: str) -> None:
        assert format_with_annotation(orf_sequence) == (
            "  1 [bold green]ATG[/bold green][blue]AAA[/blue][bold red]TAA[/bold red]A\n"
            " 11 TGCCC"
        )

    def test_format_with_annotation_plain_without_orf(self) -> None:
        seq = "CCCGGGCCCGGGCC"
        assert format_with_annotation(seq) == format_with_numbers(seq)

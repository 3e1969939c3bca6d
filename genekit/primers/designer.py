"""
PCR primer design engine.

Two designs are offered:
- a fixed design taking the first and last 20 bases of the template
- a detailed design that picks primer lengths by target melting temperature
  inside an amplification window and narrates every decision
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from genekit.config import PrimerConfig, get_config
from genekit.core.checks import PrimerPairChecker
from genekit.core.errors import SequenceTooShortError
from genekit.models.data_classes import (
    DesignStep,
    DetailedPrimerResult,
    PrimerAnalysis,
    PrimerPair,
    PrimerPosition,
)
from genekit.sequence.utils import clean, gc_content, require_dna, reverse_complement

logger = logging.getLogger(__name__)

# Below this length the Wallace rule is used for Tm
WALLACE_MAX_LENGTH = 14


def melting_temp(sequence: str) -> float:
    """
    Estimate primer melting temperature in °C.

    Primers shorter than 14 nt use the Wallace rule, 2*(A+T) + 4*(G+C).
    Longer primers use 64.9 + 41*(GC% - 16.4)/length. The two branches are
    not continuous at the boundary.
    """
    seq = clean(sequence)
    if not seq:
        return 0.0
    if len(seq) < WALLACE_MAX_LENGTH:
        at = seq.count("A") + seq.count("T")
        gc = seq.count("G") + seq.count("C")
        return float(2 * at + 4 * gc)
    return 64.9 + 41 * (gc_content(seq) - 16.4) / len(seq)


def format_primer(sequence: str) -> str:
    """Format a primer as 5'<seq>3'."""
    return f"5'{sequence}3'"


class PrimerDesigner:
    """
    Designs forward/reverse PCR primers for a template.

    Example:
        >>> designer = PrimerDesigner()
        >>> pair = designer.design_simple("ATGC" * 10)
        >>> pair.forward
        "5'ATGCATGCATGCATGCATGC3'"
    """

    def __init__(self, settings: Optional[PrimerConfig] = None):
        self.settings = settings or get_config().primers
        self.checker = PrimerPairChecker(self.settings)

    # -------------------------------------------------------------------------
    # Simple design
    # -------------------------------------------------------------------------

    def design_simple(self, sequence: str) -> PrimerPair:
        """
        Forward primer from the first bases, reverse primer from the
        reverse complement of the last bases.

        Raises:
            InvalidSequenceError: on non-ATCG input
            SequenceTooShortError: if the template is shorter than one primer
        """
        cleaned = require_dna(sequence)
        length = self.settings.simple_length
        if len(cleaned) < length:
            raise SequenceTooShortError(len(cleaned), length, "primer design")

        forward = cleaned[:length]
        reverse = reverse_complement(cleaned[len(cleaned) - length:])
        return PrimerPair(
            forward=format_primer(forward),
            reverse=format_primer(reverse),
        )

    # -------------------------------------------------------------------------
    # Length search
    # -------------------------------------------------------------------------

    def find_optimal_length(
        self,
        sequence: str,
        start: int,
        target_tm: Optional[float] = None,
    ) -> int:
        """
        Pick the primer length whose Tm is closest to the target.

        Candidate lengths are scanned in ascending order and the scan stops
        at the first length that runs past the end of the sequence. Ties keep
        the shorter length.
        """
        target_tm = self.settings.target_tm if target_tm is None else target_tm
        cleaned = clean(sequence)
        if start < 0:
            raise ValueError(f"Primer start must be non-negative, got {start}")

        best_length = None
        best_diff = math.inf
        for length in range(self.settings.min_length, self.settings.max_length + 1):
            if start + length > len(cleaned):
                break
            diff = abs(melting_temp(cleaned[start:start + length]) - target_tm)
            if diff < best_diff:
                best_diff = diff
                best_length = length

        if best_length is None:
            raise SequenceTooShortError(
                max(0, len(cleaned) - start),
                self.settings.min_length,
                f"a primer starting at position {start}",
            )
        return best_length

    def analyze_primer(self, primer: str, start: int, end: int) -> PrimerAnalysis:
        """Measure GC content and Tm of a primer."""
        return PrimerAnalysis(
            sequence=primer,
            length=len(primer),
            gc_content=gc_content(primer),
            melting_temp=melting_temp(primer),
            position=PrimerPosition(start=start, end=end),
        )

    # -------------------------------------------------------------------------
    # Detailed design
    # -------------------------------------------------------------------------

    def design_detailed(self, sequence: str) -> DetailedPrimerResult:
        """
        Design a primer pair inside the central amplification window.

        Stages:
        1. Clean the template
        2. Trim a 10% margin from each end to get the amplification window
        3. Forward primer at the window start, length chosen by Tm
        4. Reverse primer templated 20 nt before the window end, length
           chosen by Tm, then reverse-complemented
        5. Validate the pair (Tm difference, GC content, amplicon length)

        Raises:
            InvalidSequenceError: on non-ATCG input
            SequenceTooShortError: below the minimum detailed length (40 nt)
        """
        s = self.settings
        cleaned = require_dna(sequence)
        n = len(cleaned)
        if n < s.min_detailed_length:
            raise SequenceTooShortError(n, s.min_detailed_length, "detailed primer design")

        steps: List[DesignStep] = []

        # Step 1: preparation
        steps.append(DesignStep(
            step=1,
            title="Sequence preparation",
            description="Whitespace removed and bases converted to uppercase.",
            sequence=cleaned,
            result=f"{n} nt ready for analysis",
            details=[
                f"Original length: {len(sequence)} characters",
                f"Cleaned length: {n} nt",
            ],
        ))

        # Step 2: amplification window
        window_start = math.floor(n * s.window_margin)
        window_end = math.floor(n * (1 - s.window_margin))
        amplification_length = window_end - window_start
        steps.append(DesignStep(
            step=2,
            title="Amplification window",
            description=(
                f"A {s.window_margin:.0%} margin is left at each end of the "
                "template to avoid edge artifacts."
            ),
            sequence=cleaned[window_start:window_end],
            result=f"Window {window_start + 1}-{window_end} ({amplification_length} bp)",
            details=[
                f"Window start: {window_start}",
                f"Window end: {window_end}",
                f"Amplification length: {amplification_length} bp",
            ],
        ))

        # Step 3: forward primer
        forward_length = self.find_optimal_length(cleaned, window_start)
        forward_seq = cleaned[window_start:window_start + forward_length]
        forward = self.analyze_primer(forward_seq, window_start, window_start + forward_length)
        logger.debug(
            f"Forward primer {forward_seq} ({forward_length} nt, Tm {forward.melting_temp:.2f})"
        )
        steps.append(DesignStep(
            step=3,
            title="Forward primer",
            description=(
                f"Lengths {s.min_length}-{s.max_length} nt tested from the window "
                f"start; the one closest to {s.target_tm:g}°C was kept."
            ),
            sequence=forward_seq,
            result=format_primer(forward_seq),
            details=_primer_details(forward),
        ))

        # Step 4: reverse primer
        reverse_start = window_end - s.reverse_anchor
        reverse_length = self.find_optimal_length(cleaned, reverse_start)
        template = cleaned[reverse_start:reverse_start + reverse_length]
        reverse_seq = reverse_complement(template)
        reverse = self.analyze_primer(reverse_seq, reverse_start, reverse_start + reverse_length)
        logger.debug(
            f"Reverse primer {reverse_seq} ({reverse_length} nt, Tm {reverse.melting_temp:.2f})"
        )
        steps.append(DesignStep(
            step=4,
            title="Reverse primer",
            description=(
                f"Template taken {s.reverse_anchor} nt before the window end, "
                "sized by Tm, then reverse-complemented."
            ),
            sequence=template,
            result=format_primer(reverse_seq),
            details=[f"Template: {template}"] + _primer_details(reverse),
        ))

        # Step 5: validation
        tm_difference = abs(forward.melting_temp - reverse.melting_temp)
        annealing_temp = min(forward.melting_temp, reverse.melting_temp)
        recommendations = self.checker.check_all(forward, reverse, amplification_length)
        steps.append(DesignStep(
            step=5,
            title="Validation",
            description="Primer pair checked for Tm balance, GC content and amplicon size.",
            result=f"Recommended annealing temperature: {annealing_temp:.1f}°C",
            details=[
                f"Tm difference: {tm_difference:.1f}°C",
                f"Annealing temperature: {annealing_temp:.1f}°C",
            ] + [r.message for r in recommendations],
        ))

        return DetailedPrimerResult(
            original_length=len(sequence),
            cleaned_length=n,
            window_start=window_start,
            window_end=window_end,
            amplification_length=amplification_length,
            forward=forward,
            reverse=reverse,
            tm_difference=tm_difference,
            annealing_temp=annealing_temp,
            steps=steps,
            recommendations=recommendations,
        )


def _primer_details(primer: PrimerAnalysis) -> List[str]:
    return [
        f"Length: {primer.length} nt",
        f"GC content: {primer.gc_content:.1f}%",
        f"Melting temperature: {primer.melting_temp:.1f}°C",
    ]


def design_simple(sequence: str) -> PrimerPair:
    """Convenience function for the fixed 20-nt design."""
    return PrimerDesigner().design_simple(sequence)


def design_detailed(sequence: str) -> DetailedPrimerResult:
    """Convenience function for the Tm-targeted design."""
    return PrimerDesigner().design_detailed(sequence)


def find_optimal_length(sequence: str, start: int, target_tm: float = 60.0) -> int:
    """Convenience function for the Tm-targeted length search."""
    return PrimerDesigner().find_optimal_length(sequence, start, target_tm)

"""
Primer pair validation.

Identifies issues with a designed primer pair that are likely to hurt a PCR.
"""

from __future__ import annotations

from typing import List, Optional, Dict, Any

from genekit.config import PrimerConfig, get_config
from genekit.models.enums import PrimerDirection, RecommendationLevel
from genekit.models.data_classes import PrimerAnalysis, Recommendation


class PrimerPairChecker:
    """
    Validates a forward/reverse primer pair.

    Checks for:
    1. Melting temperature mismatch between the two primers
    2. GC content outside the stable range, per primer
    3. Amplicons too long for a standard polymerase
    """

    def __init__(self, settings: Optional[PrimerConfig] = None):
        self.settings = settings or get_config().primers

    def check_all(
        self,
        forward: PrimerAnalysis,
        reverse: PrimerAnalysis,
        amplification_length: int,
    ) -> List[Recommendation]:
        """
        Run all checks on a primer pair.

        Returns:
            Warnings for every issue found, or a single success
            recommendation when the pair is optimal.
        """
        recommendations = []
        recommendations.extend(self._check_tm_difference(forward, reverse))
        recommendations.extend(self._check_gc(forward, PrimerDirection.FORWARD))
        recommendations.extend(self._check_gc(reverse, PrimerDirection.REVERSE))
        recommendations.extend(self._check_amplicon(amplification_length))

        if not recommendations:
            recommendations.append(Recommendation(
                level=RecommendationLevel.SUCCESS,
                message="Primer pair is optimal for PCR",
                details={
                    "forward_tm": forward.melting_temp,
                    "reverse_tm": reverse.melting_temp,
                },
            ))
        return recommendations

    def _check_tm_difference(
        self,
        forward: PrimerAnalysis,
        reverse: PrimerAnalysis,
    ) -> List[Recommendation]:
        difference = abs(forward.melting_temp - reverse.melting_temp)
        if difference <= self.settings.max_tm_difference:
            return []
        return [Recommendation(
            level=RecommendationLevel.WARNING,
            message=(
                f"Melting temperature difference of {difference:.1f}°C exceeds "
                f"{self.settings.max_tm_difference:g}°C; adjust primer lengths"
            ),
            details={"difference": difference},
        )]

    def _check_gc(
        self,
        primer: PrimerAnalysis,
        direction: PrimerDirection,
    ) -> List[Recommendation]:
        gc = primer.gc_content
        if self.settings.gc_min <= gc <= self.settings.gc_max:
            return []
        return [Recommendation(
            level=RecommendationLevel.WARNING,
            message=(
                f"{direction.value.capitalize()} primer GC content {gc:.1f}% is outside "
                f"{self.settings.gc_min:g}-{self.settings.gc_max:g}%"
            ),
            details={"primer": direction.value, "gc_content": gc},
        )]

    def _check_amplicon(self, amplification_length: int) -> List[Recommendation]:
        if amplification_length <= self.settings.max_amplicon:
            return []
        return [Recommendation(
            level=RecommendationLevel.WARNING,
            message=(
                f"Amplicon of {amplification_length} bp is longer than "
                f"{self.settings.max_amplicon} bp; use a long-range polymerase"
            ),
            details={"amplification_length": amplification_length},
        )]


def check_primer_pair(
    forward: PrimerAnalysis,
    reverse: PrimerAnalysis,
    amplification_length: int,
    settings: Optional[PrimerConfig] = None,
) -> List[Recommendation]:
    """Convenience function to validate a primer pair."""
    checker = PrimerPairChecker(settings)
    return checker.check_all(forward, reverse, amplification_length)


def summarize_recommendations(recommendations: List[Recommendation]) -> Dict[str, Any]:
    """Generate summary of primer recommendations."""
    warnings = [r for r in recommendations if r.level == RecommendationLevel.WARNING]

    if warnings:
        interpretation = f"{len(warnings)} issue(s) detected - review before ordering"
    else:
        interpretation = "No issues detected"

    return {
        "total": len(recommendations),
        "warnings": len(warnings),
        "messages": [
            {"level": r.level.value, "message": r.message}
            for r in recommendations
        ],
        "interpretation": interpretation,
    }

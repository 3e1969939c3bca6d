"""Sequence report package."""

from genekit.analysis.report import analyze_sequence

__all__ = ["analyze_sequence"]

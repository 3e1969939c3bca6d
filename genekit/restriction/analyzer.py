"""
Restriction-site analyzer.

Counts recognition sites and estimates the fragments produced by digesting a
linear molecule.
"""

from __future__ import annotations

from genekit.restriction.enzymes import DEFAULT_ENZYME
from genekit.sequence.utils import clean

ECORI_SITE = DEFAULT_ENZYME.site


def count_sites(sequence: str, site: str = ECORI_SITE) -> int:
    """
    Count occurrences of a recognition site, scanning left to right.

    After a match at index i the scan resumes at i + 1, so overlapping
    occurrences of self-overlapping sites are all counted.
    """
    site = clean(site)
    if not site:
        raise ValueError("Recognition site must not be empty")

    cleaned = clean(sequence)
    count = 0
    index = cleaned.find(site)
    while index != -1:
        count += 1
        index = cleaned.find(site, index + 1)
    return count


def estimate_fragments(sequence: str, site: str = ECORI_SITE) -> int:
    """Fragments from a linear molecule: one more than the number of cuts."""
    return count_sites(sequence, site) + 1

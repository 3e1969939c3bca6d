"""Restriction analysis package."""

from genekit.restriction.enzymes import (
    RestrictionEnzyme,
    ENZYMES,
    DEFAULT_ENZYME,
    get_enzyme,
    list_enzymes,
)
from genekit.restriction.analyzer import (
    ECORI_SITE,
    count_sites,
    estimate_fragments,
)

__all__ = [
    "RestrictionEnzyme",
    "ENZYMES",
    "DEFAULT_ENZYME",
    "get_enzyme",
    "list_enzymes",
    "ECORI_SITE",
    "count_sites",
    "estimate_fragments",
]

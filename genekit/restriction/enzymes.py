"""
Restriction enzyme definitions.

Recognition sites for the enzymes offered by the restriction analyzer.
"""

from __future__ import annotations

from typing import Dict, List
from dataclasses import dataclass


@dataclass(frozen=True)
class RestrictionEnzyme:
    """
    A type II restriction enzyme.

    Attributes:
        name: Enzyme name (e.g., "EcoRI")
        site: Recognition sequence, 5'->3'
        description: Human-readable description
    """
    name: str
    site: str
    description: str = ""

    @property
    def site_length(self) -> int:
        return len(self.site)


ENZYMES: Dict[str, RestrictionEnzyme] = {
    "ECORI": RestrictionEnzyme(
        name="EcoRI",
        site="GAATTC",
        description="Escherichia coli RY13, leaves 5' AATT overhangs",
    ),
    "BAMHI": RestrictionEnzyme(
        name="BamHI",
        site="GGATCC",
        description="Bacillus amyloliquefaciens, leaves 5' GATC overhangs",
    ),
    "HINDIII": RestrictionEnzyme(
        name="HindIII",
        site="AAGCTT",
        description="Haemophilus influenzae Rd, leaves 5' AGCT overhangs",
    ),
    "ECORV": RestrictionEnzyme(
        name="EcoRV",
        site="GATATC",
        description="Escherichia coli J62, blunt ends",
    ),
    "NOTI": RestrictionEnzyme(
        name="NotI",
        site="GCGGCCGC",
        description="Nocardia otitidis-caviarum, rare 8-bp cutter",
    ),
}

DEFAULT_ENZYME = ENZYMES["ECORI"]


def get_enzyme(name: str) -> RestrictionEnzyme:
    """Get an enzyme definition by name (case-insensitive)."""
    key = name.strip().upper()
    if key not in ENZYMES:
        raise ValueError(
            f"Unknown restriction enzyme: {name}. "
            f"Available: {', '.join(e.name for e in ENZYMES.values())}"
        )
    return ENZYMES[key]


def list_enzymes() -> List[RestrictionEnzyme]:
    """List all supported enzymes."""
    return list(ENZYMES.values())

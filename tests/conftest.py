"""
Test configuration and fixtures for GENEKIT.
"""

import pytest
from typing import Dict, List

from genekit.models.data_classes import ClusterNode, Taxon, TaxonSequence


@pytest.fixture
def orf_sequence() -> str:
    """ATG AAA TAA followed by an untranslated tail."""
    return "ATGAAATAAATGCCC"


@pytest.fixture
def repeat_template() -> str:
    """100 nt template of ATGC repeats."""
    return "ATGC" * 25


@pytest.fixture
def three_taxa() -> List[Taxon]:
    return [Taxon(id="A", name="A"), Taxon(id="B", name="B"), Taxon(id="C", name="C")]


@pytest.fixture
def three_leaves(three_taxa: List[Taxon]) -> List[ClusterNode]:
    return [ClusterNode(id=t.id, name=t.name) for t in three_taxa]


@pytest.fixture
def three_taxa_matrix() -> Dict[str, Dict[str, float]]:
    return {
        "A": {"B": 2, "C": 4},
        "B": {"A": 2, "C": 4},
        "C": {"A": 4, "B": 4},
    }


@pytest.fixture
def four_taxa() -> List[Taxon]:
    return [
        Taxon(id="1", name="A"),
        Taxon(id="2", name="B"),
        Taxon(id="3", name="C"),
        Taxon(id="4", name="D"),
    ]


@pytest.fixture
def four_taxa_matrix() -> Dict[str, Dict[str, float]]:
    return {
        "1": {"2": 2, "3": 4, "4": 6},
        "2": {"1": 2, "3": 3, "4": 5},
        "3": {"1": 4, "2": 3, "4": 4},
        "4": {"1": 6, "2": 5, "3": 4},
    }


@pytest.fixture
def aligned_sequences() -> List[TaxonSequence]:
    """Pairwise Hamming distances: A-B 1, A-C 4, B-C 3."""
    return [
        TaxonSequence(id="A", name="A", sequence="AAAA"),
        TaxonSequence(id="B", name="B", sequence="aaat"),
        TaxonSequence(id="C", name="C", sequence="TT TT"),
    ]

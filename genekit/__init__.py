"""
GENEKIT - Molecular Genetics Toolkit

Sequence analysis, mutation simulation, restriction mapping, PCR primer
design and UPGMA phylogenetic trees for genetics teaching tools.
"""

__version__ = "0.1.0"
__author__ = "GENEKIT Team"

from genekit.models.enums import MutationEffect, MutationType, MissingDistancePolicy
from genekit.models.data_classes import (
    Mutation,
    MutationAnalysis,
    PrimerPair,
    DetailedPrimerResult,
    TaxonSequence,
    Taxon,
    ClusterNode,
    UPGMAResult,
)

__all__ = [
    # Enums
    "MutationEffect",
    "MutationType",
    "MissingDistancePolicy",
    # Data classes
    "Mutation",
    "MutationAnalysis",
    "PrimerPair",
    "DetailedPrimerResult",
    "TaxonSequence",
    "Taxon",
    "ClusterNode",
    "UPGMAResult",
]

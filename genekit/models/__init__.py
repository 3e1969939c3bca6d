"""Models package."""

from genekit.models.enums import (
    MutationType,
    MutationEffect,
    BaseRole,
    PrimerDirection,
    RecommendationLevel,
    MissingDistancePolicy,
)
from genekit.models.data_classes import (
    DistanceMatrix,
    SequenceAnnotation,
    SequenceReport,
    Mutation,
    MutationAnalysis,
    PrimerPair,
    PrimerPosition,
    PrimerAnalysis,
    DesignStep,
    Recommendation,
    DetailedPrimerResult,
    Taxon,
    TaxonSequence,
    ClusterNode,
    UPGMAStep,
    UPGMAResult,
)

__all__ = [
    # Enums
    "MutationType",
    "MutationEffect",
    "BaseRole",
    "PrimerDirection",
    "RecommendationLevel",
    "MissingDistancePolicy",
    # Data classes
    "DistanceMatrix",
    "SequenceAnnotation",
    "SequenceReport",
    "Mutation",
    "MutationAnalysis",
    "PrimerPair",
    "PrimerPosition",
    "PrimerAnalysis",
    "DesignStep",
    "Recommendation",
    "DetailedPrimerResult",
    "Taxon",
    "TaxonSequence",
    "ClusterNode",
    "UPGMAStep",
    "UPGMAResult",
]

"""
Pydantic data classes for GENEKIT.

All inputs and results exchanged with the analysis engines.
"""

from __future__ import annotations

from typing import Optional, Dict, List, Any
from pydantic import BaseModel, ConfigDict, Field, computed_field

from genekit.models.enums import (
    BaseRole,
    MutationEffect,
    RecommendationLevel,
)


# A symmetric mapping id -> id -> distance, diagonal 0
DistanceMatrix = Dict[str, Dict[str, float]]


# =============================================================================
# Sequence Analysis
# =============================================================================

class SequenceAnnotation(BaseModel):
    """Start/stop codon positions and a role for every base."""
    model_config = ConfigDict(frozen=True)

    sequence: str
    start_index: int = -1
    stop_index: int = -1
    stop_codon: Optional[str] = None
    roles: List[BaseRole] = Field(default_factory=list)

    @computed_field
    @property
    def has_orf(self) -> bool:
        return self.start_index != -1


class SequenceReport(BaseModel):
    """Overview of a single sequence, as shown on the analysis page."""
    length: int
    is_valid: bool
    formatted: str = ""
    protein: str = ""
    protein_length: int = 0
    enzyme: str = "EcoRI"
    restriction_sites: int = 0
    restriction_fragments: int = 1
    motif: Optional[str] = None
    motif_occurrences: Optional[int] = None
    primers: Optional[PrimerPair] = None
    error: Optional[str] = None


# =============================================================================
# Mutations
# =============================================================================

class Mutation(BaseModel):
    """A single-base substitution at a 1-based position."""
    position: int
    original: str
    replacement: str

    def inverse(self) -> "Mutation":
        """The substitution that undoes this one."""
        return Mutation(
            position=self.position,
            original=self.replacement,
            replacement=self.original,
        )


class MutationAnalysis(BaseModel):
    """Outcome of applying a substitution and measuring its effect."""
    is_valid: bool
    effect: MutationEffect
    mutated_sequence: Optional[str] = None
    original_protein_length: Optional[int] = None
    mutated_protein_length: Optional[int] = None
    error: Optional[str] = None


# =============================================================================
# Primers
# =============================================================================

class PrimerPair(BaseModel):
    """Forward/reverse primers formatted as 5'...3'."""
    forward: str
    reverse: str


class PrimerPosition(BaseModel):
    """Template coordinates of a primer (0-based, end exclusive)."""
    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class PrimerAnalysis(BaseModel):
    """A designed primer with its physical properties."""
    model_config = ConfigDict(frozen=True)

    sequence: str
    length: int
    gc_content: float
    melting_temp: float
    position: PrimerPosition


class DesignStep(BaseModel):
    """One narrated stage of the detailed primer design."""
    model_config = ConfigDict(frozen=True)

    step: int
    title: str
    description: str
    sequence: Optional[str] = None
    result: Optional[str] = None
    details: List[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """A validation outcome for a primer pair."""
    model_config = ConfigDict(frozen=True)

    level: RecommendationLevel
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class DetailedPrimerResult(BaseModel):
    """Primers plus the full trace of how they were chosen."""
    model_config = ConfigDict(frozen=True)

    original_length: int
    cleaned_length: int
    window_start: int
    window_end: int
    amplification_length: int
    forward: PrimerAnalysis
    reverse: PrimerAnalysis
    tm_difference: float
    annealing_temp: float
    steps: List[DesignStep] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)

    @computed_field
    @property
    def is_optimal(self) -> bool:
        return all(r.level == RecommendationLevel.SUCCESS for r in self.recommendations)


# =============================================================================
# Phylogeny
# =============================================================================

class Taxon(BaseModel):
    """A named entity to be clustered."""
    id: str
    name: str


class TaxonSequence(BaseModel):
    """A named, aligned DNA sequence."""
    id: str
    name: str
    sequence: str


class ClusterNode(BaseModel):
    """A node of the UPGMA dendrogram."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    height: float = 0.0
    is_leaf: bool = True
    children: Optional[List["ClusterNode"]] = None


class UPGMAStep(BaseModel):
    """Record of one merge, with matrix snapshots before and after."""
    model_config = ConfigDict(frozen=True)

    step: int
    clustered_nodes: List[str]
    distance: float
    height: float
    description: str
    matrix_before: DistanceMatrix
    matrix_after: DistanceMatrix
    active_clusters: List[str]
    new_cluster_name: str


class UPGMAResult(BaseModel):
    """Tree root (None for empty input) and the ordered merge history."""
    model_config = ConfigDict(frozen=True)

    tree: Optional[ClusterNode] = None
    steps: List[UPGMAStep] = Field(default_factory=list)
    matrix: DistanceMatrix = Field(default_factory=dict)


SequenceReport.model_rebuild()
ClusterNode.model_rebuild()

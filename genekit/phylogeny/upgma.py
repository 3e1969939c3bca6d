"""
UPGMA clustering engine.

Builds an ultrametric tree by repeatedly merging the closest pair of
clusters, recording a snapshot of the distance matrix before and after each
merge so the construction can be replayed step by step.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Dict, List, Optional, Tuple

from genekit.config import get_config
from genekit.core.errors import IncompleteDistanceMatrixError, PhylogenyInputError
from genekit.models.enums import MissingDistancePolicy
from genekit.models.data_classes import (
    ClusterNode,
    DistanceMatrix,
    UPGMAResult,
    UPGMAStep,
)

logger = logging.getLogger(__name__)


def _lookup(matrix: DistanceMatrix, a: str, b: str) -> float:
    """Distance a -> b; absent entries read as 0."""
    return matrix.get(a, {}).get(b) or 0


def copy_matrix_for_clusters(matrix: DistanceMatrix, cluster_ids: List[str]) -> DistanceMatrix:
    """Fresh square copy of the matrix restricted to the given ids, diagonal 0."""
    return {
        a: {b: 0 if a == b else _lookup(matrix, a, b) for b in cluster_ids}
        for a in cluster_ids
    }


def _is_number(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, Real) and not math.isnan(value)


def find_matrix_problems(
    matrix: DistanceMatrix,
    cluster_ids: List[str],
) -> Tuple[List[str], List[str]]:
    """
    Inspect the entries between the given ids.

    Returns:
        (gaps, invalid): gaps are missing or asymmetric off-diagonal
        entries; invalid are malformed rows, non-numeric or negative
        values, and non-zero diagonal entries
    """
    if not isinstance(matrix, dict):
        return [], [f"distance matrix must map ids to rows, got {type(matrix).__name__}"]

    gaps, invalid = [], []
    rows: Dict[str, dict] = {}
    for a in cluster_ids:
        row = matrix.get(a, {})
        if not isinstance(row, dict):
            invalid.append(f"row {a} is not a mapping ({row!r})")
            row = {}
        rows[a] = row
        diagonal = row.get(a)
        if diagonal is not None and (not _is_number(diagonal) or diagonal != 0):
            invalid.append(f"distance {a} -> {a} must be 0 ({diagonal!r})")

    for i, a in enumerate(cluster_ids):
        for b in cluster_ids[i + 1:]:
            values = []
            for x, y in ((a, b), (b, a)):
                value = rows[x].get(y)
                if value is None:
                    gaps.append(f"missing distance {x} -> {y}")
                elif not _is_number(value):
                    invalid.append(f"distance {x} -> {y} is not a number ({value!r})")
                elif value < 0:
                    invalid.append(f"distance {x} -> {y} is negative ({value})")
                else:
                    values.append(value)
            if len(values) == 2 and values[0] != values[1]:
                gaps.append(f"distance {a} <-> {b} is asymmetric ({values[0]} != {values[1]})")
    return gaps, invalid


class UPGMABuilder:
    """
    Agglomerative clustering with unweighted average linkage.

    The distance from a merged cluster to any other cluster X is
    (d(A, X) + d(B, X)) / 2, regardless of how many leaves A and B hold.
    Merge heights are half the merge distance.
    """

    def __init__(self, missing: Optional[MissingDistancePolicy] = None):
        self.missing = missing or get_config().phylogeny.missing_distance

    def build(self, clusters: List[ClusterNode], matrix: DistanceMatrix) -> UPGMAResult:
        """
        Cluster until a single root remains.

        Args:
            clusters: Initial clusters, usually one leaf per taxon
            matrix: Distances keyed by cluster id

        Returns:
            UPGMAResult with the root (None for empty input) and merge steps

        Raises:
            PhylogenyInputError: on duplicate cluster ids
            IncompleteDistanceMatrixError: on malformed rows, non-numeric,
                negative or non-zero diagonal entries, and on missing or
                asymmetric entries when the policy is
                MissingDistancePolicy.ERROR
        """
        initial_ids = [c.id for c in clusters]
        if len(set(initial_ids)) != len(initial_ids):
            raise PhylogenyInputError("Cluster ids must be unique")

        gaps, invalid = find_matrix_problems(matrix, initial_ids)
        if invalid:
            raise IncompleteDistanceMatrixError(invalid)
        if gaps:
            if self.missing == MissingDistancePolicy.ERROR:
                raise IncompleteDistanceMatrixError(gaps)
            logger.warning(
                f"Distance matrix has {len(gaps)} missing or asymmetric entries; "
                "missing distances are treated as 0"
            )

        steps: List[UPGMAStep] = []
        active = list(clusters)
        working: Dict[str, Dict[str, float]] = {
            k: dict(v) for k, v in matrix.items() if isinstance(v, dict)
        }
        counter = len(clusters) + 1

        while len(active) > 1:
            current_ids = [c.id for c in active]
            matrix_before = copy_matrix_for_clusters(working, current_ids)

            pair = self._find_closest_pair(active, working)
            if pair is None:
                logger.warning("No mergeable pair found; stopping early")
                break
            i, j, distance = pair
            cluster_i, cluster_j = active[i], active[j]

            merged = ClusterNode(
                id=f"cluster_{counter}",
                name=f"({cluster_i.name}, {cluster_j.name})",
                height=distance / 2,
                is_leaf=False,
                children=[cluster_i, cluster_j],
            )
            counter += 1

            # Average linkage to every remaining cluster
            working[merged.id] = {}
            for k, other in enumerate(active):
                if k in (i, j):
                    continue
                average = (
                    _lookup(working, cluster_i.id, other.id)
                    + _lookup(working, cluster_j.id, other.id)
                ) / 2
                working[merged.id][other.id] = average
                working.setdefault(other.id, {})[merged.id] = average

            # Drop merged clusters' rows and columns
            for removed in (cluster_i.id, cluster_j.id):
                working.pop(removed, None)
            for row in working.values():
                row.pop(cluster_i.id, None)
                row.pop(cluster_j.id, None)

            # Merged cluster takes the slot of its first member
            active[i] = merged
            del active[j]

            logger.debug(
                f"Step {len(steps) + 1}: merged {cluster_i.name} and {cluster_j.name} "
                f"at distance {distance} (height {merged.height})"
            )
            steps.append(UPGMAStep(
                step=len(steps) + 1,
                clustered_nodes=[cluster_i.name, cluster_j.name],
                distance=distance,
                height=merged.height,
                description=f"Merge {cluster_i.name} and {cluster_j.name} (distance: {distance:.2f})",
                matrix_before=matrix_before,
                matrix_after=copy_matrix_for_clusters(working, [c.id for c in active]),
                active_clusters=current_ids,
                new_cluster_name=merged.name,
            ))

        return UPGMAResult(
            tree=active[0] if active else None,
            steps=steps,
            matrix=copy_matrix_for_clusters(matrix, initial_ids),
        )

    @staticmethod
    def _find_closest_pair(
        active: List[ClusterNode],
        matrix: DistanceMatrix,
    ) -> Optional[Tuple[int, int, float]]:
        """First pair (i ascending, then j) holding the strictly smallest distance."""
        best: Optional[Tuple[int, int, float]] = None
        for i in range(len(active)):
            for j in range(i + 1, len(active)):
                distance = _lookup(matrix, active[i].id, active[j].id)
                if best is None or distance < best[2]:
                    best = (i, j, distance)
        return best


def construct_upgma_tree(
    clusters: List[ClusterNode],
    matrix: DistanceMatrix,
    missing: Optional[MissingDistancePolicy] = None,
) -> UPGMAResult:
    """Convenience function to run UPGMA over initial clusters."""
    return UPGMABuilder(missing).build(clusters, matrix)

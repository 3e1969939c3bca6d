"""
Tree construction entry points and dendrogram helpers.
"""

from __future__ import annotations

import re
from typing import List, Optional

from genekit.models.enums import MissingDistancePolicy
from genekit.models.data_classes import (
    ClusterNode,
    DistanceMatrix,
    Taxon,
    TaxonSequence,
    UPGMAResult,
)
from genekit.phylogeny.distance import distance_matrix_from_sequences
from genekit.phylogeny.upgma import construct_upgma_tree

# Labels made only of these characters can be written unquoted in Newick
_PLAIN_LABEL = re.compile(r"^[A-Za-z0-9_.\-]+$")


def leaf_clusters(taxa: List[Taxon]) -> List[ClusterNode]:
    """One leaf cluster per taxon."""
    return [ClusterNode(id=t.id, name=t.name, height=0.0, is_leaf=True) for t in taxa]


def tree_from_sequences(sequences: List[TaxonSequence]) -> UPGMAResult:
    """Build a UPGMA tree from aligned sequences via Hamming distances."""
    matrix = distance_matrix_from_sequences(sequences)
    taxa = [Taxon(id=s.id, name=s.name) for s in sequences]
    return construct_upgma_tree(leaf_clusters(taxa), matrix)


def tree_from_matrix(
    taxa: List[Taxon],
    matrix: DistanceMatrix,
    missing: Optional[MissingDistancePolicy] = None,
) -> UPGMAResult:
    """Build a UPGMA tree from a user-supplied distance matrix."""
    return construct_upgma_tree(leaf_clusters(taxa), matrix, missing)


def leaves(node: ClusterNode) -> List[ClusterNode]:
    """Leaves in left-to-right order."""
    if node.is_leaf or not node.children:
        return [node]
    result = []
    for child in node.children:
        result.extend(leaves(child))
    return result


def _label(name: str) -> str:
    if _PLAIN_LABEL.match(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def to_newick(node: ClusterNode) -> str:
    """
    Newick representation of a dendrogram.

    Branch lengths are the height difference between parent and child.
    """
    def build(current: ClusterNode) -> str:
        if current.is_leaf or not current.children:
            return _label(current.name)
        parts = [
            f"{build(child)}:{current.height - child.height:g}"
            for child in current.children
        ]
        return "(" + ",".join(parts) + ")"

    return build(node) + ";"

"""Phylogenetic tree construction package."""

from genekit.phylogeny.distance import (
    hamming_distance,
    distance_matrix_from_sequences,
)
from genekit.phylogeny.upgma import (
    UPGMABuilder,
    construct_upgma_tree,
    copy_matrix_for_clusters,
    find_matrix_problems,
)
from genekit.phylogeny.tree import (
    leaf_clusters,
    tree_from_sequences,
    tree_from_matrix,
    leaves,
    to_newick,
)

__all__ = [
    "hamming_distance",
    "distance_matrix_from_sequences",
    "UPGMABuilder",
    "construct_upgma_tree",
    "copy_matrix_for_clusters",
    "find_matrix_problems",
    "leaf_clusters",
    "tree_from_sequences",
    "tree_from_matrix",
    "leaves",
    "to_newick",
]

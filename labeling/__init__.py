"""
Graph Labeling Backtracking Package
Subsets, graceful labelings and L(3,2,1)-labelings by exhaustive search
"""

__version__ = "1.0.0"

from .graph_loader import Graph, EdgeListLoader, format_adjacency_list
from .state import LabelingState, UNSET
from .constraints import (
    LabelConstraint, SubsetMembershipConstraint,
    DistinctVertexLabelConstraint, DistinctEdgeLabelConstraint,
    DistanceSeparationConstraint, ConstraintManager, LabelingConstraints
)
from .backtracking import (
    BacktrackingSearch, SearchMode, SearchSignal, SearchResult,
    RangeCandidates, AlphabetCandidates, search
)
from .sinks import (
    SolutionSink, CollectSink, PrintSink,
    format_labeling, format_subset, chosen_elements
)
from .symmetry import MirrorSymmetry

__all__ = [
    'Graph', 'EdgeListLoader', 'format_adjacency_list',
    'LabelingState', 'UNSET',
    'LabelConstraint', 'SubsetMembershipConstraint',
    'DistinctVertexLabelConstraint', 'DistinctEdgeLabelConstraint',
    'DistanceSeparationConstraint', 'ConstraintManager', 'LabelingConstraints',
    'BacktrackingSearch', 'SearchMode', 'SearchSignal', 'SearchResult',
    'RangeCandidates', 'AlphabetCandidates', 'search',
    'SolutionSink', 'CollectSink', 'PrintSink',
    'format_labeling', 'format_subset', 'chosen_elements',
    'MirrorSymmetry'
]

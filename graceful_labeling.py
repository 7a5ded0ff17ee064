"""
Graceful Labelings of Arbitrary Graphs
Finds labelings with distinct vertex labels in {0..m} whose induced
edge labels |l(u) - l(v)| are exactly {1..m}
"""

import argparse
from typing import List, Optional, Sequence, Tuple
from labeling.graph_loader import Graph, EdgeListLoader, format_adjacency_list
from labeling.backtracking import BacktrackingSearch, RangeCandidates, SearchMode
from labeling.constraints import LabelingConstraints
from labeling.sinks import CollectSink, PrintSink, format_labeling


def is_graceful(graph: Graph, labeling: Sequence[int]) -> bool:
    """Check a complete labeling against the definition"""
    m = graph.size()
    if len(labeling) != graph.order():
        return False
    if any(not 0 <= label <= m for label in labeling):
        return False
    if len(set(labeling)) != len(labeling):
        return False
    edge_labels = sorted(abs(labeling[u] - labeling[v]) for u, v in graph.edges)
    return edge_labels == list(range(1, m + 1))


class GracefulLabeler:
    """Backtracking search for graceful labelings of a graph"""

    def __init__(self, graph: Graph, verbose: bool = False):
        self.graph = graph
        self.verbose = verbose
        self.stats = {}
        self.predicate_stats = []

    @property
    def num_edges(self) -> int:
        return self.graph.size()

    def _make_search(self, sink, mode: SearchMode) -> BacktrackingSearch:
        return BacktrackingSearch(
            length=self.graph.order(),
            constraints=LabelingConstraints.graceful(self.graph),
            candidates=RangeCandidates(self.num_edges + 1),
            sink=sink,
            mode=mode,
            title="GRACEFUL LABELING",
            verbose=self.verbose
        )

    def enumerate(self) -> List[Tuple[int, ...]]:
        """Every graceful labeling, in ascending lexicographic order"""
        sink = CollectSink()
        result = self._make_search(sink, SearchMode.COLLECT_ALL).run()
        self.stats = result.stats
        self.predicate_stats = result.predicate_stats
        return sink.solutions

    def find_first(self) -> Optional[Tuple[int, ...]]:
        """The first graceful labeling, or None if the graph has none"""
        result = self._make_search(None, SearchMode.STOP_AT_FIRST).run()
        self.stats = result.stats
        self.predicate_stats = result.predicate_stats
        return result.first_solution

    def print_all(self) -> int:
        result = self._make_search(PrintSink(), SearchMode.COLLECT_ALL).run()
        self.stats = result.stats
        self.predicate_stats = result.predicate_stats
        return result.solution_count


def main():
    parser = argparse.ArgumentParser(description='Generate all graceful labelings of a graph')
    parser.add_argument('edges', nargs='?', default='edges.txt',
                        help='Edge-list file: whitespace-separated vertex pairs')
    parser.add_argument('--first', action='store_true', help='Stop at the first labeling')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    loader = EdgeListLoader(verbose=args.verbose)
    graph = loader.load_file(args.edges)

    print(f"order of G: {graph.order()}")
    print(format_adjacency_list(graph))

    labeler = GracefulLabeler(graph, verbose=args.verbose)
    if args.first:
        labeling = labeler.find_first()
        print(format_labeling(labeling) if labeling is not None else "G has no graceful labeling")
    else:
        total = labeler.print_all()
        if total == 0:
            print("G has no graceful labeling")


if __name__ == "__main__":
    main()

"""
L(3,2,1)-Labelings

Labels of vertices at distance 1, 2 and 3 must differ by at least
3, 2 and 1 respectively. Two searches are provided:

- L321Labeler: every labeling with labels in {0, ..., max_label}
- MinimumSpanL321: the smallest max_label (span) that admits a labeling,
  found by trying 2*Delta(G) + 1, 2*Delta(G) + 2, ... until one succeeds
"""

import argparse
import time
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple
from labeling.graph_loader import Graph, EdgeListLoader
from labeling.backtracking import BacktrackingSearch, RangeCandidates, SearchMode
from labeling.constraints import LabelingConstraints
from labeling.sinks import CollectSink, PrintSink, format_labeling

SEPARATIONS = (3, 2, 1)


def _bfs_distances(graph: Graph, source: int) -> Dict[int, int]:
    dist = {source: 0}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v not in dist:
                dist[v] = dist[u] + 1
                queue.append(v)

    return dist


def is_l321_labeling(graph: Graph, labeling: Sequence[int]) -> bool:
    """Check a complete labeling against shortest-path distances"""
    if len(labeling) != graph.order() or any(label < 0 for label in labeling):
        return False

    for u in range(graph.order()):
        for v, d in _bfs_distances(graph, u).items():
            if 1 <= d <= len(SEPARATIONS) and abs(labeling[u] - labeling[v]) < SEPARATIONS[d - 1]:
                return False
    return True


class L321Labeler:
    """Exhaustive L(3,2,1)-labeling search with a fixed maximum label"""

    def __init__(self, graph: Graph, max_label: int, verbose: bool = False):
        if max_label < 0:
            raise ValueError(f"Maximum label must be non-negative, got {max_label}")
        self.graph = graph
        self.max_label = max_label
        self.verbose = verbose
        self.stats = {}

    def _make_search(self, sink, mode: SearchMode) -> BacktrackingSearch:
        return BacktrackingSearch(
            length=self.graph.order(),
            constraints=LabelingConstraints.l321(self.graph),
            candidates=RangeCandidates(self.max_label + 1),
            sink=sink,
            mode=mode,
            title=f"L(3,2,1)-LABELING (max label {self.max_label})",
            verbose=self.verbose
        )

    def enumerate(self) -> List[Tuple[int, ...]]:
        sink = CollectSink()
        result = self._make_search(sink, SearchMode.COLLECT_ALL).run()
        self.stats = result.stats
        return sink.solutions

    def find_first(self) -> Optional[Tuple[int, ...]]:
        result = self._make_search(None, SearchMode.STOP_AT_FIRST).run()
        self.stats = result.stats
        return result.first_solution

    def print_all(self) -> int:
        result = self._make_search(PrintSink(), SearchMode.COLLECT_ALL).run()
        self.stats = result.stats
        return result.solution_count


class MinimumSpanL321:
    """
    Minimum-span L(3,2,1)-labeling by increasing the maximum label

    The first bound tried is 2*Delta(G) + 1; every failed bound is
    followed by the next integer, so the first success is the span.
    """

    def __init__(self, graph: Graph, max_label_limit: int = None, verbose: bool = False):
        self.graph = graph
        self.max_label_limit = max_label_limit
        self.verbose = verbose

        self.attempts: List[Dict] = []
        self.span: Optional[int] = None
        self.labeling: Optional[Tuple[int, ...]] = None
        self.stats = {
            'bounds_tried': 0,
            'nodes_visited': 0,
            'runtime': 0
        }

        if self.verbose:
            self._print_initialization()

    def initial_bound(self) -> int:
        return 2 * self.graph.max_degree() + 1

    def _print_initialization(self):
        print(f"\n{'='*70}")
        print(f"{'MINIMUM SPAN L(3,2,1)-LABELING':^70}")
        print(f"{'='*70}")
        print(f"  Graph: {self.graph.order()} vertices, {self.graph.size()} edges")
        print(f"  Maximum degree: {self.graph.max_degree()}")
        print(f"  Initial bound: {self.initial_bound()}")
        if self.max_label_limit is not None:
            print(f"  Bound limit: {self.max_label_limit}")
        print(f"{'='*70}\n")

    def find(self) -> Optional[Tuple[int, ...]]:
        """
        Search increasing bounds until a labeling exists

        Returns:
            The labeling found at the smallest feasible bound, or None if
            max_label_limit was passed first
        """
        start_time = time.time()
        self.stats = {
            'bounds_tried': 0,
            'nodes_visited': 0,
            'runtime': 0
        }
        self.attempts = []
        self.span = None
        self.labeling = None

        max_label = self.initial_bound()
        while self.max_label_limit is None or max_label <= self.max_label_limit:
            labeler = L321Labeler(self.graph, max_label)
            labeling = labeler.find_first()

            self.attempts.append({
                'max_label': max_label,
                'found': labeling is not None,
                'nodes_visited': labeler.stats['nodes_visited']
            })
            self.stats['nodes_visited'] += labeler.stats['nodes_visited']

            if labeling is not None:
                if self.verbose:
                    print(f"✓ max label {max_label}: {format_labeling(labeling)}")
                self.span = max_label
                self.labeling = labeling
                break

            if self.verbose:
                print(f"✗ max label {max_label}: no labeling")
            max_label += 1

        self.stats['bounds_tried'] = len(self.attempts)
        self.stats['runtime'] = time.time() - start_time
        return self.labeling


def main():
    parser = argparse.ArgumentParser(description='L(3,2,1)-labelings of a graph')
    parser.add_argument('edges', nargs='?', default='edges.txt',
                        help='Edge-list file: whitespace-separated vertex pairs')
    parser.add_argument('--max-label', type=int, default=None,
                        help='Print every labeling with labels up to this value; '
                             'without it the minimum span is searched')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    graph = EdgeListLoader(verbose=args.verbose).load_file(args.edges)

    if args.max_label is not None:
        total = L321Labeler(graph, args.max_label, verbose=args.verbose).print_all()
        print(f"total = {total} labelings")
    else:
        solver = MinimumSpanL321(graph, verbose=args.verbose)
        labeling = solver.find()
        print(format_labeling(labeling))
        print(f"span = {solver.span}")


if __name__ == "__main__":
    main()

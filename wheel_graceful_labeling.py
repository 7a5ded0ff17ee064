"""
Graceful Labelings of Wheel Graphs with 0 at the Central Vertex

W_n has n + 1 vertices and 2n edges: the hub v_0 joined to every vertex
of the outer cycle v_1, ..., v_n. The hub is labeled 0 and, without loss
of generality, v_1 is labeled 2n. Every completion is collected first;
labelings that mirror an earlier one around the edge v_0 v_1 are then
discarded, and the survivors are reported as [l0,l1,...,ln].
"""

import argparse
from typing import List, Tuple
from labeling.graph_loader import Graph, format_adjacency_list
from labeling.backtracking import BacktrackingSearch, RangeCandidates, SearchMode
from labeling.constraints import LabelingConstraints
from labeling.sinks import CollectSink, format_labeling
from labeling.symmetry import MirrorSymmetry

HUB = 0
ANCHOR = 1


class WheelGracefulLabeler:
    """Collect graceful labelings of W_n and remove complementary pairs"""

    def __init__(self, n: int, verbose: bool = False):
        self.n = n
        self.graph = Graph.build_wheel(n)
        self.symmetry = MirrorSymmetry(n)
        self.verbose = verbose

        self.collected: List[Tuple[int, ...]] = []
        self.predicate_stats = []
        self.stats = {
            'collected': 0,
            'nodes_visited': 0,
            'candidates_tried': 0,
            'constraint_pruned': 0,
            'complementary_discarded': 0,
            'reported': 0,
            'runtime': 0
        }

    @property
    def num_edges(self) -> int:
        return self.graph.size()

    def collect(self) -> List[Tuple[int, ...]]:
        """Every graceful labeling with l(v_0) = 0 and l(v_1) = 2n"""
        sink = CollectSink()
        engine = BacktrackingSearch(
            length=self.graph.order(),
            constraints=LabelingConstraints.graceful(self.graph),
            candidates=RangeCandidates(self.num_edges + 1),
            sink=sink,
            mode=SearchMode.COLLECT_ALL,
            title=f"GRACEFUL LABELINGS OF W_{self.n}",
            verbose=self.verbose
        )

        state = engine.new_state()
        engine.pin(state, HUB, 0)
        engine.pin(state, ANCHOR, 2 * self.n)

        result = engine.run(state, start_index=2)
        for key in ('nodes_visited', 'candidates_tried', 'constraint_pruned', 'runtime'):
            self.stats[key] = result.stats[key]
        self.predicate_stats = result.predicate_stats
        self.collected = sink.solutions
        return self.collected

    def generate(self) -> List[Tuple[int, ...]]:
        """Non-complementary graceful labelings, in search order"""
        collected = self.collect()
        survivors = self.symmetry.reduce(collected)

        self.stats['collected'] = len(collected)
        self.stats['complementary_discarded'] = len(collected) - len(survivors)
        self.stats['reported'] = len(survivors)

        if self.verbose:
            print(f"✓ {len(collected)} labelings collected, "
                  f"{self.stats['complementary_discarded']} complementary discarded")

        return survivors


def main():
    parser = argparse.ArgumentParser(
        description='Graceful labelings of the wheel W_n with 0 at the central vertex')
    parser.add_argument('n', type=int, nargs='?', default=4, help='Length of the outer cycle')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    labeler = WheelGracefulLabeler(args.n, verbose=args.verbose)

    print(f"order of the wheel graph G: {labeler.graph.order()}")
    print("Adjacency list:")
    print(format_adjacency_list(labeler.graph))
    print("Graceful labelings:")

    labelings = labeler.generate()
    for labeling in labelings:
        print(format_labeling(labeling))
    print(f"total = {len(labelings)} labelings")


if __name__ == "__main__":
    main()

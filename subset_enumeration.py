"""
Subset Enumeration by Backtracking
Generates every subset of {1, ..., n} for n <= 50
"""

import argparse
from typing import List, Tuple
from labeling.backtracking import BacktrackingSearch, AlphabetCandidates, SearchMode
from labeling.constraints import LabelingConstraints
from labeling.sinks import CollectSink, PrintSink, chosen_elements, format_subset

MAX_ELEMENTS = 50

# included is tried before excluded
MEMBERSHIP_ALPHABET = (1, 0)


class SubsetEnumerator:
    """
    Backtracking over one included/excluded flag per element
    No pruning: every leaf of the 2^n tree is a subset
    """

    def __init__(self, n: int, verbose: bool = False):
        if not 0 <= n <= MAX_ELEMENTS:
            raise ValueError(f"Set size must be in [0, {MAX_ELEMENTS}], got {n}")
        self.n = n
        self.verbose = verbose
        self.stats = {}

    def _make_search(self, sink) -> BacktrackingSearch:
        return BacktrackingSearch(
            length=self.n,
            constraints=LabelingConstraints.subsets(),
            candidates=AlphabetCandidates(MEMBERSHIP_ALPHABET),
            sink=sink,
            mode=SearchMode.COLLECT_ALL,
            title=f"SUBSETS OF {{1..{self.n}}}",
            verbose=self.verbose
        )

    def enumerate(self) -> List[Tuple[int, ...]]:
        """All subsets, each as the tuple of its chosen elements"""
        sink = CollectSink()
        result = self._make_search(sink).run()
        self.stats = result.stats
        return [chosen_elements(membership) for membership in sink.solutions]

    def print_all(self) -> int:
        """Print every subset as it is generated; returns how many"""
        sink = PrintSink(lambda membership: format_subset(chosen_elements(membership)))
        result = self._make_search(sink).run()
        self.stats = result.stats
        return result.solution_count


def main():
    parser = argparse.ArgumentParser(description='Generate all subsets of {1..n}')
    parser.add_argument('n', type=int, nargs='?', default=3, help='Set size (<= 50)')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    enumerator = SubsetEnumerator(args.n, verbose=args.verbose)
    total = enumerator.print_all()
    print(f"total = {total} subsets")


if __name__ == "__main__":
    main()

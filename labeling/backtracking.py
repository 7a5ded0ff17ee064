"""
Generic backtracking search over labelings
Slots are filled in increasing index order; every commit is undone on backtrack
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .graph_loader import Graph
from .state import LabelingState
from .constraints import LabelConstraint, ConstraintManager


class SearchMode(Enum):
    COLLECT_ALL = "collect_all"
    STOP_AT_FIRST = "stop_at_first"


class SearchSignal(Enum):
    FOUND_AND_STOP = "found_and_stop"
    EXHAUSTED_CONTINUE = "exhausted_continue"


class RangeCandidates:
    """Labels 0..bound-1 in ascending order"""

    def __init__(self, bound: int):
        if bound < 0:
            raise ValueError(f"Candidate bound must be non-negative, got {bound}")
        self.bound = bound

    def __call__(self, index: int, state: LabelingState) -> Iterable[int]:
        return range(self.bound)


class AlphabetCandidates:
    """A fixed, ordered alphabet of values"""

    def __init__(self, values: Sequence[int]):
        self.values = tuple(values)

    def __call__(self, index: int, state: LabelingState) -> Iterable[int]:
        return self.values


@dataclass
class SearchResult:
    found: bool
    solution_count: int
    first_solution: Optional[Tuple[int, ...]] = None
    solutions: List[Tuple[int, ...]] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)
    predicate_stats: List[Dict] = field(default_factory=list)


class BacktrackingSearch:
    """
    Recursive depth-first search over partial labelings

    A slot accepts a candidate only if every predicate allows it; the
    values the candidate induces are recorded in the state and removed
    again when the slot is undone. In STOP_AT_FIRST mode the first
    complete labeling ends the whole search.
    """

    def __init__(self,
                 length: int,
                 constraints: List[LabelConstraint],
                 candidates: Callable[[int, LabelingState], Iterable[int]],
                 sink: Callable[[Tuple[int, ...]], None] = None,
                 mode: SearchMode = SearchMode.COLLECT_ALL,
                 title: str = "BACKTRACKING SEARCH",
                 verbose: bool = False):

        self.length = length
        self.constraint_manager = ConstraintManager(constraints)
        self.candidates = candidates
        self.sink = sink
        self.mode = mode
        self.title = title
        self.verbose = verbose

        self.stats = self._empty_stats()
        self._first_solution = None

    @staticmethod
    def _empty_stats() -> Dict:
        return {
            'nodes_visited': 0,
            'candidates_tried': 0,
            'constraint_pruned': 0,
            'solutions_found': 0,
            'runtime': 0
        }

    def _print_init(self, start_index: int):
        """Print initialization"""
        print(f"\n{'='*70}")
        print(f"{self.title:^70}")
        print(f"{'='*70}")
        print(f"  Slots: {self.length} (starting at {start_index})")
        print(f"  Mode: {self.mode.value}")
        print(f"  Predicates: {len(self.constraint_manager.constraints)}")
        for i, c in enumerate(self.constraint_manager.constraints, 1):
            print(f"    {i}. {c.name}")
        print(f"{'='*70}\n")

    def new_state(self) -> LabelingState:
        return LabelingState(self.length)

    def pin(self, state: LabelingState, index: int, label: int):
        """
        Fix a label before the search starts

        Raises:
            ValueError: if the label violates a predicate
        """
        if not self.constraint_manager.is_safe(label, index, state):
            raise ValueError(f"Label {label} cannot be pinned on slot {index}")
        induced = self.constraint_manager.induced_values(label, index, state)
        state.commit(index, label, induced)

    def run(self, state: LabelingState = None, start_index: int = 0) -> SearchResult:
        """
        Search every completion of state from slot start_index on

        Returns:
            SearchResult; found is False when no labeling exists
        """
        if state is None:
            state = self.new_state()
        if len(state) != self.length:
            raise ValueError(f"State has {len(state)} slots, search expects {self.length}")

        self.stats = self._empty_stats()
        self._first_solution = None
        self.constraint_manager.reset_stats()
        # a reused sink keeps earlier runs; report only this one
        already_kept = len(getattr(self.sink, 'solutions', []))

        if self.verbose:
            self._print_init(start_index)

        start_time = time.time()
        self._search(state, start_index)
        self.stats['runtime'] = time.time() - start_time

        result = SearchResult(
            found=self.stats['solutions_found'] > 0,
            solution_count=self.stats['solutions_found'],
            first_solution=self._first_solution,
            solutions=list(getattr(self.sink, 'solutions', [])[already_kept:]),
            stats=dict(self.stats),
            predicate_stats=self.constraint_manager.get_all_stats()
        )

        if self.verbose:
            self._print_results(result)

        return result

    def _search(self, state: LabelingState, index: int) -> SearchSignal:
        self.stats['nodes_visited'] += 1

        if index == self.length:
            solution = state.snapshot()
            self.stats['solutions_found'] += 1
            if self._first_solution is None:
                self._first_solution = solution
            if self.sink is not None:
                self.sink(solution)
            if self.mode is SearchMode.STOP_AT_FIRST:
                return SearchSignal.FOUND_AND_STOP
            return SearchSignal.EXHAUSTED_CONTINUE

        for label in self.candidates(index, state):
            self.stats['candidates_tried'] += 1

            if not self.constraint_manager.is_safe(label, index, state):
                self.stats['constraint_pruned'] += 1
                continue

            state.commit(index, label,
                         self.constraint_manager.induced_values(label, index, state))
            try:
                signal = self._search(state, index + 1)
            finally:
                state.undo(index)

            if signal is SearchSignal.FOUND_AND_STOP:
                return signal

        return SearchSignal.EXHAUSTED_CONTINUE

    def _print_results(self, result: SearchResult):
        """Print search results"""
        print(f"\n{'='*70}")
        print(f"{'SEARCH COMPLETE':^70}")
        print(f"{'='*70}")

        print(f"\n📊 Results:")
        print(f"  Labelings found: {result.solution_count:,}")
        print(f"  Runtime: {self.stats['runtime']:.2f}s")

        print(f"\n📈 Statistics:")
        print(f"  Nodes visited: {self.stats['nodes_visited']:,}")
        print(f"  Candidates tried: {self.stats['candidates_tried']:,}")
        print(f"  Constraint pruned: {self.stats['constraint_pruned']:,}")

        if self.stats['candidates_tried'] > 0:
            prune_rate = self.stats['constraint_pruned'] / self.stats['candidates_tried'] * 100
            print(f"  Overall pruning: {prune_rate:.1f}%")

        print(f"\n🔧 Predicate Statistics:")
        for stat in self.constraint_manager.get_all_stats():
            print(f"  {stat['name']}: {stat['checks']:,} checks, "
                  f"{stat['prunes']:,} prunes ({stat['prune_rate']*100:.1f}%)")

        print(f"\n{'='*70}\n")


def search(graph: Optional[Graph],
           state: LabelingState,
           index: int,
           bound: int,
           sink: Callable[[Tuple[int, ...]], None],
           mode: SearchMode = SearchMode.COLLECT_ALL,
           constraints: List[LabelConstraint] = None) -> SearchResult:
    """
    Run a backtracking search with candidates 0..bound-1 on every slot

    The slot count is taken from state. The graph is only checked
    against it: predicates come from constraints alone, so a graph with
    no constraints still enumerates every assignment. Pass e.g.
    LabelingConstraints.graceful(graph) to search graceful labelings.
    """
    if graph is not None and len(state) != graph.order():
        raise ValueError(f"State has {len(state)} slots, graph has {graph.order()} vertices")

    engine = BacktrackingSearch(
        length=len(state),
        constraints=constraints or [],
        candidates=RangeCandidates(bound),
        sink=sink,
        mode=mode
    )
    return engine.run(state, start_index=index)

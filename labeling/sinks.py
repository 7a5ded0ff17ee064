"""
Solution sinks: what the search does with each complete labeling
"""

from typing import Callable, List, Sequence, Tuple


def format_labeling(labeling: Sequence[int]) -> str:
    """[l0,l1,...,ln]"""
    return "[" + ",".join(str(label) for label in labeling) + "]"


def format_subset(chosen: Sequence[int]) -> str:
    """{ a b c } with a space before every element"""
    return "{" + "".join(f" {element}" for element in chosen) + " }"


def chosen_elements(membership: Sequence[int]) -> Tuple[int, ...]:
    """Elements 1..n whose membership flag is set"""
    return tuple(i for i, flag in enumerate(membership, 1) if flag)


class SolutionSink:
    """Base sink: counts solutions"""

    def __init__(self):
        self.count = 0

    def __call__(self, solution: Tuple[int, ...]):
        self.count += 1


class CollectSink(SolutionSink):
    """Keep every solution for later post-processing"""

    def __init__(self):
        super().__init__()
        self.solutions: List[Tuple[int, ...]] = []

    def __call__(self, solution: Tuple[int, ...]):
        super().__call__(solution)
        self.solutions.append(solution)


class PrintSink(SolutionSink):
    """Print each solution as soon as it is found"""

    def __init__(self, formatter: Callable[[Sequence[int]], str] = format_labeling):
        super().__init__()
        self.formatter = formatter

    def __call__(self, solution: Tuple[int, ...]):
        super().__call__(solution)
        print(self.formatter(solution))

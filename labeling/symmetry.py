"""
Mirror symmetry of wheel labelings
Used to keep one labeling out of every complementary (mirror-image) pair
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class MirrorSymmetry:
    """
    Reflection of the outer n-cycle of a wheel that fixes the edge
    between the hub (slot 0) and vertex 1: outer position k maps to n+2-k
    """
    n: int

    def __post_init__(self):
        if self.n < 3:
            raise ValueError(f"Outer cycle length must be >= 3, got {self.n}")

    def mirror_position(self, k: int) -> int:
        return self.n + 2 - k

    def compared_positions(self) -> range:
        """Outer positions 2..ceil(n/2)"""
        return range(2, math.ceil(self.n / 2) + 1)

    def are_complementary(self, a: Sequence[int], b: Sequence[int]) -> bool:
        for k in self.compared_positions():
            m = self.mirror_position(k)
            if a[k] != b[m] or b[k] != a[m]:
                return False
        return True

    def reflect(self, labeling: Sequence[int]) -> Tuple[int, ...]:
        """Mirror image of a labeling (hub and vertex 1 stay put)"""
        reflected = list(labeling)
        for k in range(2, self.n + 1):
            reflected[k] = labeling[self.mirror_position(k)]
        return tuple(reflected)

    def mark_duplicates(self, labelings: Sequence[Sequence[int]]) -> List[bool]:
        """
        Forward scan: each labeling not yet marked marks every later
        labeling complementary to it
        """
        duplicate = [False] * len(labelings)

        for i in range(len(labelings)):
            if duplicate[i]:
                continue
            for j in range(i + 1, len(labelings)):
                if not duplicate[j] and self.are_complementary(labelings[i], labelings[j]):
                    duplicate[j] = True

        return duplicate

    def reduce(self, labelings: Sequence[Sequence[int]]) -> List[Tuple[int, ...]]:
        """Labelings that survive the complementary scan, in their original order"""
        duplicate = self.mark_duplicates(labelings)
        return [tuple(l) for l, dup in zip(labelings, duplicate) if not dup]

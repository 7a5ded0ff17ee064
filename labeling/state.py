"""
Partial labeling state shared by the backtracking search
"""

from typing import List, Set, Tuple, Iterable

UNSET = -1


class LabelingState:
    """
    Partial assignment of labels to slots plus the set of values those
    labels have realized (e.g. induced edge differences)

    Every commit records exactly which values it inserted so that undo
    can erase those same values, whatever happened to other slots since.
    """

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"Labeling length must be non-negative, got {length}")
        self.labels: List[int] = [UNSET] * length
        self.used_values: Set[int] = set()
        self._inserted: List[Tuple[int, ...]] = [()] * length

    def __len__(self):
        return len(self.labels)

    def __getitem__(self, index: int) -> int:
        return self.labels[index]

    def is_set(self, index: int) -> bool:
        return self.labels[index] != UNSET

    def commit(self, index: int, label: int, induced: Iterable[int] = ()):
        """Assign label to slot index and insert its induced values"""
        if self.is_set(index):
            raise ValueError(f"Slot {index} already holds label {self.labels[index]}")

        values = tuple(induced)
        self.labels[index] = label
        self.used_values.update(values)
        self._inserted[index] = values

    def undo(self, index: int):
        """Reset slot index and erase the values its commit inserted"""
        for value in self._inserted[index]:
            self.used_values.discard(value)
        self._inserted[index] = ()
        self.labels[index] = UNSET

    def is_complete(self) -> bool:
        return UNSET not in self.labels

    def assigned_count(self) -> int:
        return sum(1 for label in self.labels if label != UNSET)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.labels)

    def __repr__(self):
        return f"LabelingState({self.labels}, used={sorted(self.used_values)})"

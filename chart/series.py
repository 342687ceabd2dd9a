"""
Ordered, key-unique sample series for the current run.
"""
from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterator, List


@dataclass
class Sample:
    position: float    # milliseconds
    value: float       # 0-100, not enforced


class SeriesStore:
    """
    Samples sorted ascending by position, at most one per position.

    Results arrive in any order (the producer spreads its work over the range),
    so ordering comes from the insertion point, not from arrival.
    """

    def __init__(self):
        self.samples: List[Sample] = []

    def upsert(self, position: float, value: float) -> bool:
        """
        Insert a sample, or overwrite the value already stored at ``position``.

        Returns:
            True if a new sample was inserted, False if an existing one was updated
        """
        i = bisect_left(self.samples, position, key=lambda s: s.position)

        if i < len(self.samples) and self.samples[i].position == position:
            self.samples[i].value = value
            return False

        self.samples.insert(i, Sample(position, value))
        return True

    def positions(self) -> List[float]:
        return [s.position for s in self.samples]

    def values(self) -> List[float]:
        return [s.value for s in self.samples]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

"""
Failure markers: positions whose value could not be computed in this run.
"""
from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class FailureMarker:
    position: float


class FailureOverlay:
    """Append-only, duplicate-free set of markers. Cleared only by a new chart."""

    def __init__(self):
        self.markers: List[FailureMarker] = []

    def mark(self, position: float) -> bool:
        """Add a marker at ``position``. Returns False if one was already there."""
        if any(m.position == position for m in self.markers):
            return False
        self.markers.append(FailureMarker(position))
        return True

    def positions(self) -> List[float]:
        return [m.position for m in self.markers]

    def __len__(self) -> int:
        return len(self.markers)

    def __iter__(self) -> Iterator[FailureMarker]:
        return iter(self.markers)

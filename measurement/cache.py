"""
In-memory cache of measured similarities.

Lives for the whole session so switching run parameters back and forth replays
known results instead of measuring them again. Nothing is persisted.
"""
from typing import Dict, Iterator, Optional, Tuple

from chart.epoch import RunIdentity
from measurement.sweep import SLIDER_MAX_INDEX, target_from_index

CacheKey = Tuple[int, int, int]   # (target_ms, lap_count, player_count)


class ResultCache:
    def __init__(self):
        self._store: Dict[CacheKey, float] = {}

    @staticmethod
    def key(target: int, run: RunIdentity) -> CacheKey:
        return (target, run.lap_count, run.player_count)

    def put(self, target: int, run: RunIdentity, similarity: float) -> None:
        self._store[self.key(target, run)] = similarity

    def get(self, target: int, run: RunIdentity) -> Optional[float]:
        return self._store.get(self.key(target, run))

    def __contains__(self, item: Tuple[int, RunIdentity]) -> bool:
        target, run = item
        return self.key(target, run) in self._store

    def __len__(self) -> int:
        return len(self._store)

    def results_for(self, run: RunIdentity) -> Iterator[Tuple[int, float]]:
        """(target, similarity) pairs cached for ``run``, in no particular order."""
        for (target, lap_count, player_count), similarity in self._store.items():
            if (lap_count, player_count) == (run.lap_count, run.player_count):
                yield target, similarity

    def cached_count(self, target_min: int, target_max: int, run: RunIdentity) -> int:
        """How many slider positions already have a result for ``run``."""
        return sum(
            1 for idx in range(SLIDER_MAX_INDEX + 1)
            if (target_from_index(target_min, target_max, idx), run) in self
        )

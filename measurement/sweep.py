"""
Sweep planning: which targets a run evaluates, and in which order.

The target slider has SLIDER_MAX_INDEX + 1 positions spread evenly over the
run's [min, max] target range.
"""
import math
from collections import deque
from typing import List

SLIDER_MAX_INDEX = 99


def spread_indices(n: int) -> List[int]:
    """
    Indices 0..n-1 ordered so early results cover the whole range:
    both ends first, then midpoints by repeated bisection.
    """
    if n <= 0:
        return []

    out = [0]
    seen = [False] * n
    seen[0] = True
    if n > 1:
        out.append(n - 1)
        seen[n - 1] = True

    queue = deque([(0, n - 1)])
    while len(out) < n:
        lo, hi = queue.popleft()
        if hi - lo <= 1:
            continue
        mid = (lo + hi) // 2
        if not seen[mid]:
            out.append(mid)
            seen[mid] = True
        queue.append((lo, mid))
        queue.append((mid, hi))
    return out


def target_step(target_min: int, target_max: int) -> int:
    if target_max > target_min:
        return math.ceil((target_max - target_min) / SLIDER_MAX_INDEX)
    return 1


def target_from_index(target_min: int, target_max: int, idx: int) -> int:
    """Map a slider index to a target, clamped to ``target_max``."""
    return min(target_min + target_step(target_min, target_max) * idx, target_max)


def sweep_targets(target_min: int, target_max: int) -> List[int]:
    """Distinct slider targets in spread order."""
    targets = []
    for idx in spread_indices(SLIDER_MAX_INDEX + 1):
        target = target_from_index(target_min, target_max, idx)
        if target not in targets:
            targets.append(target)
    return targets

"""
Deterministic stand-in for the real similarity computation.

Used by the dashboard when no real measure function is plugged in. Values form
a noisy bump over the target range; a fixed share of targets fail.
"""
import time

import numpy as np

from chart.epoch import RunIdentity
from measurement.worker import MeasurementError


class SyntheticMeasure:
    def __init__(self, target_min: int, target_max: int,
                 failure_rate: float = 0.05, delay_s: float = 0.0):
        self.target_min = target_min
        self.target_max = target_max
        self.failure_rate = failure_rate
        self.delay_s = delay_s

    def __call__(self, target: int, run: RunIdentity) -> float:
        if self.delay_s:
            time.sleep(self.delay_s)

        rng = np.random.default_rng([target, run.lap_count, run.player_count])
        if rng.random() < self.failure_rate:
            raise MeasurementError(f"no subset found for target {target}")

        span = max(self.target_max - self.target_min, 1)
        x = (target - self.target_min) / span
        # More players means more overlap between the drawn subsets
        peak = 40.0 + 50.0 * (1.0 - np.exp(-run.player_count / 40.0))
        bump = peak * np.exp(-((x - 0.5) ** 2) / 0.08)
        noise = rng.normal(0.0, 2.0)
        return float(np.clip(bump + noise, 0.0, 100.0))

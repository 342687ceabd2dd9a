"""
Measurement producers feeding the similarity chart.
"""
from measurement.cache import ResultCache
from measurement.sweep import (
    SLIDER_MAX_INDEX, spread_indices, sweep_targets, target_from_index, target_step,
)
from measurement.synthetic import SyntheticMeasure
from measurement.worker import MeasurementError, SweepWorker

__all__ = [
    'ResultCache', 'SLIDER_MAX_INDEX', 'spread_indices', 'sweep_targets',
    'target_from_index', 'target_step', 'SyntheticMeasure', 'MeasurementError',
    'SweepWorker',
]

"""
Incremental plot synchronization engine.
"""
from chart.config import ChartConfig
from chart.controller import ControllerState, PlotController
from chart.epoch import RunEpoch, RunIdentity
from chart.failures import FailureMarker, FailureOverlay
from chart.gate import DependencyGate, GateOutcome
from chart.layout_sync import LayoutSynchronizer
from chart.scheduler import QtScheduler
from chart.series import Sample, SeriesStore

__all__ = [
    'ChartConfig', 'ControllerState', 'PlotController', 'RunEpoch', 'RunIdentity',
    'FailureMarker', 'FailureOverlay', 'DependencyGate', 'GateOutcome',
    'LayoutSynchronizer', 'QtScheduler', 'Sample', 'SeriesStore',
]

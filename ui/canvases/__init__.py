"""
Matplotlib chart adapters for the dashboard.
"""
from ui.canvases.similarity import ChartData, Dataset, SimilarityChart

__all__ = ['ChartData', 'Dataset', 'SimilarityChart']

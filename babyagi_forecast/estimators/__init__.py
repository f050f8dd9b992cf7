"""Task duration estimators."""

from .base import DurationEstimator
from .heuristic import HeuristicEstimator
from .similarity import SimilarityEstimator

__all__ = ['DurationEstimator', 'HeuristicEstimator', 'SimilarityEstimator']

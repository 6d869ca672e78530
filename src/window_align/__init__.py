"""
Windowed Smith-Waterman batch scoring of string datasets.
"""

__version__ = "1.0.0"
__author__ = "Rowel Facunla"
__description__ = "Windowed local alignment scoring of source strings against fixed-length queries"

from .algorithms.smith_waterman import smith_waterman_score, score_windows
from .core.windows import iter_windows, window_count
from .core.batch import (
    BatchEvaluator,
    ForkJoinScheduler,
    SequentialScheduler,
    evaluate_pairs,
    score_pair,
)

__all__ = [
    'smith_waterman_score',
    'score_windows',
    'iter_windows',
    'window_count',
    'BatchEvaluator',
    'ForkJoinScheduler',
    'SequentialScheduler',
    'evaluate_pairs',
    'score_pair',

    # Version info
    '__version__',
    '__author__',
    '__description__'
]

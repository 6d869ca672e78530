from .smith_waterman import *

__all__ = [
    # Scoring constants
    'MATCH_SCORE',
    'MISMATCH_SCORE',
    'GAP_OPEN',
    'GAP_EXTEND',

    # Local alignment
    'smith_waterman_matrix',
    'smith_waterman_score',
    'score_windows',
]

"""
Author: Rowel Facunla
Smith-Waterman local alignment scoring (score only, no traceback).
"""

from typing import Iterable, List

import numpy as np

MATCH_SCORE = 2
MISMATCH_SCORE = -1
GAP_OPEN = -1
GAP_EXTEND = -1


def smith_waterman_matrix(
    probe: str,
    query: str,
    match_score: int = MATCH_SCORE,
    mismatch_score: int = MISMATCH_SCORE,
    gap_open: int = GAP_OPEN,
    gap_extend: int = GAP_EXTEND,
) -> np.ndarray:
    """
    Fill the local alignment matrix H of shape (len(probe)+1, len(query)+1).

    A gap is treated as an extension when an earlier cell of the same
    column (vertical) or row (horizontal) is non-zero, and as an opening
    otherwise. Row 0 and column 0 never count. The gap state is tracked
    incrementally:

    1. col_open[j] turns True once any of H[1..i-1][j] is non-zero
    2. row_open turns True once any of H[i][1..j-1] is non-zero

    so each cell costs O(1) instead of re-scanning the column and row.

    Args:
        probe: Window sliced from the extended source
        query: Query string
        match_score: Score for identical characters
        mismatch_score: Score for differing characters
        gap_open: Penalty for a gap with no prior non-zero cell
        gap_extend: Penalty for a gap after a non-zero cell

    Returns:
        int32 matrix with the clamped-at-zero local scores
    """
    m, n = len(probe), len(query)
    H = np.zeros((m + 1, n + 1), dtype=np.int32)
    if m == 0 or n == 0:
        return H

    # Plain lists in the hot loop, copied into H row by row
    col_open = [False] * (n + 1)
    prev_row = [0] * (n + 1)

    for i in range(1, m + 1):
        p_char = probe[i - 1]
        row = [0] * (n + 1)
        row_open = False

        for j in range(1, n + 1):
            match_value = match_score if p_char == query[j - 1] else mismatch_score

            if col_open[j]:
                gap_vertical = gap_extend
            else:
                gap_vertical = gap_open

            if row_open:
                gap_horizontal = gap_extend
            else:
                gap_horizontal = gap_open

            value = max(
                prev_row[j - 1] + match_value,
                prev_row[j] + gap_vertical,
                row[j - 1] + gap_horizontal,
                0,
            )
            row[j] = value

            if value != 0:
                row_open = True
                col_open[j] = True

        H[i, :] = row
        prev_row = row

    return H


def smith_waterman_score(
    probe: str,
    query: str,
    match_score: int = MATCH_SCORE,
    mismatch_score: int = MISMATCH_SCORE,
    gap_open: int = GAP_OPEN,
    gap_extend: int = GAP_EXTEND,
) -> int:
    """Best local alignment score of probe against query (0 if none)."""
    H = smith_waterman_matrix(
        probe, query,
        match_score=match_score,
        mismatch_score=mismatch_score,
        gap_open=gap_open,
        gap_extend=gap_extend,
    )
    return int(H.max())


def score_windows(windows: Iterable[str], query: str, **params) -> List[int]:
    """Score each window against query, preserving window order."""
    return [smith_waterman_score(window, query, **params) for window in windows]


__all__ = [
    'MATCH_SCORE',
    'MISMATCH_SCORE',
    'GAP_OPEN',
    'GAP_EXTEND',
    'smith_waterman_matrix',
    'smith_waterman_score',
    'score_windows',
]

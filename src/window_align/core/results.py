"""
Result rows and the in-memory result table.
Author: Rowel Facunla
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple

RESULT_HEADER = ('a_sequence', 'b_sequence', 'similarity_string')


class ResultRow(NamedTuple):
    """Window scores of one (source, query) pair."""
    source_index: int
    query_index: int
    source: str
    query: str
    scores: Tuple[int, ...]

    @property
    def similarity_string(self) -> str:
        return format_similarity(self.scores)

    def as_record(self) -> Tuple[str, str, str]:
        """Row as written to the output table."""
        return (self.source, self.query, self.similarity_string)


class ChunkResult(NamedTuple):
    """Rows produced by one worker for one contiguous chunk of sources."""
    chunk_index: int
    start: int
    end: int
    rows: List[ResultRow]


def format_similarity(scores: Sequence[int]) -> str:
    """Render window scores as a comma separated list."""
    return ','.join(str(int(s)) for s in scores)


def parse_similarity(text: str) -> List[int]:
    """Inverse of format_similarity."""
    if not text:
        return []
    return [int(s) for s in text.split(',')]


class ResultTable:
    """
    Ordered collection of result rows with a fixed header.

    The table is owned by a single writer; rows accumulate until drained.
    """

    header = RESULT_HEADER

    def __init__(self):
        self._rows: List[ResultRow] = []

    def __len__(self) -> int:
        return len(self._rows)

    def extend(self, rows: Iterable[ResultRow]):
        self._rows.extend(rows)

    def sort(self):
        """Restore input order: source index, then query index."""
        self._rows.sort(key=lambda r: (r.source_index, r.query_index))

    def drain(self) -> List[ResultRow]:
        """Hand over all accumulated rows and start empty."""
        rows, self._rows = self._rows, []
        return rows


__all__ = [
    'RESULT_HEADER',
    'ResultRow',
    'ChunkResult',
    'ResultTable',
    'format_similarity',
    'parse_similarity',
]

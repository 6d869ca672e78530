"""
All-pairs batch evaluation with pluggable scheduling.
Author: Rowel Facunla
"""

import logging
import math
import time
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from ..algorithms.smith_waterman import score_windows
from .errors import BatchEvaluationError, WindowAlignError
from .results import ChunkResult, ResultRow
from .windows import iter_windows

logger = logging.getLogger(__name__)

DEFAULT_NUM_WORKERS = 8


class ChunkTask(NamedTuple):
    """A contiguous slice of the source list scored against every query."""
    chunk_index: int
    start: int
    sources: Tuple[str, ...]
    queries: Tuple[str, ...]


@dataclass
class BatchSummary:
    """Counters reported at the end of a batch."""
    sources: int
    queries: int
    chunks: int
    rows_written: int
    drains: int
    drain_every: int
    elapsed_seconds: float

    @property
    def pairs(self) -> int:
        return self.sources * self.queries

    @property
    def pairs_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.pairs / self.elapsed_seconds


# =====================================================================
# SCORING
# =====================================================================

def score_pair(source: str, query: str) -> List[int]:
    """Window scores of one source against one query, in offset order."""
    return score_windows(iter_windows(source), query)


def score_source(source: str, queries: Sequence[str]) -> List[List[int]]:
    """Score one source against every query, slicing its windows once."""
    windows = list(iter_windows(source))
    return [score_windows(windows, query) for query in queries]


def evaluate_chunk(task: ChunkTask) -> ChunkResult:
    """
    Worker entry point: score a chunk of sources against all queries.

    Rows come out source-major, query-minor. Exceptions are not caught
    here; they propagate to the coordinator and abort the batch.
    """
    rows = []
    for offset, source in enumerate(task.sources):
        source_index = task.start + offset
        for query_index, scores in enumerate(score_source(source, task.queries)):
            rows.append(ResultRow(
                source_index=source_index,
                query_index=query_index,
                source=source,
                query=task.queries[query_index],
                scores=tuple(scores),
            ))
    return ChunkResult(
        chunk_index=task.chunk_index,
        start=task.start,
        end=task.start + len(task.sources),
        rows=rows,
    )


# =====================================================================
# PARTITIONING
# =====================================================================

def parse_num_workers(num_workers_spec: Union[int, str, None]) -> int:
    """Parse num_workers specification ('auto', digits or int)."""
    if num_workers_spec is None:
        return DEFAULT_NUM_WORKERS
    if num_workers_spec == 'auto':
        return max(1, cpu_count() - 1)
    if isinstance(num_workers_spec, str) and num_workers_spec.isdigit():
        return max(1, int(num_workers_spec))
    if isinstance(num_workers_spec, int):
        return max(1, num_workers_spec)
    raise ValueError(f"Invalid num_workers: {num_workers_spec!r}")


def partition_sources(n_sources: int, num_workers: int) -> List[Tuple[int, int]]:
    """
    Split range(n_sources) into contiguous (start, end) chunks.

    chunk_size = ceil(n_sources / num_workers), so at most num_workers
    chunks are produced and only the last one may be shorter.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")
    if n_sources <= 0:
        return []
    chunk_size = math.ceil(n_sources / num_workers)
    return [
        (start, min(start + chunk_size, n_sources))
        for start in range(0, n_sources, chunk_size)
    ]


def resolve_drain_every(spec: Union[int, str, None], num_workers: int, n_chunks: int) -> int:
    """
    Number of completed chunks between drains.

    'auto' scales with concurrency (a quarter of the workers). Any value is
    clamped to the chunk count so at least one periodic drain can happen.
    """
    if spec is None or spec == 'auto':
        k = max(1, num_workers // 4)
    else:
        k = int(spec)
        if k < 1:
            raise ValueError(f"drain_every must be >= 1 or 'auto', got {spec!r}")
    return max(1, min(k, n_chunks)) if n_chunks else 1


# =====================================================================
# SCHEDULERS
# =====================================================================

class SequentialScheduler:
    """Runs chunks one after another in the calling process."""

    num_workers = 1

    def map(self, fn: Callable, tasks: Sequence) -> Iterator:
        for task in tasks:
            yield fn(task)


class ForkJoinScheduler:
    """
    Runs chunks on a fixed-size process pool.

    Results are yielded in completion order, not submission order. Leaving
    the generator early (including on error) terminates the pool.
    """

    def __init__(self, num_workers: int = DEFAULT_NUM_WORKERS):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers

    def map(self, fn: Callable, tasks: Sequence) -> Iterator:
        if not tasks:
            return
        processes = min(self.num_workers, len(tasks))
        with Pool(processes=processes) as pool:
            for result in pool.imap_unordered(fn, tasks):
                yield result


def make_scheduler(num_workers: int, use_multiprocessing: bool = True):
    """Fork-join pool for more than one worker, sequential otherwise."""
    if use_multiprocessing and num_workers > 1:
        return ForkJoinScheduler(num_workers)
    return SequentialScheduler()


# =====================================================================
# EVALUATOR
# =====================================================================

class BatchEvaluator:
    """
    Scores every (source, query) pair and streams rows into a sink.

    Sources are partitioned into one chunk per worker; finished chunks go
    through a bounded queue to a single ResultWriter thread, which owns the
    result table and drains it to the sink.
    """

    def __init__(
        self,
        sink,
        scheduler=None,
        drain_every: Union[int, str, None] = 'auto',
        sort_rows: bool = False,
        queue_size: Optional[int] = None,
        show_progress: bool = False,
    ):
        self.sink = sink
        self.scheduler = scheduler or SequentialScheduler()
        self.drain_every = drain_every
        self.sort_rows = sort_rows
        self.queue_size = queue_size
        self.show_progress = show_progress

    def _make_tasks(self, sources: Sequence[str], queries: Sequence[str]) -> List[ChunkTask]:
        query_tuple = tuple(queries)
        return [
            ChunkTask(chunk_index=idx, start=start, sources=tuple(sources[start:end]), queries=query_tuple)
            for idx, (start, end) in enumerate(partition_sources(len(sources), self.scheduler.num_workers))
        ]

    def run(self, sources: Sequence[str], queries: Sequence[str]) -> BatchSummary:
        # io imports core, so import lazily
        from ..io.results_writer import ResultWriter

        start_time = time.time()
        num_workers = self.scheduler.num_workers
        tasks = self._make_tasks(sources, queries) if queries else []
        drain_every = resolve_drain_every(self.drain_every, num_workers, len(tasks))
        queue_size = self.queue_size or 2 * num_workers

        logger.info(
            f"Scoring {len(sources)} sources x {len(queries)} queries "
            f"in {len(tasks)} chunk(s) with {type(self.scheduler).__name__} "
            f"(workers={num_workers}, drain_every={drain_every}, sort_rows={self.sort_rows})"
        )

        progress = tqdm(
            total=len(sources) * len(queries),
            desc="Scoring pairs",
            unit="pair",
            disable=not self.show_progress,
        )
        writer = ResultWriter(
            self.sink,
            drain_every=drain_every,
            sort_rows=self.sort_rows,
            queue_size=queue_size,
            progress=progress,
        )
        try:
            writer.start()
            results = self.scheduler.map(evaluate_chunk, tasks)
            try:
                for chunk in results:
                    logger.debug(
                        f"Chunk {chunk.chunk_index} done: sources [{chunk.start}:{chunk.end}], "
                        f"{len(chunk.rows)} rows"
                    )
                    writer.submit(chunk)
            except WindowAlignError:
                writer.abort()
                raise
            except Exception as e:
                writer.abort()
                raise BatchEvaluationError(f"Worker failed: {e}") from e
            finally:
                results.close()
            writer.close()
        finally:
            progress.close()

        summary = BatchSummary(
            sources=len(sources),
            queries=len(queries),
            chunks=len(tasks),
            rows_written=writer.rows_written,
            drains=writer.drains,
            drain_every=drain_every,
            elapsed_seconds=time.time() - start_time,
        )
        logger.info(
            f"Wrote {summary.rows_written} rows in {summary.drains} drain(s), "
            f"{summary.elapsed_seconds:.2f}s ({summary.pairs_per_second:.1f} pairs/s)"
        )
        return summary


def evaluate_pairs(
    sources: Sequence[str],
    queries: Sequence[str],
    num_workers: int = 1,
    use_multiprocessing: bool = True,
) -> List[ResultRow]:
    """Score all pairs in memory and return rows in input order."""
    from ..io.results_writer import MemorySink

    sink = MemorySink()
    evaluator = BatchEvaluator(
        sink,
        scheduler=make_scheduler(num_workers, use_multiprocessing),
        sort_rows=True,
    )
    evaluator.run(sources, queries)
    return sink.rows


__all__ = [
    'DEFAULT_NUM_WORKERS',
    'ChunkTask',
    'BatchSummary',
    'score_pair',
    'score_source',
    'evaluate_chunk',
    'parse_num_workers',
    'partition_sources',
    'resolve_drain_every',
    'SequentialScheduler',
    'ForkJoinScheduler',
    'make_scheduler',
    'BatchEvaluator',
    'evaluate_pairs',
]

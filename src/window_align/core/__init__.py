"""
Core modules for the window alignment pipeline.
"""

from .errors import (
    WindowAlignError,
    InputFormatError,
    InvalidQueryError,
    BatchEvaluationError,
    OutputWriteError
)

from .windows import (
    WINDOW_LENGTH,
    WINDOW_STEP,
    WRAP_LENGTH,
    extend_source,
    iter_windows,
    window_offsets,
    window_count
)

from .results import (
    RESULT_HEADER,
    ResultRow,
    ChunkResult,
    ResultTable,
    format_similarity,
    parse_similarity
)

from .batch import (
    DEFAULT_NUM_WORKERS,
    ChunkTask,
    BatchSummary,
    score_pair,
    score_source,
    evaluate_chunk,
    parse_num_workers,
    partition_sources,
    resolve_drain_every,
    SequentialScheduler,
    ForkJoinScheduler,
    make_scheduler,
    BatchEvaluator,
    evaluate_pairs
)

__all__ = [
    # Errors
    'WindowAlignError',
    'InputFormatError',
    'InvalidQueryError',
    'BatchEvaluationError',
    'OutputWriteError',

    # Window slicing
    'WINDOW_LENGTH',
    'WINDOW_STEP',
    'WRAP_LENGTH',
    'extend_source',
    'iter_windows',
    'window_offsets',
    'window_count',

    # Results
    'RESULT_HEADER',
    'ResultRow',
    'ChunkResult',
    'ResultTable',
    'format_similarity',
    'parse_similarity',

    # Batch evaluation
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

"""
Exception types raised by the window alignment pipeline.
Author: Rowel Facunla
"""


class WindowAlignError(Exception):
    """Base class for all pipeline errors."""


class InputFormatError(WindowAlignError):
    """Input table is malformed or lacks the expected column."""


class InvalidQueryError(InputFormatError):
    """A query string does not have the required length after folding."""

    def __init__(self, row: int, value: str, expected: int):
        self.row = row
        self.value = value
        self.expected = expected
        super().__init__(
            f"Query on row {row} has length {len(value)} "
            f"(must be exactly {expected} characters): {value!r}"
        )


class BatchEvaluationError(WindowAlignError):
    """A worker failed while scoring a chunk; the whole batch is aborted."""


class OutputWriteError(WindowAlignError):
    """The result table could not be created or written."""


__all__ = [
    'WindowAlignError',
    'InputFormatError',
    'InvalidQueryError',
    'BatchEvaluationError',
    'OutputWriteError',
]

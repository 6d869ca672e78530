"""
Fixed-length window slicing over wrapped source strings.
Author: Rowel Facunla
"""

from typing import Iterator, List

WINDOW_LENGTH = 30
WINDOW_STEP = 10
WRAP_LENGTH = 20


def _check_geometry(window: int, step: int, wrap: int):
    if window <= 0:
        raise ValueError(f"window must be positive, got {window}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if wrap < 0:
        raise ValueError(f"wrap must be non-negative, got {wrap}")


def extend_source(source: str, wrap: int = WRAP_LENGTH) -> str:
    """Append the first min(wrap, len(source)) characters to source."""
    return source + source[:min(wrap, len(source))]


def window_offsets(
    source: str,
    window: int = WINDOW_LENGTH,
    step: int = WINDOW_STEP,
    wrap: int = WRAP_LENGTH,
) -> List[int]:
    """Start offsets of every full-length window of the extended source."""
    _check_geometry(window, step, wrap)
    extended_len = len(source) + min(wrap, len(source))
    return list(range(0, extended_len - window + 1, step))


def iter_windows(
    source: str,
    window: int = WINDOW_LENGTH,
    step: int = WINDOW_STEP,
    wrap: int = WRAP_LENGTH,
) -> Iterator[str]:
    """
    Yield windows of the extended source in ascending offset order.

    Slicing stops at the first offset where a full window no longer fits,
    so short windows are never produced.
    """
    _check_geometry(window, step, wrap)
    extended = extend_source(source, wrap)
    start = 0
    while start + window <= len(extended):
        yield extended[start:start + window]
        start += step


def window_count(
    length: int,
    window: int = WINDOW_LENGTH,
    step: int = WINDOW_STEP,
    wrap: int = WRAP_LENGTH,
) -> int:
    """Number of windows produced for a source of the given length."""
    _check_geometry(window, step, wrap)
    span = length + min(wrap, length) - window
    if span < 0:
        return 0
    return span // step + 1

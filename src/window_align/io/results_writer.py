"""
Result sinks and the dedicated writer thread.
Author: Rowel Facunla
"""

import csv
import logging
import queue
import threading
from pathlib import Path
from typing import List, Optional

from ..core.errors import OutputWriteError
from ..core.results import ChunkResult, ResultRow, ResultTable, RESULT_HEADER
from .file_handler import ensure_parent_directory

logger = logging.getLogger(__name__)

_STOP = object()


class CsvResultSink:
    """Writes result rows to a CSV file with a fixed header."""

    def __init__(self, path: str, header=RESULT_HEADER):
        self.path = Path(path)
        self.header = tuple(header)
        self._fh = None
        self._writer = None

    def open(self):
        try:
            ensure_parent_directory(self.path)
            self._fh = open(self.path, 'w', newline='')
            self._writer = csv.writer(self._fh)
            self._writer.writerow(self.header)
        except OSError as e:
            raise OutputWriteError(f"Unable to create {self.path}: {e}") from e

    def write_rows(self, rows: List[ResultRow]):
        if self._writer is None:
            raise OutputWriteError(f"Sink for {self.path} is not open")
        try:
            self._writer.writerows(row.as_record() for row in rows)
            self._fh.flush()
        except OSError as e:
            raise OutputWriteError(f"Unable to write {self.path}: {e}") from e

    def close(self):
        if self._fh is not None:
            try:
                self._fh.close()
            except OSError as e:
                raise OutputWriteError(f"Unable to flush {self.path}: {e}") from e
            finally:
                self._fh = None
                self._writer = None


class MemorySink:
    """Keeps drained rows in a list. Used by tests and evaluate_pairs."""

    def __init__(self):
        self.rows: List[ResultRow] = []
        self.drains = 0
        self.closed = False

    def open(self):
        self.rows = []
        self.drains = 0
        self.closed = False

    def write_rows(self, rows: List[ResultRow]):
        self.rows.extend(rows)
        self.drains += 1

    def close(self):
        self.closed = True


class ResultWriter:
    """
    Single consumer of finished chunk results.

    Workers never touch the result table: the coordinator puts each
    ChunkResult on a bounded queue and this thread appends it to the table,
    draining to the sink after every ``drain_every`` chunks and once more
    when the batch is closed. With ``sort_rows`` the table is only drained
    at the end, after sorting by (source index, query index).
    """

    def __init__(
        self,
        sink,
        drain_every: int = 1,
        sort_rows: bool = False,
        queue_size: int = 16,
        progress=None,
    ):
        if drain_every < 1:
            raise ValueError(f"drain_every must be >= 1, got {drain_every}")
        self.sink = sink
        self.drain_every = drain_every
        self.sort_rows = sort_rows
        self.progress = progress
        self.table = ResultTable()
        self.queue = queue.Queue(maxsize=max(1, queue_size))

        self.chunks_received = 0
        self.rows_written = 0
        self.drains = 0
        self.error: Optional[BaseException] = None

        self._aborted = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name='result-writer', daemon=True
        )

    def start(self):
        """Open the sink and start consuming."""
        self.sink.open()
        self._thread.start()

    def submit(self, result: ChunkResult):
        """Queue a chunk result, blocking while the queue is full."""
        while True:
            if self.error is not None:
                raise OutputWriteError(f"Result writer failed: {self.error}") from self.error
            try:
                self.queue.put(result, timeout=0.1)
                return
            except queue.Full:
                continue

    def close(self):
        """Final drain, close the sink and wait for the thread."""
        self._stop()
        self.sink.close()
        if self.error is not None:
            raise OutputWriteError(f"Result writer failed: {self.error}") from self.error

    def abort(self):
        """Stop without a final drain; pending results are discarded."""
        self._aborted.set()
        self._stop()
        try:
            self.sink.close()
        except OutputWriteError as e:
            logger.warning(f"Could not close sink after abort: {e}")

    def _stop(self):
        if self._thread.is_alive():
            self.queue.put(_STOP)
            self._thread.join()

    def _drain(self):
        rows = self.table.drain()
        if not rows:
            return
        self.sink.write_rows(rows)
        self.rows_written += len(rows)
        self.drains += 1
        if self.progress is not None:
            self.progress.update(len(rows))
        logger.debug(f"Drained {len(rows)} rows (total {self.rows_written})")

    def _run(self):
        stopped = False
        try:
            while True:
                item = self.queue.get()
                if item is _STOP:
                    stopped = True
                    break
                if self._aborted.is_set():
                    continue

                self.table.extend(item.rows)
                self.chunks_received += 1

                if not self.sort_rows and self.chunks_received % self.drain_every == 0:
                    self._drain()

            if not self._aborted.is_set():
                if self.sort_rows:
                    self.table.sort()
                self._drain()
        except Exception as e:
            self.error = e
            logger.error(f"Result writer stopped: {e}")
            # Keep the queue moving until the coordinator sends _STOP
            while not stopped:
                stopped = self.queue.get() is _STOP


def write_results_csv(rows: List[ResultRow], path: str) -> str:
    """Write a complete list of rows to path in one go."""
    sink = CsvResultSink(path)
    sink.open()
    try:
        sink.write_rows(rows)
    finally:
        sink.close()
    return str(path)


__all__ = [
    'CsvResultSink',
    'MemorySink',
    'ResultWriter',
    'write_results_csv',
]

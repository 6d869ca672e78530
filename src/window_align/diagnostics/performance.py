"""
Performance monitoring for batch runs.
Author: Rowel Facunla
"""

import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

import psutil


@dataclass
class PerformanceMetrics:
    """Performance metrics container."""
    start_time: float
    end_time: Optional[float] = None
    peak_memory_mb: float = 0.0

    @property
    def total_time(self) -> float:
        """Total execution time in seconds."""
        if self.end_time is None:
            return 0.0
        return self.end_time - self.start_time


class PerformanceMonitor:
    """Samples CPU and memory of this process on a background thread."""

    def __init__(self, sampling_interval: float = 1.0):
        """
        Initialize performance monitor.

        Args:
            sampling_interval: Time between samples in seconds
        """
        self.sampling_interval = sampling_interval
        self.metrics = PerformanceMetrics(start_time=time.time())
        self.cpu_samples: List[float] = []
        self.memory_samples: List[float] = []
        self._stop_event = threading.Event()
        self.thread = None

    def start(self):
        """Start performance monitoring."""
        self.metrics = PerformanceMetrics(start_time=time.time())
        self.cpu_samples = []
        self.memory_samples = []
        self._stop_event.clear()
        self.thread = threading.Thread(target=self._monitor_loop, name='perf-monitor', daemon=True)
        self.thread.start()

    def stop(self):
        """Stop performance monitoring."""
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=2.0)
        self.metrics.end_time = time.time()

        if self.memory_samples:
            self.metrics.peak_memory_mb = max(self.memory_samples)

    def _monitor_loop(self):
        """Background monitoring loop."""
        process = psutil.Process()
        # First cpu_percent call only primes the counter
        process.cpu_percent(interval=None)

        while not self._stop_event.is_set():
            try:
                self.memory_samples.append(process.memory_info().rss / (1024 * 1024))
                self.cpu_samples.append(process.cpu_percent(interval=None))
            except psutil.NoSuchProcess:
                break
            self._stop_event.wait(self.sampling_interval)

    def get_report(self) -> Dict:
        """Get performance report."""
        return {
            'total_time_seconds': self.metrics.total_time,
            'peak_memory_mb': self.metrics.peak_memory_mb,
            'average_cpu_percent': sum(self.cpu_samples) / len(self.cpu_samples) if self.cpu_samples else 0.0,
            'samples': len(self.memory_samples),
            'start_time': datetime.fromtimestamp(self.metrics.start_time).isoformat(),
            'end_time': datetime.fromtimestamp(self.metrics.end_time).isoformat() if self.metrics.end_time else None,
            'cpu_count': psutil.cpu_count(),
        }

    def log_report(self, logger, pairs: int = 0):
        """Write the report to a logger, with pair throughput if given."""
        report = self.get_report()
        logger.info(f"Total time: {report['total_time_seconds']:.2f} seconds")
        logger.info(f"Peak memory: {report['peak_memory_mb']:.1f} MB")
        logger.info(f"Average CPU: {report['average_cpu_percent']:.1f}% ({report['cpu_count']} cores)")
        if pairs and report['total_time_seconds'] > 0:
            logger.info(f"Throughput: {pairs / report['total_time_seconds']:.1f} pairs/s")
        return report


__all__ = [
    'PerformanceMetrics',
    'PerformanceMonitor',
]

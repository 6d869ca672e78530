"""
Diagnostic modules for the window alignment pipeline.
"""

from .performance import PerformanceMetrics, PerformanceMonitor
from .validation import validate_inputs

__all__ = [
    'PerformanceMetrics',
    'PerformanceMonitor',
    'validate_inputs',
]

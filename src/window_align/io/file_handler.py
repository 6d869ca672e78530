"""
File handling utilities for the window alignment pipeline.
Author: Rowel Facunla
"""

import logging
import os
from pathlib import Path
from typing import Tuple

import psutil

logger = logging.getLogger(__name__)


def check_disk_space(path: str, required_gb: float = 1.0) -> Tuple[bool, float, float]:
    """
    Check if there is enough disk space at the given path.

    Args:
        path: Path to check disk space for
        required_gb: Required space in GB

    Returns:
        Tuple of (has_space, available_gb, required_gb)
    """
    try:
        usage = psutil.disk_usage(path)
        available_gb = usage.free / (1024**3)
        return available_gb >= required_gb, available_gb, required_gb
    except OSError as e:
        # If we can't check, assume there's enough space
        logger.warning(f"Could not check disk space: {e}")
        return True, float('inf'), required_gb


def ensure_parent_directory(filepath: str) -> Path:
    """Create the directory that will hold filepath. Returns that directory."""
    parent = Path(filepath).resolve().parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def get_file_size(filepath: str, human_readable: bool = True) -> str:
    """
    Get file size in human-readable format.

    Args:
        filepath: Path to file
        human_readable: If True, return human-readable string

    Returns:
        File size string
    """
    try:
        size_bytes = os.path.getsize(filepath)
    except OSError:
        return "Unknown"

    if not human_readable:
        return str(size_bytes)

    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0

    return f"{size_bytes:.1f} PB"


def safe_remove(filepath: str) -> bool:
    """
    Remove a file if it exists.

    Returns:
        True if file was removed or didn't exist, False on error
    """
    try:
        path = Path(filepath)
        if path.exists():
            path.unlink()
        return True
    except OSError as e:
        logger.warning(f"Could not remove file {filepath}: {e}")
        return False


__all__ = [
    'check_disk_space',
    'ensure_parent_directory',
    'get_file_size',
    'safe_remove',
]

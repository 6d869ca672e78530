"""
Input validation and pre-flight checks.
Author: Rowel Facunla
"""

import logging
import os
from typing import List, Tuple

from ..io.file_handler import check_disk_space, ensure_parent_directory

logger = logging.getLogger(__name__)


def _check_input(label: str, filepath: str) -> List[str]:
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"{label} not found: {filepath}")
    if not os.path.isfile(filepath):
        return [f"{label}: not a file: {filepath}"]
    if os.path.getsize(filepath) == 0:
        return [f"{label}: file is empty: {filepath}"]
    return []


def validate_inputs(
    source_path: str,
    query_path: str,
    output_path: str,
    required_disk_gb: float = 0.1,
) -> Tuple[bool, List[str]]:
    """
    Validate pipeline inputs before any work starts.

    Args:
        source_path: Path to the source table
        query_path: Path to the query table
        output_path: Path of the result table to be written
        required_disk_gb: Free space below this only logs a warning

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        FileNotFoundError: If either input table does not exist
    """
    errors = []
    errors.extend(_check_input("Source table", source_path))
    errors.extend(_check_input("Query table", query_path))

    try:
        output_dir = ensure_parent_directory(output_path)
    except OSError as e:
        errors.append(f"Cannot create output directory for {output_path}: {e}")
    else:
        has_space, available_gb, _ = check_disk_space(str(output_dir), required_disk_gb)
        if not has_space:
            logger.warning(
                f"Low disk space in {output_dir}: {available_gb:.2f} GB available"
            )

    return len(errors) == 0, errors


__all__ = [
    'validate_inputs',
]

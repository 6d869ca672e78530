import sys
from pathlib import Path

SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

__version__ = "1.0.0"
__author__ = "Rowel Facunla"
__description__ = "Test suite for window_align"

TEST_CATEGORIES = {
    'alignment': 'Smith-Waterman scoring tests',
    'windows': 'Window slicing tests',
    'batch': 'Partitioning, scheduling and draining tests',
    'io': 'Table loading and result writing tests',
    'integration': 'End-to-end pipeline and CLI tests',
}

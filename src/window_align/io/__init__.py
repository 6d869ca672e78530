from .table_reader import (
    QUERY_LENGTH,
    read_table,
    select_column,
    load_sources,
    load_queries,
    validate_queries
)

from .file_handler import (
    check_disk_space,
    ensure_parent_directory,
    get_file_size,
    safe_remove
)

from .results_writer import (
    CsvResultSink,
    MemorySink,
    ResultWriter,
    write_results_csv
)

__all__ = [
    # Table reader functions
    'QUERY_LENGTH',
    'read_table',
    'select_column',
    'load_sources',
    'load_queries',
    'validate_queries',

    # File handler functions
    'check_disk_space',
    'ensure_parent_directory',
    'get_file_size',
    'safe_remove',

    # Results writer
    'CsvResultSink',
    'MemorySink',
    'ResultWriter',
    'write_results_csv',
]

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.config_loader import apply_overrides, load_config
from ..core.batch import BatchEvaluator, BatchSummary, make_scheduler, parse_num_workers
from ..core.errors import InputFormatError, WindowAlignError
from ..diagnostics.performance import PerformanceMonitor
from ..diagnostics.validation import validate_inputs
from ..io.file_handler import get_file_size, safe_remove
from ..io.results_writer import CsvResultSink
from ..io.table_reader import load_queries, load_sources


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration."""
    debug = config.get('debug', {})
    log_level_str = 'DEBUG' if debug.get('verbose') else debug.get('log_level', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logger = logging.getLogger('window_align')
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler, only when a log directory is configured
    logs_dir = config.get('io', {}).get('logs_dir')
    if logs_dir:
        log_dir = Path(logs_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / 'pipeline.log')
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def run_batch_pipeline(config: Dict[str, Any], logger: logging.Logger) -> BatchSummary:
    """
    Load both tables, score every pair and write the result table.

    Raises on any failure; a partially written output file is removed.
    """
    io_cfg = config.get('io', {})
    batch_cfg = config.get('batch', {})
    debug_cfg = config.get('debug', {})

    source_file = io_cfg.get('source_file', 'a_sequence.csv')
    query_file = io_cfg.get('query_file', 'b_sequence.csv')
    output_file = io_cfg.get('output_file', 'result.csv')

    ok, errors = validate_inputs(source_file, query_file, output_file)
    if not ok:
        for err in errors:
            logger.error(err)
        raise InputFormatError("; ".join(errors))

    # Both tables are fully validated before the output file is created
    sources = load_sources(source_file, io_cfg.get('source_column', 'a_sequence'))
    queries = load_queries(query_file, io_cfg.get('query_column', 'b_sequence'))

    num_workers = parse_num_workers(batch_cfg.get('num_workers', 8))
    scheduler = make_scheduler(num_workers, batch_cfg.get('use_multiprocessing', True))

    evaluator = BatchEvaluator(
        CsvResultSink(output_file),
        scheduler=scheduler,
        drain_every=batch_cfg.get('drain_every', 'auto'),
        sort_rows=bool(batch_cfg.get('sort_rows', False)),
        queue_size=batch_cfg.get('queue_size'),
        show_progress=bool(debug_cfg.get('progress', True)),
    )

    monitor = PerformanceMonitor(sampling_interval=0.5)
    monitor.start()
    try:
        summary = evaluator.run(sources, queries)
    except Exception:
        logger.error(f"Batch aborted; removing partial output {output_file}")
        safe_remove(output_file)
        raise
    finally:
        monitor.stop()

    monitor.log_report(logger, pairs=summary.pairs)
    logger.info(f"Results saved to {output_file} ({get_file_size(output_file)})")
    return summary


def main(config_path: Optional[str] = None, overrides: Optional[Dict] = None) -> int:
    """Main pipeline entry point. Returns a process exit code."""
    # Load configuration
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"ERROR loading configuration: {e}", file=sys.stderr)
        return 1

    apply_overrides(config, overrides)

    logger = setup_logging(config)
    logger.info("Starting window alignment pipeline")
    logger.info(f"Configuration loaded from {config.get('_source', 'default')}")

    try:
        run_batch_pipeline(config, logger)
    except (WindowAlignError, FileNotFoundError, ValueError) as e:
        logger.error(f"Pipeline failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Pipeline failed with error: {e}", exc_info=True)
        return 1

    logger.info("Pipeline completed successfully")
    return 0


# Alias for backward compatibility
run_pipeline = main

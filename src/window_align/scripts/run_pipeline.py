"""
Command-line interface for the window alignment pipeline.
Author: Rowel Facunla
"""

import sys
import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Windowed Smith-Waterman scoring of every source string against every 20-character query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a_sequence.csv against b_sequence.csv into result.csv with 8 workers
  %(prog)s

  # Explicit files and worker count
  %(prog)s --source sources.csv --query probes.csv --output scores.csv --workers 16

  # Output rows in input order
  %(prog)s --sort --no-progress
        """
    )

    parser.add_argument(
        '--workers',
        type=int,
        help='Number of worker processes (default 8, 0 = auto)'
    )

    parser.add_argument(
        '--source',
        type=str,
        help='CSV file with source strings (default a_sequence.csv)'
    )

    parser.add_argument(
        '--query',
        type=str,
        help='CSV file with 20-character query strings (default b_sequence.csv)'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Result CSV file (default result.csv)'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration YAML file'
    )

    parser.add_argument(
        '--sort',
        action='store_true',
        help='Write rows in input order (source, then query)'
    )

    parser.add_argument(
        '--no-multiprocessing',
        action='store_true',
        help='Score all chunks in the main process'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Hide the progress bar'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version information'
    )

    return parser


def build_overrides(args) -> dict:
    """Translate parsed arguments into config overrides."""
    config_overrides = {}

    if args.workers is not None:
        if args.workers < 0:
            raise ValueError(f"--workers must be >= 0, got {args.workers}")
        config_overrides['batch'] = config_overrides.get('batch', {})
        config_overrides['batch']['num_workers'] = 'auto' if args.workers == 0 else args.workers

    if args.no_multiprocessing:
        config_overrides['batch'] = config_overrides.get('batch', {})
        config_overrides['batch']['use_multiprocessing'] = False

    if args.sort:
        config_overrides['batch'] = config_overrides.get('batch', {})
        config_overrides['batch']['sort_rows'] = True

    for arg_name, key in (('source', 'source_file'), ('query', 'query_file'), ('output', 'output_file')):
        value = getattr(args, arg_name)
        if value:
            config_overrides['io'] = config_overrides.get('io', {})
            config_overrides['io'][key] = value

    if args.no_progress:
        config_overrides['debug'] = config_overrides.get('debug', {})
        config_overrides['debug']['progress'] = False

    if args.verbose:
        config_overrides['debug'] = config_overrides.get('debug', {})
        config_overrides['debug']['verbose'] = True

    return config_overrides


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.version:
        from window_align import __version__
        print(f"window-align {__version__}")
        return 0

    try:
        config_overrides = build_overrides(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    from window_align.pipeline.main_pipeline import main as pipeline_main
    return pipeline_main(config_path=args.config, overrides=config_overrides)


if __name__ == "__main__":
    sys.exit(main())

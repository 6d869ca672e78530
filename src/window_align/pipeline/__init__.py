from .main_pipeline import main, run_batch_pipeline, setup_logging

# Alias for convenience
run_pipeline = main

__all__ = [
    'main',
    'run_pipeline',
    'run_batch_pipeline',
    'setup_logging',
]

"""Valuesforge - render YAML templates against a shared values file.

Every template under a root directory is expanded concurrently against
``values.yaml`` and the results are merged into one multi-document stream.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .pipeline import PipelineResult, render_directory, run_pipeline

# Re-export main CLI entry point
from .cli import main

__all__ = ["PipelineResult", "main", "render_directory", "run_pipeline"]

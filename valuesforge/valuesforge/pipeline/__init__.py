"""Concurrent rendering pipeline."""

from .aggregator import CollectedOutput, FragmentCollector
from .orchestrator import PipelineResult, render_directory, render_task, run_pipeline

__all__ = [
    "CollectedOutput",
    "FragmentCollector",
    "PipelineResult",
    "render_directory",
    "render_task",
    "run_pipeline",
]

"""Pipeline orchestration: load, discover, fan out, collect, join."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment

from ..config.loader import load_values
from ..core.errors import DocumentError, TemplateExecutionError
from ..core.models import (
    RenderConfig,
    RenderedFragment,
    RenderFailure,
    RenderOutcome,
)
from ..core.tree import ConfigurationTree
from ..discovery.walker import discover_documents
from ..rendering.engine import build_environment, render_document
from ..rendering.io import read_document
from .aggregator import FragmentCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    output: str
    fragments: tuple[RenderedFragment, ...]
    failures: tuple[RenderFailure, ...]


def render_task(
    path: Path,
    tree: ConfigurationTree,
    env: Environment,
    root_name: str,
    collector: FragmentCollector,
) -> None:
    """Read and render one document, then report to the collector.

    Exactly one outcome is sent whatever happens inside the task.
    """
    outcome = RenderOutcome(
        path=path,
        failure=RenderFailure(
            path, TemplateExecutionError(path, "render task did not complete")
        ),
    )
    try:
        document = read_document(path)
        fragment = render_document(document, tree, env, root_name)
        outcome = RenderOutcome(path=path, fragment=fragment)
        logger.debug(f"Rendered {path}")
    except DocumentError as exc:
        logger.warning(f"Skipping {path} ({exc.kind} error): {exc.message}")
        outcome = RenderOutcome(path=path, failure=RenderFailure(path, exc))
    except Exception as exc:
        logger.exception(f"Unexpected error rendering {path}")
        error = TemplateExecutionError(path, f"{type(exc).__name__}: {exc}")
        outcome = RenderOutcome(path=path, failure=RenderFailure(path, error))
    finally:
        collector.send(outcome)


def run_pipeline(config: RenderConfig) -> PipelineResult:
    """Render every template under ``config.root`` into one stream.

    Args:
        config: Run options

    Returns:
        Joined output plus the individual fragments and failures

    Raises:
        ConfigurationError: The values file is missing or invalid
    """
    tree = load_values(config.root, config.values_filename)

    paths = discover_documents(
        config.root, config.extensions, exclude_name=config.values_filename
    )
    logger.info(f"Rendering {len(paths)} template(s)")

    env = build_environment()
    collector = FragmentCollector()
    submitted = 0

    with ThreadPoolExecutor(
        max_workers=config.max_workers, thread_name_prefix="valuesforge-render"
    ) as pool:
        for path in paths:
            pool.submit(render_task, path, tree, env, config.root_name, collector)
            submitted += 1
        collected = collector.collect(submitted)

    output = collected.join(config.separator)
    fragments = tuple(collected.ordered_fragments())
    failures = tuple(sorted(collected.failures, key=lambda f: f.path))

    if failures:
        logger.warning(
            f"Rendered {len(fragments)} of {submitted} template(s); "
            f"{len(failures)} skipped"
        )
    else:
        logger.info(f"Successfully rendered {len(fragments)} template(s)")

    return PipelineResult(output=output, fragments=fragments, failures=failures)


def render_directory(root: Path | str) -> str:
    """Render ``root`` with default options and return the joined stream."""
    return run_pipeline(RenderConfig(root=Path(root))).output

"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import ConfigurationError
from ..pipeline import orchestrator
from ..rendering.io import atomic_write_text
from .parsers import build_config, parse_extension

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="valuesforge",
    help="Render YAML templates under a directory against its values.yaml.",
)


@app.command()
def render(
    root: Annotated[
        Path,
        typer.Argument(
            help="Root directory containing values.yaml and the templates.",
            metavar="ROOT",
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the merged stream to FILE instead of stdout.",
            metavar="FILE",
        ),
    ] = None,
    workers: Annotated[
        Optional[int],
        typer.Option(
            "--workers",
            "-w",
            min=1,
            help="Number of render threads (default: chosen by the runtime).",
            metavar="N",
        ),
    ] = None,
    extensions: Annotated[
        list[str],
        typer.Option(
            "--extension",
            "-e",
            help="Template file extension (default: .yaml and .yml). Repeatable.",
            metavar="EXT",
        ),
    ] = [],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render every template under ROOT into one multi-document stream."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    config = build_config(root, [parse_extension(e) for e in extensions], workers)
    logger.debug(f"Config: {config!r}")

    try:
        result = orchestrator.run_pipeline(config)
    except ConfigurationError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    if output is not None:
        atomic_write_text(output, result.output + "\n")
        logger.info(f"Wrote {len(result.fragments)} document(s) to {output}")
    else:
        typer.echo(result.output)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""Shared CLI helpers."""

from pathlib import Path
from typing import Any

import click

from covkit.core.errors import CovkitError
from covkit.coverage.io import dump_json, load_coverage_map
from covkit.coverage.models import CoverageMap


def load_or_fail(path: Path) -> CoverageMap:
    """Load a coverage map, turning covkit errors into a clean CLI failure."""
    try:
        return load_coverage_map(path)
    except CovkitError as e:
        raise click.ClickException(str(e)) from e


def emit_json(data: Any, output: Path | None) -> None:
    """Write JSON to the output file, or stdout when no file is given."""
    text = dump_json(data)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n")
    click.echo(f"Wrote {output}", err=True)

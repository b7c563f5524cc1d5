"""covkit yui command - convert to yuitest_coverage format."""

from pathlib import Path

import click

from covkit.cli.utils import emit_json, load_or_fail
from covkit.coverage.yui import to_yui_coverage, yui_to_dict


@click.command()
@click.argument("coverage", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write converted coverage here instead of stdout",
)
def yui_command(coverage: Path, output: Path | None) -> None:
    """Convert an Istanbul coverage file to yuitest_coverage JSON.

    Only line and function counts are kept.
    """
    emit_json(yui_to_dict(to_yui_coverage(load_or_fail(coverage))), output)

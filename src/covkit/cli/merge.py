"""covkit merge command - combine coverage from repeated runs."""

from functools import reduce
from pathlib import Path

import click
import structlog

from covkit.cli.utils import emit_json, load_or_fail
from covkit.core.errors import CovkitError
from covkit.coverage.io import coverage_map_to_dict
from covkit.coverage.merge import merge_coverage_maps

log = structlog.get_logger(__name__)


@click.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write merged coverage here instead of stdout",
)
@click.option(
    "--lenient/--strict",
    default=None,
    help="Union mismatched ids instead of failing (default from config merge.strict_shapes)",
)
@click.pass_context
def merge_command(
    ctx: click.Context, inputs: tuple[Path, ...], output: Path | None, lenient: bool | None
) -> None:
    """Merge coverage files from runs of the same code.

    Counters of files present in several INPUTS are added together.
    """
    strict = ctx.obj["config"].merge.strict_shapes if lenient is None else not lenient
    maps = [load_or_fail(path) for path in inputs]

    try:
        merged = reduce(lambda acc, m: merge_coverage_maps(acc, m, strict=strict), maps, {})
    except CovkitError as e:
        raise click.ClickException(str(e)) from e

    log.info("merge.done", inputs=len(inputs), files=len(merged), strict=strict)
    emit_json(coverage_map_to_dict(merged), output)

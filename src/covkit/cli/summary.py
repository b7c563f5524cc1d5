"""covkit summary command - per-file and total coverage metrics."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from covkit.cli.utils import load_or_fail
from covkit.config.models import ReportConfig
from covkit.coverage.merge import merge_summaries
from covkit.coverage.metrics import summarize_file_coverage
from covkit.coverage.models import Pct, Summary


def _style(pct: Pct, report: ReportConfig) -> str:
    if isinstance(pct, str):
        return "dim"
    if pct < report.watermark_low:
        return "red"
    if pct < report.watermark_high:
        return "yellow"
    return "green"


def _cell(summary: Summary, category: str, report: ReportConfig) -> str:
    metric = summary.metric(category)
    style = _style(metric.pct, report)
    pct = metric.pct if isinstance(metric.pct, str) else f"{metric.pct:.2f}"
    return f"[{style}]{pct}[/{style}] ({metric.covered}/{metric.total})"


def build_table(per_file: dict[str, Summary], total: Summary, report: ReportConfig) -> Table:
    """Render summaries as a rich table, one row per file plus a total row."""
    table = Table(title="Coverage summary")
    table.add_column("File", style="cyan", no_wrap=True)
    for category in Summary.CATEGORIES:
        table.add_column(category.capitalize(), justify="right")

    rows = list(per_file.items())
    if report.sort_by == "pct":
        rows.sort(key=lambda item: (_sort_pct(item[1]), item[0]))
    else:
        rows.sort(key=lambda item: item[0])

    for path, summary in rows:
        table.add_row(path, *(_cell(summary, c, report) for c in Summary.CATEGORIES))
    table.add_section()
    table.add_row("All files", *(_cell(total, c, report) for c in Summary.CATEGORIES))
    return table


def _sort_pct(summary: Summary) -> float:
    pct = summary.lines.pct
    return -1.0 if isinstance(pct, str) else pct


@click.command()
@click.argument("coverage", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def summary_command(ctx: click.Context, coverage: Path, as_json: bool) -> None:
    """Summarize an Istanbul coverage file.

    COVERAGE is a coverage-final.json file or a directory containing one.
    """
    coverage_map = load_or_fail(coverage)
    per_file = {path: summarize_file_coverage(fc) for path, fc in coverage_map.items()}
    total = merge_summaries(per_file.values())

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": total.to_dict(),
                    "files": {path: s.to_dict() for path, s in per_file.items()},
                },
                indent=2,
            )
        )
        return

    report = ctx.obj["config"].report
    Console().print(build_table(per_file, total, report))

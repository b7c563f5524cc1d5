"""Per-category totals and percentages.

Each category reports ``{total, covered, pct}``:

- statements, functions, lines: one entry per id, covered when its count
  is non-zero
- branches: one entry per branch arm, covered when the arm count is
  positive
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from covkit.coverage.derived import add_derived_info_for_file
from covkit.coverage.models import FileCoverage, Metric, Summary


def percent(covered: int, total: int) -> float:
    """Coverage percentage rounded half-up to two decimals.

    An empty category (``total == 0``) counts as fully covered.
    """
    if total > 0:
        tmp = 1000 * 100 * covered / total + 5
        return math.floor(tmp / 10) / 100
    return 100.00


def compute_simple_totals(counts: Mapping[Any, int]) -> Metric:
    total = len(counts)
    covered = sum(1 for count in counts.values() if count)
    return Metric(total=total, covered=covered, pct=percent(covered, total))


def compute_branch_totals(branches: Mapping[str, Sequence[int]]) -> Metric:
    total = 0
    covered = 0
    for arms in branches.values():
        total += len(arms)
        covered += sum(1 for count in arms if count > 0)
    return Metric(total=total, covered=covered, pct=percent(covered, total))


def blank_summary() -> Summary:
    return Summary.blank()


def summarize_file_coverage(file_coverage: FileCoverage) -> Summary:
    """Summary metrics for a single file.

    Derives ``l`` on the record first if it is missing (in place).
    """
    add_derived_info_for_file(file_coverage)
    assert file_coverage.l is not None
    return Summary(
        lines=compute_simple_totals(file_coverage.l),
        statements=compute_simple_totals(file_coverage.s),
        functions=compute_simple_totals(file_coverage.f),
        branches=compute_branch_totals(file_coverage.b),
    )

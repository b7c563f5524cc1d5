"""Tests for percentages, category totals and per-file summaries."""

from typing import Any

import pytest

from covkit.coverage import (
    UNKNOWN,
    FileCoverage,
    blank_summary,
    compute_branch_totals,
    compute_simple_totals,
    percent,
    summarize_file_coverage,
)


class TestPercent:
    """Tests for percent rounding."""

    @pytest.mark.parametrize(
        ("covered", "total", "expected"),
        [
            (0, 0, 100.00),
            (1, 3, 33.33),
            (2, 3, 66.67),
            (0, 5, 0.00),
            (5, 5, 100.00),
            (1, 2, 50.00),
            (1, 8, 12.5),
            (1, 7, 14.29),
            (2, 7, 28.57),
        ],
    )
    def test_rounds_half_up_to_two_decimals(
        self, covered: int, total: int, expected: float
    ) -> None:
        assert percent(covered, total) == expected

    def test_empty_category_is_fully_covered(self) -> None:
        assert percent(0, 0) == 100.0
        assert isinstance(percent(0, 0), float)


class TestSimpleTotals:
    """Tests for count-per-entry aggregation."""

    def test_counts_truthy_entries_as_covered(self) -> None:
        metric = compute_simple_totals({"1": 4, "2": 0, "3": 1})
        assert metric.total == 3
        assert metric.covered == 2
        assert metric.pct == 66.67

    def test_empty_mapping(self) -> None:
        metric = compute_simple_totals({})
        assert (metric.total, metric.covered, metric.pct) == (0, 0, 100.0)

    def test_all_zero(self) -> None:
        metric = compute_simple_totals({"a": 0, "b": 0})
        assert (metric.total, metric.covered, metric.pct) == (2, 0, 0.0)


class TestBranchTotals:
    """Tests for arm-level branch aggregation."""

    def test_counts_each_arm(self) -> None:
        metric = compute_branch_totals({"br1": [1, 0, 2]})
        assert metric.total == 3
        assert metric.covered == 2
        assert metric.pct == percent(2, 3) == 66.67

    def test_sums_across_branches(self) -> None:
        metric = compute_branch_totals({"1": [1, 0], "2": [0, 0], "3": [5, 5]})
        assert metric.total == 6
        assert metric.covered == 3
        assert metric.pct == 50.0

    def test_no_branches(self) -> None:
        metric = compute_branch_totals({})
        assert (metric.total, metric.covered, metric.pct) == (0, 0, 100.0)


class TestBlankSummary:
    """Tests for the blank summary."""

    def test_every_category_unknown(self) -> None:
        summary = blank_summary()
        assert summary.to_dict() == {
            category: {"total": 0, "covered": 0, "pct": UNKNOWN}
            for category in ("lines", "statements", "functions", "branches")
        }

    def test_returns_fresh_instances(self) -> None:
        first = blank_summary()
        first.lines.total = 10
        assert blank_summary().lines.total == 0


class TestSummarizeFileCoverage:
    """Tests for summarize_file_coverage."""

    def test_summarizes_all_categories(self, sample_record: dict[str, Any]) -> None:
        fc = FileCoverage.from_dict(sample_record)

        summary = summarize_file_coverage(fc)

        assert summary.to_dict() == {
            "lines": {"total": 2, "covered": 1, "pct": 50.0},
            "statements": {"total": 2, "covered": 1, "pct": 50.0},
            "functions": {"total": 1, "covered": 1, "pct": 100.0},
            "branches": {"total": 2, "covered": 2, "pct": 100.0},
        }

    def test_derives_lines_in_place(self, sample_record: dict[str, Any]) -> None:
        fc = FileCoverage.from_dict(sample_record)
        assert fc.l is None

        summarize_file_coverage(fc)

        assert fc.l == {1: 3, 2: 0}

    def test_lines_collapse_statements_on_same_line(self, record_factory: Any) -> None:
        fc = FileCoverage.from_dict(
            record_factory({"1": 0, "2": 1, "3": 0}, lines={"1": 5, "2": 5, "3": 6})
        )

        summary = summarize_file_coverage(fc)

        assert (summary.lines.total, summary.lines.covered) == (2, 1)
        assert (summary.statements.total, summary.statements.covered) == (3, 1)

    def test_uses_existing_line_info(self, record_factory: Any) -> None:
        raw = record_factory({"1": 1}, lines={"1": 1})
        raw["l"] = {"1": 0, "2": 0}
        fc = FileCoverage.from_dict(raw)

        summary = summarize_file_coverage(fc)

        assert (summary.lines.total, summary.lines.covered) == (2, 0)

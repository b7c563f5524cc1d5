"""Tests for derived line coverage."""

from typing import Any

import pytest

from covkit.core.errors import CoverageError, ErrorCode
from covkit.coverage import (
    FileCoverage,
    Span,
    add_derived_info,
    add_derived_info_for_file,
    coverage_map_from_dict,
    remove_derived_info,
    with_derived_info,
    with_derived_info_for_file,
)
from covkit.coverage.models import Position


class TestAddDerivedInfoForFile:
    """Tests for add_derived_info_for_file."""

    def test_line_takes_max_of_statements_starting_on_it(self, record_factory: Any) -> None:
        fc = FileCoverage.from_dict(
            record_factory({"1": 2, "2": 7, "3": 0, "4": 0}, lines={"1": 3, "2": 3, "3": 4, "4": 4})
        )

        add_derived_info_for_file(fc)

        assert fc.l == {3: 7, 4: 0}

    def test_is_idempotent(self, sample_record: dict[str, Any]) -> None:
        fc = FileCoverage.from_dict(sample_record)
        add_derived_info_for_file(fc)
        first = fc.l

        add_derived_info_for_file(fc)

        assert fc.l is first
        assert fc.l == {1: 3, 2: 0}

    def test_existing_lines_not_recomputed_after_counter_change(
        self, sample_record: dict[str, Any]
    ) -> None:
        fc = FileCoverage.from_dict(sample_record)
        add_derived_info_for_file(fc)
        fc.s["2"] = 9

        add_derived_info_for_file(fc)

        assert fc.l == {1: 3, 2: 0}

    def test_recomputed_after_invalidation(self, sample_record: dict[str, Any]) -> None:
        fc = FileCoverage.from_dict(sample_record)
        add_derived_info_for_file(fc)
        fc.s["2"] = 9
        fc.invalidate_derived()
        assert not fc.has_derived_lines

        add_derived_info_for_file(fc)

        assert fc.l == {1: 3, 2: 9}

    def test_statement_without_location_raises(self) -> None:
        fc = FileCoverage(
            statement_map={"1": Span(start=Position(line=1))},
            s={"1": 1, "2": 1},
            path="a.js",
        )

        with pytest.raises(CoverageError) as exc_info:
            add_derived_info_for_file(fc)

        assert exc_info.value.code == ErrorCode.COVERAGE_MISSING_FIELD
        assert exc_info.value.details["field"] == "statementMap[2]"

    def test_empty_record_gets_empty_lines(self) -> None:
        fc = FileCoverage()
        add_derived_info_for_file(fc)
        assert fc.l == {}


class TestMapLevelDerivation:
    """Tests for add_derived_info / remove_derived_info on whole maps."""

    def test_add_then_remove(self, record_factory: Any) -> None:
        coverage_map = coverage_map_from_dict(
            {"a.js": record_factory({"1": 1}), "b.js": record_factory({"1": 0})}
        )

        add_derived_info(coverage_map)
        assert all(fc.has_derived_lines for fc in coverage_map.values())
        assert coverage_map["a.js"].l == {1: 1}
        assert coverage_map["b.js"].l == {1: 0}

        remove_derived_info(coverage_map)
        assert all(fc.l is None for fc in coverage_map.values())

    def test_remove_on_underived_map_is_noop(self, record_factory: Any) -> None:
        coverage_map = coverage_map_from_dict({"a.js": record_factory({"1": 1})})
        remove_derived_info(coverage_map)
        assert coverage_map["a.js"].l is None


class TestPureVariants:
    """Tests for the copy-returning derivation helpers."""

    def test_file_variant_leaves_input_untouched(self, sample_record: dict[str, Any]) -> None:
        fc = FileCoverage.from_dict(sample_record)

        result = with_derived_info_for_file(fc)

        assert fc.l is None
        assert result.l == {1: 3, 2: 0}
        assert result is not fc

    def test_map_variant_leaves_input_untouched(self, sample_record: dict[str, Any]) -> None:
        coverage_map = coverage_map_from_dict({"app.js": sample_record})

        result = with_derived_info(coverage_map)

        assert coverage_map["app.js"].l is None
        assert result["app.js"].l == {1: 3, 2: 0}

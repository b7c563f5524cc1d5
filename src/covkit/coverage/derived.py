"""Derived line coverage.

Line counts are not instrumented directly; they are reconstructed from
statement counts. A line's count is the maximum count of the statements
starting on it.
"""

import copy

import structlog

from covkit.core.errors import CoverageError
from covkit.coverage.models import CoverageMap, FileCoverage

log = structlog.get_logger(__name__)


def add_derived_info_for_file(file_coverage: FileCoverage) -> None:
    """Fill in ``l`` on a single file record, in place.

    Existing line information is left untouched.

    Raises:
        CoverageError: MISSING_FIELD if a statement id has no location.
    """
    if file_coverage.l is not None:
        return

    lines: dict[int, int] = {}
    for sid, count in file_coverage.s.items():
        span = file_coverage.statement_map.get(sid)
        if span is None:
            raise CoverageError.missing_field(f"statementMap[{sid}]", file_coverage.path)
        line = span.start.line
        prev = lines.get(line)
        if prev is None or prev < count:
            lines[line] = count

    file_coverage.l = lines
    log.debug("derived.lines_computed", path=file_coverage.path, lines=len(lines))


def add_derived_info(coverage_map: CoverageMap) -> None:
    """Fill in ``l`` on every file record of the map, in place."""
    for file_coverage in coverage_map.values():
        add_derived_info_for_file(file_coverage)


def remove_derived_info(coverage_map: CoverageMap) -> None:
    """Drop ``l`` from every file record so it is recomputed on next use."""
    for file_coverage in coverage_map.values():
        file_coverage.invalidate_derived()


def with_derived_info_for_file(file_coverage: FileCoverage) -> FileCoverage:
    """Return a copy of the record with ``l`` derived; the input is not modified."""
    result = copy.deepcopy(file_coverage)
    add_derived_info_for_file(result)
    return result


def with_derived_info(coverage_map: CoverageMap) -> CoverageMap:
    """Return a copy of the map with ``l`` derived on every file."""
    return {path: with_derived_info_for_file(fc) for path, fc in coverage_map.items()}

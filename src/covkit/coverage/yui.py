"""Conversion to the yuitest_coverage format.

The conversion is lossy: only line and function counts survive, statement
and branch data are dropped.
"""

import copy

import structlog

from covkit.coverage.derived import add_derived_info
from covkit.coverage.models import CoverageMap, YUIFileCoverage

log = structlog.get_logger(__name__)


def to_yui_coverage(coverage_map: CoverageMap) -> dict[str, YUIFileCoverage]:
    """Project a coverage map onto yuitest_coverage records.

    Derived line info is added to every record of ``coverage_map`` in place
    as a side effect. Use ``to_yui_coverage_pure`` to leave the input alone.
    """
    add_derived_info(coverage_map)

    result: dict[str, YUIFileCoverage] = {}
    for path, fc in coverage_map.items():
        assert fc.l is not None
        out = YUIFileCoverage()
        for line, count in fc.l.items():
            out.lines[line] = count
            out.covered_lines += 1
            if count > 0:
                out.called_lines += 1
        for fid, count in fc.f.items():
            meta = fc.fn_map[fid]
            out.functions[f"{meta.name}:{meta.line}"] = count
            out.covered_functions += 1
            if count > 0:
                out.called_functions += 1
        result[path] = out

    log.debug("yui.converted", files=len(result))
    return result


def to_yui_coverage_pure(coverage_map: CoverageMap) -> dict[str, YUIFileCoverage]:
    """Same as ``to_yui_coverage`` but works on a copy of the input."""
    return to_yui_coverage(copy.deepcopy(coverage_map))


def yui_to_dict(yui: dict[str, YUIFileCoverage]) -> dict[str, dict[str, object]]:
    return {path: record.to_dict() for path, record in yui.items()}

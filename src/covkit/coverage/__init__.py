"""Coverage statistics: summaries, merging and format conversion.

This package provides:
- Typed Istanbul coverage records with derived line counts
- Per-file and whole-map summaries
- Additive merge of records from repeated runs, and of summaries
- Lossy conversion to yuitest_coverage format

Usage:
    from covkit.coverage import load_coverage_map, merge_coverage_maps, summarize_coverage_map

    first = load_coverage_map(Path("run1/coverage-final.json"))
    second = load_coverage_map(Path("run2/coverage-final.json"))

    merged = merge_coverage_maps(first, second)
    summary = summarize_coverage_map(merged)
"""

from covkit.coverage.derived import (
    add_derived_info,
    add_derived_info_for_file,
    remove_derived_info,
    with_derived_info,
    with_derived_info_for_file,
)
from covkit.coverage.io import (
    coverage_map_from_dict,
    coverage_map_to_dict,
    load_coverage_map,
)
from covkit.coverage.merge import (
    merge_coverage_maps,
    merge_file_coverage,
    merge_summaries,
    merge_summary_objects,
    summarize_coverage_map,
)
from covkit.coverage.metrics import (
    blank_summary,
    compute_branch_totals,
    compute_simple_totals,
    percent,
    summarize_file_coverage,
)
from covkit.coverage.models import (
    UNKNOWN,
    CoverageMap,
    FileCoverage,
    FunctionMeta,
    Metric,
    Position,
    Span,
    Summary,
    YUIFileCoverage,
)
from covkit.coverage.yui import to_yui_coverage, to_yui_coverage_pure, yui_to_dict

__all__ = [
    # Models
    "UNKNOWN",
    "CoverageMap",
    "FileCoverage",
    "FunctionMeta",
    "Metric",
    "Position",
    "Span",
    "Summary",
    "YUIFileCoverage",
    # Derived lines
    "add_derived_info",
    "add_derived_info_for_file",
    "remove_derived_info",
    "with_derived_info",
    "with_derived_info_for_file",
    # Metrics
    "blank_summary",
    "compute_branch_totals",
    "compute_simple_totals",
    "percent",
    "summarize_file_coverage",
    # Merge
    "merge_coverage_maps",
    "merge_file_coverage",
    "merge_summaries",
    "merge_summary_objects",
    "summarize_coverage_map",
    # Conversion
    "to_yui_coverage",
    "to_yui_coverage_pure",
    "yui_to_dict",
    # JSON
    "coverage_map_from_dict",
    "coverage_map_to_dict",
    "load_coverage_map",
]

"""Coverage merging with additive semantics.

Records of the same file from two executions are combined counter-wise:

- s[id] = first.s[id] + second.s[id]
- f[id] = first.f[id] + second.f[id]
- b[id][arm] = first.b[id][arm] + second.b[id][arm]

The result describes the file as if it had executed under both runs.
Summaries are merged by summing totals and covered counts per category
and recomputing the percentage.
"""

import copy
from collections.abc import Iterable
from functools import reduce

import structlog

from covkit.core.errors import CoverageError
from covkit.coverage.metrics import percent, summarize_file_coverage
from covkit.coverage.models import CoverageMap, FileCoverage, Metric, Summary

log = structlog.get_logger(__name__)


def _check_shapes(first: FileCoverage, second: FileCoverage) -> None:
    path = first.path or second.path
    for category, left, right in (
        ("s", first.s, second.s),
        ("f", first.f, second.f),
        ("b", first.b, second.b),
    ):
        diff = set(left) ^ set(right)
        if diff:
            raise CoverageError.shape_mismatch(category, diff, path)

    uneven = [bid for bid, arms in second.b.items() if len(arms) != len(first.b[bid])]
    if uneven:
        raise CoverageError.shape_mismatch("b", uneven, path)


def merge_file_coverage(
    first: FileCoverage,
    second: FileCoverage,
    *,
    strict: bool = True,
) -> FileCoverage:
    """Merge two coverage records *for the same file*.

    Neither input is modified. The result carries no derived line info;
    it has to be recomputed from the merged statement counts.

    Args:
        first: Coverage record from one run.
        second: Coverage record for the same file from another run.
        strict: Reject records whose statement, function or branch ids (or
            branch arm counts) differ. When False, ids are unioned, their
            map entries taken from whichever record has them, and shorter
            arm lists are zero-padded.

    Returns:
        New FileCoverage with summed counters.

    Raises:
        CoverageError: SHAPE_MISMATCH if strict and the shapes differ.
    """
    if strict:
        _check_shapes(first, second)

    result = copy.deepcopy(first)
    result.invalidate_derived()

    mismatched: set[str] = {
        f"{category}:{key}"
        for category, left, right in (
            ("s", first.s, second.s),
            ("f", first.f, second.f),
            ("b", first.b, second.b),
        )
        for key in set(left) - set(right)
    }

    for sid, count in second.s.items():
        if sid not in result.s:
            mismatched.add(f"s:{sid}")
            result.s[sid] = 0
            result.statement_map[sid] = second.statement_map[sid]
        result.s[sid] += count

    for fid, count in second.f.items():
        if fid not in result.f:
            mismatched.add(f"f:{fid}")
            result.f[fid] = 0
            result.fn_map[fid] = second.fn_map[fid]
        result.f[fid] += count

    for bid, arms in second.b.items():
        merged = result.b.setdefault(bid, [])
        if bid not in first.b:
            mismatched.add(f"b:{bid}")
            if bid in second.branch_map:
                result.branch_map[bid] = copy.deepcopy(second.branch_map[bid])
        if len(merged) != len(arms):
            if bid in first.b:
                mismatched.add(f"b:{bid}")
            merged.extend([0] * (len(arms) - len(merged)))
        for i, count in enumerate(arms):
            merged[i] += count

    if mismatched:
        log.warning(
            "merge.shape_mismatch",
            path=first.path or second.path,
            ids=sorted(mismatched),
        )

    return result


def merge_coverage_maps(
    first: CoverageMap,
    second: CoverageMap,
    *,
    strict: bool = True,
) -> CoverageMap:
    """Merge two coverage maps path by path.

    Paths present in both maps are merged with ``merge_file_coverage``;
    paths present in only one are copied. Inputs are not modified and no
    record in the result carries derived line info.
    """
    result: CoverageMap = {}
    for path in [*first, *(p for p in second if p not in first)]:
        if path in first and path in second:
            result[path] = merge_file_coverage(first[path], second[path], strict=strict)
        else:
            fc = copy.deepcopy(first[path] if path in first else second[path])
            fc.invalidate_derived()
            result[path] = fc
    log.debug("merge.maps", files=len(result), shared=len(first.keys() & second.keys()))
    return result


def _add_summaries(acc: Summary, other: Summary) -> Summary:
    return Summary(
        **{
            category: Metric(
                total=acc.metric(category).total + other.metric(category).total,
                covered=acc.metric(category).covered + other.metric(category).covered,
            )
            for category in Summary.CATEGORIES
        }
    )


def merge_summary_objects(*summaries: Summary | None) -> Summary:
    """Merge any number of summaries by summing totals and covered counts.

    ``None`` entries are skipped. With nothing to merge the blank summary
    (pct ``"Unknown"``) is returned; otherwise every pct is recomputed.
    """
    present = [summary for summary in summaries if summary is not None]
    if not present:
        return Summary.blank()

    result = reduce(_add_summaries, present, Summary.blank())
    for category in Summary.CATEGORIES:
        metric = result.metric(category)
        metric.pct = percent(metric.covered, metric.total)
    return result


def merge_summaries(summaries: Iterable[Summary | None]) -> Summary:
    """Iterable form of ``merge_summary_objects``."""
    return merge_summary_objects(*summaries)


def summarize_coverage_map(coverage_map: CoverageMap) -> Summary:
    """Total summary over every file of the map.

    Derives line info on records that lack it (in place).
    """
    return merge_summaries(summarize_file_coverage(fc) for fc in coverage_map.values())

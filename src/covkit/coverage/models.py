"""Coverage data model.

Mirrors the Istanbul per-file record: statement, function and branch maps
with their raw execution counters, plus the derived per-line view ``l``.
``from_dict``/``to_dict`` convert between the typed model and the plain
JSON mapping produced by instrumenters.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from covkit.core.errors import CoverageError

UNKNOWN: Literal["Unknown"] = "Unknown"

Pct: TypeAlias = float | Literal["Unknown"]

_REQUIRED_KEYS = ("statementMap", "s", "fnMap", "f", "b")


@dataclass(frozen=True, slots=True)
class Position:
    """A line/column position in a source file. Lines are 1-based."""

    line: int
    column: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position:
        return cls(line=int(data["line"]), column=int(data.get("column") or 0))

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class Span:
    """Source location of a statement or function."""

    start: Position
    end: Position | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Span:
        end = data.get("end")
        return cls(
            start=Position.from_dict(data["start"]),
            end=Position.from_dict(end) if end else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"start": self.start.to_dict()}
        if self.end is not None:
            out["end"] = self.end.to_dict()
        return out


@dataclass(frozen=True, slots=True)
class FunctionMeta:
    """Function declaration: name and the line it starts on."""

    name: str
    line: int
    loc: Span | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FunctionMeta:
        loc = Span.from_dict(data["loc"]) if data.get("loc") else None
        line = data.get("line")
        if line is None:
            if loc is None:
                raise KeyError("line")
            line = loc.start.line
        return cls(name=str(data["name"]), line=int(line), loc=loc)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "line": self.line}
        if self.loc is not None:
            out["loc"] = self.loc.to_dict()
        return out


@dataclass(slots=True)
class FileCoverage:
    """Raw coverage counters for a single file.

    ``l`` holds the derived line counts. It stays ``None`` until
    ``add_derived_info_for_file`` fills it in, and is never recomputed
    while present; call ``invalidate_derived`` after changing counters.
    """

    statement_map: dict[str, Span] = field(default_factory=dict)
    s: dict[str, int] = field(default_factory=dict)
    fn_map: dict[str, FunctionMeta] = field(default_factory=dict)
    f: dict[str, int] = field(default_factory=dict)
    b: dict[str, list[int]] = field(default_factory=dict)
    branch_map: dict[str, Any] = field(default_factory=dict)
    path: str | None = None
    l: dict[int, int] | None = None  # noqa: E741

    @property
    def has_derived_lines(self) -> bool:
        return self.l is not None

    def invalidate_derived(self) -> None:
        """Drop derived line counts so they are recomputed on next use."""
        self.l = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, path: str | None = None) -> FileCoverage:
        """Build a record from its JSON mapping.

        Raises:
            CoverageError: MISSING_FIELD if a required key is absent, or if a
                counter id has no matching statementMap/fnMap entry.
                PARSE_ERROR if the record is not a mapping, or a map entry or
                counter has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise CoverageError.parse_error(
                path or "<record>", f"expected a JSON object, got {type(data).__name__}"
            )
        where = path or data.get("path")
        for key in _REQUIRED_KEYS:
            if key not in data:
                raise CoverageError.missing_field(key, where)

        try:
            statement_map = {str(k): Span.from_dict(v) for k, v in data["statementMap"].items()}
        except KeyError as e:
            raise CoverageError.missing_field(f"statementMap.{e.args[0]}", where) from e
        except (AttributeError, TypeError, ValueError) as e:
            raise CoverageError.parse_error(where or "<record>", f"bad statementMap: {e}") from e
        try:
            fn_map = {str(k): FunctionMeta.from_dict(v) for k, v in data["fnMap"].items()}
        except KeyError as e:
            raise CoverageError.missing_field(f"fnMap.{e.args[0]}", where) from e
        except (AttributeError, TypeError, ValueError) as e:
            raise CoverageError.parse_error(where or "<record>", f"bad fnMap: {e}") from e
        try:
            s = {str(k): int(v) for k, v in data["s"].items()}
            f = {str(k): int(v) for k, v in data["f"].items()}
            b = {str(k): [int(c) for c in v] for k, v in data["b"].items()}
            raw_lines = data.get("l")
            lines = None if raw_lines is None else {int(k): int(v) for k, v in raw_lines.items()}
        except (AttributeError, TypeError, ValueError) as e:
            raise CoverageError.parse_error(where or "<record>", f"bad counter: {e}") from e

        for sid in s:
            if sid not in statement_map:
                raise CoverageError.missing_field(f"statementMap[{sid}]", where)
        for fid in f:
            if fid not in fn_map:
                raise CoverageError.missing_field(f"fnMap[{fid}]", where)

        return cls(
            statement_map=statement_map,
            s=s,
            fn_map=fn_map,
            f=f,
            b=b,
            branch_map=dict(data.get("branchMap") or {}),
            path=data.get("path"),
            l=lines,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the Istanbul JSON mapping; ``l`` only when derived."""
        out: dict[str, Any] = {}
        if self.path is not None:
            out["path"] = self.path
        out["statementMap"] = {k: v.to_dict() for k, v in self.statement_map.items()}
        out["s"] = dict(self.s)
        out["fnMap"] = {k: v.to_dict() for k, v in self.fn_map.items()}
        out["f"] = dict(self.f)
        if self.branch_map:
            out["branchMap"] = dict(self.branch_map)
        out["b"] = {k: list(v) for k, v in self.b.items()}
        if self.l is not None:
            out["l"] = {str(k): v for k, v in self.l.items()}
        return out


CoverageMap: TypeAlias = dict[str, FileCoverage]


@dataclass(slots=True)
class Metric:
    """Totals for one coverage category."""

    total: int = 0
    covered: int = 0
    pct: Pct = UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "covered": self.covered, "pct": self.pct}


@dataclass(slots=True)
class Summary:
    """Summary metrics for lines, statements, functions and branches."""

    lines: Metric = field(default_factory=Metric)
    statements: Metric = field(default_factory=Metric)
    functions: Metric = field(default_factory=Metric)
    branches: Metric = field(default_factory=Metric)

    CATEGORIES = ("lines", "statements", "functions", "branches")

    @classmethod
    def blank(cls) -> Summary:
        """Zero totals with pct ``"Unknown"`` in every category."""
        return cls()

    def metric(self, category: str) -> Metric:
        return getattr(self, category)  # type: ignore[no-any-return]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {category: self.metric(category).to_dict() for category in self.CATEGORIES}


@dataclass(slots=True)
class YUIFileCoverage:
    """Per-file record in yuitest_coverage format.

    ``covered_*`` counts every entry while ``called_*`` counts entries with
    a positive count. The names follow the established output of this
    conversion and are kept as-is.
    """

    lines: dict[int, int] = field(default_factory=dict)
    called_lines: int = 0
    covered_lines: int = 0
    functions: dict[str, int] = field(default_factory=dict)
    called_functions: int = 0
    covered_functions: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": {str(k): v for k, v in self.lines.items()},
            "calledLines": self.called_lines,
            "coveredLines": self.covered_lines,
            "functions": dict(self.functions),
            "calledFunctions": self.called_functions,
            "coveredFunctions": self.covered_functions,
        }

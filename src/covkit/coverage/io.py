"""JSON interop for Istanbul coverage maps.

Structure of coverage-final.json:
{
  "/path/to/file.js": {
    "path": "/path/to/file.js",
    "statementMap": { "1": {"start": {"line": 1, "column": 0}, "end": ...}, ... },
    "s": { "1": 1, "2": 0, ... },  // statement hit counts
    "fnMap": { "1": {"name": "foo", "line": 1, "loc": ...}, ... },
    "f": { "1": 1, ... },  // function hit counts
    "branchMap": { "1": {"line": 5, "type": "if", "locations": [...]}, ... },
    "b": { "1": [1, 0], ... }  // branch hit counts per arm
  }
}
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from covkit.core.errors import CoverageError
from covkit.coverage.models import CoverageMap, FileCoverage


def coverage_map_from_dict(data: Mapping[str, Any]) -> CoverageMap:
    """Build typed records for every file of a raw coverage mapping."""
    return {path: FileCoverage.from_dict(record, path=path) for path, record in data.items()}


def coverage_map_to_dict(coverage_map: CoverageMap) -> dict[str, dict[str, Any]]:
    return {path: fc.to_dict() for path, fc in coverage_map.items()}


def load_coverage_map(path: Path) -> CoverageMap:
    """Read a coverage map from a JSON file.

    A directory is accepted if it contains coverage-final.json.

    Raises:
        CoverageError: PARSE_ERROR if the file is missing, not UTF-8 JSON,
            or holds a record or counter of the wrong type. MISSING_FIELD
            if a record lacks required keys.
    """
    json_file = path / "coverage-final.json" if path.is_dir() else path
    if not json_file.exists():
        raise CoverageError.parse_error(str(json_file), "file not found")

    try:
        with json_file.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CoverageError.parse_error(str(json_file), str(e)) from e

    if not isinstance(data, dict):
        raise CoverageError.parse_error(str(json_file), "expected a JSON object at top level")

    return coverage_map_from_dict(data)


def dump_json(obj: Any) -> str:
    return json.dumps(obj, indent=2)

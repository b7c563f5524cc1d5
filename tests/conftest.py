"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of covkit modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("covkit"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to per-test streams (CliRunner, capsys)."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


def make_record(
    s: dict[str, int],
    f: dict[str, int] | None = None,
    b: dict[str, list[int]] | None = None,
    *,
    lines: dict[str, int] | None = None,
    fn_lines: dict[str, int] | None = None,
    path: str | None = None,
) -> dict[str, Any]:
    """Build a raw Istanbul file record.

    ``lines`` maps statement id to its start line (default: line = int(id)
    for numeric ids, else 1). ``fn_lines`` does the same for functions,
    which are named ``fn<id>``.
    """
    f = f or {}
    b = b or {}
    lines = lines or {}
    fn_lines = fn_lines or {}
    record: dict[str, Any] = {
        "statementMap": {
            sid: {
                "start": {"line": lines.get(sid, 1), "column": 0},
                "end": {"line": lines.get(sid, 1), "column": 10},
            }
            for sid in s
        },
        "s": dict(s),
        "fnMap": {fid: {"name": f"fn{fid}", "line": fn_lines.get(fid, 1)} for fid in f},
        "f": dict(f),
        "branchMap": {bid: {"line": 1, "type": "if", "locations": []} for bid in b},
        "b": {bid: list(arms) for bid, arms in b.items()},
    }
    if path is not None:
        record["path"] = path
    return record


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Two statements on separate lines, one function, one if/else branch."""
    return make_record(
        {"1": 3, "2": 0},
        {"1": 3},
        {"1": [2, 1]},
        lines={"1": 1, "2": 2},
        fn_lines={"1": 1},
        path="/src/app.js",
    )


@pytest.fixture
def record_factory() -> Any:
    return make_record

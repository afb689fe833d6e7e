"""Shared fixtures: a fake node repository with scripts/ and pallets/."""

from pathlib import Path
from typing import Any, Callable, Dict

import orjson
import pytest


@pytest.fixture
def node_repo(tmp_path: Path) -> Path:
    """Create an empty repository layout and return its scripts/ directory."""
    scripts_dir = tmp_path / "scripts"
    scripts_dir.mkdir()
    (tmp_path / "pallets").mkdir()
    return scripts_dir


@pytest.fixture
def write_pallet_types(node_repo: Path) -> Callable[[str, Any], Path]:
    """Return a helper writing pallets/<name>/types.json.

    Dicts and lists are serialized; str/bytes are written verbatim so tests
    can produce malformed files.
    """

    def _write(name: str, content: Any) -> Path:
        pallet_dir = node_repo.parent / "pallets" / name
        pallet_dir.mkdir(parents=True, exist_ok=True)
        types_file = pallet_dir / "types.json"
        if isinstance(content, bytes):
            types_file.write_bytes(content)
        elif isinstance(content, str):
            types_file.write_text(content, encoding="utf-8")
        else:
            types_file.write_bytes(orjson.dumps(content))
        return types_file

    return _write


@pytest.fixture
def read_output(node_repo: Path) -> Callable[[], Dict[str, Any]]:
    """Return a helper parsing the aggregated types.json next to scripts/."""

    def _read() -> Dict[str, Any]:
        return orjson.loads((node_repo.parent / "types.json").read_bytes())

    return _read

import json
from pathlib import Path

from sane_repo.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    read_json,
    read_json_safe,
)


# --- read_json_safe ---


def test_read_json_safe_file_missing(tmp_path: Path) -> None:
    result, error = read_json_safe(tmp_path / "missing.json")

    assert result is None
    assert error is None


def test_read_json_safe_file_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert error is None


def test_read_json_safe_valid_json(tmp_path: Path) -> None:
    path = tmp_path / ".sanerepo.json"
    path.write_text(json.dumps({"esmOnly": ["a"]}), encoding="utf-8")

    result, error = read_json_safe(path)

    assert result == {"esmOnly": ["a"]}
    assert error is None


def test_read_json_safe_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{bad json", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert isinstance(error, str)


def test_read_json_returns_arrays(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert read_json(path) == [1, 2]


# --- compact_home_path ---


def test_compact_home_path_for_absolute_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path / "repo" / "package.json") == "~/repo/package.json"


def test_compact_home_path_home_itself(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"


def test_compact_home_path_outside_home() -> None:
    assert compact_home_path("/opt/workspace") == "/opt/workspace"


def test_compact_home_paths_in_text_rewrites_embedded_paths(tmp_path: Path) -> None:
    message = f"Missing template file: {tmp_path / 'templates' / 'jest.config.cjs'}"

    result = compact_home_paths_in_text(message)

    assert result == "Missing template file: ~/templates/jest.config.cjs"

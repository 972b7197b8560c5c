"""File-system capabilities handed to rule generators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sane_repo.constants import (
    PACKAGE_JSON_FILENAME,
    PNPM_WORKSPACE_FILENAME,
    WORKSPACE_IGNORED_DIRS,
)
from sane_repo.errors import InvalidManifestError
from sane_repo.utils import read_json


class SimpleHost:
    """Read-only access to JSON and text files at arbitrary paths."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def glob(self, root: Path, pattern: str) -> list[Path]:
        return sorted(root.glob(pattern))

    def read_file(self, path: Path, encoding: str = "utf-8") -> str:
        return path.read_text(encoding=encoding)

    def read_json(self, path: Path) -> Any | None:
        if not path.exists():
            return None
        return read_json(path)


class WorkspaceContext:
    def __init__(self, root: Path, host: SimpleHost | None = None) -> None:
        self._root = root
        self.host = host or SimpleHost()

    @property
    def root(self) -> Path:
        return self._root

    def read_file(self, relative: str) -> str:
        return self.host.read_file(self._root / relative)

    def package_patterns(self) -> list[str]:
        pnpm_manifest = self._root / PNPM_WORKSPACE_FILENAME
        if self.host.exists(pnpm_manifest):
            return self._pnpm_patterns(pnpm_manifest)

        package_json = self._root / PACKAGE_JSON_FILENAME
        try:
            manifest = self.host.read_json(package_json)
        except ValueError as exc:
            raise InvalidManifestError(package_json, str(exc)) from exc
        if not isinstance(manifest, dict):
            return []
        workspaces = manifest.get("workspaces", [])
        if isinstance(workspaces, dict):
            workspaces = workspaces.get("packages", [])
        return _string_list(workspaces, package_json, "workspaces")

    def list_package_dirs(self) -> list[Path]:
        included: list[Path] = []
        excluded: set[Path] = set()
        for pattern in self.package_patterns():
            if pattern.startswith("!"):
                excluded.update(self._glob_packages(pattern[1:]))
                continue
            for path in self._glob_packages(pattern):
                if path not in included:
                    included.append(path)
        return [path for path in included if path not in excluded]

    async def get_workspace_package_dirs(self) -> list[Path]:
        return self.list_package_dirs()

    def _pnpm_patterns(self, path: Path) -> list[str]:
        try:
            raw = yaml.safe_load(self.host.read_file(path)) or {}
        except yaml.YAMLError as exc:
            raise InvalidManifestError(path, str(exc)) from exc
        if not isinstance(raw, dict):
            raise InvalidManifestError(path, "expected a mapping")
        return _string_list(raw.get("packages", []), path, "packages")

    def _glob_packages(self, pattern: str) -> list[Path]:
        pattern = pattern.strip().rstrip("/")
        if pattern.startswith("./"):
            pattern = pattern[2:]
        if not pattern or pattern == ".":
            return []
        matches: list[Path] = []
        for candidate in self.host.glob(self._root, pattern):
            if not self.host.is_dir(candidate):
                continue
            relative_parts = candidate.relative_to(self._root).parts
            if not relative_parts:
                continue
            if any(part in WORKSPACE_IGNORED_DIRS for part in relative_parts):
                continue
            if not self.host.is_file(candidate / PACKAGE_JSON_FILENAME):
                continue
            matches.append(candidate.resolve())
        return matches


def _string_list(value: Any, path: Path, field_name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidManifestError(path, f"'{field_name}' must be a list of strings")
    return list(value)

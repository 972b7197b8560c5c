from pathlib import Path
from typing import Optional

from sane_repo.constants import PACKAGE_JSON_FILENAME, PNPM_WORKSPACE_FILENAME
from sane_repo.errors import InvalidManifestError, WorkspaceNotFoundError
from sane_repo.host import SimpleHost
from sane_repo.models import Workspace


class WorkspaceService:
    def __init__(self, host: Optional[SimpleHost] = None) -> None:
        self.host = host or SimpleHost()

    def is_workspace_root(self, path: Path) -> bool:
        if self.host.exists(path / PNPM_WORKSPACE_FILENAME):
            return True
        manifest = self._read_manifest(path / PACKAGE_JSON_FILENAME)
        return isinstance(manifest, dict) and "workspaces" in manifest

    def locate(self, start_dir: Path) -> Path:
        current = start_dir.resolve()
        for candidate in (current, *current.parents):
            if self.is_workspace_root(candidate):
                return candidate
        raise WorkspaceNotFoundError(start_dir)

    def root_package_name(self, workspace_root: Path) -> str:
        manifest = self._read_manifest(workspace_root / PACKAGE_JSON_FILENAME)
        if isinstance(manifest, dict):
            name = manifest.get("name")
            if isinstance(name, str) and name:
                return name
        return str(workspace_root)

    def load_workspace(self, start_dir: Path) -> Workspace:
        root = self.locate(start_dir)
        return Workspace(root=root, name=self.root_package_name(root))

    def _read_manifest(self, path: Path) -> object:
        try:
            return self.host.read_json(path)
        except ValueError as exc:
            raise InvalidManifestError(path, str(exc)) from exc


def locate_workspace_root(start_dir: Path) -> Path:
    return WorkspaceService().locate(start_dir)

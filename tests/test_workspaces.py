from pathlib import Path

import pytest

from sane_repo.errors import InvalidManifestError, WorkspaceNotFoundError
from sane_repo.models import Workspace
from sane_repo.workspaces import WorkspaceService, locate_workspace_root


@pytest.mark.parametrize("depth", [0, 1, 2, 5])
def test_locate_finds_root_from_any_descendant_depth(make_workspace, depth: int) -> None:
    root = make_workspace()
    start = root
    for index in range(depth):
        start = start / f"level-{index}"
    start.mkdir(parents=True, exist_ok=True)

    assert WorkspaceService().locate(start) == root.resolve()


def test_locate_from_inside_package_returns_workspace_root(make_workspace) -> None:
    root = make_workspace()
    package_src = root / "packages" / "pkgA" / "src"
    package_src.mkdir(parents=True)

    assert locate_workspace_root(package_src) == root.resolve()


def test_locate_accepts_package_json_workspaces_marker(tmp_path: Path, write_json) -> None:
    root = tmp_path / "yarn-style"
    write_json(root / "package.json", {"name": "yarn-root", "workspaces": ["packages/*"]})
    nested = root / "packages" / "one"
    nested.mkdir(parents=True)

    assert WorkspaceService().locate(nested) == root.resolve()


def test_locate_ignores_package_json_without_workspaces(tmp_path: Path, write_json) -> None:
    root = tmp_path / "outer"
    root.mkdir(parents=True)
    (root / "pnpm-workspace.yaml").write_text("packages: []\n", encoding="utf-8")
    inner = root / "packages" / "lib"
    write_json(inner / "package.json", {"name": "lib"})

    assert WorkspaceService().locate(inner) == root.resolve()


def test_locate_raises_when_no_marker(tmp_path: Path) -> None:
    orphan = tmp_path / "no-workspace" / "deep"
    orphan.mkdir(parents=True)

    with pytest.raises(WorkspaceNotFoundError) as exc_info:
        WorkspaceService().locate(orphan)

    assert exc_info.value.start_dir == orphan
    assert str(orphan) in str(exc_info.value)


def test_locate_raises_on_malformed_manifest(tmp_path: Path) -> None:
    root = tmp_path / "broken"
    root.mkdir()
    (root / "package.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidManifestError):
        WorkspaceService().locate(root)


def test_load_workspace_reads_root_package_name(make_workspace) -> None:
    root = make_workspace(name="@acme/monorepo")

    workspace = WorkspaceService().load_workspace(root / "packages")

    assert workspace == Workspace(root=root.resolve(), name="@acme/monorepo")


def test_root_package_name_falls_back_to_root_path(make_workspace) -> None:
    root = make_workspace(name=None)

    name = WorkspaceService().root_package_name(root)

    assert name == str(root)

import json
from pathlib import Path

from sane_repo.__main__ import cli, main


def test_rules_json_output(make_workspace, cli_runner) -> None:
    root = make_workspace(settings={"esmOnly": ["pkgA"]})

    result = cli_runner.invoke(cli, ["--cwd", str(root), "rules", "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["workspace"]["name"] == "sane-root"
    kinds = [rule["kind"] for rule in payload["rules"]]
    assert kinds[0] == "file-contents"
    assert kinds[-1] == "alphabetical-scripts"
    assert payload["rules"][16]["includePackages"] == ["pkgA"]


def test_rules_yaml_output(make_workspace, cli_runner) -> None:
    root = make_workspace()

    result = cli_runner.invoke(cli, ["--cwd", str(root), "rules", "--format", "yaml"])

    assert result.exit_code == 0, result.output
    assert "kind: package-order" in result.output


def test_rules_yaml_output_has_no_anchors(make_workspace, cli_runner) -> None:
    root = make_workspace()

    result = cli_runner.invoke(cli, ["--cwd", str(root), "rules", "--format", "yaml"])

    assert result.exit_code == 0, result.output
    assert "&id" not in result.output
    assert "*id" not in result.output
    assert result.output.count("fixValue: null") == 4


def test_rules_table_output(make_workspace, cli_runner) -> None:
    root = make_workspace()

    result = cli_runner.invoke(cli, ["--cwd", str(root), "rules"])

    assert result.exit_code == 0, result.output
    assert "rule overview" in result.output
    assert "sane-root" in result.output


def test_rules_outside_workspace_fails(tmp_path: Path, cli_runner) -> None:
    lonely = tmp_path / "lonely"
    lonely.mkdir()

    result = cli_runner.invoke(cli, ["--cwd", str(lonely), "rules"])

    assert result.exit_code != 0
    assert "Failed to find a workspace dir" in result.output


def test_rules_invalid_settings_fails(make_workspace, cli_runner) -> None:
    root = make_workspace(settings={"esmOnly": "pkgA"})

    result = cli_runner.invoke(cli, ["--cwd", str(root), "rules"])

    assert result.exit_code != 0
    assert "Invalid sanerepo settings" in result.output


def test_settings_command_reports_defaults(make_workspace, cli_runner) -> None:
    root = make_workspace()

    result = cli_runner.invoke(cli, ["--cwd", str(root), "settings"])

    assert result.exit_code == 0, result.output
    assert "no settings file" in result.output


def test_render_jest_config_raw(make_workspace, cli_runner) -> None:
    root = make_workspace(packages=["pkgA", "pkgB"])

    result = cli_runner.invoke(
        cli, ["--cwd", str(root), "render", "jest.config.cjs", "--raw"]
    )

    assert result.exit_code == 0, result.output
    assert 'projects: ["pkgA", "pkgB"]' in result.output


def test_render_unknown_file_fails(make_workspace, cli_runner) -> None:
    root = make_workspace()

    result = cli_runner.invoke(cli, ["--cwd", str(root), "render", "README.md"])

    assert result.exit_code != 0
    assert "Not a managed file" in result.output


def test_packages_command_lists_package_dirs(make_workspace, cli_runner) -> None:
    root = make_workspace(packages=["pkgA"])

    result = cli_runner.invoke(cli, ["--cwd", str(root), "packages"])

    assert result.exit_code == 0, result.output
    assert "pkgA" in result.output


def test_main_returns_two_on_fatal_error(tmp_path: Path, monkeypatch) -> None:
    lonely = tmp_path / "lonely"
    lonely.mkdir()
    monkeypatch.setattr("sys.argv", ["sane-repo", "--cwd", str(lonely), "rules"])

    assert main() == 2

from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from sane_repo.constants import SETTINGS_FILENAME
from sane_repo.errors import InvalidSettingsError
from sane_repo.models import SaneRepoSettings
from sane_repo.utils import read_json_safe


_PACKAGE_LIST_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "$schema": {"type": "string"},
        "esmOnly": _PACKAGE_LIST_SCHEMA,
        "cjsOnly": _PACKAGE_LIST_SCHEMA,
    },
    "additionalProperties": False,
}


def validate_settings(payload: Any, path: Path) -> None:
    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(
        validator.iter_errors(payload),
        key=lambda item: [str(part) for part in item.path],
    )
    if not errors:
        return
    first = errors[0]
    location = ".".join(str(part) for part in first.path) or "<root>"
    raise InvalidSettingsError(path, f"{location}: {first.message}")


class SettingsRepository:
    def __init__(self, workspace_root: Path) -> None:
        self.workspace_root = workspace_root

    @property
    def settings_path(self) -> Path:
        return self.workspace_root / SETTINGS_FILENAME

    def exists(self) -> bool:
        return self.settings_path.exists()

    def load(self) -> SaneRepoSettings:
        payload, error = read_json_safe(self.settings_path)
        if error is not None:
            raise InvalidSettingsError(self.settings_path, f"invalid JSON: {error}")
        if payload is None:
            return SaneRepoSettings()

        validate_settings(payload, self.settings_path)

        esm_only = tuple(payload.get("esmOnly", []))
        cjs_only = tuple(payload.get("cjsOnly", []))
        overlap = sorted(set(esm_only) & set(cjs_only))
        if overlap:
            raise InvalidSettingsError(
                self.settings_path,
                "packages listed in both esmOnly and cjsOnly: " + ", ".join(overlap),
            )
        return SaneRepoSettings(esm_only=esm_only, cjs_only=cjs_only)


def load_settings(workspace_root: Path) -> SaneRepoSettings:
    return SettingsRepository(workspace_root).load()

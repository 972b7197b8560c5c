"""Rule descriptor models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Optional


class FrozenDict(Mapping[str, Any]):
    """Read-only, hashable mapping used for rule options."""

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data = dict(data or {})
        self._hash: Optional[int] = None

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenDict({self._data!r})"


def freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return FrozenDict({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


class RuleKind(str, Enum):
    FILE_CONTENTS = "file-contents"
    PACKAGE_ENTRY = "package-entry"
    PACKAGE_SCRIPT = "package-script"
    PACKAGE_ORDER = "package-order"
    ALPHABETICAL_DEPENDENCIES = "alphabetical-dependencies"
    ALPHABETICAL_SCRIPTS = "alphabetical-scripts"
    REQUIRE_DEPENDENCY = "require-dependency"
    STANDARD_TSCONFIG = "standard-tsconfig"


@dataclass(frozen=True)
class PackageScope:
    include_packages: Optional[tuple[str, ...]] = None
    exclude_packages: tuple[str, ...] = ()
    include_workspace_root: bool = False

    @property
    def all_packages(self) -> bool:
        return self.include_packages is None and not self.exclude_packages

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"includeWorkspaceRoot": self.include_workspace_root}
        if self.include_packages is not None:
            payload["includePackages"] = list(self.include_packages)
        if self.exclude_packages:
            payload["excludePackages"] = list(self.exclude_packages)
        return payload


@dataclass(frozen=True)
class RuleDescriptor:
    kind: RuleKind
    scope: PackageScope = field(default_factory=PackageScope)
    options: Mapping[str, Any] = field(default_factory=FrozenDict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", freeze(self.options))

    @property
    def target_file(self) -> Optional[str]:
        if self.kind != RuleKind.FILE_CONTENTS:
            return None
        return self.options.get("file")

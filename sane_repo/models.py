from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Workspace:
    root: Path
    name: str


@dataclass(frozen=True)
class SaneRepoSettings:
    esm_only: tuple[str, ...] = field(default_factory=tuple)
    cjs_only: tuple[str, ...] = field(default_factory=tuple)

    @property
    def partitioned(self) -> tuple[str, ...]:
        return self.esm_only + self.cjs_only

    def as_dict(self) -> dict[str, Any]:
        return {
            "esmOnly": list(self.esm_only),
            "cjsOnly": list(self.cjs_only),
        }

"""Template content variants attached to file-contents rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Union

from sane_repo.host import WorkspaceContext


@dataclass(frozen=True)
class TemplateContext:
    workspace: WorkspaceContext


Generator = Callable[[TemplateContext], Awaitable[str]]


@dataclass(frozen=True)
class StaticContent:
    """Template copied verbatim."""

    template_file: Path

    @property
    def generated(self) -> bool:
        return False


@dataclass(frozen=True)
class GeneratedContent:
    """Template computed from live workspace data."""

    template_file: Path
    generator: Generator = field(compare=False, repr=False)

    @property
    def generated(self) -> bool:
        return True


Content = Union[StaticContent, GeneratedContent]

"""Render bundled templates, verbatim or with workspace data spliced in."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from sane_repo.constants import (
    FILES_DIRNAME,
    JEST_CONFIG_FILENAME,
    PROJECT_DIRS_PLACEHOLDER,
    TEMPLATES_DIRNAME,
)
from sane_repo.errors import PlaceholderMissingError, TemplateNotFoundError
from sane_repo.host import SimpleHost
from sane_repo.templates.models import (
    Content,
    GeneratedContent,
    Generator,
    StaticContent,
    TemplateContext,
)


def format_project_dirs(package_dirs: Iterable[Path | str]) -> str:
    return ", ".join(f'"{Path(item).name}"' for item in package_dirs)


def substitute_placeholder(
    template: str,
    replacement: str,
    template_file: Path,
    placeholder: str = PROJECT_DIRS_PLACEHOLDER,
) -> str:
    # The quoted form is replaced together with its quotes.
    quoted = f'"{placeholder}"'
    if quoted in template:
        return template.replace(quoted, replacement, 1)
    if placeholder in template:
        return template.replace(placeholder, replacement, 1)
    raise PlaceholderMissingError(template_file, placeholder)


class TemplateGenerator:
    def __init__(self, template_root: Path, host: SimpleHost | None = None) -> None:
        self.template_root = template_root
        self.host = host or SimpleHost()

    @property
    def files_dir(self) -> Path:
        return self.template_root / FILES_DIRNAME

    @property
    def templates_dir(self) -> Path:
        return self.template_root / TEMPLATES_DIRNAME

    def read(self, template_file: Path) -> str:
        if not self.host.exists(template_file) or self.host.is_dir(template_file):
            raise TemplateNotFoundError(template_file)
        return self.host.read_file(template_file)

    def static(self, filename: str) -> StaticContent:
        template_file = self.files_dir / filename
        self._require(template_file)
        return StaticContent(template_file=template_file)

    def generated(self, template_file: Path, generator: Generator) -> GeneratedContent:
        self._require(template_file)
        return GeneratedContent(template_file=template_file, generator=generator)

    def project_dirs(self, filename: str = JEST_CONFIG_FILENAME) -> GeneratedContent:
        """Content that lists every workspace package in place of the placeholder.

        Package names keep the order the workspace context enumerates them in.
        """
        template_file = self.templates_dir / filename

        async def _generate(context: TemplateContext) -> str:
            template = self.read(template_file)
            package_dirs = await context.workspace.get_workspace_package_dirs()
            return substitute_placeholder(
                template, format_project_dirs(package_dirs), template_file
            )

        return self.generated(template_file, _generate)

    async def render(self, content: Content, context: TemplateContext) -> str:
        if isinstance(content, GeneratedContent):
            return await content.generator(context)
        return self.read(content.template_file)

    def _require(self, template_file: Path) -> None:
        if not self.host.exists(template_file):
            raise TemplateNotFoundError(template_file)

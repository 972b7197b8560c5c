from sane_repo.templates.generator import (
    TemplateGenerator,
    format_project_dirs,
    substitute_placeholder,
)
from sane_repo.templates.models import (
    Content,
    GeneratedContent,
    Generator,
    StaticContent,
    TemplateContext,
)

__all__ = [
    "Content",
    "GeneratedContent",
    "Generator",
    "StaticContent",
    "TemplateContext",
    "TemplateGenerator",
    "format_project_dirs",
    "substitute_placeholder",
]

from pathlib import Path


class SaneRepoError(Exception):
    """Base user-facing application error."""


class SaneRepoFileError(SaneRepoError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class WorkspaceNotFoundError(SaneRepoFileError):
    def __init__(self, start_dir: Path) -> None:
        self.start_dir = start_dir
        super().__init__(
            path=start_dir,
            message="Failed to find a workspace dir, which is required for sanerepo",
        )


class InvalidSettingsError(SaneRepoFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid sanerepo settings ({detail})")


class InvalidManifestError(SaneRepoFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid workspace manifest ({detail})")


class TemplateNotFoundError(SaneRepoFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing template file")


class PlaceholderMissingError(SaneRepoFileError):
    def __init__(self, path: Path, placeholder: str) -> None:
        self.placeholder = placeholder
        super().__init__(
            path=path, message=f"Template placeholder {placeholder!r} not found"
        )

from typing import Final


PACKAGE_JSON_FILENAME: Final[str] = "package.json"
PNPM_WORKSPACE_FILENAME: Final[str] = "pnpm-workspace.yaml"
SETTINGS_FILENAME: Final[str] = ".sanerepo.json"

FILES_DIRNAME: Final[str] = "files"
TEMPLATES_DIRNAME: Final[str] = "templates"

JEST_CONFIG_FILENAME: Final[str] = "jest.config.cjs"
PROJECT_DIRS_PLACEHOLDER: Final[str] = "INSERT_PROJECT_DIRS"

ROOT_FILES: Final[tuple[str, ...]] = (
    ".eslintrc.cjs",
    ".gitignore",
    ".husky/pre-commit",
    ".lintstagedrc",
    ".monorepolint.config.mjs",
    ".prettierignore",
    ".prettierrc",
    "pnpm-workspace.yaml",
    "tsconfig.base.json",
    "tsup.config.js",
    "turbo.json",
)

WORKSPACE_IGNORED_DIRS: Final[tuple[str, ...]] = (
    "node_modules",
    ".git",
)

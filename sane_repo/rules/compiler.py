"""Assemble the ordered rule list for a workspace."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from sane_repo.constants import JEST_CONFIG_FILENAME, ROOT_FILES
from sane_repo.models import SaneRepoSettings
from sane_repo.rules import catalog
from sane_repo.rules.builders import (
    alphabetical_dependencies,
    alphabetical_scripts,
    file_contents,
    package_entry,
    package_order,
    package_script,
    require_dependency,
    root_scope,
    scope,
    standard_tsconfig,
)
from sane_repo.rules.models import RuleDescriptor
from sane_repo.templates import TemplateGenerator


class RuleSetCompiler:
    def __init__(
        self,
        templates: TemplateGenerator,
        root_files: Sequence[str] = ROOT_FILES,
    ) -> None:
        self.templates = templates
        self.root_files = tuple(root_files)

    def compile(
        self,
        workspace_root: Path,
        root_package_name: str,
        settings: SaneRepoSettings,
    ) -> list[RuleDescriptor]:
        root_name = root_package_name or str(workspace_root)

        rules: list[RuleDescriptor] = []
        rules.extend(self._root_file_rules(root_name))
        rules.append(self._test_runner_config_rule(root_name))
        rules.append(package_script(catalog.ROOT_SCRIPTS, root_scope(root_name)))
        rules.extend(self._plain_package_rules(settings))
        if settings.esm_only:
            rules.extend(self._esm_only_rules(settings.esm_only))
        if settings.cjs_only:
            rules.extend(self._cjs_only_rules(settings.cjs_only))
        rules.extend(self._workspace_rules(root_name))
        return rules

    def _root_file_rules(self, root_name: str) -> list[RuleDescriptor]:
        return [
            file_contents(filename, self.templates.static(filename), root_scope(root_name))
            for filename in self.root_files
        ]

    def _test_runner_config_rule(self, root_name: str) -> RuleDescriptor:
        return file_contents(
            JEST_CONFIG_FILENAME,
            self.templates.project_dirs(JEST_CONFIG_FILENAME),
            root_scope(root_name),
        )

    def _plain_package_rules(self, settings: SaneRepoSettings) -> list[RuleDescriptor]:
        plain = scope(exclude_packages=settings.partitioned)
        return [
            package_entry(catalog.PLAIN_PACKAGE_ENTRIES, plain),
            package_script(catalog.PLAIN_PACKAGE_SCRIPTS, plain),
        ]

    def _esm_only_rules(self, packages: Sequence[str]) -> list[RuleDescriptor]:
        esm_only = scope(include_packages=packages)
        return [
            package_entry(catalog.ESM_ONLY_PACKAGE_ENTRIES, esm_only),
            package_script(catalog.ESM_ONLY_PACKAGE_SCRIPTS, esm_only),
        ]

    def _cjs_only_rules(self, packages: Sequence[str]) -> list[RuleDescriptor]:
        cjs_only = scope(include_packages=packages)
        return [
            package_entry(catalog.CJS_ONLY_PACKAGE_ENTRIES, cjs_only),
            package_script(catalog.CJS_ONLY_PACKAGE_SCRIPTS, cjs_only),
        ]

    def _workspace_rules(self, root_name: str) -> list[RuleDescriptor]:
        every_package = scope()
        everywhere = scope(include_workspace_root=True)
        return [
            require_dependency(
                root_scope(root_name), dev_dependencies=catalog.ROOT_DEV_DEPENDENCIES
            ),
            package_script(catalog.PACKAGE_SCRIPTS, every_package),
            standard_tsconfig(catalog.TSCONFIG_TEMPLATE, every_package),
            require_dependency(
                every_package, dev_dependencies=catalog.PACKAGE_DEV_DEPENDENCIES
            ),
            package_order(everywhere),
            alphabetical_dependencies(everywhere),
            alphabetical_scripts(everywhere),
        ]

"""Constructors for each rule kind the enforcement engine understands."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from sane_repo.rules.models import PackageScope, RuleDescriptor, RuleKind
from sane_repo.templates.models import Content


def scope(
    *,
    include_packages: Optional[Iterable[str]] = None,
    exclude_packages: Iterable[str] = (),
    include_workspace_root: bool = False,
) -> PackageScope:
    return PackageScope(
        include_packages=tuple(include_packages) if include_packages is not None else None,
        exclude_packages=tuple(exclude_packages),
        include_workspace_root=include_workspace_root,
    )


def root_scope(root_package_name: str) -> PackageScope:
    return scope(include_packages=[root_package_name], include_workspace_root=True)


def file_contents(file: str, content: Content, rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(
        kind=RuleKind.FILE_CONTENTS,
        scope=rule_scope,
        options={"file": file, "content": content},
    )


def package_entry(entries: Mapping[str, Any], rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(
        kind=RuleKind.PACKAGE_ENTRY,
        scope=rule_scope,
        options={"entries": entries},
    )


def package_script(scripts: Mapping[str, Any], rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(
        kind=RuleKind.PACKAGE_SCRIPT,
        scope=rule_scope,
        options={"scripts": scripts},
    )


def require_dependency(
    rule_scope: PackageScope,
    *,
    dependencies: Optional[Mapping[str, str]] = None,
    dev_dependencies: Optional[Mapping[str, str]] = None,
) -> RuleDescriptor:
    options: dict[str, Any] = {}
    if dependencies:
        options["dependencies"] = dict(dependencies)
    if dev_dependencies:
        options["devDependencies"] = dict(dev_dependencies)
    return RuleDescriptor(kind=RuleKind.REQUIRE_DEPENDENCY, scope=rule_scope, options=options)


def standard_tsconfig(template: Mapping[str, Any], rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(
        kind=RuleKind.STANDARD_TSCONFIG,
        scope=rule_scope,
        options={"template": template},
    )


def package_order(rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.PACKAGE_ORDER, scope=rule_scope)


def alphabetical_dependencies(rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.ALPHABETICAL_DEPENDENCIES, scope=rule_scope)


def alphabetical_scripts(rule_scope: PackageScope) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.ALPHABETICAL_SCRIPTS, scope=rule_scope)

from sane_repo.rules.compiler import RuleSetCompiler
from sane_repo.rules.models import PackageScope, RuleDescriptor, RuleKind

__all__ = ["PackageScope", "RuleDescriptor", "RuleKind", "RuleSetCompiler"]

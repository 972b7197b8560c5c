from enum import Enum

from sane_repo.rules.models import RuleKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


RULE_KIND_STYLE = {
    RuleKind.FILE_CONTENTS: UIStyle.CYAN.value,
    RuleKind.PACKAGE_ENTRY: UIStyle.MAGENTA.value,
    RuleKind.PACKAGE_SCRIPT: UIStyle.GREEN.value,
    RuleKind.REQUIRE_DEPENDENCY: UIStyle.YELLOW.value,
    RuleKind.STANDARD_TSCONFIG: UIStyle.BLUE.value,
    RuleKind.PACKAGE_ORDER: UIStyle.DIM.value,
    RuleKind.ALPHABETICAL_DEPENDENCIES: UIStyle.DIM.value,
    RuleKind.ALPHABETICAL_SCRIPTS: UIStyle.DIM.value,
}

from sane_repo.tui.renderers import SaneRepoConsoleUI

__all__ = ["SaneRepoConsoleUI"]

"""Search-path based executable resolution."""

from __future__ import annotations

import os
import shutil

from myshell.execution.base import CommandResolver


class PathResolver(CommandResolver):
    """Resolve command names against an ordered list of directories.

    When no explicit search path is given, ``PATH`` is read at every lookup so
    changes to the environment are honored.
    """

    def __init__(self, search_path: list[str] | None = None) -> None:
        self._search_path = list(search_path) if search_path is not None else None

    @property
    def search_path(self) -> list[str]:
        if self._search_path is not None:
            return list(self._search_path)
        return [entry for entry in os.environ.get("PATH", "").split(os.pathsep) if entry]

    def resolve(self, name: str) -> str | None:
        if not name:
            return None
        found = shutil.which(name, path=os.pathsep.join(self.search_path))
        if found is None:
            return None
        return os.path.abspath(found)

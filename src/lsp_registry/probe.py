from __future__ import annotations

import os
import shutil
from collections.abc import Iterable


class ExecutableProbe:
    """Checks whether an executable name resolves on a search path.

    With no ``search_path`` the process PATH is used at call time.
    """

    def __init__(self, search_path: Iterable[str] | None = None) -> None:
        self._path = None if search_path is None else os.pathsep.join(search_path)

    def which(self, name: str) -> str | None:
        return shutil.which(name, path=self._path)

    def __call__(self, name: str) -> bool:
        return self.which(name) is not None

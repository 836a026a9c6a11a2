import ntpath
import posixpath
from types import ModuleType
from typing import Optional

from vfile.domain.services.i_path_service import IPathService


class _ModulePathService(IPathService):
    """Path utilities over a stdlib path flavour module.

    Differs from ``os.path`` where a virtual path needs it: ``join`` never
    lets an absolute segment discard earlier ones, trailing separators are
    ignored, and the directory of a bare name is ``"."``.
    """

    module: ModuleType = posixpath

    @property
    def sep(self) -> str:
        return self.module.sep

    @property
    def _separators(self) -> str:
        return self.module.sep + (self.module.altsep or "")

    def join(self, *segments: str) -> str:
        parts = [segment for segment in segments if segment]
        if not parts:
            return "."

        # A root segment already ends with a separator.
        joined = parts[0]
        for part in parts[1:]:
            if not joined.endswith(tuple(self._separators)):
                joined += self.module.sep
            joined += part
        return self.module.normpath(joined)

    def dirname(self, path: str) -> str:
        return self.module.dirname(self._trim(path)) or "."

    def basename(self, path: str, ext: Optional[str] = None) -> str:
        name = self.module.basename(self._trim(path))
        if ext and name != ext and name.endswith(ext):
            name = name[: -len(ext)]
        return name

    def extname(self, path: str) -> str:
        return self.module.splitext(self.basename(path))[1]

    def _trim(self, path: str) -> str:
        # Keep a lone root separator.
        return path.rstrip(self._separators) or path[:1]


class PosixPathService(_ModulePathService):
    module = posixpath


class WindowsPathService(_ModulePathService):
    module = ntpath

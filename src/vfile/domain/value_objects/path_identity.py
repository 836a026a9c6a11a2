import logging
import os
from typing import Any, Iterable, List, Optional, Tuple, Type

from ..exceptions.domain_exceptions import (
    InvalidBasenameError,
    InvalidExtensionError,
    InvalidPathError,
    InvalidStemError,
    MissingBasenameError,
    MissingPathError,
    VFileError,
)
from ..services.i_path_service import IPathService
from ..services.i_url_converter import IUrlConverter

logger = logging.getLogger(__name__)


class PathIdentity:
    """The path of a virtual file and every path it was known by before.

    Only the history is stored. The current path is its last entry, and the
    directory, basename, stem and extension facets are always derived from
    that path, so they cannot drift out of sync with each other. Every
    setter builds a complete new path and appends it when it differs from
    the current one.
    """

    def __init__(
        self,
        path_service: IPathService,
        url_converter: IUrlConverter,
        history: Optional[Iterable[str]] = None,
    ) -> None:
        self._path_service = path_service
        self._url_converter = url_converter
        self._history: List[str] = list(history) if history else []

    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    def path(self) -> Optional[str]:
        return self._history[-1] if self._history else None

    def directory(self) -> Optional[str]:
        """Parent path (``/a/b`` for ``/a/b/index.min.js``)."""
        path = self.path()
        return self._path_service.dirname(path) if path is not None else None

    def basename(self) -> Optional[str]:
        """Final segment including extension (``index.min.js``)."""
        path = self.path()
        return self._path_service.basename(path) if path is not None else None

    def extension(self) -> Optional[str]:
        """Dotted suffix of the basename (``.js``)."""
        path = self.path()
        return self._path_service.extname(path) if path is not None else None

    def stem(self) -> Optional[str]:
        """Basename without its extension (``index.min``)."""
        path = self.path()
        if path is None:
            return None
        return self._path_service.basename(path, self.extension())

    def set_path(self, path: Any) -> None:
        """Make ``path`` the current path.

        File URL objects are converted to plain paths first. Setting the
        current path again leaves the history untouched.

        Raises:
            InvalidPathError: If the path is empty or the URL is not a usable
                ``file:`` URL
        """
        if self._url_converter.is_url(path):
            path = self._url_converter.to_path(path)
        elif isinstance(path, os.PathLike):
            path = os.fspath(path)

        self._assert_non_empty(path, "path", InvalidPathError)
        if not isinstance(path, str):
            raise InvalidPathError(
                f"`path` must be a string or file URL, got {type(path).__name__}"
            )

        if path != self.path():
            logger.debug("Appending %r to path history (was %r)", path, self.path())
            self._history.append(path)

    def set_directory(self, directory: Optional[str]) -> None:
        basename = self.basename()
        if not basename:
            raise MissingBasenameError("Setting `dirname` requires `path` to be set too")
        self.set_path(self._path_service.join(directory or "", basename))

    def set_basename(self, basename: str) -> None:
        """Replace the final segment; use ``set_path`` to drop it instead."""
        self._assert_non_empty(basename, "basename", InvalidBasenameError)
        self._assert_part(basename, "basename", InvalidBasenameError)
        self.set_path(self._path_service.join(self.directory() or "", basename))

    def set_extension(self, extension: Optional[str]) -> None:
        """Replace the extension; an empty value removes it.

        Raises:
            InvalidExtensionError: If the value contains a separator, does not
                start with ``.`` or contains more than one dot
            MissingPathError: If there is no path to compose onto
        """
        self._assert_part(extension, "extname", InvalidExtensionError)

        directory = self.directory()
        if not directory:
            raise MissingPathError("Setting `extname` requires `path` to be set too")

        if extension:
            if not extension.startswith("."):
                raise InvalidExtensionError("`extname` must start with `.`")
            if "." in extension[1:]:
                raise InvalidExtensionError("`extname` cannot contain multiple dots")

        self.set_path(
            self._path_service.join(directory, (self.stem() or "") + (extension or ""))
        )

    def set_stem(self, stem: str) -> None:
        self._assert_non_empty(stem, "stem", InvalidStemError)
        self._assert_part(stem, "stem", InvalidStemError)

        if not self.basename():
            raise MissingBasenameError("Setting `stem` requires `path` to be set too")

        self.set_path(
            self._path_service.join(
                self.directory() or "", stem + (self.extension() or "")
            )
        )

    def _assert_part(
        self, part: Optional[str], name: str, error: Type[VFileError]
    ) -> None:
        sep = self._path_service.sep
        if part and sep in part:
            raise error(f"`{name}` cannot be a path: did not expect `{sep}`")

    @staticmethod
    def _assert_non_empty(part: Any, name: str, error: Type[VFileError]) -> None:
        if not part:
            raise error(f"`{name}` cannot be empty")

    def __repr__(self) -> str:
        return f"PathIdentity(history={self._history!r})"

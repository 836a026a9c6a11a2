import re
from typing import Any
from urllib.parse import unquote

from vfile.domain.exceptions.domain_exceptions import InvalidPathError
from vfile.domain.services.i_url_converter import IUrlConverter


class FileUrlConverter(IUrlConverter):
    """Converts ``file:`` URL objects to plain paths.

    Accepts anything shaped like a parsed URL: pydantic ``AnyUrl``/``FileUrl``
    values and ``urllib.parse`` results. Plain strings are never treated as
    URLs.
    """

    POSIX_ENCODED_SEPARATOR = re.compile(r"%2f", re.IGNORECASE)
    WINDOWS_ENCODED_SEPARATOR = re.compile(r"%2f|%5c", re.IGNORECASE)
    WINDOWS_DRIVE = re.compile(r"^/?([a-zA-Z]):(/|$)")

    def __init__(self, windows: bool = False) -> None:
        self.windows = windows

    def is_url(self, value: Any) -> bool:
        if isinstance(value, (str, bytes)):
            return False
        return hasattr(value, "scheme") and hasattr(value, "path")

    def to_path(self, url: Any) -> str:
        if getattr(url, "scheme", None) != "file":
            raise InvalidPathError("The URL must be of scheme file")

        host = getattr(url, "host", None) or getattr(url, "hostname", None) or ""
        path = getattr(url, "path", None) or ""

        if self.windows:
            return self._to_windows_path(host, path)
        return self._to_posix_path(host, path)

    def _to_posix_path(self, host: str, path: str) -> str:
        if host not in ("", "localhost"):
            raise InvalidPathError('File URL host must be "localhost" or empty')
        if self.POSIX_ENCODED_SEPARATOR.search(path):
            raise InvalidPathError(
                "File URL path must not include encoded / characters"
            )
        return unquote(path)

    def _to_windows_path(self, host: str, path: str) -> str:
        if self.WINDOWS_ENCODED_SEPARATOR.search(path):
            raise InvalidPathError(
                "File URL path must not include encoded \\ or / characters"
            )

        decoded = unquote(path)
        if host and host != "localhost":
            # UNC path: \\server\share\...
            return "\\\\" + host + decoded.replace("/", "\\")

        match = self.WINDOWS_DRIVE.match(decoded)
        if not match:
            raise InvalidPathError("File URL path must be absolute")
        return decoded.lstrip("/").replace("/", "\\")

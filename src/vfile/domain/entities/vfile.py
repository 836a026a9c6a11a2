import codecs
import logging
from typing import Any, Dict, List, NoReturn, Optional, Tuple, Union

from .file_message import FileMessage
from ..exceptions.domain_exceptions import FatalMessageError
from ..value_objects.path_identity import PathIdentity

logger = logging.getLogger(__name__)

BYTES_TYPES = (bytes, bytearray, memoryview)


class VFile:
    """A file that lives in memory while a pipeline works on it.

    Holds the content (``value``), the path identity with its rename history,
    free-form pipeline state (``data``, ``stored``, ``result``, ``map``) and
    the diagnostics reported against the file. Option keys that are not
    recognised at construction end up in ``attributes``.
    """

    def __init__(
        self,
        identity: PathIdentity,
        cwd: str,
        value: Any = None,
        data: Optional[Dict[str, Any]] = None,
        messages: Optional[List[FileMessage]] = None,
        stored: bool = False,
        result: Any = None,
        map: Any = None,
        attributes: Optional[Dict[str, Any]] = None,
        default_encoding: str = "utf-8",
    ) -> None:
        self.identity = identity
        self.cwd = cwd
        self.value = value if value is not None else ""
        self.data: Dict[str, Any] = data if data is not None else {}
        self.messages: List[FileMessage] = list(messages) if messages else []
        self.stored = stored
        self.result = result
        self.map = map
        self.attributes: Dict[str, Any] = dict(attributes) if attributes else {}
        self.default_encoding = default_encoding

    @property
    def history(self) -> Tuple[str, ...]:
        return self.identity.history()

    @property
    def path(self) -> Optional[str]:
        return self.identity.path()

    @path.setter
    def path(self, path: Any) -> None:
        self.identity.set_path(path)

    @property
    def dirname(self) -> Optional[str]:
        return self.identity.directory()

    @dirname.setter
    def dirname(self, dirname: Optional[str]) -> None:
        self.identity.set_directory(dirname)

    @property
    def basename(self) -> Optional[str]:
        return self.identity.basename()

    @basename.setter
    def basename(self, basename: str) -> None:
        self.identity.set_basename(basename)

    @property
    def extname(self) -> Optional[str]:
        return self.identity.extension()

    @extname.setter
    def extname(self, extname: Optional[str]) -> None:
        self.identity.set_extension(extname)

    @property
    def stem(self) -> Optional[str]:
        return self.identity.stem()

    @stem.setter
    def stem(self, stem: str) -> None:
        self.identity.set_stem(stem)

    def to_string(self, encoding: Optional[str] = None) -> str:
        """Return the content as text, decoding byte content if needed."""
        value = self.value
        if value is None:
            return ""
        if isinstance(value, BYTES_TYPES):
            return bytes(value).decode(self._codec(encoding), errors="replace")
        if isinstance(value, str):
            return value
        return str(value)

    def _codec(self, encoding: Optional[str]) -> str:
        name = encoding or self.default_encoding
        try:
            codecs.lookup(name)
        except LookupError:
            logger.warning(
                "Unknown encoding %r for %s, decoding as %s",
                name,
                self.path or "<no path>",
                self.default_encoding,
            )
            return self.default_encoding
        return name

    def message(
        self,
        reason: Union[str, BaseException],
        place: Any = None,
        origin: Optional[str] = None,
    ) -> FileMessage:
        """Create a warning associated with this file and record it."""
        message = FileMessage.create(reason, place, origin)

        path = self.path
        if path:
            message.name = f"{path}:{message.name}"
            message.file = path

        message.fatal = False
        self.messages.append(message)
        logger.debug("Recorded message %s", message)
        return message

    def info(
        self,
        reason: Union[str, BaseException],
        place: Any = None,
        origin: Optional[str] = None,
    ) -> FileMessage:
        """Like ``message``, but the record is informational (``fatal=None``)."""
        message = self.message(reason, place, origin)
        message.fatal = None
        return message

    def fail(
        self,
        reason: Union[str, BaseException],
        place: Any = None,
        origin: Optional[str] = None,
    ) -> NoReturn:
        """Record a fatal message and abort processing of this file.

        Raises:
            FatalMessageError: Always, carrying the recorded message
        """
        message = self.message(reason, place, origin)
        message.fatal = True
        raise FatalMessageError(message) from message.cause

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"VFile(path={self.path!r}, messages={len(self.messages)})"

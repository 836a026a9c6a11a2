from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..entities.file_message import FileMessage


class VFileError(Exception):
    """Base exception for all virtual file errors."""

    pass


class InvalidPathError(VFileError):
    """Raised when a path is empty or a file URL cannot be converted."""

    pass


class MissingPathError(VFileError):
    """Raised when a facet needs a path but the file has none yet."""

    pass


class MissingBasenameError(VFileError):
    """Raised when a facet must compose onto a basename that does not exist."""

    pass


class InvalidBasenameError(VFileError):
    """Raised when a basename is empty or contains a path separator."""

    pass


class InvalidStemError(VFileError):
    """Raised when a stem is empty or contains a path separator."""

    pass


class InvalidExtensionError(VFileError):
    """Raised when an extension breaks the leading-dot rule or is a path."""

    pass


class InvalidOptionsError(VFileError):
    """Raised when an options record has fields of the wrong shape."""

    pass


class FatalMessageError(VFileError):
    """Raised by ``VFile.fail`` to signal the file cannot be processed further.

    The diagnostic record that caused the failure is available as
    ``file_message`` and is already part of the file's message log.
    """

    def __init__(self, file_message: "FileMessage") -> None:
        super().__init__(str(file_message))
        self.file_message = file_message

    @property
    def fatal(self) -> Optional[bool]:
        return self.file_message.fatal

    @property
    def name(self) -> str:
        return self.file_message.name

    @property
    def file(self) -> str:
        return self.file_message.file

from .file_message import FileMessage, Fatality
from .vfile import VFile

__all__ = [
    "FileMessage",
    "Fatality",
    "VFile",
]

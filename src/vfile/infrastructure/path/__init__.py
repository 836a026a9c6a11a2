from .file_url import FileUrlConverter
from .path_service import PosixPathService, WindowsPathService

__all__ = [
    "FileUrlConverter",
    "PosixPathService",
    "WindowsPathService",
]

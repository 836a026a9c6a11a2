"""
Virtual files: content, path identity and diagnostics without a filesystem.
"""

import logging
from typing import Any

from vfile.application.dtos.file_options import VFileOptions
from vfile.domain.entities.file_message import Fatality, FileMessage
from vfile.domain.entities.vfile import VFile
from vfile.domain.exceptions.domain_exceptions import (
    FatalMessageError,
    InvalidBasenameError,
    InvalidExtensionError,
    InvalidOptionsError,
    InvalidPathError,
    InvalidStemError,
    MissingBasenameError,
    MissingPathError,
    VFileError,
)
from vfile.domain.value_objects.path_identity import PathIdentity
from vfile.domain.value_objects.position import Point, Position
from vfile.infrastructure.dependencies import get_create_file_use_case

logging.getLogger(__name__).addHandler(logging.NullHandler())


def create_file(compatible: Any = None) -> VFile:
    """Create a virtual file using the configured path conventions."""
    return get_create_file_use_case().execute(compatible)


__all__ = [
    "create_file",
    "VFile",
    "VFileOptions",
    "FileMessage",
    "Fatality",
    "PathIdentity",
    "Point",
    "Position",
    "VFileError",
    "InvalidPathError",
    "MissingPathError",
    "MissingBasenameError",
    "InvalidBasenameError",
    "InvalidStemError",
    "InvalidExtensionError",
    "InvalidOptionsError",
    "FatalMessageError",
]

from .domain_exceptions import (
    VFileError,
    InvalidPathError,
    MissingPathError,
    MissingBasenameError,
    InvalidBasenameError,
    InvalidStemError,
    InvalidExtensionError,
    InvalidOptionsError,
    FatalMessageError,
)

__all__ = [
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

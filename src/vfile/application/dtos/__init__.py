from .file_options import PATH_OPTION_ORDER, VFileOptions

__all__ = [
    "PATH_OPTION_ORDER",
    "VFileOptions",
]

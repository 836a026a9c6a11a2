from .i_path_service import IPathService
from .i_url_converter import IUrlConverter

__all__ = [
    "IPathService",
    "IUrlConverter",
]

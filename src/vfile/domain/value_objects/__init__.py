from .path_identity import PathIdentity
from .position import Point, Position, resolve_place, stringify_place

__all__ = [
    "PathIdentity",
    "Point",
    "Position",
    "resolve_place",
    "stringify_place",
]

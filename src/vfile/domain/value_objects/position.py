from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Point:
    """A single place in a source file (1-indexed line and column)."""

    line: Optional[int] = None
    column: Optional[int] = None
    offset: Optional[int] = None

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "Point":
        return cls(
            line=raw.get("line"),
            column=raw.get("column"),
            offset=raw.get("offset"),
        )

    def stringify(self) -> str:
        return f"{_index(self.line)}:{_index(self.column)}"


@dataclass(frozen=True)
class Position:
    """A range in a source file, from ``start`` to ``end``."""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "Position":
        return cls(
            start=_to_point(raw.get("start")),
            end=_to_point(raw.get("end")),
        )

    def stringify(self) -> str:
        return f"{self.start.stringify()}-{self.end.stringify()}"


def _index(value: Optional[int]) -> int:
    return value if isinstance(value, int) and value > 0 else 1


def _to_point(raw: Any) -> Point:
    if isinstance(raw, Point):
        return raw
    if isinstance(raw, Mapping):
        return Point.from_mapping(raw)
    return Point()


def _node_position(place: Any) -> Any:
    if isinstance(place, Mapping):
        return place.get("position")
    return getattr(place, "position", None)


def resolve_place(place: Any) -> Optional[Position]:
    """Turn a point, position or syntax tree node into a ``Position``.

    Points become a position whose end is unknown. Nodes contribute their
    own ``position`` (objects with a ``position`` attribute or mappings
    with a ``"position"`` key). Anything unrecognised yields ``None``.
    """
    if place is None:
        return None
    if isinstance(place, Position):
        return place
    if isinstance(place, Point):
        return Position(start=place)

    if isinstance(place, Mapping):
        if "position" in place:
            return resolve_place(_node_position(place))
        if "start" in place or "end" in place:
            return Position.from_mapping(place)
        if "line" in place or "column" in place:
            return Position(start=Point.from_mapping(place))
        return None

    if hasattr(place, "position"):
        return resolve_place(_node_position(place))
    return None


def stringify_place(place: Any) -> str:
    """Render a place as ``L:C`` (point) or ``L:C-L:C`` (position or node).

    Returns ``""`` when nothing usable is given, including nodes without a
    position.
    """
    if place is None:
        return ""
    if isinstance(place, (Point, Position)):
        return place.stringify()

    if isinstance(place, Mapping):
        if "position" in place:
            return stringify_place(_node_position(place))
        if "start" in place or "end" in place:
            return Position.from_mapping(place).stringify()
        if "line" in place or "column" in place:
            return Point.from_mapping(place).stringify()
        return ""

    if hasattr(place, "position"):
        return stringify_place(_node_position(place))
    return ""

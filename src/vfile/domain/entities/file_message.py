from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..value_objects.position import Position, resolve_place, stringify_place


class Fatality(Enum):
    FATAL = "fatal"
    WARNING = "warning"
    INFO = "info"


@dataclass
class FileMessage:
    """A diagnostic about a file, tied to an optional place in it.

    ``fatal`` is tri-state: ``True`` for fatal errors, ``False`` for
    warnings and ``None`` for informational notices.
    """

    reason: str
    name: str = "1:1"
    file: str = ""
    fatal: Optional[bool] = False
    line: Optional[int] = None
    column: Optional[int] = None
    position: Optional[Position] = None
    origin: Optional[str] = None
    cause: Optional[BaseException] = None

    @classmethod
    def create(
        cls,
        reason: Union[str, BaseException],
        place: Any = None,
        origin: Optional[str] = None,
    ) -> "FileMessage":
        cause = reason if isinstance(reason, BaseException) else None
        position = resolve_place(place)

        return cls(
            reason=str(reason),
            name=stringify_place(place) or "1:1",
            line=position.start.line if position else None,
            column=position.start.column if position else None,
            position=position,
            origin=origin,
            cause=cause,
        )

    @property
    def severity(self) -> Fatality:
        if self.fatal is None:
            return Fatality.INFO
        return Fatality.FATAL if self.fatal else Fatality.WARNING

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"

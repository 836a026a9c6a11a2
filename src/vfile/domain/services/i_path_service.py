from abc import ABC, abstractmethod
from typing import Optional


class IPathService(ABC):
    """Interface for the path string utilities a file identity is built on."""

    @property
    @abstractmethod
    def sep(self) -> str:
        """The path segment separator."""
        pass

    @abstractmethod
    def join(self, *segments: str) -> str:
        """Join segments with the separator and normalize the result."""
        pass

    @abstractmethod
    def dirname(self, path: str) -> str:
        """Return the parent segment of a path."""
        pass

    @abstractmethod
    def basename(self, path: str, ext: Optional[str] = None) -> str:
        """Return the final segment of a path, optionally without ``ext``."""
        pass

    @abstractmethod
    def extname(self, path: str) -> str:
        """Return the dotted suffix of the final segment, or ``""``."""
        pass

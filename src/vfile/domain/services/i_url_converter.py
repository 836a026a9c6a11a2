from abc import ABC, abstractmethod
from typing import Any


class IUrlConverter(ABC):
    """Interface for turning structured file URLs into plain paths."""

    @abstractmethod
    def is_url(self, value: Any) -> bool:
        """Check whether a value is a structured URL object."""
        pass

    @abstractmethod
    def to_path(self, url: Any) -> str:
        """Convert a ``file:`` URL to a filesystem path string."""
        pass

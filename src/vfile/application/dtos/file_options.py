from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Applied in this order so specific facets compose onto the general path.
PATH_OPTION_ORDER = ("history", "path", "basename", "stem", "extname", "dirname")


class VFileOptions(BaseModel):
    """Options record a virtual file is built from.

    Unknown keys are accepted and kept as extras; they become the file's
    ``attributes`` and never shadow the reserved keys below.
    """

    value: Any = None
    cwd: Optional[str] = None
    history: Optional[List[str]] = None
    path: Any = None
    basename: Optional[str] = None
    stem: Optional[str] = None
    extname: Optional[str] = None
    dirname: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    messages: Optional[List[Any]] = None
    stored: bool = False
    result: Any = None
    map: Any = None
    attributes: Dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "extra": "allow",
        "arbitrary_types_allowed": True,
    }

    @property
    def extras(self) -> Dict[str, Any]:
        """Unrecognised keys together with explicitly passed ``attributes``."""
        return {**self.attributes, **(self.model_extra or {})}

"""Base domain entity shared by every CRUD resource."""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional


@dataclass
class Entity:
    """An identifiable, persistable record.

    ``id`` is ``None`` until storage assigns it on first save and never
    changes afterwards.
    """

    id: Optional[int] = None

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {name: getattr(self, name) for name in self.field_names()}

    def merge(self, changes: Dict[str, Any]) -> None:
        """Overwrite the given fields, leaving every other field untouched."""
        known = self.field_names()
        for name, value in changes.items():
            if name == "id":
                continue
            if name not in known:
                raise AttributeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)

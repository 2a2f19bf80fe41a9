"""Entity alerts attached to successful and failed mutations.

An alert is kept as a small structured value and only turned into HTTP
headers at the presentation boundary, so the same information can be sent
over another transport without re-parsing header strings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
from urllib.parse import quote


class AlertKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class EntityAlert:
    """Notification that an entity was created, updated or deleted."""

    application_name: str
    entity_name: str
    entity_id: Any
    kind: AlertKind

    @classmethod
    def created(cls, application_name: str, entity_name: str, entity_id: Any) -> "EntityAlert":
        return cls(application_name, entity_name, entity_id, AlertKind.CREATED)

    @classmethod
    def updated(cls, application_name: str, entity_name: str, entity_id: Any) -> "EntityAlert":
        return cls(application_name, entity_name, entity_id, AlertKind.UPDATED)

    @classmethod
    def deleted(cls, application_name: str, entity_name: str, entity_id: Any) -> "EntityAlert":
        return cls(application_name, entity_name, entity_id, AlertKind.DELETED)

    @property
    def message(self) -> str:
        """Translation key of the alert, e.g. ``myApp.a.created``."""
        return f"{self.application_name}.{self.entity_name}.{self.kind.value}"

    def to_headers(self) -> Dict[str, str]:
        return {
            f"X-{self.application_name}-alert": self.message,
            f"X-{self.application_name}-params": quote(str(self.entity_id), safe=""),
        }


@dataclass(frozen=True)
class FailureAlert:
    """Notification that a request was rejected, keyed for client-side localisation."""

    application_name: str
    entity_name: str
    error_key: str

    @property
    def message(self) -> str:
        return f"error.{self.error_key}"

    def to_headers(self) -> Dict[str, str]:
        return {
            f"X-{self.application_name}-error": self.message,
            f"X-{self.application_name}-params": self.entity_name,
        }

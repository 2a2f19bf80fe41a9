"""Domain entities exposed by the application."""

from dataclasses import dataclass
from typing import Optional

from myapp.features.crud.domain.entities import Entity


@dataclass
class A(Entity):
    """Entity A."""


@dataclass
class B(Entity):
    """Entity B, optionally pointing at one A."""

    a_id: Optional[int] = None


@dataclass
class C(Entity):
    """Entity C."""


@dataclass
class D(Entity):
    """Entity D."""

"""Domain entity: pure Python business object for a Sakila actor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .film import Film


@dataclass
class Actor:
    """Core domain entity representing an actor.

    ``films`` stays ``None`` unless the films relation was explicitly loaded,
    so an empty list always means "loaded, and the actor has no films".
    """

    id: int
    first_name: str
    last_name: str
    last_update: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    films: list[Film] | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_json(self) -> dict[str, Any]:
        """Serialize to the public JSON shape exposed by the API."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }

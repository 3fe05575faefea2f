"""Domain entities for films and the film/actor association."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any


class FilmRating(str, Enum):
    """MPAA ratings accepted for a film."""

    G = "G"
    PG = "PG"
    PG_13 = "PG-13"
    R = "R"
    NC_17 = "NC-17"


class SpecialFeature(str, Enum):
    """Bonus material a film release may carry."""

    TRAILERS = "Trailers"
    COMMENTARIES = "Commentaries"
    DELETED_SCENES = "Deleted Scenes"
    BEHIND_THE_SCENES = "Behind the Scenes"


@dataclass
class Film:
    """Core domain entity representing a film in the catalogue."""

    id: int
    title: str
    language_id: int
    description: str | None = None
    release_year: int | None = None
    rental_duration: int = 3
    rental_rate: Decimal = Decimal("4.99")
    length: int | None = None
    replacement_cost: Decimal = Decimal("19.99")
    rating: FilmRating = FilmRating.G
    special_features: list[SpecialFeature] = field(default_factory=list)
    last_update: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_json(self) -> dict[str, Any]:
        """Serialize to the public JSON shape exposed by the API."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "release_year": self.release_year,
            "language_id": self.language_id,
            "rental_duration": self.rental_duration,
            "rental_rate": float(self.rental_rate),
            "length": self.length,
            "replacement_cost": float(self.replacement_cost),
            "rating": self.rating.value,
            "special_features": [feature.value for feature in self.special_features],
        }


@dataclass
class FilmActor:
    """Association between one actor and one film (composite identity)."""

    actor_id: int
    film_id: int
    last_update: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_json(self) -> dict[str, Any]:
        return {"actor_id": self.actor_id, "film_id": self.film_id}

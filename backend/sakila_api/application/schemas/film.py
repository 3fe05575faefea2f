"""Pydantic DTOs (Data Transfer Objects) for the Film feature."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from sakila_api.domain.entities import FilmRating, SpecialFeature


def _unique_features(value: list[SpecialFeature] | None) -> list[SpecialFeature] | None:
    if value is not None and len(set(value)) != len(value):
        raise ValueError("special_features must not contain duplicates")
    return value


class FilmCreate(BaseModel):
    """Schema for creating a new film."""

    title: str = Field(..., min_length=1, max_length=128, examples=["ACADEMY DINOSAUR"])
    language_id: int = Field(..., ge=1, examples=[1])
    description: str | None = None
    release_year: int | None = Field(None, ge=1901, le=2155, examples=[2006])
    rental_duration: int = Field(3, ge=1, le=255)
    rental_rate: Decimal = Field(Decimal("4.99"), ge=0, max_digits=4, decimal_places=2)
    length: int | None = Field(None, ge=1, examples=[86])
    replacement_cost: Decimal = Field(Decimal("19.99"), ge=0, max_digits=5, decimal_places=2)
    rating: FilmRating = FilmRating.G
    special_features: list[SpecialFeature] = Field(
        default_factory=list, examples=[["Trailers", "Deleted Scenes"]]
    )

    _check_features = field_validator("special_features")(_unique_features)


class FilmUpdate(BaseModel):
    """Schema for updating an existing film: all fields optional.

    Only fields present in the request body are applied. An explicit null
    clears description, release_year or length; on other fields it is ignored.
    """

    title: str | None = Field(None, min_length=1, max_length=128)
    language_id: int | None = Field(None, ge=1)
    description: str | None = None
    release_year: int | None = Field(None, ge=1901, le=2155)
    rental_duration: int | None = Field(None, ge=1, le=255)
    rental_rate: Decimal | None = Field(None, ge=0, max_digits=4, decimal_places=2)
    length: int | None = Field(None, ge=1)
    replacement_cost: Decimal | None = Field(None, ge=0, max_digits=5, decimal_places=2)
    rating: FilmRating | None = None
    special_features: list[SpecialFeature] | None = None

    _check_features = field_validator("special_features")(_unique_features)


class FilmResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str | None
    release_year: int | None
    language_id: int
    rental_duration: int
    rental_rate: float
    length: int | None
    replacement_cost: float
    rating: FilmRating
    special_features: list[SpecialFeature]


class FilmActorResponse(BaseModel):
    actor_id: int
    film_id: int

"""SQLAlchemy ORM models for the Film entity and the film/actor join table."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sakila_api.infrastructure.database.base import Base

FILM_RATINGS = ("G", "PG", "PG-13", "R", "NC-17")


class FilmModel(Base):
    """ORM model: maps to the 'film' table."""

    __tablename__ = "film"

    film_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # language table is owned by the external schema; no FK declared here
    language_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    rental_duration: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=3)
    rental_rate: Mapped[Decimal] = mapped_column(
        Numeric(4, 2), nullable=False, default=Decimal("4.99")
    )
    length: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    replacement_cost: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal("19.99")
    )
    rating: Mapped[str] = mapped_column(
        Enum(*FILM_RATINGS, name="mpaa_rating"),
        nullable=False,
        default="G",
    )
    # Stored as a comma-separated list of feature names
    special_features: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<FilmModel(film_id={self.film_id}, title='{self.title}')>"


class FilmActorModel(Base):
    """ORM model: maps to the 'film_actor' join table (composite key)."""

    __tablename__ = "film_actor"

    actor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("actor.actor_id"), primary_key=True
    )
    film_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("film.film_id"), primary_key=True, index=True
    )
    last_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<FilmActorModel(actor_id={self.actor_id}, film_id={self.film_id})>"

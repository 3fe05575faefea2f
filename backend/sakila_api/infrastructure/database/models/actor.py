"""SQLAlchemy ORM model for the Actor entity."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sakila_api.infrastructure.database.base import Base

if TYPE_CHECKING:
    from .film import FilmModel


class ActorModel(Base):
    """ORM model: maps to the 'actor' table."""

    __tablename__ = "actor"

    actor_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column(String(45), nullable=False)
    last_name: Mapped[str] = mapped_column(String(45), nullable=False, index=True)
    last_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    films: Mapped[list[FilmModel]] = relationship(
        "FilmModel",
        secondary="film_actor",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<ActorModel(actor_id={self.actor_id}, name='{self.first_name} {self.last_name}')>"

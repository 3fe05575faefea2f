"""SQLAlchemy ORM base shared by the Sakila table mappings."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the actor, film and film_actor ORM models."""

    pass

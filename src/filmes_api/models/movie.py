"""Movie ORM model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.database import Base

if TYPE_CHECKING:
    from filmes_api.models.session import MovieSession


class Movie(Base):
    """A movie that can be scheduled in cinema sessions."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(100))
    genre: Mapped[str] = mapped_column(String(50))
    duration: Mapped[int] = mapped_column()  # minutes
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    sessions: Mapped[list[MovieSession]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )

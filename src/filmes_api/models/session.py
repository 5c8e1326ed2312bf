"""Movie session ORM model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.database import Base

if TYPE_CHECKING:
    from filmes_api.models.cinema import Cinema
    from filmes_api.models.movie import Movie


class MovieSession(Base):
    """A screening of a movie at a cinema."""

    __tablename__ = "sessions"

    id: Mapped[int] = mapped_column(primary_key=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"), index=True)
    cinema_id: Mapped[int] = mapped_column(ForeignKey("cinemas.id", ondelete="CASCADE"), index=True)

    # Relationships
    movie: Mapped[Movie] = relationship(back_populates="sessions")
    cinema: Mapped[Cinema] = relationship(back_populates="sessions")

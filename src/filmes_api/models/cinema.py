"""Cinema ORM model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmes_api.database import Base

if TYPE_CHECKING:
    from filmes_api.models.session import MovieSession


class Cinema(Base):
    """A cinema where movie sessions take place."""

    __tablename__ = "cinemas"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)

    # Relationships
    sessions: Mapped[list[MovieSession]] = relationship(
        back_populates="cinema", cascade="all, delete-orphan"
    )

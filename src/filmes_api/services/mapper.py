"""Declarative mapping between movie DTOs and ORM entities."""

from filmes_api.models.movie import Movie
from filmes_api.schemas.movie import MovieBase, MovieCreate, MovieRead, MovieUpdate


class MovieMapper:
    """Translate between the movie schemas and the Movie entity.

    Mapped fields are the ones declared on ``MovieBase``; identity and
    relationships are owned by the store and never copied from a DTO.
    """

    fields: tuple[str, ...] = tuple(MovieBase.model_fields)

    def to_entity(self, data: MovieCreate) -> Movie:
        """Create a new, transient Movie from a creation payload."""
        return Movie(**data.model_dump(include=set(self.fields)), sessions=[])

    def to_read(self, movie: Movie) -> MovieRead:
        """Map a Movie to its read-only representation.

        The ``sessions`` relationship must already be loaded.
        """
        return MovieRead.model_validate(movie)

    def to_update(self, movie: Movie) -> MovieUpdate:
        """Map a Movie to the intermediate document a JSON-Patch applies to.

        Stored values are copied without validation; only the patched
        document is validated.
        """
        return MovieUpdate.model_construct(
            **{field: getattr(movie, field) for field in self.fields}
        )

    def apply_update(self, data: MovieUpdate, movie: Movie) -> Movie:
        """Overwrite every mapped field of ``movie`` in place."""
        for field, value in data.model_dump(include=set(self.fields)).items():
            setattr(movie, field, value)
        return movie


def get_movie_mapper() -> MovieMapper:
    """Factory function to create a movie mapper.

    Can be used as a FastAPI dependency.
    """
    return MovieMapper()

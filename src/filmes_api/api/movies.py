"""Movie ("filme") resource endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from filmes_api.database import get_db
from filmes_api.models.cinema import Cinema
from filmes_api.models.movie import Movie
from filmes_api.models.session import MovieSession
from filmes_api.schemas.movie import MovieCreate, MovieRead, MovieUpdate
from filmes_api.schemas.patch import PatchOperation
from filmes_api.schemas.problem import ProblemDetails
from filmes_api.services.base import NotFoundError
from filmes_api.services.mapper import MovieMapper, get_movie_mapper
from filmes_api.services.patching import apply_patch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/filme", tags=["filme"])

NOT_FOUND_RESPONSE = {404: {"model": ProblemDetails, "description": "Movie not found"}}
BAD_REQUEST_RESPONSE = {400: {"model": ProblemDetails, "description": "Invalid input"}}


async def get_movie_or_404(db: AsyncSession, movie_id: int, with_sessions: bool = False) -> Movie:
    """Load a movie by id or raise NotFoundError."""
    query = select(Movie).where(Movie.id == movie_id)
    if with_sessions:
        query = query.options(selectinload(Movie.sessions))
    result = await db.execute(query)
    movie = result.scalar_one_or_none()

    if movie is None:
        logger.debug("Movie %s not found", movie_id)
        raise NotFoundError(f"Movie {movie_id} not found")

    return movie


@router.post(
    "",
    response_model=MovieRead,
    status_code=201,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_movie(
    movie_data: MovieCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    mapper: MovieMapper = Depends(get_movie_mapper),
) -> MovieRead:
    """Add a movie.

    Returns the created movie with a Location header pointing at it.
    """
    movie = mapper.to_entity(movie_data)
    db.add(movie)
    await db.commit()

    logger.info("Created movie %s (%s)", movie.id, movie.title)
    response.headers["Location"] = router.url_path_for("get_movie", movie_id=str(movie.id))
    return mapper.to_read(movie)


@router.get("", response_model=list[MovieRead], responses=BAD_REQUEST_RESPONSE)
async def list_movies(
    skip: int = Query(0, ge=0, description="Number of movies to skip"),
    take: int = Query(50, ge=0, le=1000, description="Maximum number of movies to return"),
    cinema_name: str | None = Query(
        None, alias="nomeCinema", description="Only movies with a session at this cinema"
    ),
    db: AsyncSession = Depends(get_db),
    mapper: MovieMapper = Depends(get_movie_mapper),
) -> list[MovieRead]:
    """List movies.

    Optionally restricted to movies having at least one session at a cinema
    with exactly the given name. The filter applies before pagination.
    """
    query = select(Movie).options(selectinload(Movie.sessions))

    if cinema_name is not None:
        query = query.where(
            Movie.sessions.any(MovieSession.cinema.has(Cinema.name == cinema_name))
        )

    query = query.order_by(Movie.id).offset(skip).limit(take)
    result = await db.execute(query)
    movies = result.scalars().all()

    return [mapper.to_read(movie) for movie in movies]


@router.get("/{movie_id}", response_model=MovieRead, responses=NOT_FOUND_RESPONSE)
async def get_movie(
    movie_id: int,
    db: AsyncSession = Depends(get_db),
    mapper: MovieMapper = Depends(get_movie_mapper),
) -> MovieRead:
    """Get a movie by id."""
    movie = await get_movie_or_404(db, movie_id, with_sessions=True)
    return mapper.to_read(movie)


@router.put(
    "/{movie_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_movie(
    movie_id: int,
    movie_data: MovieUpdate,
    db: AsyncSession = Depends(get_db),
    mapper: MovieMapper = Depends(get_movie_mapper),
) -> None:
    """Replace every writable field of a movie."""
    movie = await get_movie_or_404(db, movie_id)
    mapper.apply_update(movie_data, movie)
    await db.commit()

    logger.info("Updated movie %s", movie_id)


@router.patch(
    "/{movie_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def patch_movie(
    movie_id: int,
    operations: list[PatchOperation] = Body(
        ..., media_type="application/json-patch+json", description="JSON-Patch document"
    ),
    db: AsyncSession = Depends(get_db),
    mapper: MovieMapper = Depends(get_movie_mapper),
) -> None:
    """Partially update a movie with a JSON-Patch (RFC 6902) document.

    The patch is applied to the movie's update representation, which is then
    re-validated. Nothing is written if the result is invalid.
    """
    movie = await get_movie_or_404(db, movie_id)
    patched = apply_patch(mapper.to_update(movie), operations)
    mapper.apply_update(patched, movie)
    await db.commit()

    logger.info("Patched movie %s (%d operations)", movie_id, len(operations))


@router.delete("/{movie_id}", status_code=204, responses=NOT_FOUND_RESPONSE)
async def delete_movie(
    movie_id: int,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a movie and its sessions."""
    movie = await get_movie_or_404(db, movie_id)
    await db.delete(movie)
    await db.commit()

    logger.info("Deleted movie %s", movie_id)

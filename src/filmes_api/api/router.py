"""Main API router aggregation."""

from fastapi import APIRouter

from filmes_api.api.movies import router as movies_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(movies_router)

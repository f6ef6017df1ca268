"""API router composition for all route groups."""

from fastapi import APIRouter

from .routes import movies

api_router = APIRouter()
api_router.include_router(movies.router, tags=["movies"])

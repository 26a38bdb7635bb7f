"""API router -- aggregates all endpoint routers."""

from fastapi import APIRouter

from pixsearch.api import auth, health, history, search, trending

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(search.router, tags=["search"])
api_router.include_router(history.router, tags=["search"])
api_router.include_router(trending.router, tags=["search"])

"""Agregador de routers de la API."""
from fastapi import APIRouter
from smartnotes.api.routers import health, note, tags

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(tags.router)
api_router.include_router(note.router)

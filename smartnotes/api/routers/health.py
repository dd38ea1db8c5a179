"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, Depends, Request, status

from smartnotes.api.deps import get_settings
from smartnotes.api.schemas.health import HealthOut, PingOut
from smartnotes.core.config import Settings


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
def health(request: Request, settings: Settings = Depends(get_settings)) -> HealthOut:
    return HealthOut(
        ok=True,
        mongo_connected=getattr(request.app.state, "note_repo", None) is not None,
        hf_configured=settings.hf_configured,
        hf_model=settings.hf_model,
    )

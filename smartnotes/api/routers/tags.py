"""Preview de tags en tiempo real (no persiste nada)."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from smartnotes.api.deps import get_classifier, get_settings
from smartnotes.api.schemas.tags import TagPreviewIn, TagPreviewOut
from smartnotes.core.config import Settings
from smartnotes.infrastructure.ai.hf_client import (
    ClassificationError,
    ClassificationErrorKind,
    TextClassifier,
)
from smartnotes.services.tag_service import TagValidationError, preview_tags

_log = logging.getLogger("smartnotes.tags")

router = APIRouter(tags=["Tags"])


def _classification_http_error(e: ClassificationError, settings: Settings) -> HTTPException:
    if e.kind is ClassificationErrorKind.INVALID_CREDENTIALS:
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail={"error": "Invalid Hugging Face API key"})
    if e.kind is ClassificationErrorKind.UNAVAILABLE:
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "Service temporarily unavailable. Please try again."},
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": "Failed to generate tags",
            "details": e.message if settings.is_development else "Internal server error",
        },
    )


@router.post(
    "/tags/generate-tags",
    response_model=TagPreviewOut,
    summary="Preview de tags",
    description="Clasifica `text` (máx. 1000 caracteres) y devuelve tags, star_tag y top_tag.",
)
@router.post("/notes/tags/generate-tags", response_model=TagPreviewOut, include_in_schema=False)
def generate_tags(
    payload: TagPreviewIn,
    classifier: TextClassifier = Depends(get_classifier),
    settings: Settings = Depends(get_settings),
) -> TagPreviewOut:
    try:
        return TagPreviewOut(**preview_tags(classifier, payload.text, max_chars=settings.preview_max_chars))
    except TagValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"error": str(e)})
    except ClassificationError as e:
        _log.error("Tag generation error kind=%s: %s", e.kind.value, e.message)
        raise _classification_http_error(e, settings)

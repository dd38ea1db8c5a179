"""
Generación de tags a partir de texto: versión tolerante (notas) y versión preview.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from smartnotes.infrastructure.ai.hf_client import TextClassifier
from smartnotes.services.tag_ranker import TagResult, rank_tags

_log = logging.getLogger("smartnotes.tags")

DEFAULT_PREVIEW_MAX_CHARS = 1000


class TagValidationError(ValueError):
    pass


def generate_tags_for_text(classifier: TextClassifier, text: Optional[str]) -> TagResult:
    """
    Clasifica `text` y devuelve el TagResult.

    Nunca lanza: texto vacío o cualquier fallo del clasificador devuelven
    el resultado vacío para que la nota se pueda guardar igual.
    """
    if not text or not text.strip():
        return TagResult.empty()
    try:
        return rank_tags(classifier.classify(text))
    except Exception as e:
        _log.warning("Fallo al generar tags; se guarda la nota sin tags: %s", e)
        return TagResult.empty()


def preview_tags(
    classifier: TextClassifier,
    text: Optional[str],
    max_chars: int = DEFAULT_PREVIEW_MAX_CHARS,
) -> Dict[str, Any]:
    """Preview sin persistir. Los errores de clasificación se propagan."""
    if not isinstance(text, str) or not text.strip():
        raise TagValidationError("Valid text is required")
    if len(text) > max_chars:
        raise TagValidationError(f"Text too long. Maximum {max_chars} characters allowed.")

    result = rank_tags(classifier.classify(text))
    return {"success": True, **result.as_dict(), "input_length": len(text)}

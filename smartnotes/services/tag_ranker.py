"""Post-procesado de la salida del clasificador: orden, recorte, etiquetas y prioridad.

Entrada: pares `{label, score}` tal como los devuelve el clasificador.
Salida: `TagResult` con `tags` (máx. 5), `top_tag` y `star_tag`; estos dos
últimos son vistas del mismo `tags[0]`.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

MAX_TAGS = 5
RANK_WEIGHT = 0.6
SCORE_WEIGHT = 0.4

_WORD_START = re.compile(r"\b\w", re.ASCII)

_log = logging.getLogger("smartnotes.tags")


class Tag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    score: float
    rank: int


class TopTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    score: float


class StarTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    score: float
    rank: int = 1
    is_star: bool = True
    priority: float


class TagResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tags: List[Tag] = []
    top_tag: Optional[TopTag] = None
    star_tag: Optional[StarTag] = None

    @classmethod
    def empty(cls) -> "TagResult":
        return cls()

    @classmethod
    def from_tags(cls, tags: List[Tag]) -> "TagResult":
        if not tags:
            return cls.empty()
        first = tags[0]
        return cls(
            tags=tags,
            top_tag=TopTag(label=first.label, score=first.score),
            star_tag=StarTag(
                label=first.label,
                score=first.score,
                priority=calculate_priority(0, first.score),
            ),
        )

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def round2(value: float) -> float:
    """Redondea a 2 decimales con medio hacia arriba (x*100 → entero → /100)."""
    return math.floor(value * 100 + 0.5) / 100


def format_label(raw: str) -> str:
    """`tech_and_science` → `Tech And Science`."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), raw.replace("_", " "))


def calculate_priority(rank: int, score: float) -> float:
    """Mezcla rango (0-based) y confianza: 60% rango normalizado, 40% score."""
    if not 0 <= rank < MAX_TAGS:
        raise ValueError(f"rank fuera de rango 0..{MAX_TAGS - 1}: {rank}")
    normalized_rank = 1 - (rank / MAX_TAGS)
    return round2(normalized_rank * RANK_WEIGHT + score * SCORE_WEIGHT)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and not math.isnan(v)


def _flatten(raw_results: Any) -> List[Any]:
    if raw_results is None:
        return []
    if isinstance(raw_results, dict):
        return [raw_results]
    items: List[Any] = []
    for r in raw_results:
        # La Inference API devuelve [[{...}, ...]] para una sola entrada
        if isinstance(r, list):
            items.extend(r)
        else:
            items.append(r)
    return items


def _valid_entries(items: Iterable[Any]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for item in items:
        if not isinstance(item, dict):
            _log.debug("Entrada de clasificación ignorada (no es objeto): %r", item)
            continue
        label, score = item.get("label"), item.get("score")
        if not isinstance(label, str) or not _is_number(score):
            _log.debug("Entrada de clasificación ignorada (label/score inválidos): %r", item)
            continue
        out.append({"label": label, "score": float(score)})
    return out


def rank_tags(raw_results: Any) -> TagResult:
    """Ordena por score desc, recorta a `MAX_TAGS` y arma tags + top/star."""
    entries = _valid_entries(_flatten(raw_results))
    entries.sort(key=lambda e: e["score"], reverse=True)
    tags = [
        Tag(label=format_label(e["label"]), score=round2(e["score"]), rank=i + 1)
        for i, e in enumerate(entries[:MAX_TAGS])
    ]
    return TagResult.from_tags(tags)

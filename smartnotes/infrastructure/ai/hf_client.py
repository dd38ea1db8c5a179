"""Cliente HTTP mínimo para la Inference API de Hugging Face (text-classification).

Los fallos se devuelven como `ClassificationError` con un `kind` estructurado;
los routers deciden el código HTTP a partir de `kind`, no del mensaje.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List, Optional, Protocol

import requests

from smartnotes.core.config import Settings

_log = logging.getLogger("smartnotes.hf")

_UNAVAILABLE_STATUSES = {429, 502, 503, 504}
_CREDENTIAL_STATUSES = {401, 403}


class ClassificationErrorKind(str, enum.Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class ClassificationError(Exception):
    def __init__(self, kind: ClassificationErrorKind, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


class TextClassifier(Protocol):
    """Contrato del gateway: devuelve pares `{label, score}` para un texto."""

    def classify(self, text: str) -> List[Dict[str, Any]]: ...


def _kind_for_status(status: int) -> ClassificationErrorKind:
    if status in _CREDENTIAL_STATUSES:
        return ClassificationErrorKind.INVALID_CREDENTIALS
    if status in _UNAVAILABLE_STATUSES:
        return ClassificationErrorKind.UNAVAILABLE
    return ClassificationErrorKind.UNKNOWN


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return (response.text or "").strip() or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"


class HuggingFaceClassifier:
    """Clasificador remoto sobre `POST {inference_url}/{model}` con `{"inputs": text}`."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model_url: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.model_url = model_url
        self.timeout = timeout
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "HuggingFaceClassifier":
        return cls(
            api_key=settings.hf_api_key,
            model_url=settings.hf_model_url,
            timeout=settings.hf_timeout_seconds,
            session=session,
        )

    def classify(self, text: str) -> List[Dict[str, Any]]:
        if not self.api_key:
            raise ClassificationError(ClassificationErrorKind.INVALID_CREDENTIALS, "HF_API_KEY no configurada")

        requester = self._session or requests
        try:
            r = requester.post(
                self.model_url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={"inputs": text},
                timeout=self.timeout,
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            _log.warning("Inference API no accesible: %s", e)
            raise ClassificationError(ClassificationErrorKind.UNAVAILABLE, str(e)) from e
        except requests.RequestException as e:
            raise ClassificationError(ClassificationErrorKind.UNKNOWN, str(e)) from e

        if r.status_code >= 400:
            msg = _error_message(r)
            _log.warning("Inference API status=%s error=%s", r.status_code, msg)
            raise ClassificationError(_kind_for_status(r.status_code), msg, status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise ClassificationError(ClassificationErrorKind.UNKNOWN, "Respuesta no JSON de la Inference API") from e

        # [[{label, score}, ...]] para una entrada; se aplana un nivel
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ClassificationError(ClassificationErrorKind.UNKNOWN, f"Respuesta inesperada: {type(data).__name__}")
        if data and isinstance(data[0], list):
            data = data[0]
        return data

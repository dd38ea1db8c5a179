"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del repositorio.
- Agrupa ajustes por área: App, CORS, Mongo, Hugging Face, Tags.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from pathlib import Path

# Resuelve el .env ubicado en la raíz del repo (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Smart Notes API"
    api_prefix: str = ""
    environment: str = Field(
        "production",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )
    port: int = Field(5002, validation_alias=AliasChoices("PORT", "SMARTNOTES_PORT"))
    log_level: str = "INFO"

    # CORS (el front de React corre en localhost:3000)
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    cors_allow_any: bool = True

    # Mongo
    mongo_uri: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URI", "MONGODB_URL"),
    )
    mongo_db: str = "smartnotes"
    mongo_tls: bool = False
    # TLS relax options (dev only)
    mongo_tls_insecure: bool = False
    mongo_tls_allow_invalid_hostnames: bool = False
    mongo_timeout_ms: int = 15000

    # Hugging Face Inference API
    hf_api_key: str | None = Field(
        None,
        validation_alias=AliasChoices("HF_API_KEY", "HUGGINGFACE_API_KEY"),
    )
    hf_model: str = "cardiffnlp/tweet-topic-21-multi"
    hf_inference_url: str = "https://router.huggingface.co/hf-inference/models"
    hf_timeout_seconds: int = 30

    # Tags
    preview_max_chars: int = 1000

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final (excepto cuando es solo '/')
        - Si está vacío, devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref:
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        if len(pref) > 1 and pref.endswith('/'):
            pref = pref[:-1]
        return pref

    @property
    def hf_configured(self) -> bool:
        return bool(self.hf_api_key)

    @property
    def is_development(self) -> bool:
        return (self.environment or "").strip().lower() == "development"

    @property
    def hf_model_url(self) -> str:
        return f"{self.hf_inference_url.rstrip('/')}/{self.hf_model}"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
        populate_by_name=True,
    )

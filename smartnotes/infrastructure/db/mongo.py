"""Cliente MongoDB (pymongo) construido a partir de `Settings`.

No hay singletons de módulo: `create_app` guarda el cliente/base en `app.state`
y los repositorios reciben la colección por constructor.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import certifi
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from smartnotes.core.config import Settings

_log = logging.getLogger("smartnotes.mongo")


def build_client(settings: Settings) -> MongoClient:
    uri = settings.mongo_uri
    kwargs = dict(serverSelectionTimeoutMS=settings.mongo_timeout_ms)
    if uri.startswith("mongodb+srv://"):
        # SRV ya implica TLS; proveemos CA bundle para robustez
        kwargs["tlsCAFile"] = certifi.where()
    elif settings.mongo_tls:
        kwargs["tls"] = True
        kwargs["tlsCAFile"] = certifi.where()
        kwargs["tlsAllowInvalidCertificates"] = bool(settings.mongo_tls_insecure)
        kwargs["tlsAllowInvalidHostnames"] = bool(settings.mongo_tls_allow_invalid_hostnames)
    return MongoClient(uri, **kwargs)


def init_mongo(settings: Settings) -> Tuple[Optional[MongoClient], Optional[Database]]:
    """
    Inicializa el cliente y valida conexión (ping).
    No tumba la app: si Mongo no responde devuelve (None, None) y loggea.
    """
    try:
        client = build_client(settings)
        client.admin.command("ping")
    except ServerSelectionTimeoutError as e:
        _log.warning("Mongo no accesible (timeout): %s", e)
        return None, None
    except PyMongoError as e:
        _log.warning("Error de conexión a Mongo: %s", e)
        return None, None
    _log.info("Mongo conectado db=%s", settings.mongo_db)
    return client, client[settings.mongo_db]

"""
Logging de la app (loggers `smartnotes.*`) alineado con Uvicorn y pymongo.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in ("smartnotes", "uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(lvl)
    # pymongo en DEBUG inunda la salida con eventos de topología
    logging.getLogger("pymongo").setLevel(max(lvl, logging.INFO))

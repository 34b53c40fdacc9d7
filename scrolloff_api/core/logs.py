"""
➡️ But : configurer une seule fois les logs de l'application (niveau, format).

Chaque module déclare ensuite son logger :

logger = logging.getLogger(__name__)
"""

import logging
import time

from fastapi import Request

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("scrolloff_api.requests")


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not any(getattr(h, "_scrolloff", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._scrolloff = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level.upper())


async def log_requests(request: Request, call_next):
    """Middleware HTTP : trace méthode, chemin, statut et durée de chaque requête."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.error("%s %s -> 500 (%.1f ms)", request.method, request.url.path, elapsed_ms)
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response

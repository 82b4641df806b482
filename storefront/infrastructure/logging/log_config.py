"""Per-category logging levels for the storefront services.

Each service process calls ``setup_logging()`` once from its lifespan. The
root level comes from ``LOG_LEVEL``; httpx, uvicorn, the record stores and
the client gateway each get their own ``LOG_LEVEL_*`` override.
"""

import logging
import sys

from storefront.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_store": ("storefront.infrastructure.store",),
    "log_level_gateway": ("storefront.infrastructure.gateway", "ClientGateway"),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set on each logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {"": root.level}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: %s",
        ", ".join(f"{name or 'root'}={logging.getLevelName(level)}" for name, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name → logging constant. Unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO

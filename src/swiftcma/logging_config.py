from __future__ import annotations

import logging
import os

_configured = False

# chardet logs every prober at DEBUG while sniffing an upload's encoding
QUIET_LOGGERS = ("chardet", "chardet.charsetprober", "openpyxl")


def _resolve_level(level: str | int | None) -> str | int:
    if level is not None:
        return level.upper() if isinstance(level, str) else level
    env_level = os.getenv("SWIFTCMA_LOG_LEVEL")
    if env_level:
        return env_level.upper()
    if os.getenv("SWIFTCMA_ENV", "").lower() == "dev":
        return "DEBUG"
    return "INFO"


def configure_logging(level: str | int | None = None, force: bool = False) -> None:
    """Configure root logging once.

    Priority: explicit arg > SWIFTCMA_LOG_LEVEL > DEBUG if SWIFTCMA_ENV=dev > INFO.
    No-op if already configured unless ``force`` (the CLI's ``--log-level``).
    """
    global _configured
    if _configured and not force:
        return
    logging.basicConfig(
        level=_resolve_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=force,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name if name else "swiftcma")

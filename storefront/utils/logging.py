# storefront/utils/logging.py
import logging
import sys

from storefront.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def resolve_level(name: str) -> int:
    """Nazwa poziomu -> int, nieznana nazwa -> INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def _configure() -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger("storefront")
    root.addHandler(handler)
    root.setLevel(resolve_level(LOG_LEVEL))
    #nie dubluj linii przez root loggera uvicorna
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger pod drzewem "storefront", handler konfigurowany raz."""
    _configure()
    if not name.startswith("storefront"):
        name = f"storefront.{name}"
    return logging.getLogger(name)

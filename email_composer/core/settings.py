"""Réglages lus depuis l'environnement (une fois, à l'import)."""
import logging
import os

log = logging.getLogger(__name__)

_DEFAULT_CONTENT_WIDTH = 600


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("%s=%r n'est pas un entier, valeur par défaut %d", name, raw, default)
        return default
    if value <= 0:
        log.warning("%s=%r doit être positif, valeur par défaut %d", name, raw, default)
        return default
    return value


LOG_LEVEL     = os.getenv("EMAIL_COMPOSER_LOG_LEVEL", "INFO")
DEFAULT_TITLE = os.getenv("EMAIL_COMPOSER_DEFAULT_TITLE", "Notification")
DEFAULT_COLOR = os.getenv("EMAIL_COMPOSER_DEFAULT_COLOR", "#4F46E5")
CONTENT_WIDTH = _int_env("EMAIL_COMPOSER_CONTENT_WIDTH", _DEFAULT_CONTENT_WIDTH)

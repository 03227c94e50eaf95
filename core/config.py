"""Centralized configuration for the ECG Community Hub."""

import os
import logging
from urllib.parse import urlparse

log = logging.getLogger("hub.config")

# =========================
# Remote Article Service
# =========================
ARTICLE_SERVICE_URL: str = os.getenv(
    "ARTICLE_SERVICE_URL",
    "https://script.google.com/macros/s/AKfycby7DlTI_iddr3Vbf5HYyuPRZM8dc6xhoyG0FPLzlKvfCp6olKiVttjiZRBAAstyXU2Kwg/exec",
)
SERVICE_TIMEOUT: float = float(os.getenv("SERVICE_TIMEOUT", "30"))

# =========================
# Web server
# =========================
HUB_HOST: str = os.getenv("HUB_HOST", "0.0.0.0")
HUB_PORT: int = int(os.getenv("HUB_PORT", "8080"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# =========================
# Presentation
# =========================
SITE_NAME: str = os.getenv("SITE_NAME", "ECG")
SITE_TAGLINE: str = os.getenv("SITE_TAGLINE", "Community Hub")
CARD_EXCERPT_MAX: int = int(os.getenv("CARD_EXCERPT_MAX", "160"))
FOOTER_TEXT: str = "© 2025 English Gym ECG. All rights reserved."
FOOTER_MOTTO: str = "Empowering Global Citizens."


def validate_required_env() -> None:
    """Validate the service endpoint. Call at startup."""
    if not ARTICLE_SERVICE_URL:
        raise EnvironmentError("Missing required environment variable: ARTICLE_SERVICE_URL")
    parsed = urlparse(ARTICLE_SERVICE_URL)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise EnvironmentError(
            f"ARTICLE_SERVICE_URL must be an http(s) URL, got {ARTICLE_SERVICE_URL!r}"
        )
    if SERVICE_TIMEOUT <= 0:
        log.warning("SERVICE_TIMEOUT=%s is not positive; the transport may never time out.",
                    SERVICE_TIMEOUT)

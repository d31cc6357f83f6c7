"""
Runtime configuration for the API Lambda proxy
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TARGET_URL = "https://functions.poehali.dev/bbe69fb4-2a9a-478e-9b6c-efbfdb5ab40b"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings:
    def __init__(
        self,
        default_target_url: str,
        request_timeout: Optional[float],
        log_level: str,
    ):
        self.default_target_url = default_target_url
        self.request_timeout = request_timeout
        self.log_level = log_level


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return DEFAULT_REQUEST_TIMEOUT

    raw = raw.strip()
    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(
            f"Invalid PROXY_REQUEST_TIMEOUT '{raw}', "
            f"using default of {DEFAULT_REQUEST_TIMEOUT}s"
        )
        return DEFAULT_REQUEST_TIMEOUT

    if timeout < 0:
        logger.warning(
            f"Negative PROXY_REQUEST_TIMEOUT '{raw}', "
            f"using default of {DEFAULT_REQUEST_TIMEOUT}s"
        )
        return DEFAULT_REQUEST_TIMEOUT

    # 0 disables the timeout
    return timeout or None


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown LOG_LEVEL '{raw}', using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def get_settings() -> Settings:
    """Read settings from the environment.

    Called per invocation so that changes to the environment (for example a
    config file loaded at cold start) are picked up without code changes.
    """
    default_target_url = (
        os.environ.get("PROXY_DEFAULT_TARGET_URL", "").strip() or DEFAULT_TARGET_URL
    )

    return Settings(
        default_target_url=default_target_url,
        request_timeout=_parse_timeout(os.environ.get("PROXY_REQUEST_TIMEOUT")),
        log_level=_parse_log_level(os.environ.get("LOG_LEVEL")),
    )

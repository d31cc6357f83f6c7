"""
Lambda entry point with runtime configuration loading
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict

from api_lambda_proxy.config import get_settings
from api_lambda_proxy.handler import lambda_handler as _lambda_handler

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def _export(key: str, value: Any) -> None:
    key = str(key).strip()
    if not key:
        return
    if key in os.environ:
        logger.info(f"Keeping existing environment variable: {key}")
        return
    os.environ[key] = str(value)
    logger.info(f"Set environment variable from config file: {key}")


def _export_json(config_data: Dict[str, Any]) -> None:
    for key, value in config_data.items():
        if isinstance(value, (str, int, float, bool)):
            _export(key, value)
        elif isinstance(value, dict):
            # Vault KV v2 style: {"data": {...}}
            if "data" in value and isinstance(value["data"], dict):
                for nested_key, nested_value in value["data"].items():
                    _export(nested_key, nested_value)
            else:
                logger.warning(f"Ignoring nested config entry: {key}")


def _export_key_values(content: str) -> None:
    for line in content.strip().split("\n"):
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        _export(key, value.strip())


def _load_runtime_config() -> bool:
    """Load config values from a file into the environment.

    Returns True when a file was found and applied.
    """
    config_file = os.environ.get("PROXY_CONFIG_FILE")
    if not config_file:
        config_file = os.path.join(tempfile.gettempdir(), "proxy_config")

    if not os.path.exists(config_file):
        logger.info(f"No runtime config file at {config_file}, using environment")
        return False

    try:
        with open(config_file, "r") as f:
            content = f.read()
    except OSError as e:
        logger.error(f"Error reading runtime config file: {e}")
        return False

    logger.info(f"Loading runtime config from {config_file}")

    try:
        config_data = json.loads(content)
    except json.JSONDecodeError:
        logger.info("Runtime config is not JSON, reading KEY=VALUE lines")
        _export_key_values(content)
        return True

    if not isinstance(config_data, dict):
        logger.error("Runtime config JSON must be an object")
        return False

    _export_json(config_data)
    return True


# Load config during initialization
_load_runtime_config()
logger.setLevel(get_settings().log_level)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Main Lambda handler with runtime config loading"""
    return _lambda_handler(event, context)

"""Process-wide configuration for the URL builder.

The base URL is resolved on every read, in this order:

1. An in-process override set with :func:`set_base_url`.
2. The ``FORGEURL_BASE_URL`` environment variable.
3. ``forge.url`` in the YAML file named by ``FORGEURL_CONFIG``.
4. :data:`DEFAULT_BASE_URL`.

A ``.env`` file in the working directory is loaded into the environment the
first time configuration is read.
"""
import logging
import os
import threading

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost"
BASE_URL_ENV = "FORGEURL_BASE_URL"
CONFIG_PATH_ENV = "FORGEURL_CONFIG"
SECRET_FILE = ".env"


class ConfigurationError(ValueError):
    """Raised when the YAML configuration file is malformed."""


_lock = threading.Lock()
_dotenv_loaded = False
_base_url_override: str | None = None

# Cached YAML config; reloaded when FORGEURL_CONFIG points somewhere else.
_file_config_cache: dict | None = None
_cached_config_path: str | None = None


def _ensure_dotenv() -> None:
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    _dotenv_loaded = True
    if os.path.exists(SECRET_FILE):
        logger.debug("Loading environment from %s", SECRET_FILE)
        load_dotenv(SECRET_FILE)


def _load_file_config(path: str) -> dict:
    """Load the YAML settings file.

    Raises:
        ConfigurationError: If the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a YAML mapping")
    return data


def get_file_config() -> dict:
    """Return the YAML settings named by ``FORGEURL_CONFIG`` ({} if unset)."""
    global _file_config_cache, _cached_config_path
    _ensure_dotenv()
    path = os.getenv(CONFIG_PATH_ENV)
    if not path:
        return {}
    with _lock:
        if _file_config_cache is not None and _cached_config_path == path:
            return _file_config_cache
    try:
        data = _load_file_config(path)
    except OSError as exc:
        logger.warning("Cannot read %s=%s: %s", CONFIG_PATH_ENV, path, exc)
        return {}
    with _lock:
        _file_config_cache = data
        _cached_config_path = path
    return data


def _normalize(url: str) -> str:
    return str(url).strip().rstrip("/")


def get_base_url() -> str:
    """Return the currently configured base URL, without a trailing slash."""
    if _base_url_override is not None:
        return _base_url_override

    _ensure_dotenv()
    env_url = os.getenv(BASE_URL_ENV)
    if env_url and env_url.strip():
        return _normalize(env_url)

    forge = get_file_config().get("forge")
    if isinstance(forge, dict):
        url = forge.get("url")
        if isinstance(url, str) and url.strip():
            return _normalize(url)

    return DEFAULT_BASE_URL


def set_base_url(url: str) -> None:
    """Override the base URL for this process."""
    global _base_url_override
    _base_url_override = _normalize(url)
    logger.info("Base URL set to %s", _base_url_override)


def reset_base_url() -> None:
    """Drop the in-process override and any cached YAML config."""
    global _base_url_override, _file_config_cache, _cached_config_path
    with _lock:
        _base_url_override = None
        _file_config_cache = None
        _cached_config_path = None

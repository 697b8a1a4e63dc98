"""
Runtime configuration and logging setup.

Settings are read in this order:
    1. Streamlit secrets (`.streamlit/secrets.toml`, section `[apps_script]`),
    2. environment variables (a local `.env` is loaded first through
        `python-dotenv`),
    3. the defaults in `common.constants`.

Environment variables:
    - `MTG_SCRIPT_URL`: Apps Script web app URL used for storage.
    - `MTG_HTTP_TIMEOUT`: request timeout in seconds.
    - `MTG_LOG_LEVEL`: DEBUG, INFO, WARNING, ERROR or CRITICAL.
"""

from __future__ import annotations
import logging
import os

import streamlit as st
from dotenv import load_dotenv

from common.constants import DEFAULT_LOG_LEVEL, DEFAULT_SCRIPT_URL, DEFAULT_TIMEOUT

LOGGER_NAME = "mtglog"

logger = logging.getLogger(f"{LOGGER_NAME}.config")

# None lets python-dotenv search upwards from this package for a `.env`.
DOTENV_PATH: str | None = None


def load_env() -> None:
    """Load `.env` without overriding variables already set in the process.

    Every page reaches configuration through this module, so whichever page a
    visitor opens first still sees the `.env` values.
    """
    load_dotenv(DOTENV_PATH, override=False)


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the root application logger.

    Safe to call on every Streamlit rerun: the handler is only attached once.
    """
    load_env()
    level = level or os.getenv("MTG_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(numeric)
    return root


def _secret(section: str, key: str) -> str | None:
    try:
        if section in st.secrets and key in st.secrets[section]:
            return str(st.secrets[section][key])
    except Exception:
        # No secrets.toml in this environment
        pass
    return None


def get_script_url() -> str:
    load_env()
    return _secret("apps_script", "url") or os.getenv("MTG_SCRIPT_URL") or DEFAULT_SCRIPT_URL


def get_timeout() -> float:
    load_env()
    raw = _secret("apps_script", "timeout") or os.getenv("MTG_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid timeout %r, using %.0fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive timeout %r, using %.0fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value

"""Configuration module for tpcdsgen."""

from .settings import Settings, get_settings
from .logging import setup_logging, get_logger
from .session import Session, get_default_session

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "Session",
    "get_default_session",
]

"""Configuration management for Karten."""

from .config import KartenConfig
from .defaults import create_default_config

__all__ = ["KartenConfig", "create_default_config"]

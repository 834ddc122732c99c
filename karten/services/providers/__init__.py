"""Card provider implementations."""

from .verbformen_provider import VerbformenProvider

__all__ = ["VerbformenProvider"]

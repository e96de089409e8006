"""Configuration management for the entity graph search service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

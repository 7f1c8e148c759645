"""Configuration management for the wayfinder service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

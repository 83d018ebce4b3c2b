"""Core application modules."""

from social_backend.core.logging import configure_logging

__all__ = ["configure_logging"]

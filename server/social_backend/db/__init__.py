"""Database configuration and session management.

Import the data source from ``social_backend.db.data_source`` and the
process-wide instance from ``social_backend.db.session``; entities import
``Base`` from here, so this module must not import them back.
"""

from social_backend.db.base import Base

__all__ = ["Base"]

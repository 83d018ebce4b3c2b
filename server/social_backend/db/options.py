"""Data source options for the SQLite database."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from social_backend.db.base import Base
from social_backend.models import Activity, Follow, Hashtag, Like, Post, User

DEVELOPMENT = "development"
DATABASE = "database.sqlite"

# Relative to the social_backend package directory.
MIGRATIONS = ("migrations/versions/**/*.py",)

ENTITIES: tuple[type[Base], ...] = (User, Post, Like, Follow, Hashtag, Activity)


class DataSourceOptions(BaseModel):
    """Everything needed to open the database and register entities with the ORM."""

    model_config = ConfigDict(frozen=True)

    dialect: Literal["sqlite"] = "sqlite"
    database: str = DATABASE
    # Schema changes only ever go through migrations.
    synchronize: bool = False
    logging: bool = False
    entities: tuple[type[Base], ...] = ENTITIES
    migrations: tuple[str, ...] = MIGRATIONS
    subscribers: tuple[object, ...] = ()


def build_data_source_options(environment: str | None = None) -> DataSourceOptions:
    """
    Build the options for the application database.

    Args:
        environment: Deployment mode, usually ``settings.ENVIRONMENT``.
            SQL logging is enabled only for ``"development"``.

    Returns:
        DataSourceOptions instance
    """
    return DataSourceOptions(
        dialect="sqlite",
        database=DATABASE,
        synchronize=False,
        logging=environment == DEVELOPMENT,
        entities=ENTITIES,
        migrations=MIGRATIONS,
        subscribers=(),
    )

"""Data source owning the async engine built from DataSourceOptions."""

import os
from pathlib import Path, PurePosixPath
from typing import Any

import structlog
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import Table, event, inspect as sa_inspect, text
from sqlalchemy.engine import URL, Connection
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import configure_mappers
from sqlalchemy.pool import StaticPool

from social_backend.db.base import Base
from social_backend.db.options import DataSourceOptions

logger = structlog.get_logger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
MIGRATIONS_SCRIPT_LOCATION = PACKAGE_ROOT / "migrations"

DRIVERS = {"sqlite": "sqlite+aiosqlite"}
MEMORY_DATABASE = ":memory:"
GLOB_CHARS = ("*", "?", "[")


class DataSourceError(Exception):
    """Base error for data source lifecycle misuse."""


class DataSourceNotInitializedError(DataSourceError):
    """Raised when the engine is needed before initialize() or after destroy()."""


class DataSourceAlreadyInitializedError(DataSourceError):
    """Raised when initialize() is called on a live data source."""


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _static_prefix(pattern: str) -> PurePosixPath:
    """Return the leading part of a glob pattern that contains no wildcards."""
    path = PurePosixPath(pattern)
    parts: list[str] = []
    for part in path.parts:
        if any(char in part for char in GLOB_CHARS):
            return PurePosixPath(*parts)
        parts.append(part)
    # No wildcard at all: the pattern names a single file.
    return path.parent


def _upgrade(connection: Connection, config: Config, revision: str) -> None:
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


def _current_revision(connection: Connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


class DataSource:
    """
    Opens the configured database and hands out sessions.

    The engine is created lazily by initialize(); constructing a DataSource
    performs no I/O.
    """

    def __init__(self, options: DataSourceOptions, root: Path | None = None) -> None:
        """Initialize data source with options and the root for migration patterns."""
        self.options = options
        self.root = Path(root) if root is not None else PACKAGE_ROOT
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def url(self) -> URL:
        """Connection URL for the configured database file."""
        return URL.create(DRIVERS[self.options.dialect], database=self.options.database)

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DataSourceNotInitializedError("Data source is not initialized")
        return self._engine

    def _engine_kwargs(self) -> dict[str, Any]:
        engine_kwargs: dict[str, Any] = {
            "echo": self.options.logging,
            "pool_pre_ping": True,
        }
        # An in-memory database lives and dies with its connection
        if self.options.database == MEMORY_DATABASE:
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        return engine_kwargs

    def registered_tables(self) -> list[Table]:
        """Tables of the registered entities, plus association tables they use."""
        configure_mappers()
        tables: dict[str, Table] = {}
        for entity in self.options.entities:
            mapper = sa_inspect(entity)
            for table in mapper.tables:
                tables.setdefault(table.name, table)
            for relationship in mapper.relationships:
                if relationship.secondary is not None:
                    tables.setdefault(relationship.secondary.name, relationship.secondary)
        return list(tables.values())

    async def initialize(self) -> "DataSource":
        """
        Create the engine and verify the database is reachable.

        Tables are created only when the options ask for synchronization;
        otherwise the schema is left to migrations.

        Returns:
            This data source

        Raises:
            DataSourceAlreadyInitializedError: If already initialized
        """
        if self._engine is not None:
            raise DataSourceAlreadyInitializedError("Data source is already initialized")

        engine = create_async_engine(self.url, **self._engine_kwargs())
        event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                if self.options.synchronize:
                    await conn.run_sync(Base.metadata.create_all, tables=self.registered_tables())
        except Exception:
            await engine.dispose()
            raise

        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(
            "Data source initialized",
            database=self.options.database,
            entities=[entity.__name__ for entity in self.options.entities],
            synchronize=self.options.synchronize,
            logging=self.options.logging,
        )
        return self

    async def destroy(self) -> None:
        """Dispose of the engine and its connection pool."""
        engine = self.engine
        self._engine = None
        self._session_factory = None
        await engine.dispose()
        logger.info("Data source destroyed", database=self.options.database)

    def session(self) -> AsyncSession:
        """Create a new session bound to this data source."""
        if self._session_factory is None:
            raise DataSourceNotInitializedError("Data source is not initialized")
        return self._session_factory()

    def migration_locations(self) -> list[Path]:
        """Directories holding migration scripts, one per distinct pattern prefix."""
        locations: list[Path] = []
        for pattern in self.options.migrations:
            location = self.root / _static_prefix(pattern)
            if location not in locations:
                locations.append(location)
        return locations

    def discover_migrations(self) -> list[Path]:
        """Migration script files matching the configured patterns."""
        found = {
            path
            for pattern in self.options.migrations
            for path in self.root.glob(pattern)
            if path.is_file()
        }
        return sorted(found)

    def alembic_config(self) -> Config:
        """Alembic configuration pointing at this data source's migrations."""
        config = Config()
        config.set_main_option("script_location", str(MIGRATIONS_SCRIPT_LOCATION))
        config.set_main_option("path_separator", "os")
        config.set_main_option(
            "version_locations",
            os.pathsep.join(str(location) for location in self.migration_locations()),
        )
        if any("**" in pattern for pattern in self.options.migrations):
            config.set_main_option("recursive_version_locations", "true")
        config.set_main_option("sqlalchemy.url", self.url.render_as_string(hide_password=False))
        return config

    async def run_migrations(self, revision: str = "head") -> str | None:
        """
        Apply migrations up to ``revision`` over this data source's engine.

        Returns:
            The revision stamped in the database afterwards
        """
        config = self.alembic_config()
        async with self.engine.begin() as conn:
            await conn.run_sync(_upgrade, config, revision)

        current = await self.current_revision()
        logger.info("Migrations applied", database=self.options.database, revision=current)
        return current

    async def current_revision(self) -> str | None:
        """Revision recorded in the database, or None before any migration."""
        async with self.engine.connect() as conn:
            return await conn.run_sync(_current_revision)

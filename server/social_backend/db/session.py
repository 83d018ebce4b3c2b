"""Process-wide data source and its FastAPI dependency."""

from social_backend.config import settings
from social_backend.db.data_source import DataSource
from social_backend.db.options import build_data_source_options

AppDataSource = DataSource(build_data_source_options(settings.ENVIRONMENT))


def get_data_source() -> DataSource:
    """Dependency for getting the application data source."""
    return AppDataSource

"""Social backend: SQLite data source and entity registration."""

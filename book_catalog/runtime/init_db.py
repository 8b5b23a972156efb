"""Database initialization script."""

from book_catalog.core.services import DbManageService, DbSessionService
from book_catalog.runtime.config.config_data import ConfigData
from book_catalog.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> None:
    """Create all database tables."""
    config = config or get_config()
    database_service = DbSessionService(config.database, config.app.environment)
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()

"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from book_catalog.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Owns the engine and its connection pool.

    One instance is built at application startup and passed down to the
    request dependencies; nothing else creates engines.
    """

    def __init__(self, db_config: DatabaseConfig, environment: str = "development"):
        logger.info("Setting up database engine and session factory")
        self._db_config = db_config

        engine_kwargs = {
            "pool_pre_ping": True,  # Validate connections before use
            "echo": False,
            "connect_args": self._get_connect_args(db_config, environment),
        }

        if db_config.is_sqlite:
            if self._is_in_memory(db_config.url):
                # A single shared connection, otherwise each checkout sees an empty DB
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        logger.info(
            "Database engine initialized",
            backend=self._engine.url.get_backend_name(),
            pool_size=db_config.pool_size,
        )

    @staticmethod
    def _is_in_memory(url: str) -> bool:
        return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url

    def _get_connect_args(self, db_config: DatabaseConfig, environment: str) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # Routes run in the threadpool
                    "timeout": 20,  # Lock timeout
                }
            )
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        elif db_config.url.startswith("postgresql"):
            connect_args.update(
                {
                    "application_name": f"book_catalog_{environment}",
                    "connect_timeout": 30,
                }
            )

        return connect_args

    @property
    def engine(self):
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that is committed on success, rolled back on error
        and always closed."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()

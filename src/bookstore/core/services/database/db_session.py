"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.bookstore.runtime.config.config_data import DatabaseConfig


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on FK enforcement (and ON DELETE actions) for every SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        Args:
            db_config: Database section of the application config
            engine: Pre-built engine, mainly for tests
        """
        self._config = db_config
        if engine is None:
            logger.info("Initializing database engine")
            engine = create_engine(db_config.url, **self._engine_kwargs(db_config))
            if db_config.is_sqlite:
                enable_sqlite_foreign_keys(engine)
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def _engine_kwargs(self, db_config: DatabaseConfig) -> dict:
        engine_kwargs: dict = {
            "echo": db_config.echo,
            "pool_pre_ping": True,
            "connect_args": self._get_connect_args(db_config),
        }
        if not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                }
            )
        return engine_kwargs

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict:
        """Driver arguments that bound how long one store round-trip may take."""
        timeout_ms = db_config.statement_timeout_ms

        if db_config.is_sqlite:
            return {
                "check_same_thread": False,  # Sessions are used from FastAPI's threadpool
                "timeout": timeout_ms / 1000,  # Lock wait
            }

        if "postgresql" in db_config.url:
            return {
                "application_name": "bookstore_api",
                "connect_timeout": max(1, timeout_ms // 1000),
                "options": f"-c statement_timeout={timeout_ms}",
            }

        return {}

    def create_all(self) -> None:
        """Create all tables registered on the SQLModel metadata."""
        import src.bookstore.entities  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
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
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}", type(e).__name__)
            return False

    def dispose(self) -> None:
        self._engine.dispose()

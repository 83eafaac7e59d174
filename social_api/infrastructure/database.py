"""Database engine factory and schema definition."""
import logging
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    text,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.pool import StaticPool

from social_api.config.settings import Config


logger = logging.getLogger(__name__)

metadata = MetaData()

account_table = Table(
    "account",
    metadata,
    Column("account_id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    sqlite_autoincrement=True,
)

message_table = Table(
    "message",
    metadata,
    Column("message_id", Integer, primary_key=True, autoincrement=True),
    Column("posted_by", Integer, ForeignKey("account.account_id")),
    Column("message_text", String(255)),
    Column("time_posted_epoch", BigInteger),
    sqlite_autoincrement=True,
)


class DatabaseEngineFactory:
    """Factory for SQLAlchemy engines with connection pooling."""

    @classmethod
    def create_engine(
        cls,
        url: Optional[str] = None,
        echo: Optional[bool] = None,
        pool_size: Optional[int] = None
    ) -> Engine:
        """
        Create a SQLAlchemy engine.

        Args:
            url: Database URL (uses Config if not provided)
            echo: Log SQL statements (uses Config if not provided)
            pool_size: Pool size for server databases (uses Config if not provided)

        Returns:
            Engine instance
        """
        database_url = url or Config.DATABASE_URL
        echo = Config.DATABASE_ECHO if echo is None else echo
        pool_size = pool_size or Config.DATABASE_POOL_SIZE

        logger.info(f"Creating database engine: {cls._mask_url(database_url)}")

        parsed = make_url(database_url)
        if parsed.get_backend_name() == "sqlite":
            kwargs = {"connect_args": {"check_same_thread": False}}
            # An in-memory database lives only as long as its connection
            if parsed.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(database_url, echo=echo, **kwargs)

        return create_engine(
            database_url,
            echo=echo,
            pool_size=pool_size,
            pool_pre_ping=True,
        )

    @staticmethod
    def initialize_schema(engine: Engine) -> None:
        """
        Create the account and message tables if they do not exist.

        Args:
            engine: Engine to create the tables on
        """
        metadata.create_all(engine)
        logger.info("Database schema initialized")

    @staticmethod
    def check_connection(engine: Engine) -> bool:
        """
        Run a trivial statement to verify the database is reachable.

        Args:
            engine: Engine to check

        Returns:
            True if the database answered, False otherwise
        """
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    @staticmethod
    def _mask_url(url: str) -> str:
        """Mask the password of a database URL for logging."""
        try:
            return make_url(url).render_as_string(hide_password=True)
        except ArgumentError:
            return "<unparseable database url>"

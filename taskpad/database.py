"""
Database layer for Taskpad.

Provides the SQLAlchemy ORM model, async engine/session management, and
database initialization.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Optional

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from taskpad.config import DEFAULT_DATABASE_URL
from taskpad.logging_config import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class TaskORM(Base):
    """
    SQLAlchemy ORM model for tasks.

    Corresponds to the Task Pydantic model. ``sequence`` records insertion
    order so that tasks created within the same clock tick still list
    newest first.
    """
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="ck_tasks_title_not_blank"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<TaskORM(id={self.id}, title={self.title})>"


class DatabaseManager:
    """
    Manages database connections and session lifecycle.

    Handles async engine creation, session management, and database
    initialization for both production and testing scenarios.
    """

    def __init__(self, database_url: str = DEFAULT_DATABASE_URL, echo: bool = False):
        """
        Initialize database manager with connection URL.

        Args:
            database_url: SQLAlchemy database URL (default: local SQLite file)
            echo: Log every SQL statement through SQLAlchemy's logger
        """
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_initialized(self) -> bool:
        return self.session_maker is not None

    async def initialize(self) -> None:
        """
        Initialize the database engine and create tables.
        """
        try:
            logger.info(f"Initializing database: {self.database_url}")
            self.engine = create_async_engine(
                self.database_url,
                echo=self.echo,
            )

            self.session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )

            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}", exc_info=True)
            raise

    async def close(self) -> None:
        """
        Close the database engine and cleanup resources.
        """
        if self.engine:
            logger.info("Closing database connection")
            try:
                await self.engine.dispose()
                self.engine = None
                self.session_maker = None
                logger.info("Database connection closed successfully")
            except Exception as e:
                logger.error(f"Error closing database connection: {e}", exc_info=True)
                raise

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession for database operations

        Example:
            async with db_manager.get_session() as session:
                result = await session.execute(select(TaskORM))
                tasks = result.scalars().all()
        """
        if not self.session_maker:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")

        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logger.error(f"Database session error, rolling back: {e}", exc_info=True)
                await session.rollback()
                raise

"""
Remote task store for Taskpad.

Implements the four store operations (list, create, update, delete) over an
async SQLAlchemy database. Every failure surfaces as ``StoreError`` carrying
the backend's message, and every successful mutation fires the registered
cache-invalidation listeners.
"""

from typing import Callable, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from taskpad.database import DatabaseManager, TaskORM
from taskpad.logging_config import get_logger
from taskpad.models import Task
from taskpad.utils.datetime_utils import utc_now

logger = get_logger(__name__)

InvalidationListener = Callable[[str], None]


class StoreError(Exception):
    """Raised when a store operation fails.

    Attributes:
        message: Human-readable message, usually the backend's own text
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskNotFoundError(StoreError):
    """Raised when an update or delete targets an id that does not exist."""
    pass


class TaskStore:
    """
    Client for the persistent task collection.

    Each operation runs in its own session and transaction. Unknown ids on
    update and delete raise ``TaskNotFoundError`` rather than silently
    doing nothing.
    """

    def __init__(self, db_manager: DatabaseManager) -> None:
        """
        Initialize the store over a database manager.

        Args:
            db_manager: Initialized DatabaseManager
        """
        self.db_manager = db_manager
        self._listeners: List[InvalidationListener] = []

    # ==============================================================================
    # CACHE INVALIDATION
    # ==============================================================================

    def add_invalidation_listener(self, listener: InvalidationListener) -> None:
        """
        Register a callback fired after every successful mutation.

        Args:
            listener: Called with the mutation name ("create", "update", "delete")
        """
        self._listeners.append(listener)

    def remove_invalidation_listener(self, listener: InvalidationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _invalidate(self, operation: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(operation)
            except Exception as e:
                logger.warning(f"Invalidation listener failed after {operation}: {e}")

    # ==============================================================================
    # CONVERSION HELPERS
    # ==============================================================================

    @staticmethod
    def _orm_to_pydantic(task_orm: TaskORM) -> Task:
        """
        Convert a stored row to a Task.

        Raises:
            StoreError: If the row does not hold a valid task
        """
        try:
            return Task(
                id=task_orm.id,
                title=task_orm.title,
                description=task_orm.description,
                created_at=task_orm.created_at,
            )
        except ValidationError as e:
            raise StoreError(f"Stored task {task_orm.id} is invalid: {e}") from e

    # ==============================================================================
    # OPERATIONS
    # ==============================================================================

    async def list_tasks(self) -> List[Task]:
        """
        Read every task, newest first.

        Returns:
            Tasks ordered by created_at descending

        Raises:
            StoreError: On connectivity or query failure, or an invalid stored row
        """
        try:
            async with self.db_manager.get_session() as session:
                result = await session.execute(
                    select(TaskORM).order_by(
                        TaskORM.created_at.desc(),
                        TaskORM.sequence.desc(),
                    )
                )
                tasks = [self._orm_to_pydantic(row) for row in result.scalars().all()]
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreError(f"Failed to load tasks: {e}") from e

        logger.debug(f"Listed {len(tasks)} tasks")
        return tasks

    async def create_task(self, title: str, description: Optional[str] = None) -> None:
        """
        Insert a new task. The store assigns id and created_at.

        Args:
            title: Task title; blank titles are rejected by the database
            description: Optional description

        Raises:
            StoreError: If the backend rejects the record or is unreachable
        """
        task_id = str(uuid4())
        try:
            async with self.db_manager.get_session() as session:
                result = await session.execute(select(func.max(TaskORM.sequence)))
                last_sequence = result.scalar_one_or_none()

                session.add(TaskORM(
                    id=task_id,
                    title=title,
                    description=description,
                    created_at=utc_now(),
                    sequence=(last_sequence or 0) + 1,
                ))
                await session.flush()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreError(f"Failed to create task: {e}") from e

        logger.info(f"Created task {task_id}: title='{title[:50]}'")
        self._invalidate("create")

    async def update_task(
        self,
        task_id: UUID,
        title: str,
        description: Optional[str] = None
    ) -> None:
        """
        Change a task's title and description in place.

        Args:
            task_id: Id of the task to update
            title: New title
            description: New description

        Raises:
            TaskNotFoundError: If no task has this id
            StoreError: If the backend rejects the change or is unreachable
        """
        try:
            async with self.db_manager.get_session() as session:
                task_orm = await session.get(TaskORM, str(task_id))
                if task_orm is None:
                    raise TaskNotFoundError(f"Task with id {task_id} not found")

                task_orm.title = title
                task_orm.description = description
                await session.flush()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreError(f"Failed to update task: {e}") from e

        logger.info(f"Updated task {task_id}: title='{title[:50]}'")
        self._invalidate("update")

    async def delete_task(self, task_id: UUID) -> None:
        """
        Remove a task permanently.

        Args:
            task_id: Id of the task to delete

        Raises:
            TaskNotFoundError: If no task has this id
            StoreError: If the backend is unreachable
        """
        try:
            async with self.db_manager.get_session() as session:
                task_orm = await session.get(TaskORM, str(task_id))
                if task_orm is None:
                    raise TaskNotFoundError(f"Task with id {task_id} not found")

                await session.delete(task_orm)
                await session.flush()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreError(f"Failed to delete task: {e}") from e

        logger.info(f"Deleted task {task_id}")
        self._invalidate("delete")

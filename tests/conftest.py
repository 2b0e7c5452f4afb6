"""
Pytest configuration and fixtures for Taskpad tests.

Provides database fixtures, store/controller fixtures and test data factories.
"""

import pytest
import pytest_asyncio
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from taskpad.controller import TaskListController
from taskpad.database import DatabaseManager, TaskORM
from taskpad.models import Task
from taskpad.preferences import PreferenceStore
from taskpad.services.task_store import TaskStore


IN_MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_manager():
    """
    Create an in-memory SQLite database for testing.

    Yields:
        Initialized DatabaseManager instance
    """
    manager = DatabaseManager(IN_MEMORY_DB_URL)
    await manager.initialize()

    yield manager

    await manager.close()


@pytest_asyncio.fixture
async def db_session(db_manager):
    """Provide a database session that commits on exit."""
    async with db_manager.get_session() as session:
        yield session


@pytest.fixture
def store(db_manager):
    """TaskStore over the in-memory database."""
    return TaskStore(db_manager)


@pytest.fixture
def preferences(tmp_path):
    """PreferenceStore writing to a temporary file."""
    return PreferenceStore(tmp_path / "preferences.json")


@pytest.fixture
def controller(store, preferences):
    """TaskListController wired to the in-memory store."""
    return TaskListController(store, preferences)


@pytest.fixture
def sample_task_id():
    """Generate a consistent UUID for testing tasks."""
    return UUID("87654321-4321-8765-4321-876543218765")


@pytest_asyncio.fixture
async def three_tasks(db_manager):
    """
    Insert tasks A, B and C with increasing creation times.

    Returns:
        Dictionary mapping "A"/"B"/"C" to task id strings
    """
    base = datetime(2025, 1, 14, 10, 0, 0)
    ids = {}
    async with db_manager.get_session() as session:
        for offset, name in enumerate(["A", "B", "C"]):
            task_id = str(uuid4())
            ids[name] = task_id
            session.add(TaskORM(
                id=task_id,
                title=f"Task {name}",
                description=f"Description {name}",
                created_at=base + timedelta(minutes=offset),
                sequence=offset + 1,
            ))
    return ids


@pytest.fixture
def make_task():
    """
    Factory fixture for creating Task Pydantic models.

    Example:
        def test_something(make_task):
            task = make_task(title="Custom Task")
    """
    def _make_task(
        id: UUID = None,
        title: str = "Test Task",
        description: str = None,
        created_at: datetime = None,
    ) -> Task:
        return Task(
            id=id or uuid4(),
            title=title,
            description=description,
            created_at=created_at or datetime(2025, 1, 14, 10, 0, 0),
        )
    return _make_task

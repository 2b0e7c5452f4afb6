"""Taskpad services - store access."""

from taskpad.services.task_store import StoreError, TaskNotFoundError, TaskStore

__all__ = ["StoreError", "TaskNotFoundError", "TaskStore"]

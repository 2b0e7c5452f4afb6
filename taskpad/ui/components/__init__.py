"""Taskpad UI components - reusable widgets and the delete modal."""

from taskpad.ui.components.delete_modal import DeleteConfirmModal
from taskpad.ui.components.task_form import DescriptionArea, TaskForm
from taskpad.ui.components.task_list import TaskListView, TaskRow

__all__ = ["DeleteConfirmModal", "DescriptionArea", "TaskForm", "TaskListView", "TaskRow"]

"""Task list widgets for Taskpad.

``TaskListView`` renders one ``TaskRow`` per task, newest first, or the
empty-state message when there are no tasks. Rows are rebuilt from
``TaskRowView`` tuples; an unchanged tuple does not trigger a re-render.
"""

from typing import Optional, Tuple
from uuid import UUID

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Static

from taskpad.logging_config import get_logger
from taskpad.ui.base_styles import BUTTON_BASE_CSS
from taskpad.ui.view_model import EMPTY_MESSAGE, TaskRowView

logger = get_logger(__name__)


class TaskRow(Horizontal):
    """A single task: title, optional description, timestamp, Edit and Delete.

    Messages:
        EditRequested: Edit pressed
        DeleteRequested: Delete pressed
    """

    DEFAULT_CSS = BUTTON_BASE_CSS + """
    TaskRow {
        height: auto;
        background: $surface;
        padding: 1 2;
        margin: 0 0 1 0;
    }

    TaskRow .task-body {
        width: 1fr;
        height: auto;
    }

    TaskRow .task-actions {
        width: auto;
        height: 3;
    }
    """

    def __init__(self, row: TaskRowView, **kwargs) -> None:
        super().__init__(**kwargs)
        self.row = row

    @property
    def task_id(self) -> UUID:
        return self.row.task_id

    def render_body(self) -> Text:
        """Build the rich text shown for this task."""
        body = Text(self.row.title, style="bold")
        if self.row.description:
            body.append("\n")
            body.append(self.row.description)
        body.append("\n")
        body.append(self.row.created_label, style="dim italic")
        return body

    def compose(self) -> ComposeResult:
        yield Static(self.render_body(), classes="task-body")
        with Horizontal(classes="task-actions"):
            yield Button("Edit", classes="edit-button primary")
            yield Button("Delete", classes="delete-button danger")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("edit-button"):
            self.post_message(self.EditRequested(self.task_id))
        elif event.button.has_class("delete-button"):
            self.post_message(self.DeleteRequested(self.task_id))

    class EditRequested(Message):
        def __init__(self, task_id: UUID) -> None:
            super().__init__()
            self.task_id = task_id

    class DeleteRequested(Message):
        def __init__(self, task_id: UUID) -> None:
            super().__init__()
            self.task_id = task_id


class TaskListView(VerticalScroll):
    """Scrollable list of task rows with an empty state."""

    DEFAULT_CSS = """
    TaskListView {
        height: 1fr;
    }

    TaskListView .empty-message {
        width: 100%;
        color: $text-muted;
        text-align: center;
        padding: 2;
    }
    """

    rows: reactive[Tuple[TaskRowView, ...]] = reactive((), recompose=True)
    empty_message: reactive[Optional[str]] = reactive(EMPTY_MESSAGE, recompose=True)

    def compose(self) -> ComposeResult:
        if not self.rows:
            yield Static(self.empty_message or "", classes="empty-message")
            return
        for row in self.rows:
            yield TaskRow(row)

    def set_rows(self, rows: Tuple[TaskRowView, ...], empty_message: Optional[str]) -> None:
        """Replace the displayed rows.

        Args:
            rows: Rows in display order
            empty_message: Message shown when ``rows`` is empty
        """
        if rows != self.rows:
            logger.debug(f"TaskListView: rendering {len(rows)} rows")
        self.empty_message = empty_message
        self.rows = rows

    def get_rows(self) -> Tuple[TaskRow, ...]:
        return tuple(self.query(TaskRow))

"""Task deletion confirmation modal for Taskpad.

Shows the title of the task about to be deleted and asks the user to
confirm. The modal never closes itself: it reports the user's choice with a
message and the app dismisses it once the delete dialog state is hidden.
"""

from uuid import UUID

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from taskpad.logging_config import get_logger
from taskpad.ui.base_styles import BUTTON_BASE_CSS, MODAL_BASE_CSS
from taskpad.ui.view_model import DialogView

logger = get_logger(__name__)


class DeleteConfirmModal(ModalScreen):
    """Modal screen gating a destructive delete.

    Messages:
        DeleteConfirmed: Emitted when the user presses Delete
        DeleteCancelled: Emitted when the user presses Cancel or Escape
    """

    DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + """
    DeleteConfirmModal > Container {
        width: 60;
        height: auto;
    }

    DeleteConfirmModal .modal-icon {
        width: 100%;
        content-align: center middle;
        padding: 0 0 1 0;
    }

    DeleteConfirmModal .button-container {
        width: 100%;
        height: 3;
        align: center middle;
        layout: horizontal;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
    ]

    def __init__(self, dialog: DialogView, **kwargs) -> None:
        """Initialize the delete confirmation modal.

        Args:
            dialog: View of the pending delete (task id, title and message)
            **kwargs: Additional keyword arguments for ModalScreen
        """
        super().__init__(**kwargs)
        self.dialog = dialog

    @property
    def task_id(self) -> UUID:
        return self.dialog.task_id

    def compose(self) -> ComposeResult:
        with Container():
            yield Static("🗑️", classes="modal-icon")
            yield Static(self.dialog.title, classes="modal-header")
            yield Static(self.dialog.message, classes="info-text", id="delete-message")
            with Container(classes="button-container"):
                yield Button("Cancel", id="cancel-button", classes="secondary")
                yield Button("Delete", id="confirm-button", classes="danger")

    def on_mount(self) -> None:
        logger.info(f"DeleteConfirmModal: Opened for task {self.task_id}")
        self.query_one("#cancel-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "confirm-button":
            self.action_confirm()
        elif event.button.id == "cancel-button":
            self.action_cancel()

    def action_confirm(self) -> None:
        logger.info(f"DeleteConfirmModal: Delete confirmed for task {self.task_id}")
        self.post_message(self.DeleteConfirmed(self.task_id))

    def action_cancel(self) -> None:
        logger.info("DeleteConfirmModal: Cancelled")
        self.post_message(self.DeleteCancelled())

    class DeleteConfirmed(Message):
        """Message emitted when deletion is confirmed."""

        def __init__(self, task_id: UUID) -> None:
            super().__init__()
            self.task_id = task_id

    class DeleteCancelled(Message):
        """Message emitted when deletion is cancelled."""
        pass

"""
Tests for the delete confirmation modal.

Tests cover:
- Content rendered from the dialog view
- Confirm and cancel messages
- Escape key cancels
- The modal never dismisses itself
"""

import pytest
from uuid import uuid4

from textual.app import App
from textual.widgets import Button, Static

from taskpad.ui.components.delete_modal import DeleteConfirmModal
from taskpad.ui.view_model import DialogView


def _dialog(title: str = "Buy milk") -> DialogView:
    return DialogView(
        task_id=uuid4(),
        title="Delete Task",
        message=f'Are you sure you want to delete "{title}"? This action cannot be undone.',
    )


class ModalHarness(App):
    """Minimal app that shows a DeleteConfirmModal and records its messages."""

    def __init__(self, dialog: DialogView) -> None:
        super().__init__()
        self.dialog = dialog
        self.confirmed = []
        self.cancelled = 0

    def on_mount(self) -> None:
        self.push_screen(DeleteConfirmModal(self.dialog))

    def on_delete_confirm_modal_delete_confirmed(
        self, message: DeleteConfirmModal.DeleteConfirmed
    ) -> None:
        self.confirmed.append(message.task_id)

    def on_delete_confirm_modal_delete_cancelled(
        self, message: DeleteConfirmModal.DeleteCancelled
    ) -> None:
        self.cancelled += 1


class TestDeleteConfirmModal:
    """Tests for DeleteConfirmModal."""

    def test_modal_initialization(self):
        dialog = _dialog()
        modal = DeleteConfirmModal(dialog)
        assert modal.dialog is dialog
        assert modal.task_id == dialog.task_id

    @pytest.mark.asyncio
    async def test_modal_shows_task_title(self):
        app = ModalHarness(_dialog("Walk dog"))
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            assert isinstance(modal, DeleteConfirmModal)

            assert modal.query_one("#delete-message", Static) is not None
            assert '"Walk dog"' in modal.dialog.message

    @pytest.mark.asyncio
    async def test_cancel_button_focused_on_open(self):
        app = ModalHarness(_dialog())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.focused is app.screen.query_one("#cancel-button", Button)

    @pytest.mark.asyncio
    async def test_confirm_posts_task_id(self):
        dialog = _dialog()
        app = ModalHarness(dialog)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#confirm-button", Button).press()
            await pilot.pause()

            assert app.confirmed == [dialog.task_id]
            assert app.cancelled == 0
            assert isinstance(app.screen, DeleteConfirmModal)

    @pytest.mark.asyncio
    async def test_cancel_button_posts_cancelled(self):
        app = ModalHarness(_dialog())
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#cancel-button", Button).press()
            await pilot.pause()

            assert app.cancelled == 1
            assert app.confirmed == []

    @pytest.mark.asyncio
    async def test_escape_posts_cancelled(self):
        app = ModalHarness(_dialog())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()

            assert app.cancelled == 1
            assert isinstance(app.screen, DeleteConfirmModal)

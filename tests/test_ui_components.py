"""
Tests for the form and list widgets in isolation.

Tests cover:
- TaskForm.apply() only overwrites fields on a new form revision
- TaskForm messages for Enter, Ctrl+S and Cancel
- TaskListView rows and empty state
- TaskRow Edit/Delete messages
"""

import pytest
from uuid import uuid4

from textual.app import App, ComposeResult
from textual.widgets import Button, Input

from taskpad.ui.components.task_form import DescriptionArea, TaskForm
from taskpad.ui.components.task_list import TaskListView, TaskRow
from taskpad.ui.view_model import FormView, TaskRowView


def _form_view(**overrides) -> FormView:
    fields = dict(
        heading="Create Task",
        title="",
        description="",
        revision=0,
        submit_label="Add",
        submit_disabled=False,
        show_cancel=False,
    )
    fields.update(overrides)
    return FormView(**fields)


def _row(title: str, description: str = None) -> TaskRowView:
    return TaskRowView(
        task_id=uuid4(),
        title=title,
        description=description,
        created_label="Jan 14, 2025 10:00 AM",
    )


class WidgetHarness(App):
    """Mounts a TaskForm and TaskListView and records their messages."""

    def __init__(self) -> None:
        super().__init__()
        self.messages = []

    def compose(self) -> ComposeResult:
        yield TaskForm(id="task-form")
        yield TaskListView(id="task-list")

    def on_task_form_submit_requested(self, message: TaskForm.SubmitRequested) -> None:
        self.messages.append(("submit", None))

    def on_task_form_cancel_requested(self, message: TaskForm.CancelRequested) -> None:
        self.messages.append(("cancel", None))

    def on_task_form_title_edited(self, message: TaskForm.TitleEdited) -> None:
        self.messages.append(("title", message.value))

    def on_task_row_edit_requested(self, message: TaskRow.EditRequested) -> None:
        self.messages.append(("edit", message.task_id))

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        self.messages.append(("delete", message.task_id))


class TestTaskForm:
    """Tests for TaskForm."""

    @pytest.mark.asyncio
    async def test_apply_sets_labels(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            form = app.query_one(TaskForm)
            form.apply(_form_view(heading="Edit Task", submit_label="Update", show_cancel=True))
            await pilot.pause()

            assert form.query_one("#submit-button", Button).label.plain == "Update"
            assert form.query_one("#cancel-button", Button).display

    @pytest.mark.asyncio
    async def test_apply_disables_submit_while_saving(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            form = app.query_one(TaskForm)
            form.apply(_form_view(submit_label="Saving...", submit_disabled=True))
            await pilot.pause()

            assert form.query_one("#submit-button", Button).disabled

    @pytest.mark.asyncio
    async def test_same_revision_keeps_typed_text(self):
        """Test that re-applying the current revision never clobbers the fields."""
        app = WidgetHarness()
        async with app.run_test() as pilot:
            form = app.query_one(TaskForm)
            form.apply(_form_view(revision=0))
            title_input = form.query_one("#title-input", Input)
            title_input.value = "typed locally"
            await pilot.pause()

            form.apply(_form_view(title="stale", revision=0))
            await pilot.pause()

            assert title_input.value == "typed locally"

    @pytest.mark.asyncio
    async def test_new_revision_replaces_fields(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            form = app.query_one(TaskForm)
            form.apply(_form_view(revision=0))
            await pilot.pause()

            form.apply(_form_view(title="Walk dog", description="evening", revision=1))
            await pilot.pause()

            assert form.query_one("#title-input", Input).value == "Walk dog"
            assert form.query_one("#description-input", DescriptionArea).text == "evening"

    @pytest.mark.asyncio
    async def test_typing_posts_title_edited(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            app.query_one("#title-input", Input).value = "Buy"
            await pilot.pause()

            assert ("title", "Buy") in app.messages

    @pytest.mark.asyncio
    async def test_enter_in_title_requests_submit(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            app.query_one("#title-input", Input).focus()
            await pilot.press("enter")
            await pilot.pause()

            assert ("submit", None) in app.messages

    @pytest.mark.asyncio
    async def test_enter_in_description_does_not_submit(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            area = app.query_one("#description-input", DescriptionArea)
            area.focus()
            await pilot.press("enter")
            await pilot.pause()

            assert ("submit", None) not in app.messages
            assert "\n" in area.text

    @pytest.mark.asyncio
    async def test_ctrl_s_in_description_requests_submit(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            app.query_one("#description-input", DescriptionArea).focus()
            await pilot.press("ctrl+s")
            await pilot.pause()

            assert ("submit", None) in app.messages

    @pytest.mark.asyncio
    async def test_cancel_button_requests_cancel(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            form = app.query_one(TaskForm)
            form.apply(_form_view(show_cancel=True))
            await pilot.pause()

            form.query_one("#cancel-button", Button).press()
            await pilot.pause()

            assert ("cancel", None) in app.messages


class TestTaskListView:
    """Tests for TaskListView and TaskRow."""

    @pytest.mark.asyncio
    async def test_empty_state(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            task_list = app.query_one(TaskListView)
            task_list.set_rows((), "Nothing here")
            await pilot.pause()

            assert task_list.get_rows() == ()
            assert len(task_list.query(".empty-message")) == 1

    @pytest.mark.asyncio
    async def test_rows_rendered_in_order(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            task_list = app.query_one(TaskListView)
            rows = (_row("Newest"), _row("Oldest"))
            task_list.set_rows(rows, None)
            await pilot.pause()

            rendered = task_list.get_rows()
            assert [r.row.title for r in rendered] == ["Newest", "Oldest"]
            assert len(task_list.query(".empty-message")) == 0

    @pytest.mark.asyncio
    async def test_rerender_replaces_rows(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            task_list = app.query_one(TaskListView)
            task_list.set_rows((_row("A"), _row("B")), None)
            await pilot.pause()

            task_list.set_rows((_row("C"),), None)
            await pilot.pause()

            assert [r.row.title for r in task_list.get_rows()] == ["C"]

    @pytest.mark.asyncio
    async def test_row_buttons_post_task_id(self):
        app = WidgetHarness()
        async with app.run_test() as pilot:
            row_view = _row("Clickable")
            app.query_one(TaskListView).set_rows((row_view,), None)
            await pilot.pause()

            row = app.query_one(TaskRow)
            row.query_one(".edit-button", Button).press()
            row.query_one(".delete-button", Button).press()
            await pilot.pause()

            assert ("edit", row_view.task_id) in app.messages
            assert ("delete", row_view.task_id) in app.messages

    def test_row_body_includes_description_and_timestamp(self):
        row = TaskRow(_row("Buy milk", "2%"))
        body = row.render_body().plain
        assert body.splitlines() == ["Buy milk", "2%", "Jan 14, 2025 10:00 AM"]

    def test_row_body_without_description(self):
        row = TaskRow(_row("Buy milk"))
        assert row.render_body().plain.splitlines() == ["Buy milk", "Jan 14, 2025 10:00 AM"]

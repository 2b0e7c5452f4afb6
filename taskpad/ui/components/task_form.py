"""Create/edit form for Taskpad.

The form is a thin widget over the form state:
- Title input (Enter submits)
- Description text area (Ctrl+Enter or Ctrl+S submits, Enter adds a newline)
- Add/Update button, disabled while a submit is in flight
- Cancel button, shown only while editing

It never submits anything itself. User input is reported with messages and
``apply`` brings the widgets in line with a ``FormView``.
"""

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.message import Message
from textual.widgets import Button, Input, Static, TextArea

from taskpad.logging_config import get_logger
from taskpad.ui.base_styles import BUTTON_BASE_CSS, FORM_FIELD_CSS
from taskpad.ui.view_model import FormView

logger = get_logger(__name__)


class DescriptionArea(TextArea):
    """Multi-line description field with a modifier+Enter submit shortcut."""

    BINDINGS = [
        Binding("ctrl+enter", "submit", "Save", show=False),
        Binding("ctrl+s", "submit", "Save", show=False),
    ]

    def action_submit(self) -> None:
        logger.debug("DescriptionArea: submit shortcut pressed")
        self.post_message(self.SubmitRequested())

    class SubmitRequested(Message):
        pass


class TaskForm(Container):
    """Form widget for creating and editing tasks.

    Messages:
        SubmitRequested: Add/Update pressed, Enter in title, Ctrl+Enter in description
        CancelRequested: Cancel pressed while editing
        TitleEdited: The title input changed
        DescriptionEdited: The description changed
    """

    DEFAULT_CSS = BUTTON_BASE_CSS + FORM_FIELD_CSS + """
    TaskForm {
        height: auto;
        background: $surface;
        padding: 1 2;
        margin: 1 0;
    }

    TaskForm .form-heading {
        text-style: bold;
        color: $foreground;
        padding: 0 0 1 0;
    }

    TaskForm DescriptionArea {
        height: 6;
    }

    TaskForm .form-buttons {
        height: 3;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._revision: Optional[int] = None

    def compose(self) -> ComposeResult:
        yield Static("", classes="form-heading", id="form-heading")
        yield Input(placeholder="Task title", id="title-input")
        yield DescriptionArea(id="description-input")
        with Horizontal(classes="form-buttons"):
            yield Button("Add", id="submit-button", classes="primary")
            yield Button("Cancel", id="cancel-button", classes="secondary")

    def apply(self, view: FormView) -> None:
        """Bring the widgets in line with the form view.

        Field contents are only overwritten when the form revision changes,
        so keystrokes in flight are never clobbered by their own echo.
        """
        self.query_one("#form-heading", Static).update(view.heading)

        submit_button = self.query_one("#submit-button", Button)
        submit_button.label = view.submit_label
        submit_button.disabled = view.submit_disabled

        self.query_one("#cancel-button", Button).display = view.show_cancel

        if view.revision != self._revision:
            self._revision = view.revision
            title_input = self.query_one("#title-input", Input)
            if title_input.value != view.title:
                title_input.value = view.title
            description_area = self.query_one("#description-input", DescriptionArea)
            if description_area.text != view.description:
                description_area.load_text(view.description)

    def focus_title(self) -> None:
        self.query_one("#title-input", Input).focus()

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "title-input":
            event.stop()
            self.post_message(self.TitleEdited(event.value))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == "description-input":
            event.stop()
            self.post_message(self.DescriptionEdited(event.text_area.text))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "title-input":
            event.stop()
            logger.debug("TaskForm: Enter pressed in title field")
            self.post_message(self.SubmitRequested())

    def on_description_area_submit_requested(self, event: DescriptionArea.SubmitRequested) -> None:
        event.stop()
        self.post_message(self.SubmitRequested())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "submit-button":
            self.post_message(self.SubmitRequested())
        elif event.button.id == "cancel-button":
            self.post_message(self.CancelRequested())

    class SubmitRequested(Message):
        pass

    class CancelRequested(Message):
        pass

    class TitleEdited(Message):
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class DescriptionEdited(Message):
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

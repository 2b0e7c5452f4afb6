"""
Application state for Taskpad.

All UI state lives in one frozen, serializable ``AppState``. It only ever
changes through ``reduce(state, event)``, a pure function over the event
models defined here. The delete dialog is a tagged union so a shown dialog
always carries its task.
"""

from typing import Annotated, Literal, Optional, Tuple, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskpad.models import Task
from taskpad.preferences import THEME_DARK, THEME_LIGHT


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ==============================================================================
# STATE
# ==============================================================================


class FormState(_Frozen):
    """
    Create/edit form fields.

    ``revision`` increases whenever the form is replaced wholesale (edit
    started, edit cancelled, submit succeeded) and stays put while the user
    types, so widgets know when to overwrite their contents.
    """

    title: str = ""
    description: str = ""
    editing_task_id: Optional[UUID] = None
    revision: int = 0

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None

    @property
    def has_title(self) -> bool:
        return bool(self.title.strip())

    def replaced(self, **fields) -> "FormState":
        return FormState(revision=self.revision + 1, **fields)


class DialogHidden(_Frozen):
    kind: Literal["hidden"] = "hidden"

    @property
    def is_open(self) -> bool:
        return False

    @property
    def target_task(self) -> Optional[Task]:
        return None


class DialogShown(_Frozen):
    kind: Literal["shown"] = "shown"
    task: Task

    @property
    def is_open(self) -> bool:
        return True

    @property
    def target_task(self) -> Optional[Task]:
        return self.task


DeleteDialog = Annotated[Union[DialogHidden, DialogShown], Field(discriminator="kind")]


class AppState(_Frozen):
    """Everything the view needs to render, in one place."""

    tasks: Tuple[Task, ...] = ()
    form: FormState = Field(default_factory=FormState)
    dialog: DeleteDialog = Field(default_factory=DialogHidden)
    page_loading: bool = True
    submitting: bool = False
    theme: Literal["light", "dark"] = THEME_LIGHT
    error: Optional[str] = None


# ==============================================================================
# EVENTS
# ==============================================================================


class Event(_Frozen):
    """Base class for state events."""
    pass


class LoadSucceeded(Event):
    tasks: Tuple[Task, ...]


class LoadFinished(Event):
    """Dispatched on every exit path of a load, success or failure."""
    pass


class TitleChanged(Event):
    title: str


class DescriptionChanged(Event):
    description: str


class EditStarted(Event):
    task: Task


class EditCancelled(Event):
    pass


class SubmitStarted(Event):
    pass


class SubmitSucceeded(Event):
    """Carries the form as it was when the submit started."""
    submitted: FormState


class SubmitFinished(Event):
    """Dispatched on every exit path of a submit, success or failure."""
    pass


class DeleteRequested(Event):
    task: Task


class DeleteDismissed(Event):
    pass


class TaskDeleted(Event):
    task_id: UUID


class ThemeToggled(Event):
    pass


class ThemeLoaded(Event):
    theme: Literal["light", "dark"]


class ErrorReported(Event):
    message: str


class ErrorCleared(Event):
    pass


# ==============================================================================
# UPDATE FUNCTION
# ==============================================================================


def reduce(state: AppState, event: Event) -> AppState:
    """
    Compute the state that follows ``event``.

    Pure: never performs I/O and never mutates ``state``.

    Args:
        state: Current state
        event: Event to apply

    Returns:
        The next state (``state`` itself when the event changes nothing)

    Raises:
        TypeError: If the event type is unknown
    """
    if isinstance(event, LoadSucceeded):
        return state.model_copy(update={"tasks": tuple(event.tasks), "error": None})

    if isinstance(event, LoadFinished):
        # page_loading only ever goes from True to False
        return state.model_copy(update={"page_loading": False})

    if isinstance(event, TitleChanged):
        if event.title == state.form.title:
            return state
        return state.model_copy(
            update={"form": state.form.model_copy(update={"title": event.title})}
        )

    if isinstance(event, DescriptionChanged):
        if event.description == state.form.description:
            return state
        return state.model_copy(
            update={"form": state.form.model_copy(update={"description": event.description})}
        )

    if isinstance(event, EditStarted):
        form = state.form.replaced(
            title=event.task.title,
            description=event.task.description or "",
            editing_task_id=event.task.id,
        )
        return state.model_copy(update={"form": form})

    if isinstance(event, EditCancelled):
        return state.model_copy(update={"form": state.form.replaced()})

    if isinstance(event, SubmitSucceeded):
        # Input typed, or an edit started, while the call was in flight is kept
        if state.form != event.submitted:
            return state
        return state.model_copy(update={"form": state.form.replaced()})

    if isinstance(event, SubmitStarted):
        return state.model_copy(update={"submitting": True, "error": None})

    if isinstance(event, SubmitFinished):
        return state.model_copy(update={"submitting": False})

    if isinstance(event, DeleteRequested):
        return state.model_copy(update={"dialog": DialogShown(task=event.task)})

    if isinstance(event, DeleteDismissed):
        if not state.dialog.is_open:
            return state
        return state.model_copy(update={"dialog": DialogHidden()})

    if isinstance(event, TaskDeleted):
        # Editing a task that no longer exists would only fail on submit
        if state.form.editing_task_id == event.task_id:
            return state.model_copy(update={"form": state.form.replaced()})
        return state

    if isinstance(event, ThemeToggled):
        theme = THEME_LIGHT if state.theme == THEME_DARK else THEME_DARK
        return state.model_copy(update={"theme": theme})

    if isinstance(event, ThemeLoaded):
        return state.model_copy(update={"theme": event.theme})

    if isinstance(event, ErrorReported):
        return state.model_copy(update={"error": event.message})

    if isinstance(event, ErrorCleared):
        return state.model_copy(update={"error": None})

    raise TypeError(f"Unknown event: {type(event).__name__}")

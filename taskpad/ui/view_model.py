"""Pure state-to-view mapping for Taskpad.

``build_view`` turns an ``AppState`` into a plain description of what the
screen should show. The Textual widgets only apply these descriptions; all
decisions about labels, visibility and enabled states are made here.
"""

from typing import Optional, Tuple, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskpad.state import AppState
from taskpad.ui.theme import theme_toggle_icon
from taskpad.utils.datetime_utils import format_created_at


APP_TITLE = "Task Manager"
APP_SUBTITLE = "Simple task list"
LOADING_MESSAGE = "Loading tasks..."
EMPTY_MESSAGE = "No tasks yet. Add one 👆"
CREATE_HEADING = "Create Task"
EDIT_HEADING = "Edit Task"
ADD_LABEL = "Add"
UPDATE_LABEL = "Update"
SAVING_LABEL = "Saving..."
DIALOG_TITLE = "Delete Task"


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


class FormView(_View):
    heading: str
    title: str
    description: str
    revision: int
    submit_label: str
    submit_disabled: bool
    show_cancel: bool


class TaskRowView(_View):
    task_id: UUID
    title: str
    description: Optional[str]
    created_label: str


class DialogView(_View):
    task_id: UUID
    title: str
    message: str


class LoadingView(_View):
    message: str = LOADING_MESSAGE
    theme: str


class MainView(_View):
    title: str = APP_TITLE
    subtitle: str = APP_SUBTITLE
    theme: str
    theme_icon: str
    form: FormView
    rows: Tuple[TaskRowView, ...]
    empty_message: Optional[str]
    dialog: Optional[DialogView]
    error: Optional[str]


PageView = Union[LoadingView, MainView]


def build_form_view(state: AppState) -> FormView:
    form = state.form
    if state.submitting:
        submit_label = SAVING_LABEL
    elif form.is_editing:
        submit_label = UPDATE_LABEL
    else:
        submit_label = ADD_LABEL

    return FormView(
        heading=EDIT_HEADING if form.is_editing else CREATE_HEADING,
        title=form.title,
        description=form.description,
        revision=form.revision,
        submit_label=submit_label,
        submit_disabled=state.submitting,
        show_cancel=form.is_editing,
    )


def build_dialog_view(state: AppState) -> Optional[DialogView]:
    task = state.dialog.target_task
    if task is None:
        return None
    return DialogView(
        task_id=task.id,
        title=DIALOG_TITLE,
        message=(
            f'Are you sure you want to delete "{task.title}"? '
            "This action cannot be undone."
        ),
    )


def build_view(state: AppState, timezone_name: str = "UTC") -> PageView:
    """Map application state to the view to render.

    Args:
        state: Current application state
        timezone_name: IANA timezone used for creation timestamps

    Returns:
        LoadingView until the first load completes, MainView afterwards
    """
    if state.page_loading:
        return LoadingView(theme=state.theme)

    rows = tuple(
        TaskRowView(
            task_id=task.id,
            title=task.title,
            description=task.description or None,
            created_label=format_created_at(task.created_at, timezone_name),
        )
        for task in state.tasks
    )

    return MainView(
        theme=state.theme,
        theme_icon=theme_toggle_icon(state.theme),
        form=build_form_view(state),
        rows=rows,
        empty_message=None if rows else EMPTY_MESSAGE,
        dialog=build_dialog_view(state),
        error=state.error,
    )

"""
Task list controller for Taskpad.

Owns the current ``AppState`` and turns user intent into store calls and
state events. Every state change goes through ``reduce`` and is pushed to
subscribers, which is how the view learns it must re-render.
"""

from typing import Callable, List, Optional

from taskpad.logging_config import get_logger
from taskpad.models import Task
from taskpad.preferences import PreferenceStore
from taskpad.services.task_store import StoreError, TaskStore
from taskpad.state import (
    AppState,
    DeleteDismissed,
    DeleteRequested,
    DescriptionChanged,
    EditCancelled,
    EditStarted,
    ErrorCleared,
    ErrorReported,
    Event,
    LoadFinished,
    LoadSucceeded,
    SubmitFinished,
    SubmitStarted,
    SubmitSucceeded,
    TaskDeleted,
    ThemeLoaded,
    ThemeToggled,
    TitleChanged,
    reduce,
)

logger = get_logger(__name__)

StateListener = Callable[[AppState], None]


class TaskListController:
    """
    Coordinates the task list state with the remote store.

    Runs on a single event loop. The only mutual exclusion is the
    ``submitting`` flag, which keeps at most one create/update in flight.
    """

    def __init__(
        self,
        store: TaskStore,
        preferences: Optional[PreferenceStore] = None,
        initial_state: Optional[AppState] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            store: Remote task store
            preferences: Optional preference store for the theme
            initial_state: Starting state (defaults to a fresh AppState)
        """
        self.store = store
        self.preferences = preferences
        self._state = initial_state or AppState()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> AppState:
        return self._state

    # ==============================================================================
    # DISPATCH
    # ==============================================================================

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked with every new state.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> AppState:
        """
        Apply an event and notify subscribers if the state changed.

        Args:
            event: The event to apply

        Returns:
            The resulting state
        """
        new_state = reduce(self._state, event)
        if new_state is self._state or new_state == self._state:
            return self._state

        logger.debug(f"State event: {type(event).__name__}")
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    # ==============================================================================
    # LOADING
    # ==============================================================================

    async def load(self) -> None:
        """
        Replace the in-memory task list with a fresh read of the store.

        A failed read leaves the current tasks untouched. The page loading
        flag is cleared on every exit path.

        Raises:
            StoreError: If the store cannot be read
        """
        try:
            tasks = await self.store.list_tasks()
            self.dispatch(LoadSucceeded(tasks=tuple(tasks)))
            logger.debug(f"Loaded {len(tasks)} tasks")
        finally:
            self.dispatch(LoadFinished())

    def load_theme(self) -> None:
        """Apply the saved theme preference, if a preference store is set."""
        if self.preferences is None:
            return
        self.dispatch(ThemeLoaded(theme=self.preferences.load_theme()))

    # ==============================================================================
    # FORM
    # ==============================================================================

    def set_title(self, title: str) -> None:
        self.dispatch(TitleChanged(title=title))

    def set_description(self, description: str) -> None:
        self.dispatch(DescriptionChanged(description=description))

    def start_edit(self, task: Task) -> None:
        """Copy a task's fields into the form and enter edit mode."""
        logger.info(f"Editing task {task.id}")
        self.dispatch(EditStarted(task=task))

    def cancel_edit(self) -> None:
        """Clear the form and leave edit mode without touching the store."""
        if self._state.form.is_editing:
            logger.info("Edit cancelled")
        self.dispatch(EditCancelled())

    async def submit(self) -> bool:
        """
        Create a task, or update the one being edited, then reload.

        Ignored while another submit is in flight or when the title is
        blank. On success the form is cleared unless it changed while the
        call was in flight. On failure the form keeps its contents so the
        user can retry.

        Returns:
            True if a store call was issued, False if the submit was ignored

        Raises:
            StoreError: If the store rejects the change or the reload fails
        """
        if self._state.submitting:
            logger.debug("Submit ignored: another submit is in flight")
            return False

        form = self._state.form
        title = form.title.strip()
        if not title:
            logger.debug("Submit ignored: title is blank")
            return False
        description = form.description.strip() or None

        self.dispatch(SubmitStarted())
        try:
            if form.editing_task_id is not None:
                await self.store.update_task(form.editing_task_id, title, description)
            else:
                await self.store.create_task(title, description)
            self.dispatch(SubmitSucceeded(submitted=form))
            await self.load()
        finally:
            self.dispatch(SubmitFinished())
        return True

    # ==============================================================================
    # DELETE CONFIRMATION
    # ==============================================================================

    def request_delete(self, task: Task) -> None:
        """Open the confirmation dialog for ``task``."""
        logger.info(f"Delete requested for task {task.id}")
        self.dispatch(DeleteRequested(task=task))

    def cancel_delete(self) -> None:
        """Close the confirmation dialog without deleting anything."""
        self.dispatch(DeleteDismissed())

    async def confirm_delete(self) -> None:
        """
        Delete the dialog's task, close the dialog, then reload.

        The dialog closes once the delete call resolves, whether it
        succeeded or not. The reload only happens after a successful delete.

        Raises:
            StoreError: If the delete or the reload fails
        """
        task = self._state.dialog.target_task
        if task is None:
            logger.debug("Confirm ignored: no delete pending")
            return

        try:
            await self.store.delete_task(task.id)
        finally:
            self.dispatch(DeleteDismissed())

        self.dispatch(TaskDeleted(task_id=task.id))
        await self.load()

    # ==============================================================================
    # THEME AND ERRORS
    # ==============================================================================

    def toggle_theme(self) -> None:
        """Flip between light and dark, persisting the choice when possible."""
        self.dispatch(ThemeToggled())
        if self.preferences is None:
            return
        try:
            self.preferences.save_theme(self._state.theme)
        except OSError as e:
            logger.warning(f"Could not save theme preference: {e}")

    def report_error(self, error: StoreError) -> None:
        self.dispatch(ErrorReported(message=error.message))

    def clear_error(self) -> None:
        self.dispatch(ErrorCleared())

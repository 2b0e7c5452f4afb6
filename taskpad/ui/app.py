"""Main Textual application for Taskpad.

A single screen with two mutually exclusive views:
- Loading view, shown until the first task list fetch completes
- Main view: header with theme toggle, create/edit form, task list

A confirmation modal gates every delete. The app holds no UI state of its
own: it renders whatever ``build_view`` derives from the controller's state
and forwards user interaction to controller operations.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, ContentSwitcher, Footer, LoadingIndicator, Static

from taskpad.config import Config
from taskpad.controller import TaskListController
from taskpad.database import DatabaseManager
from taskpad.logging_config import get_logger
from taskpad.models import Task
from taskpad.preferences import PreferenceStore
from taskpad.services.task_store import StoreError, TaskStore
from taskpad.state import AppState
from taskpad.ui.components.delete_modal import DeleteConfirmModal
from taskpad.ui.components.task_form import TaskForm
from taskpad.ui.components.task_list import TaskListView, TaskRow
from taskpad.ui.constants import (
    LOADING_VIEW_ID,
    MAIN_VIEW_ID,
    MAX_TITLE_LENGTH_IN_NOTIFICATION,
    NOTIFICATION_TIMEOUT_MEDIUM,
    NOTIFICATION_TIMEOUT_SHORT,
    VIEW_SWITCHER_ID,
)
from taskpad.ui.keybindings import get_all_bindings
from taskpad.ui.theme import ALL_THEMES, textual_theme_name
from taskpad.ui.view_model import (
    APP_SUBTITLE,
    APP_TITLE,
    LOADING_MESSAGE,
    DialogView,
    LoadingView,
    PageView,
    build_view,
)

# Initialize logger for this module
logger = get_logger(__name__)


class TaskpadApp(App):
    """Task list application: one form, one list, one delete dialog."""

    CSS = """
    Screen {
        background: $background;
    }

    #view-switcher {
        height: 1fr;
    }

    #loading-view {
        height: 100%;
        align: center middle;
    }

    #loading-view LoadingIndicator {
        height: 3;
        color: $primary;
    }

    #loading-message {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }

    #main-view {
        height: 100%;
        padding: 1 4;
    }

    #header {
        height: auto;
        background: $surface;
        padding: 1 2;
    }

    #header-text {
        width: 1fr;
        height: auto;
    }

    #app-title {
        text-style: bold;
        color: $foreground;
    }

    #app-subtitle {
        color: $text-muted;
    }

    #theme-button {
        min-width: 6;
        background: $panel;
    }

    #error-banner {
        background: $error 20%;
        color: $error;
        padding: 0 2;
    }
    """

    BINDINGS = get_all_bindings()

    # ==============================================================================
    # LIFECYCLE METHODS
    # ==============================================================================

    def __init__(
        self,
        config: Optional[Config] = None,
        db_manager: Optional[DatabaseManager] = None,
        preferences: Optional[PreferenceStore] = None,
        **kwargs
    ) -> None:
        """Initialize the Taskpad application.

        Args:
            config: Configuration (defaults to ~/.taskpad/config.ini)
            db_manager: Database manager to use instead of one built from config
            preferences: Preference store to use instead of one built from config
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        self.config = config or Config()
        self.title = APP_TITLE
        self.sub_title = APP_SUBTITLE

        self._owns_db_manager = db_manager is None
        if db_manager is None:
            db_config = self.config.get_database_config()
            db_manager = DatabaseManager(db_config['url'], echo=db_config['echo'])
        self._db_manager = db_manager
        self._timezone = self.config.get_display_config()['timezone']

        self.preferences = preferences or PreferenceStore(self.config.get_preferences_path())
        self.store = TaskStore(self._db_manager)
        self.controller = TaskListController(self.store, self.preferences)

        self._delete_modal: Optional[DeleteConfirmModal] = None
        self._main_view_shown = False
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial=LOADING_VIEW_ID, id=VIEW_SWITCHER_ID):
            with Vertical(id=LOADING_VIEW_ID):
                yield LoadingIndicator()
                yield Static(LOADING_MESSAGE, id="loading-message")

            with Vertical(id=MAIN_VIEW_ID):
                with Horizontal(id="header"):
                    with Vertical(id="header-text"):
                        yield Static(APP_TITLE, id="app-title")
                        yield Static(APP_SUBTITLE, id="app-subtitle")
                    yield Button("🌙", id="theme-button")
                yield Static("", id="error-banner")
                yield TaskForm(id="task-form")
                yield TaskListView(id="task-list")

        yield Footer()

    async def on_mount(self) -> None:
        """Register themes, connect to the database and start the first load."""
        logger.info("Taskpad application mounted, initializing...")

        for theme in ALL_THEMES:
            self.register_theme(theme)
        self.controller.load_theme()

        self._unsubscribe = self.controller.subscribe(self._on_state_changed)
        self._render_state(self.controller.state)

        if not self._db_manager.is_initialized:
            try:
                await self._db_manager.initialize()
            except (SQLAlchemyError, OSError) as e:
                # The first load reports the failure and clears the spinner
                logger.error(f"Database unavailable at startup: {e}")

        self.run_worker(self._load_tasks(), group="store")

    async def on_unmount(self) -> None:
        logger.info("Taskpad application shutting down")
        if self._unsubscribe is not None:
            self._unsubscribe()
        if self._owns_db_manager:
            await self._db_manager.close()

    # ==============================================================================
    # RENDERING
    # ==============================================================================

    @property
    def _main_screen(self) -> Screen:
        """The base screen holding the form and list, even while a modal is open."""
        return self.screen_stack[0]

    def _on_state_changed(self, state: AppState) -> None:
        self._render_state(state)

    def _render_state(self, state: AppState) -> None:
        """Apply the view derived from ``state`` to the widget tree."""
        self._apply_view(build_view(state, self._timezone))

    def _apply_view(self, view: PageView) -> None:
        theme_name = textual_theme_name(view.theme)
        if self.theme != theme_name:
            self.theme = theme_name

        screen = self._main_screen
        switcher = screen.query_one(f"#{VIEW_SWITCHER_ID}", ContentSwitcher)
        if isinstance(view, LoadingView):
            switcher.current = LOADING_VIEW_ID
            return
        switcher.current = MAIN_VIEW_ID

        screen.query_one("#theme-button", Button).label = view.theme_icon

        banner = screen.query_one("#error-banner", Static)
        banner.update(view.error or "")
        banner.display = view.error is not None

        form = screen.query_one(TaskForm)
        form.apply(view.form)
        screen.query_one(TaskListView).set_rows(view.rows, view.empty_message)
        self._reconcile_dialog(view.dialog)

        if not self._main_view_shown:
            self._main_view_shown = True
            form.focus_title()

    def _reconcile_dialog(self, dialog: Optional[DialogView]) -> None:
        """Push or pop the delete modal so it matches the dialog state."""
        if dialog is not None and self._delete_modal is None:
            self._delete_modal = DeleteConfirmModal(dialog)
            self.push_screen(self._delete_modal)
        elif dialog is None and self._delete_modal is not None:
            modal, self._delete_modal = self._delete_modal, None
            if self.screen is modal:
                self.pop_screen()

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    def on_task_form_title_edited(self, message: TaskForm.TitleEdited) -> None:
        self.controller.set_title(message.value)

    def on_task_form_description_edited(self, message: TaskForm.DescriptionEdited) -> None:
        self.controller.set_description(message.value)

    def on_task_form_submit_requested(self, message: TaskForm.SubmitRequested) -> None:
        if self.controller.state.submitting:
            logger.debug("Submit requested while another submit is in flight, ignoring")
            return
        self.run_worker(self._submit_form(), group="store")

    def on_task_form_cancel_requested(self, message: TaskForm.CancelRequested) -> None:
        self.action_cancel_edit()

    def on_task_row_edit_requested(self, message: TaskRow.EditRequested) -> None:
        task = self._find_task(message.task_id)
        if task is None:
            logger.warning(f"Edit requested for unknown task {message.task_id}")
            return
        self.controller.start_edit(task)
        self._main_screen.query_one(TaskForm).focus_title()

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        task = self._find_task(message.task_id)
        if task is None:
            logger.warning(f"Delete requested for unknown task {message.task_id}")
            return
        self.controller.request_delete(task)

    def on_delete_confirm_modal_delete_confirmed(
        self, message: DeleteConfirmModal.DeleteConfirmed
    ) -> None:
        self.run_worker(self._confirm_delete(), group="store")

    def on_delete_confirm_modal_delete_cancelled(
        self, message: DeleteConfirmModal.DeleteCancelled
    ) -> None:
        self.controller.cancel_delete()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "theme-button":
            self.action_toggle_theme()

    # ==============================================================================
    # ACTION HANDLERS
    # ==============================================================================

    def action_toggle_theme(self) -> None:
        self.controller.toggle_theme()
        logger.info(f"Theme switched to {self.controller.state.theme}")

    def action_cancel_edit(self) -> None:
        self.controller.cancel_edit()

    def action_reload(self) -> None:
        self.run_worker(self._load_tasks(), group="store")

    # ==============================================================================
    # PRIVATE HELPERS - STORE OPERATIONS
    # ==============================================================================

    async def _load_tasks(self) -> None:
        try:
            await self.controller.load()
        except StoreError as e:
            self._handle_store_error(e, "load tasks")

    async def _submit_form(self) -> None:
        form = self.controller.state.form
        action = "updated" if form.is_editing else "created"
        try:
            issued = await self.controller.submit()
        except StoreError as e:
            self._handle_store_error(e, "save task")
            return
        if issued:
            self._notify_task_success(action, form.title.strip())

    async def _confirm_delete(self) -> None:
        task = self.controller.state.dialog.target_task
        try:
            await self.controller.confirm_delete()
        except StoreError as e:
            self._handle_store_error(e, "delete task")
            return
        if task is not None:
            self._notify_task_success("deleted", task.title, icon="🗑️")

    def _find_task(self, task_id: UUID) -> Optional[Task]:
        return next((t for t in self.controller.state.tasks if t.id == task_id), None)

    def _handle_store_error(self, error: StoreError, action: str) -> None:
        """Log, record and show a store failure without leaving the UI stuck."""
        logger.error(f"Failed to {action}: {error.message}", exc_info=error)
        self.controller.report_error(error)
        self.notify(
            f"Failed to {action}: {error.message}",
            severity="error",
            timeout=NOTIFICATION_TIMEOUT_MEDIUM
        )

    def _notify_task_success(self, action: str, title: str, icon: str = "✓") -> None:
        truncated = title[:MAX_TITLE_LENGTH_IN_NOTIFICATION]
        self.notify(
            f"{icon} Task {action}: {truncated}",
            severity="information",
            timeout=NOTIFICATION_TIMEOUT_SHORT
        )

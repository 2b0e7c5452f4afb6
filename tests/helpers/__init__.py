"""Test helper utilities for Taskpad integration tests."""

from tests.helpers.ui_helpers import (
    # Waiting Helpers
    settle,
    current_view,

    # Form Helpers
    get_form,
    fill_form,
    submit_with_enter,
    create_task_via_form,

    # List Helpers
    get_rows,
    get_row_titles,
    press_row_button,

    # Modal Helpers
    get_delete_modal,
    confirm_delete_modal,
    cancel_delete_modal,
    make_app,
)

__all__ = [
    "settle",
    "current_view",
    "get_form",
    "fill_form",
    "submit_with_enter",
    "create_task_via_form",
    "get_rows",
    "get_row_titles",
    "press_row_button",
    "get_delete_modal",
    "confirm_delete_modal",
    "cancel_delete_modal",
    "make_app",
]

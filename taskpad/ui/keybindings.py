"""Keybindings for Taskpad.

Field-level shortcuts (Enter in the title, Ctrl+Enter in the description)
live on the form widgets; this module holds the application-wide ones.
Plain letter keys are avoided so they never steal keystrokes from the form.
"""

from textual.binding import Binding


# Form keybindings
FORM_BINDINGS = [
    Binding("escape", "cancel_edit", "Cancel Edit", show=False),
    Binding("ctrl+r", "reload", "Reload", show=True),
]

# Application control keybindings
APP_CONTROL_BINDINGS = [
    Binding("ctrl+t", "toggle_theme", "Toggle Theme", show=True),
    Binding("ctrl+q", "quit", "Quit", priority=True, show=True),
]


def get_all_bindings() -> list[Binding]:
    """Get all application keybindings."""
    return FORM_BINDINGS + APP_CONTROL_BINDINGS

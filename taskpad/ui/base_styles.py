"""Shared CSS styles for Taskpad components.

Reusable CSS for modals, buttons and form fields. Colors come from the
active Textual theme (see theme.py), so the same CSS serves light and dark.

Usage:

    from taskpad.ui.base_styles import MODAL_BASE_CSS, BUTTON_BASE_CSS

    class MyModal(ModalScreen):
        DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + '''
        MyModal .custom-element { padding: 1; }
        '''
"""


# Base Modal Styles
MODAL_BASE_CSS = """
ModalScreen {
    align: center middle;
    background: $background 60%;
}

ModalScreen > Container {
    background: $surface;
    border: thick $error;
    padding: 1 2;
}

ModalScreen .modal-header {
    width: 100%;
    content-align: center middle;
    text-style: bold;
    color: $foreground;
    padding: 0 0 1 0;
}

ModalScreen .info-text {
    width: 100%;
    color: $text-muted;
    text-align: center;
    padding: 0 0 1 0;
}
"""


# Base Button Styles
BUTTON_BASE_CSS = """
Button {
    margin: 0 1;
    min-width: 12;
}

/* Primary actions: add, update */
Button.primary {
    background: $primary;
    color: white;
}

/* Destructive actions */
Button.danger {
    background: $error;
    color: white;
}

/* Cancel and other secondary actions */
Button.secondary {
    background: $panel;
    color: $foreground;
}

Button:disabled {
    opacity: 0.7;
}
"""


# Form field styles
FORM_FIELD_CSS = """
Input, TextArea {
    background: $surface;
    color: $foreground;
    border: tall $panel;
    margin: 0 0 1 0;
}

Input:focus, TextArea:focus {
    border: tall $primary;
}
"""

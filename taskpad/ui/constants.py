"""UI constants for Taskpad."""

# Notification settings
MAX_TITLE_LENGTH_IN_NOTIFICATION = 30
NOTIFICATION_TIMEOUT_SHORT = 2
NOTIFICATION_TIMEOUT_MEDIUM = 3

# Widget ids used across the app and tests
VIEW_SWITCHER_ID = "view-switcher"
LOADING_VIEW_ID = "loading-view"
MAIN_VIEW_ID = "main-view"

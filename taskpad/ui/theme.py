"""Light and dark color themes for Taskpad.

Both palettes are registered with Textual as named themes, so component CSS
refers to Textual's design variables (``$primary``, ``$surface``, ...)
instead of hard-coded colors, and switching themes is a single assignment to
``App.theme``.

Palette Layout
--------------
- **Base colors**: background, surface, panel, foreground
- **Accent colors**: primary (actions), error (destructive actions)
- **Muted text**: secondary text such as descriptions and timestamps
"""

from textual.theme import Theme

from taskpad.preferences import THEME_DARK, THEME_LIGHT


# ============================================================================
# LIGHT PALETTE
# ============================================================================

LIGHT_BACKGROUND = "#F3F4F6"  # Page background (gray-100)
LIGHT_SURFACE = "#FFFFFF"     # Cards and form
LIGHT_PANEL = "#E5E7EB"       # Secondary buttons
LIGHT_FOREGROUND = "#111827"  # Primary text (gray-900)
LIGHT_MUTED = "#6B7280"       # Secondary text (gray-500)


# ============================================================================
# DARK PALETTE
# ============================================================================

DARK_BACKGROUND = "#111827"   # Page background (gray-900)
DARK_SURFACE = "#1F2937"      # Cards and form (gray-800)
DARK_PANEL = "#4B5563"        # Secondary buttons (gray-600)
DARK_FOREGROUND = "#F9FAFB"   # Primary text
DARK_MUTED = "#9CA3AF"        # Secondary text (gray-400)


# ============================================================================
# SHARED ACCENTS
# ============================================================================

PRIMARY = "#2563EB"  # Add/Update buttons, spinner (blue-600)
ERROR = "#EF4444"    # Delete actions and error banner (red-500)
WARNING = "#FACC15"  # Theme toggle in dark mode (yellow-400)


LIGHT_THEME_NAME = "taskpad-light"
DARK_THEME_NAME = "taskpad-dark"

LIGHT_THEME = Theme(
    name=LIGHT_THEME_NAME,
    primary=PRIMARY,
    error=ERROR,
    warning=WARNING,
    background=LIGHT_BACKGROUND,
    surface=LIGHT_SURFACE,
    panel=LIGHT_PANEL,
    foreground=LIGHT_FOREGROUND,
    dark=False,
    variables={"text-muted": LIGHT_MUTED},
)

DARK_THEME = Theme(
    name=DARK_THEME_NAME,
    primary=PRIMARY,
    error=ERROR,
    warning=WARNING,
    background=DARK_BACKGROUND,
    surface=DARK_SURFACE,
    panel=DARK_PANEL,
    foreground=DARK_FOREGROUND,
    dark=True,
    variables={"text-muted": DARK_MUTED},
)

ALL_THEMES = (LIGHT_THEME, DARK_THEME)


def textual_theme_name(theme: str) -> str:
    """Map a stored preference value ("light"/"dark") to a Textual theme name."""
    return DARK_THEME_NAME if theme == THEME_DARK else LIGHT_THEME_NAME


def theme_toggle_icon(theme: str) -> str:
    """Icon for the toggle button: the theme you would switch to."""
    return "☀️" if theme == THEME_DARK else "🌙"


__all__ = [
    "ALL_THEMES",
    "DARK_THEME",
    "LIGHT_THEME",
    "THEME_DARK",
    "THEME_LIGHT",
    "textual_theme_name",
    "theme_toggle_icon",
]

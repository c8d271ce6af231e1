"""Colour palette, shared styles and layout helpers for the dashboard."""

from wms.ui.style import CENTER, RIGHT, ROUNDED_BORDER, Style

PRIMARY = "#60A5FA"
SECONDARY = "#A78BFA"
SUCCESS = "#34D399"
WARNING = "#FBBF24"
ERROR = "#F87171"
INFO = "#38BDF8"

WHITE = "#FFFFFF"
GRAY_50 = "#F9FAFB"
GRAY_100 = "#F3F4F6"
GRAY_200 = "#E5E7EB"
GRAY_300 = "#D1D5DB"
GRAY_400 = "#9CA3AF"
GRAY_500 = "#6B7280"
GRAY_600 = "#4B5563"
GRAY_700 = "#374151"
GRAY_800 = "#1F2937"
GRAY_900 = "#111827"

WEATHER_COLOR = "#06B6D4"
MOON_COLOR = "#8B5CF6"
SUN_COLOR = "#F59E0B"
TIME_COLOR = "#10B981"

TEXT_PRIMARY = GRAY_50
TEXT_SECONDARY = GRAY_300
TEXT_MUTED = GRAY_500
TEXT_INVERSE = GRAY_900

BASE_STYLE = Style(foreground=TEXT_PRIMARY)

H1_STYLE = BASE_STYLE.copy(bold=True, foreground=PRIMARY, margin=(0, 0, 1, 0))
H2_STYLE = BASE_STYLE.copy(bold=True, foreground=TEXT_PRIMARY)
H3_STYLE = BASE_STYLE.copy(bold=True, foreground=TEXT_SECONDARY)
BODY_STYLE = BASE_STYLE.copy(foreground=TEXT_PRIMARY)
CAPTION_STYLE = BASE_STYLE.copy(foreground=TEXT_MUTED)

CONTAINER_STYLE = BASE_STYLE.copy(padding=(0, 0))
CARD_STYLE = BASE_STYLE.copy(padding=(0, 0), margin=(0, 0))
CARD_HEADER_STYLE = BASE_STYLE.copy(bold=True, foreground=TEXT_PRIMARY, margin=(0, 0, 1, 0))

HEADER_STYLE = BASE_STYLE.copy(bold=True, foreground=PRIMARY, padding=(0, 0), align=CENTER)
STATUS_BAR_STYLE = BASE_STYLE.copy(foreground=TEXT_MUTED, padding=(0, 0))

METRIC_LABEL_STYLE = BASE_STYLE.copy(foreground=TEXT_MUTED, bold=False)
METRIC_VALUE_STYLE = BASE_STYLE.copy(foreground=TEXT_PRIMARY, bold=True)
METRIC_LARGE_STYLE = BASE_STYLE.copy(foreground=TEXT_PRIMARY, bold=True, margin=(0, 1, 0, 0))

ICON_STYLE = BASE_STYLE.copy(bold=True, margin=(0, 1, 0, 0))
ICON_LARGE_STYLE = BASE_STYLE.copy(bold=True, margin=(0, 1, 0, 0))

LOADING_STYLE = BASE_STYLE.copy(foreground=INFO, italic=True, align=CENTER)
ERROR_STYLE = BASE_STYLE.copy(foreground=ERROR, bold=True, align=CENTER)
SUCCESS_STYLE = BASE_STYLE.copy(foreground=SUCCESS, bold=True)
WARNING_STYLE = BASE_STYLE.copy(foreground=WARNING, bold=True)

BUTTON_STYLE = BASE_STYLE.copy(
    foreground=PRIMARY, padding=(0, 1), border=ROUNDED_BORDER,
    border_foreground=PRIMARY, bold=True,
)
BUTTON_SECONDARY_STYLE = BUTTON_STYLE.copy()
KEYBIND_STYLE = BASE_STYLE.copy(foreground=PRIMARY, bold=True)

DIVIDER_STYLE = BASE_STYLE.copy(foreground=GRAY_600, margin=(1, 0, 1, 0))
SEPARATOR_STYLE = BASE_STYLE.copy(foreground=GRAY_700)

PROGRESS_BAR_STYLE = BASE_STYLE.copy(foreground=PRIMARY, bold=True)
PROGRESS_TRACK_STYLE = BASE_STYLE.copy(foreground=GRAY_600)

WEATHER_CARD_STYLE = CARD_STYLE.copy()
MOON_CARD_STYLE = CARD_STYLE.copy()
SUN_CARD_STYLE = CARD_STYLE.copy()
TIME_CARD_STYLE = CARD_STYLE.copy()

TEMPERATURE_STYLE = BASE_STYLE.copy(foreground=WEATHER_COLOR, bold=True)
CONDITION_STYLE = BASE_STYLE.copy(foreground=TEXT_SECONDARY, italic=True)
MOON_PHASE_STYLE = BASE_STYLE.copy(foreground=MOON_COLOR, bold=True)
ILLUMINATION_STYLE = BASE_STYLE.copy(foreground=MOON_COLOR)
SUN_TIME_STYLE = BASE_STYLE.copy(foreground=SUN_COLOR, bold=True)
DAY_LENGTH_STYLE = BASE_STYLE.copy(foreground=SUN_COLOR)
CLOCK_STYLE = BASE_STYLE.copy(foreground=TIME_COLOR, bold=True)
DATE_STYLE = BASE_STYLE.copy(foreground=TEXT_SECONDARY)

CENTER_STYLE = BASE_STYLE.copy(align=CENTER)
RIGHT_STYLE = BASE_STYLE.copy(align=RIGHT)
COMPACT_STYLE = BASE_STYLE.copy(padding=(0, 1))

SPACING_XS = BASE_STYLE.copy(margin=(0, 1))
SPACING_SM = BASE_STYLE.copy(margin=(0, 2))
SPACING_MD = BASE_STYLE.copy(margin=(1, 2))
SPACING_LG = BASE_STYLE.copy(margin=(1, 3))

MIN_TERMINAL_WIDTH = 80
MIN_TERMINAL_HEIGHT = 24
CARD_MIN_WIDTH = 25
CARD_MIN_HEIGHT = 6

_LAYOUT_PADDING = 6


def get_adaptive_width(terminal_width: int, columns: int) -> int:
    if terminal_width < MIN_TERMINAL_WIDTH:
        return CARD_MIN_WIDTH
    return (terminal_width - _LAYOUT_PADDING) // columns - 2


def get_adaptive_height(terminal_height: int, rows: int) -> int:
    if terminal_height < MIN_TERMINAL_HEIGHT:
        return CARD_MIN_HEIGHT
    return (terminal_height - _LAYOUT_PADDING) // rows - 1


def get_responsive_layout(width: int, height: int) -> tuple[int, int]:
    """Return (columns, rows) for the card layout at this terminal size."""
    if width >= 120 and height >= 30:
        return 3, 1
    if width >= 90 and height >= 24:
        return 3, 1
    return 1, 3
import pytest

from wms.ui.style import visible_width
from wms.ui.theme import (
    CARD_MIN_HEIGHT,
    CARD_MIN_WIDTH,
    BUTTON_STYLE,
    get_adaptive_height,
    get_adaptive_width,
    get_responsive_layout,
)


def test_small_terminal_uses_minimums():
    assert get_adaptive_width(79, 3) == CARD_MIN_WIDTH
    assert get_adaptive_height(23, 2) == CARD_MIN_HEIGHT


@pytest.mark.parametrize("columns", [1, 2, 3])
def test_adaptive_width_fits(columns):
    width = get_adaptive_width(126, columns)
    assert width * columns <= 126 - 6
    assert (width + 3) * columns > 126 - 6


def test_adaptive_height_fits():
    height = get_adaptive_height(36, 3)
    assert (height + 1) * 3 == 30


@pytest.mark.parametrize(
    "size, layout",
    [((120, 30), (3, 1)), ((90, 24), (3, 1)), ((89, 40), (1, 3)), ((200, 10), (1, 3))],
)
def test_responsive_layout(size, layout):
    assert get_responsive_layout(*size) == layout


def test_button_has_border():
    out = BUTTON_STYLE.render("OK")
    assert visible_width(out) == len("OK") + 2 + 2
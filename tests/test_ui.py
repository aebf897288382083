import pygame
import pytest

from warrenwild.ui import BUTTON_COLOR, BUTTON_PRESSED_COLOR, UI, UIButton, UIElement


def test_in_bounds_includes_edges():
    element = UIElement(10, 20, 30, 40)
    assert element.in_bounds(10, 20)
    assert element.in_bounds(40, 60)
    assert not element.in_bounds(41, 60)
    assert not element.in_bounds(10, 19)


@pytest.mark.parametrize("point", [(9, 25), (25, 61), (0, 0)])
def test_in_bounds_rejects_outside(point):
    assert UIElement(10, 20, 30, 40).in_bounds(*point) is False


def test_handle_click_runs_handler_of_first_match():
    calls = []
    first = UIButton(0, 0, 10, 10, text="a", click_handler=lambda: calls.append("a"))
    second = UIButton(5, 5, 10, 10, text="b", click_handler=lambda: calls.append("b"))
    ui = UI()
    ui.add_button(first)
    ui.add_button(second)
    assert ui.handle_click(7, 7) is first
    assert calls == ["a"]
    assert ui.handle_click(14, 14) is second
    assert calls == ["a", "b"]


def test_handle_click_miss_returns_none():
    calls = []
    ui = UI()
    ui.add_button(UIButton(0, 0, 10, 10, click_handler=lambda: calls.append(1)))
    assert ui.handle_click(50, 50) is None
    assert calls == []


def test_button_without_handler_is_still_returned():
    ui = UI()
    button = UIButton(0, 0, 10, 10, text="idle")
    ui.add_button(button)
    assert ui.handle_click(1, 1) is button


def test_add_button_keeps_order():
    ui = UI()
    buttons = [UIButton(i, 0, 1, 1, text=str(i)) for i in range(3)]
    for button in buttons:
        ui.add_button(button)
    assert ui.buttons == buttons


def test_draw_colours():
    surface = pygame.Surface((40, 40))
    button = UIButton(5, 5, 20, 20)
    ui = UI([button])
    ui.draw(surface, None)
    assert surface.get_at((10, 10))[:3] == BUTTON_COLOR
    assert surface.get_at((30, 30))[:3] == (0, 0, 0)
    button.is_clicked = True
    ui.draw(surface, None)
    assert surface.get_at((10, 10))[:3] == BUTTON_PRESSED_COLOR
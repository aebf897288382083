"""Clickable on-screen buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

BUTTON_COLOR = (128, 128, 128)
BUTTON_PRESSED_COLOR = (80, 80, 80)
TEXT_COLOR = (255, 255, 255)
TEXT_MARGIN = 5


@dataclass
class UIElement:
    """A rectangle on the screen."""

    x: int
    y: int
    width: int
    height: int

    def in_bounds(self, x: int, y: int) -> bool:
        """True when the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass
class UIButton(UIElement):
    """A labelled rectangle that runs a handler when clicked."""

    text: str = ""
    click_handler: Optional[Callable[[], None]] = None
    is_clicked: bool = False

    def handle_click(self) -> None:
        """Run the click handler, if there is one."""
        if self.click_handler is not None:
            self.click_handler()

    def draw(self, surface: pygame.Surface, font: Optional[pygame.font.Font]) -> None:
        """Paint the button, darker while pressed, with its label if a font is given."""
        color = BUTTON_PRESSED_COLOR if self.is_clicked else BUTTON_COLOR
        pygame.draw.rect(surface, color, pygame.Rect(self.x, self.y, self.width, self.height))
        if font is not None:
            label = font.render(self.text, True, TEXT_COLOR)
            surface.blit(label, (self.x + TEXT_MARGIN, self.y + TEXT_MARGIN))


@dataclass
class UI:
    """The set of buttons drawn over the simulation."""

    buttons: list[UIButton] = field(default_factory=list)

    def add_button(self, button: UIButton) -> None:
        self.buttons.append(button)

    def draw(self, surface: pygame.Surface, font: Optional[pygame.font.Font]) -> None:
        for button in self.buttons:
            button.draw(surface, font)

    def handle_click(self, x: int, y: int) -> Optional[UIButton]:
        """Click the first button under the point and return it, or None."""
        for button in self.buttons:
            if button.in_bounds(x, y):
                button.handle_click()
                return button
        return None
"""The running simulation: speed control, population history and the window loop."""

from __future__ import annotations

import argparse
import math
import random
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, Union

import pygame

from .assets import TILE_SIZE, Sprites, load_assets
from .chart import draw_chart
from .creatures import Species
from .ui import UI, UIButton
from .world import World, new_world

DEFAULT_SPEED = 0.2
MIN_SPEED = 0.001
TPS = 100
HISTORY_INTERVAL = 10
TEXT_COLOR = (255, 255, 255)


class SimulationStopped(Exception):
    """Raised when the run ends and the chart has been written."""


class Game:
    """Holds the world and drives it at an adjustable speed."""

    def __init__(
        self,
        world: Optional[World] = None,
        rng: Optional[random.Random] = None,
        ui: Optional[UI] = None,
        chart_path: Union[str, Path] = "population.png",
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.world = world if world is not None else new_world(rng=self.rng)
        self.ui = ui if ui is not None else UI()
        self.chart_path = Path(chart_path)
        self.ticks = 0
        self.simulation_speed = DEFAULT_SPEED
        self.rabbit_history: list[int] = []
        self.fox_history: list[int] = []
        self.fps = 0.0

    def reset(self) -> None:
        """Start over with a fresh world, keeping the buttons."""
        self.world = new_world(rng=self.rng)
        self.ticks = 0
        self.simulation_speed = DEFAULT_SPEED
        self.rabbit_history = []
        self.fox_history = []

    def change_speed(self, delta: float) -> None:
        """Adjust the speed, never letting it fall below the minimum."""
        self.simulation_speed = max(self.simulation_speed + delta, MIN_SPEED)

    def record_population(self) -> None:
        """Append the current counts; stop once either species is nearly extinct."""
        rabbits = self.world.count(Species.RABBIT)
        foxes = self.world.count(Species.FOX)
        self.rabbit_history.append(rabbits)
        self.fox_history.append(foxes)
        if rabbits <= 1 or foxes <= 1:
            print(f"Rabbits population: {rabbits} Foxes Population: {foxes}", file=sys.stderr)
            self.stop()

    def simulate(self) -> None:
        """Advance one tick; the world moves every ``1/speed`` ticks."""
        period = int(max(math.pow(self.simulation_speed, -1), 1.0))
        if self.ticks % period == 0:
            if self.ticks % HISTORY_INTERVAL == 0:
                self.record_population()
            self.world.step()
        self.ticks += 1

    def stop(self) -> NoReturn:
        """Write the population chart and end the run."""
        draw_chart(self.rabbit_history, self.fox_history, self.chart_path)
        raise SimulationStopped(f"simulation stopped after {self.ticks} ticks")

    def handle_key(self, key: int) -> bool:
        """Apply a hotkey; return whether the key was one."""
        if key == pygame.K_UP:
            self.change_speed(0.01)
        elif key == pygame.K_RIGHT:
            self.change_speed(1)
        elif key == pygame.K_DOWN:
            self.change_speed(-0.01)
        elif key == pygame.K_LEFT:
            self.change_speed(-1)
        elif key == pygame.K_r:
            self.reset()
        elif key == pygame.K_q:
            self.stop()
        else:
            return False
        return True

    def draw(
        self, surface: pygame.Surface, sprites: Sprites, font: Optional[pygame.font.Font]
    ) -> None:
        """Paint tiles, creatures, buttons and, given a font, the status text."""
        grass = {angle: pygame.transform.rotate(sprites.grass, -angle) for angle in (0, 90, 180, 270)}
        dirt = {angle: pygame.transform.rotate(sprites.dirt, -angle) for angle in (0, 90, 180, 270)}
        for row in self.world.tiles:
            for tile in row:
                position = (tile.x * TILE_SIZE, tile.y * TILE_SIZE)
                angle = tile.rotation % 360
                if tile.grass_density > 0:
                    image = grass[angle].copy()
                    level = round(255 * (0.5 + tile.grass_density / 2))
                    level = max(0, min(255, level))
                    image.fill((level, level, level, level), special_flags=pygame.BLEND_RGBA_MULT)
                    surface.blit(image, position)
                else:
                    surface.blit(dirt[angle], position)

        for entity in self.world.entities:
            sprite = sprites.fox if entity.species is Species.FOX else sprites.rabbit
            if entity.is_flipped:
                sprite = pygame.transform.flip(sprite, True, False)
            surface.blit(sprite, (entity.x * TILE_SIZE, entity.y * TILE_SIZE))

        self.ui.draw(surface, font)
        if font is not None:
            line_height = font.get_linesize()
            for index, line in enumerate(self.debug_text(self.fps).splitlines()):
                surface.blit(font.render(line, True, TEXT_COLOR), (0, index * line_height))

    def debug_text(self, fps: float) -> str:
        """The status lines shown in the corner of the window."""
        return (
            f"FPS: {fps:.2f}\n"
            f"TPS: {fps:.2f}\n"
            f"Ticks: {self.ticks}\n"
            f"Simulation Speed: {self.simulation_speed:.2f}\n"
            f"Rabbit Count: {self.world.count(Species.RABBIT)}\n"
            f"Foxes Count: {self.world.count(Species.FOX)}"
        )


def build_ui(game: Game, window_width: int) -> UI:
    """Add the control buttons to the game's UI and return it."""
    specs = [
        ("Quit", window_width - 50, 10, 40, 25, game.stop),
        ("Reset", window_width - 50, 40, 40, 25, game.reset),
        ("Speed Up", window_width - 80, 70, 70, 25, lambda: game.change_speed(0.01)),
        ("Slow Down", window_width - 80, 100, 70, 25, lambda: game.change_speed(-0.01)),
        ("Bigger Speed Up", window_width - 120, 130, 110, 25, lambda: game.change_speed(0.1)),
        ("Bigger Slow Down", window_width - 120, 160, 110, 25, lambda: game.change_speed(-0.1)),
    ]
    for text, x, y, width, height, handler in specs:
        game.ui.add_button(UIButton(x, y, width, height, text=text, click_handler=handler))
    return game.ui


_HOTKEYS = (pygame.K_UP, pygame.K_RIGHT, pygame.K_DOWN, pygame.K_LEFT, pygame.K_r, pygame.K_q)


def _canvas_position(screen: pygame.Surface, canvas: pygame.Surface) -> tuple[int, int]:
    mx, my = pygame.mouse.get_pos()
    sw, sh = screen.get_size()
    cw, ch = canvas.get_size()
    return mx * cw // max(sw, 1), my * ch // max(sh, 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Predator and prey simulation on a grassy grid.")
    parser.add_argument("--chart", default="population.png", help="where to write the population chart")
    parser.add_argument("--assets", default=None, help="directory holding the sprite images")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        game = Game(rng=random.Random(args.seed), chart_path=args.chart)
        width = game.world.width * TILE_SIZE
        height = game.world.height * TILE_SIZE
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Rabbits and Foxes")
        sprites = load_assets(args.assets, TILE_SIZE)
        pygame.display.set_icon(sprites.fox48)
        build_ui(game, width)
        font = pygame.font.Font(None, 16)
        canvas = pygame.Surface((width, height))
        clock = pygame.time.Clock()
        holding = False

        while True:
            released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    holding = True
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    released = True

            pressed = pygame.key.get_pressed()
            for key in _HOTKEYS:
                if pressed[key]:
                    game.handle_key(key)
                    break

            if holding:
                button = game.ui.handle_click(*_canvas_position(screen, canvas))
                if button is not None:
                    button.is_clicked = True
                if released:
                    holding = False
                    for each in game.ui.buttons:
                        each.is_clicked = False

            game.simulate()
            game.fps = clock.get_fps()
            canvas.fill((0, 0, 0))
            game.draw(canvas, sprites, font)
            screen.blit(pygame.transform.scale(canvas, screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(TPS)
    except SimulationStopped:
        return 0
    finally:
        pygame.quit()
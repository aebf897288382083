"""Grass tiles: growth and spreading to neighbouring tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .util import clamp, remove_first

if TYPE_CHECKING:
    from .world import World

GRASS_SPREAD_CHANCE = 0.1
GRASS_GROWTH_RATE = 0.01

# Spread direction code -> (dx, dy).
DIRECTIONS: dict[int, tuple[int, int]] = {
    1: (0, -1),   # up
    2: (0, 1),    # down
    3: (-1, 0),   # left
    4: (1, 0),    # right
    5: (-1, -1),  # up-left
    6: (1, -1),   # up-right
    7: (-1, 1),   # down-left
    8: (1, 1),    # down-right
}


def _all_directions() -> list[int]:
    return list(DIRECTIONS)


@dataclass
class Tile:
    """One cell of the world, carrying a grass density between 0 and 1."""

    x: int
    y: int
    grass_density: float = 0.0
    spread_directions: list[int] = field(default_factory=_all_directions)
    rotation: int = 0

    def update(self, world: World) -> None:
        """Grow the grass and occasionally seed one bare neighbour."""
        if self.grass_density == 0:
            return

        if self.grass_density < 1.0:
            self.grass_density = clamp(self.grass_density + GRASS_GROWTH_RATE, 0.0, 1.0)

        rng = world.rng
        if rng.random() < GRASS_SPREAD_CHANCE and self.spread_directions:
            order = list(DIRECTIONS)
            rng.shuffle(order)
            for direction in order:
                dx, dy = DIRECTIONS[direction]
                nx = clamp(self.x + dx, 0, world.width - 1)
                ny = clamp(self.y + dy, 0, world.height - 1)
                target = world.tiles[ny][nx]
                if target.grass_density == 0:
                    target.grass_density = 0.2 + rng.random() * 0.3
                    self.spread_directions = remove_first(self.spread_directions, direction)
                    break
"""The grid world holding tiles and creatures."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .creatures import Entity, Fox, Rabbit, Species
from .tile import Tile

WORLD_WIDTH = 60
WORLD_HEIGHT = 60
STARTING_RABBITS = 100
STARTING_FOXES = 20


@dataclass
class World:
    """A rectangular grid of tiles with the creatures living on it."""

    width: int = WORLD_WIDTH
    height: int = WORLD_HEIGHT
    tiles: list[list[Tile]] = field(default_factory=list)
    entities: list[Entity] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"world size must be positive, got {self.width}x{self.height}")
        if not self.tiles:
            self.tiles = [[Tile(x, y) for x in range(self.width)] for y in range(self.height)]

    def count(self, species: Species) -> int:
        """Number of living creatures of a species."""
        return sum(1 for entity in self.entities if entity.species is species)

    def count_at(self, x: int, y: int) -> int:
        """Number of creatures on a cell."""
        return sum(1 for entity in self.entities if entity.x == x and entity.y == y)

    def tile_at(self, x: int, y: int) -> Tile | None:
        """The tile at a position, or None outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.tiles[y][x]

    def add_entity(self, entity: Entity | None) -> None:
        if entity is not None:
            self.entities.append(entity)

    def remove_entity(self, entity: Entity | None) -> None:
        """Remove a creature; unknown creatures are ignored."""
        if entity is None:
            return
        for index, candidate in enumerate(self.entities):
            if candidate.id == entity.id:
                del self.entities[index]
                return

    def entity_of_species_at(
        self, x: int, y: int, species: Species, ignore: Entity | None = None
    ) -> Entity | None:
        """First creature of a species on a cell, skipping ``ignore``."""
        for entity in self.entities:
            if ignore is not None and entity.id == ignore.id:
                continue
            if entity.x == x and entity.y == y and entity.species is species:
                return entity
        return None

    def find_nearest(
        self,
        x: int,
        y: int,
        species: Species,
        ignore: Entity | None = None,
        max_distance: int | None = None,
    ) -> Entity | None:
        """Closest creature of a species strictly within ``max_distance``."""
        if max_distance is None:
            max_distance = self.width * self.height
        best_distance = max_distance * max_distance
        nearest = None
        for entity in self.entities:
            if ignore is not None and entity.id == ignore.id:
                continue
            if entity.species is not species:
                continue
            distance = (entity.x - x) ** 2 + (entity.y - y) ** 2
            if distance < best_distance:
                best_distance = distance
                nearest = entity
        return nearest

    def step(self) -> None:
        """Advance every tile and then every creature by one step."""
        for row in self.tiles:
            for tile in row:
                tile.update(self)
        for entity in list(self.entities):
            entity.update(self)


def new_world(
    width: int = WORLD_WIDTH,
    height: int = WORLD_HEIGHT,
    rabbits: int = STARTING_RABBITS,
    foxes: int = STARTING_FOXES,
    rng: random.Random | None = None,
) -> World:
    """A world with sparse random grass and randomly placed creatures."""
    rng = rng if rng is not None else random.Random()
    tiles = []
    for y in range(height):
        row = []
        for x in range(width):
            density = 0.0
            if rng.random() < 0.05:
                density = 0.2 + rng.random() * 0.3
            row.append(Tile(x, y, density, rotation=rng.randrange(4) * 90))
        tiles.append(row)

    entities: list[Entity] = []
    for _ in range(rabbits):
        entities.append(Rabbit(rng.randrange(width), rng.randrange(height)))
    for _ in range(foxes):
        entities.append(Fox(rng.randrange(width), rng.randrange(height)))
    return World(width, height, tiles, entities, rng)
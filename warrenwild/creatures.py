"""Rabbits and foxes: energy, movement, feeding and reproduction."""

from __future__ import annotations

import enum
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .util import clamp

if TYPE_CHECKING:
    from .world import World

FOX_INITIAL_ENERGY = 15.0
FOX_MAX_ENERGY = 25.0
FOX_ENERGY_LOSS = 0.3
FOX_REPRODUCTION_COOLDOWN = 7.0
FOX_EAT_GAIN = 10.0

RABBIT_INITIAL_ENERGY = 10.0
RABBIT_MAX_ENERGY = 20.0
RABBIT_ENERGY_LOSS = 0.2
RABBIT_REPRODUCTION_COOLDOWN = 2.0
RABBIT_EAT_GAIN = 5.0
RABBIT_INITIAL_CLOCK = 10.0

SIGHT_RANGE = 10
CROWD_LIMIT = 3


class Species(enum.Enum):
    FOX = enum.auto()
    RABBIT = enum.auto()


@dataclass(eq=False)
class Entity(ABC):
    """A living creature on the grid."""

    species: ClassVar[Species]
    initial_energy: ClassVar[float]
    max_energy: ClassVar[float]
    energy_loss: ClassVar[float]
    reproduction_cooldown: ClassVar[float]
    eat_gain: ClassVar[float]
    initial_clock: ClassVar[float]

    x: int
    y: int
    energy: float = field(default=0.0, init=False)
    reproduction_clock: float = field(default=0.0, init=False)
    is_flipped: bool = field(default=False, init=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4, init=False)

    def __post_init__(self) -> None:
        self.energy = self.initial_energy
        self.reproduction_clock = self.initial_clock

    def can_reproduce(self) -> bool:
        """True when the cooldown has run out and energy exceeds the starting level."""
        return self.reproduction_clock <= 0 and self.energy > self.initial_energy

    def find_partner(self, world: World) -> Entity | None:
        """Nearest partner ready to reproduce, if this creature is ready too."""
        if not self.can_reproduce():
            return None
        # Partners are always looked for among foxes, whatever the species.
        partner = world.find_nearest(self.x, self.y, Species.FOX, self)
        if partner is not None and partner.can_reproduce():
            return partner
        return None

    def reproduce(self) -> Entity:
        """A newborn of the same kind on the same cell."""
        return type(self)(self.x, self.y)

    @abstractmethod
    def move(self, world: World) -> None:
        """Take one step on the grid."""

    @abstractmethod
    def eat(self, world: World) -> None:
        """Feed on whatever is on the current cell."""

    def update(self, world: World) -> None:
        """Run one simulation step for this creature."""
        self.energy -= self.energy_loss
        if self.energy <= 0:
            world.remove_entity(self)
            return

        self.move(world)
        self.eat(world)

        other = world.entity_of_species_at(self.x, self.y, self.species, self)
        if (
            other is not None
            and world.count_at(self.x, self.y) < CROWD_LIMIT
            and self.can_reproduce()
            and other.can_reproduce()
        ):
            world.add_entity(self.reproduce())
            self.reproduction_clock = self.reproduction_cooldown
            other.reproduction_clock = other.reproduction_cooldown

        if self.reproduction_clock > 0:
            self.reproduction_clock -= 1

    def _step(self, world: World, dx: int, dy: int) -> None:
        self.x = clamp(self.x + dx, 0, world.width - 1)
        self.y = clamp(self.y + dy, 0, world.height - 1)
        self.is_flipped = dx > 0


def _towards(source: Entity, target: Entity) -> tuple[int, int]:
    return clamp(target.x - source.x, -1, 1), clamp(target.y - source.y, -1, 1)


def _random_offset(world: World) -> tuple[int, int]:
    return world.rng.randrange(3) - 1, world.rng.randrange(3) - 1


@dataclass(eq=False)
class Fox(Entity):
    """A predator that hunts rabbits when hungry."""

    species: ClassVar[Species] = Species.FOX
    initial_energy: ClassVar[float] = FOX_INITIAL_ENERGY
    max_energy: ClassVar[float] = FOX_MAX_ENERGY
    energy_loss: ClassVar[float] = FOX_ENERGY_LOSS
    reproduction_cooldown: ClassVar[float] = FOX_REPRODUCTION_COOLDOWN
    eat_gain: ClassVar[float] = FOX_EAT_GAIN
    initial_clock: ClassVar[float] = FOX_REPRODUCTION_COOLDOWN

    def find_rabbit_if_hungry(self, world: World) -> Entity | None:
        """Nearest rabbit in sight when energy is below half the maximum."""
        if self.energy >= self.max_energy / 2:
            return None
        return world.find_nearest(self.x, self.y, Species.RABBIT, None, SIGHT_RANGE)

    def move(self, world: World) -> None:
        rabbit = self.find_rabbit_if_hungry(world)
        if rabbit is not None:
            dx, dy = _towards(self, rabbit)
        else:
            partner = self.find_partner(world)
            if partner is not None and partner.can_reproduce():
                dx, dy = _towards(self, partner)
            else:
                dx, dy = _random_offset(world)
        self._step(world, dx, dy)

    def eat(self, world: World) -> None:
        rabbit = world.entity_of_species_at(self.x, self.y, Species.RABBIT, None)
        if rabbit is not None and rabbit.energy > 0:
            self.energy = max(self.energy + self.eat_gain, self.max_energy)
            rabbit.energy = 0


@dataclass(eq=False)
class Rabbit(Entity):
    """A grazer that flees from foxes."""

    species: ClassVar[Species] = Species.RABBIT
    initial_energy: ClassVar[float] = RABBIT_INITIAL_ENERGY
    max_energy: ClassVar[float] = RABBIT_MAX_ENERGY
    energy_loss: ClassVar[float] = RABBIT_ENERGY_LOSS
    reproduction_cooldown: ClassVar[float] = RABBIT_REPRODUCTION_COOLDOWN
    eat_gain: ClassVar[float] = RABBIT_EAT_GAIN
    initial_clock: ClassVar[float] = RABBIT_INITIAL_CLOCK

    def move(self, world: World) -> None:
        fox = world.find_nearest(self.x, self.y, Species.FOX, None, SIGHT_RANGE)
        if fox is not None:
            dx, dy = _towards(fox, self)
        else:
            partner = self.find_partner(world)
            if partner is not None:
                dx, dy = _towards(self, partner)
            else:
                dx, dy = _random_offset(world)
        self._step(world, dx, dy)

    def eat(self, world: World) -> None:
        tile = world.tile_at(self.x, self.y)
        if tile is not None and tile.grass_density > 0.5:
            self.energy = max(self.energy + self.eat_gain, self.max_energy)
            tile.grass_density = max(tile.grass_density - self.eat_gain / 10, 0.0)
# warrenwild

A small predator and prey simulation on a grid. Grass grows and spreads across
the tiles, rabbits graze and breed, and foxes hunt rabbits and breed in turn.
When one of the populations collapses, or when you stop the run, a chart of
both populations over time is written as a PNG file.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
warrenwild --assets path/to/sprites
```

Options:

- `--assets DIR`: directory holding the sprite images (see below).
- `--chart PATH`: where to write the population chart (default `population.png`).
- `--seed N`: seed for the random number generator, for repeatable runs.

This opens a resizable window showing the world. The panel in the top-right
corner has buttons to quit, reset the world, speed up or slow down by 0.01,
and speed up or slow down by 0.1.

Keyboard controls:

| Key   | Effect                          |
|-------|---------------------------------|
| Up    | speed up by 0.01                |
| Down  | slow down by 0.01               |
| Right | speed up by 1                   |
| Left  | slow down by 1                  |
| R     | reset the world                 |
| Q     | stop and write the chart        |

The world advances once every `1 / speed` frames (at least every frame); speed
never drops below 0.001. Population counts are recorded whenever the world
advances on a tick that is a multiple of ten, and the run stops on its own,
writing the chart, once rabbits or foxes number one or fewer. Closing the
window ends the program without writing a chart.

## Sprites

The package does not ship any images. The window needs a directory, given with
`--assets`, containing `grass.png`, `dirt.png`, `rabbit.png`, `fox.png`,
`fox-32.png` and `fox-48.png`. The first four are scaled to 16 x 16 pixels by
nearest-neighbour sampling (`warrenwild.assets.scale_nearest`); `fox-48.png` is
used as the window icon. A missing file raises `FileNotFoundError`.

## How the world behaves

- **Grass**: each grassy tile grows by 0.01 per step up to 1.0 and, with a
  one-in-ten chance, seeds one bare neighbouring tile, each direction at most
  once. Bare tiles never grow on their own.
- **Rabbits** move away from the nearest fox within ten tiles; otherwise, when
  ready to breed, they move towards the nearest ready partner; otherwise they
  wander. They eat grass denser than 0.5.
- **Foxes** chase the nearest rabbit within ten tiles when their energy is below
  half the maximum; otherwise they seek a ready partner or wander. A fox eats
  any rabbit on its tile, which then dies on its next step.
- Partner search looks among foxes for both species.
- Every creature loses energy each step and is removed at zero. Two creatures
  of a species on the same tile, with fewer than three creatures there, breed
  once their cooldowns have run out and both have more energy than they started
  with.

## Using it from Python

The model can be driven without a window:

```python
import random

from warrenwild.creatures import Species
from warrenwild.world import new_world

world = new_world(60, 60, 100, 20, random.Random(1))
for _ in range(50):
    world.step()
print(world.count(Species.RABBIT), world.count(Species.FOX))
```

`warrenwild.game.Game` wraps a world with the speed control and population
history; `Game.simulate()` advances one tick, and `Game.stop()` writes the
chart and raises `SimulationStopped`.

`warrenwild.chart.draw_chart(rabbits, foxes, path)` draws a population chart
from two equally long lists of counts sampled every ten ticks and returns the
path it wrote.
"""Sprite loading and nearest-neighbour scaling."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

TILE_SIZE = 16
DEFAULT_ASSET_DIR = Path(__file__).parent / "assets"


@dataclass(frozen=True)
class Sprites:
    """All images the simulation draws."""

    grass: pygame.Surface
    dirt: pygame.Surface
    rabbit: pygame.Surface
    fox: pygame.Surface
    fox16: pygame.Surface
    fox32: pygame.Surface
    fox48: pygame.Surface


def scale_nearest(image: pygame.Surface, size: int) -> pygame.Surface:
    """Resize an image to ``size`` x ``size`` by picking the nearest source pixel."""
    width, height = image.get_size()
    if width == size and height == size:
        return image
    scaled = pygame.Surface((size, size), pygame.SRCALPHA)
    for y in range(size):
        src_y = y * height // size
        for x in range(size):
            scaled.set_at((x, y), image.get_at((x * width // size, src_y)))
    return scaled


def _load(path: Path, resize_to: Optional[int]) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"cannot open asset: {path}")
    image = pygame.image.load(str(path))
    if resize_to is not None:
        image = scale_nearest(image, resize_to)
    return image


def load_assets(
    directory: Union[str, Path, None] = None, tile_size: int = TILE_SIZE
) -> Sprites:
    """Load every sprite from ``directory``; tile sprites are scaled to ``tile_size``."""
    base = Path(directory) if directory is not None else DEFAULT_ASSET_DIR
    return Sprites(
        grass=_load(base / "grass.png", tile_size),
        dirt=_load(base / "dirt.png", tile_size),
        rabbit=_load(base / "rabbit.png", tile_size),
        fox=_load(base / "fox.png", tile_size),
        fox16=_load(base / "fox.png", None),
        fox32=_load(base / "fox-32.png", None),
        fox48=_load(base / "fox-48.png", None),
    )
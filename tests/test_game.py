import random

import pygame
import pytest

from warrenwild.assets import TILE_SIZE, Sprites
from warrenwild.creatures import Fox, Rabbit
from warrenwild.game import DEFAULT_SPEED, MIN_SPEED, Game, SimulationStopped, build_ui
from warrenwild.tile import GRASS_GROWTH_RATE, Tile
from warrenwild.world import STARTING_FOXES, STARTING_RABBITS, World

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def small_world(rabbits=2, foxes=2, density=0.3):
    entities = [Rabbit(0, 0) for _ in range(rabbits)] + [Fox(0, 0) for _ in range(foxes)]
    return World(
        width=1,
        height=1,
        tiles=[[Tile(0, 0, density)]],
        entities=entities,
        rng=random.Random(1),
    )


def make_game(tmp_path, **kwargs):
    return Game(world=small_world(**kwargs), rng=random.Random(2), chart_path=tmp_path / "chart.png")


def test_new_game_defaults(tmp_path):
    game = make_game(tmp_path)
    assert game.ticks == 0
    assert game.simulation_speed == DEFAULT_SPEED
    assert game.rabbit_history == []
    assert game.fox_history == []


def test_change_speed_has_floor(tmp_path):
    game = make_game(tmp_path)
    game.change_speed(-1)
    assert game.simulation_speed == MIN_SPEED
    game.change_speed(0.5)
    assert game.simulation_speed == pytest.approx(MIN_SPEED + 0.5)


def test_record_population_appends(tmp_path):
    game = make_game(tmp_path)
    game.record_population()
    assert game.rabbit_history == [2]
    assert game.fox_history == [2]


def test_record_population_stops_when_nearly_extinct(tmp_path):
    game = make_game(tmp_path, foxes=1)
    with pytest.raises(SimulationStopped):
        game.record_population()
    assert game.fox_history == [1]
    assert (tmp_path / "chart.png").read_bytes()[:8] == PNG_SIGNATURE


def test_simulate_steps_every_period(tmp_path):
    game = make_game(tmp_path)
    for _ in range(5):
        game.simulate()
    assert game.ticks == 5
    assert game.rabbit_history == [2]
    assert game.world.tiles[0][0].grass_density == pytest.approx(0.3 + GRASS_GROWTH_RATE)


def test_full_speed_steps_every_tick(tmp_path):
    game = make_game(tmp_path)
    game.simulation_speed = 1.0
    for _ in range(3):
        game.simulate()
    assert game.world.tiles[0][0].grass_density == pytest.approx(0.3 + 3 * GRASS_GROWTH_RATE)


def test_hotkeys_change_speed(tmp_path):
    game = make_game(tmp_path)
    assert game.handle_key(pygame.K_UP) is True
    assert game.simulation_speed == pytest.approx(DEFAULT_SPEED + 0.01)
    game.handle_key(pygame.K_LEFT)
    assert game.simulation_speed == MIN_SPEED
    assert game.handle_key(pygame.K_a) is False


def test_reset_hotkey_builds_fresh_world(tmp_path):
    game = make_game(tmp_path)
    game.ticks = 42
    game.simulation_speed = 3.0
    game.rabbit_history.append(5)
    game.handle_key(pygame.K_r)
    assert game.ticks == 0
    assert game.simulation_speed == DEFAULT_SPEED
    assert game.rabbit_history == []
    assert len(game.world.entities) == STARTING_RABBITS + STARTING_FOXES


def test_quit_hotkey_stops(tmp_path):
    game = make_game(tmp_path)
    with pytest.raises(SimulationStopped):
        game.handle_key(pygame.K_q)
    assert (tmp_path / "chart.png").exists()


def test_debug_text(tmp_path):
    game = make_game(tmp_path, rabbits=3, foxes=2)
    text = game.debug_text(60.0).splitlines()
    assert text[0] == "FPS: 60.00"
    assert "Ticks: 0" in text
    assert "Simulation Speed: 0.20" in text
    assert "Rabbit Count: 3" in text
    assert "Foxes Count: 2" in text


def test_build_ui_buttons(tmp_path):
    game = make_game(tmp_path)
    ui = build_ui(game, 960)
    assert [button.text for button in ui.buttons] == [
        "Quit",
        "Reset",
        "Speed Up",
        "Slow Down",
        "Bigger Speed Up",
        "Bigger Slow Down",
    ]
    ui.handle_click(960 - 75, 75)
    assert game.simulation_speed == pytest.approx(DEFAULT_SPEED + 0.01)
    ui.handle_click(960 - 115, 165)
    assert game.simulation_speed == pytest.approx(DEFAULT_SPEED + 0.01 - 0.1)


def test_quit_button_stops(tmp_path):
    game = make_game(tmp_path)
    build_ui(game, 960)
    with pytest.raises(SimulationStopped):
        game.ui.handle_click(960 - 45, 15)


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(color)
    return surface


def _sprites():
    rabbit = pygame.Surface((TILE_SIZE, TILE_SIZE))
    rabbit.fill((0, 0, 255))
    rabbit.fill((255, 255, 0), pygame.Rect(TILE_SIZE // 2, 0, TILE_SIZE // 2, TILE_SIZE))
    fox = _solid((255, 128, 0))
    return Sprites(
        grass=_solid((0, 200, 0)),
        dirt=_solid((120, 60, 0)),
        rabbit=rabbit,
        fox=fox,
        fox16=fox,
        fox32=fox,
        fox48=fox,
    )


def test_draw_dirt_and_grass(tmp_path):
    sprites = _sprites()
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    game = make_game(tmp_path, rabbits=0, foxes=0, density=0.0)
    game.draw(surface, sprites, None)
    assert surface.get_at((8, 8))[:3] == sprites.dirt.get_at((0, 0))[:3]
    game.world.tiles[0][0].grass_density = 1.0
    game.draw(surface, sprites, None)
    assert surface.get_at((8, 8))[:3] == sprites.grass.get_at((0, 0))[:3]


def test_draw_flipped_creature(tmp_path):
    sprites = _sprites()
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    game = make_game(tmp_path, rabbits=1, foxes=0, density=0.0)
    game.draw(surface, sprites, None)
    assert surface.get_at((0, 0))[:3] == (0, 0, 255)
    game.world.entities[0].is_flipped = True
    game.draw(surface, sprites, None)
    assert surface.get_at((0, 0))[:3] == (255, 255, 0)
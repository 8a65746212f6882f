from __future__ import annotations

import pygame

from gemcrossing.collectibles import Collectible, CollectibleKind
from gemcrossing.player import ENEMY_SPRITE, Enemy, Player
from gemcrossing.render import Hud, RenderContext, StartScreen, render_tiles, render_world
from gemcrossing.utils import GRASS_TILE, STONE_TILE, WATER_TILE, GridConstants
from gemcrossing.world import World


def test_tiles_drawn_row_major(surface, images) -> None:
    grid = GridConstants()
    render_tiles(RenderContext(surface=surface, images=images, grid=grid))

    assert len(surface.blits) == 30
    assert surface.blits[0] == (WATER_TILE, (0, 0))
    assert surface.blits[1] == (WATER_TILE, (101, 0))
    assert surface.blits[5] == (STONE_TILE, (0, 83))
    assert surface.blits[-1] == (GRASS_TILE, (404, 415))


def test_world_layering_order(surface, images) -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    gem = Collectible.at(grid, CollectibleKind.GEM_BLUE, 2, 2)
    rock = Collectible.at(grid, CollectibleKind.ROCK, 3, 1)
    enemy = Enemy(grid=grid, row=1, speed=10.0, x=12.6)
    world = World(player=player, enemies=[enemy], collectibles=[gem, rock])

    render_world(RenderContext(surface=surface, images=images, grid=grid), world)

    entities = surface.blits[30:]
    assert entities == [
        (gem.sprite, (202, 166)),
        (rock.sprite, (101, 249)),
        (ENEMY_SPRITE, (12, grid.entity_y(1))),
        (player.sprite, (202, grid.entity_y(5))),
    ]


def test_empty_world_draws_tiles_and_player(surface, images) -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    render_world(RenderContext(surface=surface, images=images, grid=grid), World(player=player))
    assert len(surface.blits) == 31
    assert surface.drawn[-1] == player.sprite


def test_removed_collectible_is_not_drawn(surface, images) -> None:
    grid = GridConstants()
    gem = Collectible.at(grid, CollectibleKind.KEY, 1, 1)
    gem.remove()
    world = World(player=Player(grid=grid), collectibles=[gem])
    render_world(RenderContext(surface=surface, images=images, grid=grid), world)
    assert gem.sprite not in surface.drawn


def test_start_screen_visibility_toggles() -> None:
    screen = StartScreen()
    assert screen.visible
    screen.hide()
    assert not screen.visible
    assert not screen.hit(screen.button_rect.center)
    screen.show()
    assert screen.hit(screen.button_rect.center)


def test_overlays_render_on_real_surface() -> None:
    pygame.font.init()
    font = pygame.font.Font(None, 24)
    surface = pygame.Surface((505, 606))
    hud = Hud()
    hud.set_score(120)
    hud.render(surface, font)
    screen = StartScreen()
    screen.score_info = "Your Score: 120"
    screen.render(surface, font, font)
    assert hud.score_text == "120"

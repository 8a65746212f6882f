from __future__ import annotations

from gemcrossing.collectibles import Collectible, CollectibleKind
from gemcrossing.collision import Box, boxes_overlap, resolve_collisions, tolerance_overlap
from gemcrossing.loop import update_entities
from gemcrossing.player import Enemy, Player
from gemcrossing.utils import UP, GridConstants
from gemcrossing.world import World


def test_boxes_overlap_is_inclusive() -> None:
    a = Box(0, 0, 10, 10)
    assert boxes_overlap(a, Box(10, 10, 5, 5))
    assert not boxes_overlap(a, Box(10.5, 0, 5, 5))


def test_shrink_pulls_in_every_side() -> None:
    assert Box(0, 0, 101, 83).shrink(25) == Box(25, 25, 51, 33)


def test_pickup_on_player_cell_is_collected() -> None:
    grid = GridConstants(y_adjust=0)
    player = Player(grid=grid)
    gem = Collectible.at(grid, CollectibleKind.GEM_BLUE, *player.cell)
    scores: list[int] = []

    report = resolve_collisions(World(player=player, collectibles=[gem]), grid, on_score=scores.append)

    assert gem.points == 10
    assert player.score == 10
    assert gem.removed
    assert report.collected == [gem]
    assert scores == [10]


def test_collected_pickup_is_not_counted_again() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    row, col = player.cell
    star = Collectible.at(grid, CollectibleKind.STAR, row, col)
    world = World(player=player, collectibles=[star])

    resolve_collisions(world, grid)
    resolve_collisions(world, grid)

    assert player.score == 100
    assert world.active_collectibles() == []


def test_pickup_needs_exact_cell() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    gem = Collectible.at(grid, CollectibleKind.GEM_GREEN, 4, 2)
    resolve_collisions(World(player=player, collectibles=[gem]), grid)
    assert player.score == 0
    assert not gem.removed


def test_rock_rolls_player_back_to_snapshot() -> None:
    grid = GridConstants(col_space=25)
    player = Player(grid=grid)
    start = (player.x, player.y)
    rock = Collectible.at(grid, CollectibleKind.ROCK, 4, 2)
    world = World(player=player, collectibles=[rock])

    player.queue_move(UP)
    update_entities(world, 0.016)
    assert player.cell == (4, 2)

    report = resolve_collisions(world, grid)

    assert report.blocked
    assert (player.x, player.y) == start
    assert not rock.removed


def test_rock_in_neighbouring_row_does_not_block() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    rock = Collectible.at(grid, CollectibleKind.ROCK, 3, 2)
    world = World(player=player, collectibles=[rock])

    player.queue_move(UP)
    update_entities(world, 0.016)
    report = resolve_collisions(world, grid)

    assert not report.blocked
    assert player.cell == (4, 2)


def test_enemy_contact_resets_player_once() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    player.collect(20)
    player.x, player.y = grid.cell_origin(2, 1)[0], grid.entity_y(2)
    enemies = [Enemy(grid=grid, row=2, speed=0.0, x=player.x + 10), Enemy(grid=grid, row=2, speed=0.0, x=player.x)]
    resets: list[str] = []

    report = resolve_collisions(
        World(player=player, enemies=enemies), grid, on_enemy_contact=lambda: resets.append("reset")
    )

    assert report.enemy_contact
    assert resets == ["reset"]
    assert player.cell == player.start_cell
    assert player.score == 20


def test_enemy_outside_tolerance_is_harmless() -> None:
    grid = GridConstants(col_space=25)
    player = Player(grid=grid)
    enemy = Enemy(grid=grid, row=5, speed=0.0, x=player.x + 52)
    assert not tolerance_overlap(player, enemy, grid)
    enemy.x = player.x + 51
    assert tolerance_overlap(player, enemy, grid)


def test_all_categories_are_checked_in_one_pass() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    row, col = player.cell
    player.x, player.y = player.x + 1, player.y
    player.prev_x, player.prev_y = player.x - 1, player.y
    rock = Collectible.at(grid, CollectibleKind.ROCK, row, col)
    gem = Collectible.at(grid, CollectibleKind.GEM_ORANGE, row, col)
    enemy = Enemy(grid=grid, row=row, speed=0.0, x=grid.cell_origin(row, col)[0])
    contacts: list[int] = []

    report = resolve_collisions(
        World(player=player, enemies=[enemy], collectibles=[rock, gem]),
        grid,
        on_enemy_contact=lambda: contacts.append(1),
    )

    assert report.blocked
    assert report.collected == [gem]
    assert report.enemy_contact
    assert contacts == [1]


def test_removed_objects_are_skipped() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    rock = Collectible.at(grid, CollectibleKind.ROCK, *player.cell)
    rock.remove()
    rock.remove()
    player.x += 1
    report = resolve_collisions(World(player=player, collectibles=[rock]), grid)
    assert not report.blocked
    assert rock.removed


def test_empty_world_resolves_cleanly() -> None:
    grid = GridConstants()
    player = Player(grid=grid)
    report = resolve_collisions(World(player=player), grid)
    assert not report.blocked and not report.collected and not report.enemy_contact

# tests/test_rules.py
import pytest

from config import AppConfig
from core.interfaces import Direction, Phase
from core.snake_rules import Rules

def _park_food(rules, cell=(0, 0)):
    rules.food = cell

def test_new_game_layout(rules_factory):
    r = rules_factory()
    assert r.snake == [(5, 5), (4, 5), (3, 5)]
    assert r.direction is Direction.RIGHT
    assert r.next_direction is Direction.RIGHT
    assert r.phase is Phase.PLAYING
    assert not r.is_game_over()
    assert r.score == 0

def test_food_spawns_on_free_cell(rules_factory):
    r = rules_factory()
    fx, fy = r.food
    assert 0 <= fx < 10 and 0 <= fy < 10
    assert r.food not in r.snake

def test_same_seed_same_food(cfg):
    assert Rules(cfg).food == Rules(cfg).food

def test_tick_moves_forward_without_growing(rules_factory):
    r = rules_factory()
    _park_food(r)
    snap = r.tick()
    assert snap.snake == ((6, 5), (5, 5), (4, 5))
    assert snap.tick_count == 1
    assert snap.score == 0

def test_eating_grows_and_respawns_food(rules_factory):
    r = rules_factory()
    r.food = (6, 5)
    snap = r.tick()
    assert snap.score == 1
    assert snap.snake == ((6, 5), (5, 5), (4, 5), (3, 5))
    assert snap.food is not None and snap.food not in snap.snake

def test_wall_collision_ends_game(rules_factory):
    r = rules_factory()
    _park_food(r)
    for _ in range(4):
        r.tick()
    assert r.snake[0] == (9, 5)
    snap = r.tick()
    assert snap.game_over
    assert snap.reason == "wall"
    assert snap.head == (9, 5)   # head never leaves the grid

def test_self_collision_ends_game(rules_factory):
    r = rules_factory()
    _park_food(r)
    r.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (4, 5), (4, 4)]
    r.direction = r.next_direction = Direction.LEFT
    snap = r.tick()
    assert snap.game_over
    assert snap.reason == "self"

def test_moving_into_current_tail_is_a_collision(rules_factory):
    r = rules_factory()
    _park_food(r)
    r.snake = [(5, 5), (5, 6), (4, 6), (4, 5)]
    r.direction = r.next_direction = Direction.UP
    r.change_direction(Direction.LEFT)
    snap = r.tick()
    assert snap.reason == "self"

def test_reverse_turn_is_ignored(rules_factory):
    r = rules_factory()
    r.change_direction(Direction.LEFT)
    assert r.next_direction is Direction.RIGHT

def test_turn_applies_on_next_tick(rules_factory):
    r = rules_factory()
    _park_food(r)
    r.change_direction(Direction.UP)
    assert r.direction is Direction.RIGHT
    snap = r.tick()
    assert snap.direction is Direction.UP
    assert snap.head == (5, 4)

def test_latest_queued_turn_wins(rules_factory):
    r = rules_factory()
    _park_food(r)
    r.change_direction(Direction.UP)
    r.change_direction(Direction.DOWN)   # not a reversal of the applied direction
    assert r.next_direction is Direction.DOWN
    assert r.tick().head == (5, 6)

def test_two_quick_turns_cannot_reverse(rules_factory):
    r = rules_factory()
    r.change_direction(Direction.UP)
    r.change_direction(Direction.LEFT)
    assert r.next_direction is Direction.UP

def test_tick_after_game_over_is_noop(rules_factory):
    r = rules_factory()
    r.end_game("wall")
    before = r.snapshot()
    assert r.tick() == before

def test_game_initializes_with_high_score(rules_factory):
    assert rules_factory(high_score=42).high_score == 42

@pytest.mark.parametrize("high, score, expected", [(5, 10, 10), (10, 5, 10), (5, 5, 5)])
def test_end_game_high_score(rules_factory, high, score, expected):
    r = rules_factory(high_score=high)
    r.score = score
    r.end_game("wall")
    assert r.high_score == expected
    assert r.is_game_over()

def test_restart_resets_board_and_keeps_high_score(rules_factory):
    r = rules_factory(high_score=10)
    r.snake.insert(0, (0, 0))
    r.direction = Direction.UP
    r.next_direction = Direction.LEFT
    r.score = 15
    r.end_game("self")

    snap = r.restart()

    assert snap.phase is Phase.PLAYING
    assert snap.reason is None
    assert snap.score == 0
    assert snap.high_score == 15
    assert len(snap.snake) == 3
    assert snap.head == (5, 5)
    assert snap.direction is Direction.RIGHT
    assert snap.next_direction is Direction.RIGHT
    assert snap.food is not None and snap.food not in snap.snake
    assert snap.tick_count == 0

@pytest.mark.parametrize("score, seconds", [(0, 0.2), (10, 0.15), (30, 0.05), (100, 0.05)])
def test_tick_interval_speeds_up_with_score(rules_factory, score, seconds):
    r = rules_factory()
    r.score = score
    assert r.tick_interval() == pytest.approx(seconds)

def test_filling_the_board_ends_the_game(rules_factory):
    r = rules_factory(grid_w=4, grid_h=1)
    assert r.food == (3, 0)
    snap = r.tick()
    assert snap.score == 1
    assert snap.food is None
    assert snap.game_over
    assert snap.reason == "full"
    assert snap.high_score == 1

def test_grid_too_small_for_snake():
    with pytest.raises(ValueError):
        Rules(AppConfig(grid_w=2, grid_h=2, start_len=3))

def test_config_class_instead_of_instance():
    with pytest.raises(TypeError):
        Rules(AppConfig)

def test_direction_opposites():
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.LEFT.opposite() is Direction.RIGHT
    assert Direction.RIGHT.delta == (1, 0)

def test_food_follows_config_seed(cfg):
    import random
    r = Rules(cfg.with_(seed=1234))
    occ = set(r.snake)
    free = [(x, y) for y in range(10) for x in range(10) if (x, y) not in occ]
    assert r.food == random.Random(1234).choice(free)

def test_check_config_accepts_smallest_board():
    from core.snake_rules import check_config
    check_config(AppConfig(grid_w=4, grid_h=1, start_len=3))

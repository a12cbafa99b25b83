import dataclasses

import pytest

from gridsnake.config import GRID_W, GRID_H, CFG, Config, Direction
from gridsnake.game import (
    GameState, InputKind, Phase,
    new_game_state, restart, handle_input, step_game, update,
)
from gridsnake.snake import Snake, Food


def running_state(seed: int = 0) -> GameState:
    state = new_game_state(dataclasses.replace(CFG, seed=seed))
    handle_input(state, InputKind.CONFIRM)
    return state


def place_food_far_away(state: GameState) -> None:
    state.food = Food((0, GRID_H - 1))


# ---------- State machine ----------
def test_new_game_waits_for_confirm():
    state = new_game_state(Config(seed=1))
    assert state.phase is Phase.NOT_STARTED
    assert not state.started and not state.over
    assert list(state.snake) == [(GRID_W // 2, GRID_H // 2)]
    assert state.tick_interval == pytest.approx(CFG.initial_tick)
    assert state.food_eaten == 0


def test_direction_keys_ignored_before_start():
    state = new_game_state(Config(seed=1))
    handle_input(state, InputKind.UP)
    assert state.phase is Phase.NOT_STARTED
    assert state.snake.direction is Direction.RIGHT

    handle_input(state, InputKind.CONFIRM)
    assert state.phase is Phase.RUNNING


def test_running_steers_but_never_reverses():
    state = running_state()
    handle_input(state, InputKind.LEFT)
    assert state.snake.direction is Direction.RIGHT
    handle_input(state, InputKind.DOWN)
    assert state.snake.direction is Direction.DOWN


def test_confirm_while_running_does_nothing():
    state = running_state()
    state.food_eaten = 3
    handle_input(state, InputKind.CONFIRM)
    assert state.phase is Phase.RUNNING
    assert state.food_eaten == 3


def test_over_ignores_direction_input():
    state = running_state()
    state.phase = Phase.OVER
    handle_input(state, InputKind.UP)
    assert state.snake.direction is Direction.RIGHT
    assert state.phase is Phase.OVER


def test_restart_from_over_resets_session():
    state = running_state()
    state.snake = Snake((3, 3))
    state.snake.body.extend([(3, 4), (3, 5)])
    state.snake.direction = Direction.UP
    state.food_eaten = 9
    state.tick_interval = CFG.min_tick
    state.elapsed = 0.13
    state.phase = Phase.OVER

    handle_input(state, InputKind.CONFIRM)

    assert state.phase is Phase.RUNNING
    assert state.food_eaten == 0
    assert state.tick_interval == pytest.approx(CFG.initial_tick)
    assert state.elapsed == 0.0
    assert list(state.snake) == [(GRID_W // 2, GRID_H // 2)]
    assert state.snake.direction is Direction.RIGHT


def test_restart_respawns_food():
    state = running_state(seed=5)
    state.food = Food((-1, -1))  # sentinel, never produced by the rng
    restart(state)
    assert state.food.position != (-1, -1)


# ---------- Ticks ----------
def test_step_moves_snake_right():
    state = running_state()
    place_food_far_away(state)
    assert step_game(state)
    assert list(state.snake) == [(GRID_W // 2 + 1, GRID_H // 2)]
    assert state.phase is Phase.RUNNING


def test_eating_grows_respawns_and_counts():
    state = running_state()
    head = state.snake.head
    state.food = Food(head)

    assert step_game(state)

    assert len(state.snake) == 2
    assert state.food_eaten == 1
    assert list(state.snake) == [(head[0] + 1, head[1]), head]


def test_eating_resamples_food_every_time():
    state = running_state(seed=2)
    calls = []
    original = state.food.respawn

    def spy(rng):
        calls.append(rng)
        original(rng)

    state.food.respawn = spy
    for _ in range(3):
        state.food.position = state.snake.head
        step_game(state)
    assert len(calls) == 3
    assert all(rng is state.rng for rng in calls)


def test_speed_up_every_fourth_food_with_floor():
    state = running_state()
    expected = CFG.initial_tick

    for eaten in range(1, 41):
        # keep the snake walking a safe column: reset it before each bite
        state.snake = Snake((0, 0))
        state.snake.direction = Direction.DOWN
        state.food.position = (0, 0)
        step_game(state)
        assert state.food_eaten == eaten
        if eaten % 4 == 0:
            expected = max(expected - CFG.tick_step, CFG.min_tick)
        assert state.tick_interval == pytest.approx(expected)

    assert state.tick_interval == pytest.approx(CFG.min_tick)


def test_length_one_snake_into_wall_ends_game():
    state = running_state()
    state.snake = Snake((GRID_W - 1, 10))
    place_food_far_away(state)

    assert not step_game(state)
    assert state.snake.head == (GRID_W - 1, 10)
    assert state.phase is Phase.OVER


def test_long_snake_into_wall_ends_game():
    state = running_state()
    state.snake = Snake((10, 0))
    state.snake.body.extend([(10, 1), (10, 2)])
    state.snake.direction = Direction.UP
    place_food_far_away(state)

    assert not step_game(state)
    assert state.over


def test_self_collision_ends_game():
    state = running_state()
    state.snake = Snake((5, 5))
    state.snake.body.extend([(5, 6), (4, 6), (4, 5), (4, 4)])
    state.snake.direction = Direction.UP
    handle_input(state, InputKind.LEFT)  # into (4, 5)
    place_food_far_away(state)

    # tail (4, 4) is dropped, (4, 5) is still occupied
    assert not step_game(state)
    assert state.phase is Phase.OVER


# ---------- Frame timing ----------
def test_update_waits_for_tick_interval():
    state = running_state()
    place_food_far_away(state)
    start = state.snake.head

    assert not update(state, 0.1)
    assert not update(state, 0.05)
    assert state.snake.head == start
    assert state.elapsed == pytest.approx(0.15)


def test_update_steps_and_drops_overshoot():
    state = running_state()
    place_food_far_away(state)
    start = state.snake.head
    state.elapsed = 0.35  # well past the interval

    assert update(state, 0.016)
    # one step only, accumulator restarted from zero plus this frame
    assert state.snake.head == (start[0] + 1, start[1])
    assert state.elapsed == pytest.approx(0.016)


def test_update_is_idle_unless_running():
    state = new_game_state(Config(seed=4))
    assert not update(state, 1.0)
    assert state.elapsed == 0.0

    state.phase = Phase.OVER
    assert not update(state, 1.0)
    assert state.elapsed == 0.0


def test_seeded_sessions_place_food_identically():
    a = new_game_state(Config(seed=42))
    b = new_game_state(Config(seed=42))
    assert a.food.position == b.food.position

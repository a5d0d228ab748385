"""
Tests for GameLoopController.

Tests cover:
- Board construction from a level
- Per-tick update order and the collision reset
- Reset idempotence
- Input forwarding, win and restart
- Render order
"""

import random

import pytest

from games.BugCrossing.game.controller import GameLoopController
from games.BugCrossing.game.entities import Avatar, Obstacle
from models import GameState, Key, LevelConfig, ObstacleConfig

LANES = {134.0, 217.0, 300.0}


def assert_spawn_state(controller):
    avatar = controller.avatar
    assert (avatar.x, avatar.y, avatar.won) == (217.0, 466.0, False)
    for obstacle in controller.obstacles:
        assert obstacle.x == -101.0
        assert obstacle.y in LANES
        assert 100 <= obstacle.speed <= 299


class TestControllerConstruction:

    def test_owns_three_obstacles_and_one_avatar(self, controller):
        assert len(controller.obstacles) == 3
        assert all(isinstance(o, Obstacle) for o in controller.obstacles)
        assert isinstance(controller.avatar, Avatar)

    def test_obstacles_are_distinct(self, controller):
        assert len({id(o) for o in controller.obstacles}) == 3

    def test_starts_in_spawn_state(self, controller):
        assert_spawn_state(controller)
        assert controller.state == GameState.PLAYING
        assert controller.ended is False

    def test_default_level(self):
        controller = GameLoopController()
        assert controller.level == LevelConfig()

    def test_obstacle_count_from_level(self, rng):
        level = LevelConfig(obstacles=ObstacleConfig(count=5))
        assert len(GameLoopController(level, rng=rng).obstacles) == 5

    def test_seeded_boards_match(self):
        one = GameLoopController(rng=random.Random(11))
        two = GameLoopController(rng=random.Random(11))
        assert [(o.y, o.speed) for o in one.obstacles] == [(o.y, o.speed) for o in two.obstacles]


class TestControllerUpdate:

    def test_update_advances_every_obstacle(self, controller):
        speeds = [o.speed for o in controller.obstacles]
        controller.update(0.1)
        for obstacle, speed in zip(controller.obstacles, speeds):
            assert obstacle.x == pytest.approx(-101.0 + speed * 0.1)

    def test_update_clamps_avatar(self, controller, park):
        park(controller)
        for _ in range(3):
            controller.handle_input(Key.RIGHT)
        controller.update(0.016)
        assert controller.avatar.x == 419.0

    def test_collision_resets_whole_board(self, controller):
        controller.handle_input(Key.UP)
        controller.handle_input(Key.LEFT)
        for obstacle in controller.obstacles:
            obstacle.x = 300.0
            obstacle.speed = 0
        hazard = controller.obstacles[0]
        hazard.x, hazard.y = 116.0, 383.0

        controller.update(0.0)

        assert_spawn_state(controller)

    def test_obstacles_move_before_collision_check(self, controller, park):
        park(controller)
        runner = controller.obstacles[1]
        runner.y = 466.0
        runner.x = 100.0
        runner.speed = 200

        # 100 + 200 * 0.1 = 120 -> right edge 221 overlaps avatar at 217
        controller.update(0.1)

        assert controller.avatar.x == 217.0
        assert all(o.x == -101.0 for o in controller.obstacles)

    def test_reaching_goal_row_wins(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.016)

        assert controller.state == GameState.WON
        assert controller.ended is True

    def test_win_beats_collision_on_same_tick(self, controller):
        for _ in range(5):
            controller.handle_input(Key.UP)
        for obstacle in controller.obstacles:
            obstacle.x, obstacle.y, obstacle.speed = 217.0, 51.0, 0

        controller.update(0.016)

        assert controller.ended is True
        assert controller.avatar.y == 51.0

    def test_obstacles_keep_moving_while_won(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.016)

        runner = controller.obstacles[0]
        runner.speed = 150
        controller.update(0.2)

        assert runner.x == pytest.approx(-71.0)
        assert controller.ended is True


class TestControllerReset:

    def test_reset_restores_spawn_state(self, controller):
        controller.handle_input(Key.UP)
        controller.update(0.3)
        controller.reset()
        assert_spawn_state(controller)

    def test_reset_twice_matches_reset_once(self, controller):
        controller.handle_input(Key.LEFT)
        controller.update(0.5)

        controller.reset()
        controller.reset()

        assert_spawn_state(controller)
        assert controller.state == GameState.PLAYING

    def test_reset_clears_win(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.0)
        assert controller.ended is True

        controller.reset()

        assert controller.ended is False
        assert controller.state == GameState.PLAYING

    def test_reset_keeps_the_same_entities(self, controller):
        obstacles = controller.obstacles
        avatar = controller.avatar
        controller.reset()
        assert controller.obstacles is obstacles
        assert controller.avatar is avatar


class TestControllerInput:

    def test_input_forwarded_to_avatar(self, controller):
        controller.handle_input(Key.LEFT)
        assert controller.avatar.x == 116.0

    def test_unmapped_key_ignored(self, controller):
        controller.handle_input(None)
        assert (controller.avatar.x, controller.avatar.y) == (217.0, 466.0)

    def test_movement_ignored_while_won(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.0)

        for key in (Key.LEFT, Key.RIGHT, Key.DOWN, Key.UP):
            controller.handle_input(key)

        assert (controller.avatar.x, controller.avatar.y) == (217.0, 51.0)

    def test_confirm_restarts_after_win(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.0)

        controller.handle_input(Key.CONFIRM)

        assert controller.state == GameState.PLAYING
        assert (controller.avatar.x, controller.avatar.y) == (217.0, 466.0)

    def test_confirm_after_win_resets_obstacles(self, controller, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.0)
        park(controller, x=300.0)

        controller.handle_input(Key.CONFIRM)

        assert_spawn_state(controller)

    def test_confirm_while_playing_keeps_obstacles(self, controller, park):
        park(controller, x=300.0)
        controller.handle_input(Key.CONFIRM)
        assert all(o.x == 300.0 for o in controller.obstacles)


class TestControllerRender:

    def test_obstacles_drawn_before_avatar(self, controller, canvas):
        controller.render(canvas)

        sprites = [call[1] for call in canvas.images()]
        assert sprites == ['enemy-bug', 'enemy-bug', 'enemy-bug', 'char-boy']

    def test_avatar_drawn_at_render_offset(self, controller, canvas):
        controller.render(canvas)
        assert canvas.images()[-1] == ('draw_image', 'char-boy', 202.0, 396.0)

    def test_win_screen_drawn_over_obstacles(self, controller, canvas, park):
        park(controller)
        for _ in range(5):
            controller.handle_input(Key.UP)
        controller.update(0.0)

        controller.render(canvas)

        kinds = [call[0] for call in canvas.calls]
        assert kinds[:3] == ['draw_image'] * 3
        assert 'draw_image' not in kinds[3:]
        assert ('fill_rect', 0, 0, 505, 606, '#5068d3') in canvas.calls

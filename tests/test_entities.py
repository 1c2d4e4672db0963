"""
Tests for Brick Breaker game entities
"""

from brick_breaker.core.entities import Ball, Brick, Paddle, Vector2D
from brick_breaker.core.game import Game


class TestVector2D:
    """Tests for Vector2D class"""

    def test_creation(self) -> None:
        """Test vector creation"""
        v = Vector2D(3.0, 4.0)
        assert v.x == 3.0
        assert v.y == 4.0

    def test_addition(self) -> None:
        """Test vector addition"""
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result == Vector2D(4.0, 6.0)

    def test_in_place_addition_keeps_identity(self) -> None:
        """Test in-place addition mutates the same vector"""
        v = Vector2D(1.0, 2.0)
        original = v
        v += Vector2D(1.0, -1.0)
        assert v is original
        assert v.to_tuple() == (2.0, 1.0)

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0

    def test_copy_is_independent(self) -> None:
        """Test that copies do not share state"""
        v = Vector2D(1.0, 2.0)
        c = v.copy()
        c.x = 10.0
        assert v.x == 1.0


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation(self, empty_game: Game) -> None:
        """Test the paddle starts centred near the bottom, standing still"""
        paddle = Paddle(empty_game)
        assert paddle.position.x == 800 / 2 - 150 / 2
        assert paddle.position.y == 600 - 30 - 10
        assert paddle.width == 150
        assert paddle.height == 30
        assert paddle.speed == 0

    def test_move_commands(self, empty_game: Game) -> None:
        """Test move_left / move_right / stop set the speed"""
        paddle = Paddle(empty_game)
        paddle.move_left()
        assert paddle.speed == -7
        paddle.move_right()
        assert paddle.speed == 7
        paddle.stop()
        assert paddle.speed == 0

    def test_update_moves_by_speed(self, empty_game: Game) -> None:
        """Test one update moves by one speed step"""
        paddle = Paddle(empty_game)
        start_x = paddle.position.x
        paddle.move_right()
        paddle.update()
        assert paddle.position.x == start_x + 7

    def test_clamped_at_left_wall_keeps_speed(self, empty_game: Game) -> None:
        """Test the paddle stops at the left wall but keeps pressing"""
        paddle = Paddle(empty_game)
        paddle.position.x = 3
        paddle.move_left()
        paddle.update()
        assert paddle.position.x == 0
        assert paddle.speed == -7

        paddle.update()
        assert paddle.position.x == 0

    def test_clamped_at_right_wall(self, empty_game: Game) -> None:
        """Test the paddle never passes the right wall"""
        paddle = Paddle(empty_game)
        paddle.position.x = 648
        paddle.move_right()
        paddle.update()
        assert paddle.position.x == 800 - 150
        assert paddle.speed == 7

    def test_position_always_within_field(self, empty_game: Game) -> None:
        """Test the clamp holds for a long sequence of commands"""
        paddle = Paddle(empty_game)
        commands = [paddle.move_left] * 3 + [paddle.move_right] * 2 + [paddle.stop]
        for i in range(600):
            commands[(i // 40) % len(commands)]()
            paddle.update()
            assert 0 <= paddle.position.x <= 800 - paddle.width

    def test_get_rect(self, empty_game: Game) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(empty_game)
        assert paddle.get_rect() == (325.0, 560.0, 150.0, 30.0)


class TestBall:
    """Tests for Ball class"""

    def test_creation(self, empty_game: Game) -> None:
        """Test ball creation from the configuration"""
        ball = Ball(empty_game)
        assert ball.position.to_tuple() == (10, 400)
        assert ball.velocity.to_tuple() == (4, -4)
        assert ball.size == 16

    def test_update_moves_one_step(self, empty_game: Game) -> None:
        """Test position advances by exactly one velocity step"""
        ball = empty_game.ball
        ball.update(16.0)
        assert ball.position.to_tuple() == (14, 396)
        assert ball.velocity.to_tuple() == (4, -4)

    def test_delta_time_does_not_scale_movement(self, empty_game: Game) -> None:
        """Test movement is per tick whatever the elapsed time"""
        ball = empty_game.ball
        ball.update(1000.0)
        assert ball.position.to_tuple() == (14, 396)

    def test_left_wall_reflection(self, empty_game: Game) -> None:
        """Test a ball past the left wall reflects horizontally"""
        ball = empty_game.ball
        ball.position = Vector2D(-1, 300)
        ball.velocity = Vector2D(-4, 4)
        ball.update()
        assert ball.velocity.x == 4
        assert ball.velocity.y == 4

    def test_wall_reflection_does_not_reposition(self, empty_game: Game) -> None:
        """Test the ball is left where it moved, even outside the field"""
        ball = empty_game.ball
        ball.position = Vector2D(-1, 300)
        ball.velocity = Vector2D(-4, 4)
        ball.update()
        assert ball.position.x == -5

    def test_right_wall_reflection(self, empty_game: Game) -> None:
        """Test the far edge crossing the right wall reflects"""
        ball = empty_game.ball
        ball.position = Vector2D(790, 300)
        ball.velocity = Vector2D(4, 4)
        ball.update()
        assert ball.velocity.x == -4

    def test_top_wall_reflection(self, empty_game: Game) -> None:
        """Test the ball reflects off the top wall"""
        ball = empty_game.ball
        ball.position = Vector2D(100, 2)
        ball.velocity = Vector2D(4, -4)
        ball.update()
        assert ball.velocity.y == 4

    def test_bottom_wall_reflection(self, empty_game: Game) -> None:
        """Test the ball reflects off the bottom wall away from the paddle"""
        ball = empty_game.ball
        ball.position = Vector2D(10, 590)
        ball.velocity = Vector2D(4, 4)
        ball.update()
        assert ball.velocity.y == -4

    def test_paddle_bounce_snaps_on_top(self, empty_game: Game) -> None:
        """Test a paddle hit flips vy and puts the ball right on the paddle"""
        ball = empty_game.ball
        paddle = empty_game.paddle
        ball.position = Vector2D(380, 546)
        ball.velocity = Vector2D(4, 4)
        ball.update()
        assert ball.velocity.y == -4
        assert ball.position.y == paddle.position.y - ball.size

    def test_ball_over_paddle_edge_does_not_bounce(self, empty_game: Game) -> None:
        """Test a ball sticking out past the paddle's left edge is not a hit"""
        ball = empty_game.ball
        ball.position = Vector2D(316, 546)
        ball.velocity = Vector2D(4, 4)
        ball.update()
        assert ball.velocity.y == 4
        assert ball.position.y == 550

    def test_single_bounce_guard(self, config) -> None:
        """Test collision_bounce reflects only once per tick when configured"""
        config.SINGLE_BOUNCE_PER_TICK = True
        game = Game(800, 600, config=config)
        game.start(level=[])
        ball = game.ball
        ball.collision_bounce()
        ball.collision_bounce()
        assert ball.velocity.y == 4

    def test_collision_bounce_stacks_by_default(self, empty_game: Game) -> None:
        """Test two collision bounces cancel out without the guard"""
        ball = empty_game.ball
        ball.collision_bounce()
        ball.collision_bounce()
        assert ball.velocity.y == -4


class TestBrick:
    """Tests for Brick class"""

    def test_creation(self, empty_game: Game) -> None:
        """Test brick size and initial flag"""
        brick = Brick(empty_game, Vector2D(80, 60))
        assert brick.get_rect() == (80, 60, 80, 24)
        assert brick.marked_for_deletion is False

    def test_hit_flips_ball_and_marks_brick(self, empty_game: Game) -> None:
        """Test a brick under the ball reflects it and marks itself"""
        brick = Brick(empty_game, Vector2D(80, 60))
        ball = empty_game.ball
        ball.position = Vector2D(100, 70)
        ball.velocity = Vector2D(4, -4)

        brick.update()

        assert brick.marked_for_deletion is True
        assert ball.velocity.y == 4
        assert brick.position.to_tuple() == (80, 60)

    def test_marked_brick_does_not_hit_again(self, empty_game: Game) -> None:
        """Test a brick is only hit once"""
        brick = Brick(empty_game, Vector2D(80, 60))
        ball = empty_game.ball
        ball.position = Vector2D(100, 70)

        brick.update()
        brick.update()

        assert ball.velocity.y == 4

    def test_miss_leaves_everything(self, empty_game: Game) -> None:
        """Test a brick away from the ball does nothing"""
        brick = Brick(empty_game, Vector2D(400, 60))
        ball = empty_game.ball

        brick.update()

        assert brick.marked_for_deletion is False
        assert ball.velocity.to_tuple() == (4, -4)

    def test_missing_image_resolves_to_none(self, empty_game: Game) -> None:
        """Test an unloaded asset leaves the brick without an image"""
        brick = Brick(empty_game, Vector2D(0, 60))
        assert brick.image is None

    def test_image_resolved_from_world(self, config) -> None:
        """Test images are looked up by asset id at construction"""
        handle = object()
        game = Game(800, 600, config=config, images={"img_brick": handle})
        game.start(level=[])
        assert Brick(game, Vector2D(0, 60)).image is handle
        assert game.ball.image is None

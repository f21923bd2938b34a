"""Per-frame simulation step.

One tick advances, in this fixed order:
    1. the paddle (held keys, clamped to the arena)
    2. the ball and bricks (collisions, then integration)
    3. the game state (win / lose)

Ball collision causes are mutually exclusive within a frame and are
resolved in priority order: ball lost, bricks, paddle, ceiling, side
walls. Position is then integrated with the resulting velocity.
"""

from dataclasses import replace
from typing import List, Tuple

from ..config import GameConfig
from ..logging import get_logger
from ..models import Vector2D
from .entities import Ball, Brick, Paddle
from .game_state import GameState
from .model import Controls, Model
from .physics import CollisionSide, collision_side, paddle_bounce, reflect_all

log = get_logger('simulation')


def step_paddle(paddle: Paddle, controls: Controls, dt: float, config: GameConfig) -> Paddle:
    """Move the paddle for one tick."""
    return paddle.move(controls.paddle_velocity(config.paddle_speed), dt, config)


def hit_bricks(
    ball: Ball,
    bricks: Tuple[Brick, ...],
    config: GameConfig,
) -> Tuple[Tuple[Brick, ...], List[CollisionSide]]:
    """Break every active brick the ball touches.

    Args:
        ball: Ball at its current position
        bricks: Current bricks
        config: Supplies the ball radius

    Returns:
        Tuple of (updated bricks, distinct struck sides in first-seen order)
    """
    sides = {}
    updated = []
    for brick in bricks:
        if brick.broken:
            updated.append(brick)
            continue
        side = collision_side(ball.position, config.ball_radius, brick.position, brick.half_size)
        if side is CollisionSide.NONE:
            updated.append(brick)
            continue
        updated.append(brick.hit())
        sides.setdefault(side, None)
    return tuple(updated), list(sides)


def speed_factor(broken: int, total: int) -> float:
    """Displacement multiplier that grows as the wall is cleared."""
    if total == 0:
        return 1.0
    return (broken / total + 1) ** 2


def is_ball_lost(ball: Ball, config: GameConfig) -> bool:
    """Ball center has dropped through the open bottom of the arena."""
    return ball.y < -config.half_height


def wall_velocity(ball: Ball, config: GameConfig) -> Vector2D:
    """Velocity after ceiling or side wall contact, or unchanged.

    Directions are forced away from the wall rather than flipped.
    """
    v = ball.velocity
    if ball.y + config.ball_radius >= config.half_height:
        return Vector2D(x=v.x, y=-abs(v.y))
    if ball.x - config.ball_radius <= -config.half_width:
        return Vector2D(x=abs(v.x), y=v.y)
    if ball.x + config.ball_radius >= config.half_width:
        return Vector2D(x=-abs(v.x), y=v.y)
    return v


def step_ball(model: Model, dt: float, config: GameConfig) -> Model:
    """Resolve collisions for the ball and bricks, then move the ball.

    Expects model.paddle to already be advanced for this tick.
    """
    ball = model.ball

    if is_ball_lost(ball, config):
        lives = model.lives - 1
        log.info("Ball lost, %d lives remaining", lives)
        return replace(
            model,
            ball=Ball.initial(config),
            paddle=Paddle(),
            lives=lives,
        )

    bricks, sides = hit_bricks(ball, model.bricks, config)
    if sides:
        log.trace("Brick sides struck: %s", [side.value for side in sides])
        velocity = reflect_all(sides, ball.velocity)
    elif collision_side(
        ball.position,
        config.ball_radius,
        model.paddle.position(config),
        Paddle.half_size(config),
    ) is not CollisionSide.NONE:
        velocity = paddle_bounce(
            ball.velocity,
            ball.x,
            model.paddle.x,
            config.paddle_width,
            config.paddle_angle_factor,
        )
        log.trace("Paddle hit at x offset %.2f", ball.x - model.paddle.x)
    else:
        velocity = wall_velocity(ball, config)

    broken = sum(1 for brick in bricks if brick.broken)
    factor = speed_factor(broken, len(bricks))
    ball = ball.with_velocity(velocity).advance(dt, factor)
    return replace(model, ball=ball, bricks=bricks)


def step_game_state(model: Model) -> Model:
    """Finish the game when all bricks are broken or lives run out."""
    if model.state is not GameState.PLAYING:
        return model
    if model.all_broken:
        log.info("All bricks broken, final score %d", model.score)
        return replace(model, state=GameState.WON, ball=model.ball.stop())
    if model.lives <= 0:
        log.info("Out of lives, final score %d", model.score)
        return replace(model, state=GameState.LOST, ball=model.ball.stop())
    return model


def tick(model: Model, dt: float, config: GameConfig) -> Model:
    """Advance one frame. Only runs while PLAYING.

    Args:
        model: Current snapshot
        dt: Elapsed seconds since the previous tick
        config: Simulation constants

    Returns:
        Next snapshot
    """
    if model.state is not GameState.PLAYING:
        return model

    model = replace(model, paddle=step_paddle(model.paddle, model.controls, dt, config))
    model = step_ball(model, dt, config)
    return step_game_state(model)

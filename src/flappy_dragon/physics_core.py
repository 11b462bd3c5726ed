"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import math
import random
from typing import List, Tuple

from .data_models import GameConfig, Obstacle, Player


class PhysicsCore:
    """
    Deterministic physics for one run: player integration, obstacle movement,
    scoring and collision. Holds no run state of its own.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, player: Player, dt: float, flap: bool = False) -> bool:
        """
        Advances the player by one timestep. Mutates the player.

        Returns True if the unclamped position left the screen vertically;
        the stored row is clamped to the nearest visible row either way.
        """
        velocity = player.velocity + self.config.gravity * dt
        velocity = min(velocity, self.config.terminal_velocity)
        if flap:
            velocity = self.flap()

        # Sub-row motion is carried so small velocities still accumulate.
        exact = player.y + player.subrow + velocity * dt
        y = math.floor(exact + 0.5)

        player.velocity = velocity
        out_of_bounds = self.out_of_bounds(y)
        if out_of_bounds:
            player.y = max(0, min(y, self.config.screen_height - 1))
            player.subrow = 0.0
        else:
            player.y = y
            player.subrow = exact - y
        return out_of_bounds

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.flap_impulse

    def out_of_bounds(self, y: int) -> bool:
        return not 0 <= y < self.config.screen_height

    def column(self, obstacle: Obstacle) -> int:
        """The screen column holding the obstacle's leading (left) edge."""
        return math.floor(obstacle.x)

    def overlaps(self, obstacle: Obstacle, x: int) -> bool:
        """
        True if column x lies in any column the obstacle covered during its
        latest advance, so a fast wall cannot jump over the player.
        """
        start = obstacle.x if obstacle.last_x is None else obstacle.last_x
        return self.column(obstacle) <= x < math.floor(start) + self.config.obstacle_width

    def advance_obstacles(self, obstacles: List[Obstacle], player_x: int,
                          dt: float) -> Tuple[List[Obstacle], int]:
        """
        Moves every obstacle left, scores the ones whose leading edge has
        passed the player's column. Returns the moved obstacles and the
        number of points earned.
        """
        delta_x = self.config.obstacle_speed * dt
        points = 0
        for obstacle in obstacles:
            obstacle.last_x = obstacle.x
            obstacle.x = round(obstacle.x - delta_x, 4)
            if not obstacle.scored and self.column(obstacle) < player_x:
                obstacle.scored = True
                points += 1

        return obstacles, points

    def cull_obstacles(self, obstacles: List[Obstacle]) -> List[Obstacle]:
        """Drops obstacles that are fully off-screen to the left."""
        return [o for o in obstacles if o.x + self.config.obstacle_width > 0]

    def spawn_obstacle(self, rng: random.Random) -> Obstacle:
        """Generates a new obstacle at the right edge of the screen."""
        half = (self.config.gap_size + 1) // 2
        low = self.config.gap_margin + half
        high = max(low, self.config.screen_height - 1 - self.config.gap_margin - half)
        return Obstacle(
            x=float(self.config.screen_width),
            gap_center=rng.randint(low, high),
            gap_size=self.config.gap_size,
        )

    def check_collision(self, player: Player, obstacles: List[Obstacle]) -> bool:
        """Checks the player against the gap of any obstacle covering its column."""
        for obstacle in obstacles:
            if self.overlaps(obstacle, player.x):
                if not obstacle.gap_top <= player.y <= obstacle.gap_bottom:
                    return True
        return False

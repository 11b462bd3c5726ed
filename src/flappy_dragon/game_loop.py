"""
game_loop.py: The game-mode state machine.

The host calls GameLoop.tick() once per frame with at most one input event and
draws the returned Frame. The loop owns the mode, the player, the obstacles
and the score, and never touches a window or keyboard itself.
"""

import math
import random
from typing import List, Optional

from .constants import (
    GAME_TITLE, TICK_TIME, PLAYER_GLYPH, OBSTACLE_GLYPH,
    YELLOW, GREEN, WHITE, RED
)
from .data_models import DrawCommand, Frame, GameConfig, Input, Mode, Obstacle, Player
from .physics_core import PhysicsCore


class GameLoop:
    """
    Mode transitions:

        MENU    --FLAP-->              PLAYING  (fresh player, no obstacles, score 0)
        PLAYING --collision/bounds-->  ENDED    (player frozen, score kept)
        ENDED   --RESTART-->           MENU     (player and obstacles discarded)
        any     --QUIT-->              loop exit

    Every other input is ignored in every mode.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config)
        self.rng = random.Random(seed)

        self.mode = Mode.MENU
        self.player: Optional[Player] = None
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.distance_since_spawn = 0.0
        self.quitting = False

    def tick(self, event: Optional[Input] = Input.NONE, dt: float = TICK_TIME) -> Frame:
        """Consumes one input, advances the simulation if playing, and renders."""
        if self.quitting:
            return Frame(quit=True)

        event = event if isinstance(event, Input) else Input.NONE
        dt = min(dt, self.config.max_dt) if self._valid_dt(dt) else 0.0

        mode_before = self.mode
        self.handle_input(event)
        if self.quitting:
            return Frame(quit=True)

        # The run starts on the tick after the one that left the menu.
        if self.mode == Mode.PLAYING and mode_before == Mode.PLAYING:
            self.update_game(dt, flap=event == Input.FLAP)

        return Frame(commands=self.render())

    @staticmethod
    def _valid_dt(dt) -> bool:
        """Only finite, positive numbers advance time; anything else is a zero step."""
        if isinstance(dt, bool) or not isinstance(dt, (int, float)):
            return False
        return math.isfinite(dt) and dt > 0

    # ---------------- Transitions ----------------

    def handle_input(self, event: Input):
        if event == Input.QUIT:
            self.quitting = True
        elif event == Input.FLAP and self.mode == Mode.MENU:
            self.start_run()
        elif event == Input.RESTART and self.mode == Mode.ENDED:
            self.return_to_menu()

    def start_run(self):
        self.player = Player(x=self.config.player_x, y=self.config.player_start_y)
        self.obstacles = []
        self.score = 0
        self.distance_since_spawn = 0.0
        self.mode = Mode.PLAYING

    def end_run(self):
        self.obstacles = []
        self.mode = Mode.ENDED

    def return_to_menu(self):
        self.player = None
        self.obstacles = []
        self.mode = Mode.MENU

    # ---------------- Simulation ----------------

    def update_game(self, dt: float, flap: bool = False):
        """One PLAYING step: player physics, obstacles, spawning, collision."""
        player = self.player

        # 1. Player
        out_of_bounds = self.core.apply_gravity_and_movement(player, dt, flap)

        # 2. Obstacles. Collision is checked before culling so a wall that
        # swept past the player and left the screen in one tick still hits.
        self.obstacles, points = self.core.advance_obstacles(self.obstacles, player.x, dt)
        crashed = out_of_bounds or self.core.check_collision(player, self.obstacles)
        self.obstacles = self.core.cull_obstacles(self.obstacles)

        # 3. Spawning, keeping the overshoot so walls stay evenly spaced
        self.distance_since_spawn += self.config.obstacle_speed * dt
        if self.distance_since_spawn > self.config.obstacle_spacing:
            self.obstacles.append(self.core.spawn_obstacle(self.rng))
            self.distance_since_spawn %= self.config.obstacle_spacing

        # 4. Points from the crashing tick are not kept.
        if crashed:
            self.end_run()
        else:
            self.score += points

    # ---------------- Rendering ----------------

    def render(self) -> List[DrawCommand]:
        if self.mode == Mode.MENU:
            return self.render_menu()
        if self.mode == Mode.PLAYING:
            return self.render_game()
        if self.mode == Mode.ENDED:
            return self.render_game_over()
        raise AssertionError(f"Unhandled mode {self.mode}")

    def _centered(self, y: int, text: str, color=WHITE) -> DrawCommand:
        x = max(0, (self.config.screen_width - len(text)) // 2)
        return DrawCommand(x=x, y=y, text=text, color=color)

    def render_menu(self) -> List[DrawCommand]:
        middle = self.config.screen_height // 2
        return [
            self._centered(middle - 2, f"Welcome to {GAME_TITLE}!", YELLOW),
            self._centered(middle, "Press SPACE to start"),
            self._centered(middle + 2, "Press R to restart"),
            self._centered(middle + 4, "Press ESC to quit"),
        ]

    def render_game(self) -> List[DrawCommand]:
        commands = []
        width = self.config.screen_width
        for obstacle in self.obstacles:
            left = max(self.core.column(obstacle), 0)
            right = min(self.core.column(obstacle) + self.config.obstacle_width, width)
            if left >= right:
                continue
            wall = OBSTACLE_GLYPH * (right - left)
            for row in range(self.config.screen_height):
                if not obstacle.gap_top <= row <= obstacle.gap_bottom:
                    commands.append(DrawCommand(x=left, y=row, text=wall, color=GREEN))

        commands.append(DrawCommand(x=self.player.x, y=self.player.y, text=PLAYER_GLYPH, color=YELLOW))
        commands.append(DrawCommand(x=1, y=1, text=f"Score: {self.score}"))
        return commands

    def render_game_over(self) -> List[DrawCommand]:
        middle = self.config.screen_height // 2
        return [
            self._centered(middle - 2, "Game Over!", RED),
            self._centered(middle, f"Final score: {self.score}"),
            self._centered(middle + 2, "Press R to restart"),
            self._centered(middle + 4, "Press ESC to quit"),
        ]

"""
data_models.py: Data structures for the game state and the render description.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_X, PLAYER_START_Y,
    GRAVITY_ACCEL, FLAP_IMPULSE, MAX_FALL_VELOCITY,
    OBSTACLE_WIDTH, OBSTACLE_GAP, OBSTACLE_SPEED, OBSTACLE_SPACING,
    OBSTACLE_MARGIN, MAX_TICK_DT, WHITE
)


class Mode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    ENDED = "ended"


class Input(Enum):
    """A discrete key-style signal delivered to the loop, at most one per tick."""
    NONE = "none"
    FLAP = "flap"
    RESTART = "restart"
    QUIT = "quit"


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for one GameLoop. Defaults come from constants.py."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    player_x: int = PLAYER_X
    player_start_y: int = PLAYER_START_Y
    gravity: float = GRAVITY_ACCEL
    flap_impulse: float = FLAP_IMPULSE
    terminal_velocity: float = MAX_FALL_VELOCITY
    obstacle_width: int = OBSTACLE_WIDTH
    gap_size: int = OBSTACLE_GAP
    obstacle_speed: float = OBSTACLE_SPEED
    obstacle_spacing: float = OBSTACLE_SPACING
    gap_margin: int = OBSTACLE_MARGIN
    max_dt: float = MAX_TICK_DT

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"Screen must have a positive size, got {self.screen_width}x{self.screen_height}")
        if not 0 <= self.player_x < self.screen_width:
            raise ValueError(f"player_x {self.player_x} is off-screen")
        if not 0 <= self.player_start_y < self.screen_height:
            raise ValueError(f"player_start_y {self.player_start_y} is off-screen")
        if self.flap_impulse >= 0:
            raise ValueError(f"flap_impulse must be negative (upward), got {self.flap_impulse}")
        if self.terminal_velocity <= 0:
            raise ValueError(f"terminal_velocity must be positive, got {self.terminal_velocity}")
        if self.obstacle_width <= 0 or self.gap_size <= 0:
            raise ValueError("obstacle_width and gap_size must be positive")
        if not self.max_dt > 0:
            raise ValueError(f"max_dt must be positive, got {self.max_dt}")
        if self.obstacle_spacing <= 0 or self.obstacle_speed < 0:
            raise ValueError("obstacle_spacing must be positive and obstacle_speed non-negative")
        if self.gap_size + 2 * self.gap_margin > self.screen_height:
            raise ValueError(
                f"A gap of {self.gap_size} rows with margin {self.gap_margin} does not fit "
                f"on a screen {self.screen_height} rows high")


@dataclass
class Player:
    """The player entity. Only y and velocity change during a run."""
    x: int = PLAYER_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0
    subrow: float = field(default=0.0, repr=False)   # Fraction of a row not yet shown in y


@dataclass
class Obstacle:
    """A wall with a passable gap, moving left towards the player."""
    x: float
    gap_center: float
    gap_size: int = OBSTACLE_GAP
    scored: bool = False
    last_x: Optional[float] = field(default=None, repr=False, compare=False)   # x before the latest advance

    @property
    def gap_top(self) -> float:
        return self.gap_center - self.gap_size / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_center + self.gap_size / 2


@dataclass(frozen=True)
class DrawCommand:
    """Draw `text` with its first character at column x, row y."""
    x: int
    y: int
    text: str
    color: Tuple[int, int, int] = WHITE


@dataclass
class Frame:
    """The result of one tick: what to draw, and whether the host should stop."""
    commands: List[DrawCommand] = field(default_factory=list)
    quit: bool = False

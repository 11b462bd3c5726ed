import os
from dataclasses import replace

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from flappy_dragon import GameConfig, GameLoop, Input  # noqa: E402


@pytest.fixture
def unit_config() -> GameConfig:
    """Per-tick units: dt=1, gravity=1, flap=-5, player at (5, 25), no spawns."""
    return GameConfig(
        screen_width=80,
        screen_height=50,
        player_x=5,
        player_start_y=25,
        gravity=1.0,
        flap_impulse=-5.0,
        terminal_velocity=1000.0,
        obstacle_width=2,
        gap_size=10,
        obstacle_speed=1.0,
        obstacle_spacing=1000.0,
    )


@pytest.fixture
def hover_config(unit_config) -> GameConfig:
    """Like unit_config but without gravity, so the player stays on its row."""
    return replace(unit_config, gravity=0.0)


@pytest.fixture
def playing_loop(unit_config) -> GameLoop:
    loop = GameLoop(unit_config, seed=1)
    loop.tick(Input.FLAP, 1.0)
    return loop

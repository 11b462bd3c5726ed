"""
Flappy Dragon: a character-grid Flappy Bird game loop with a pygame host.
"""

from .data_models import DrawCommand, Frame, GameConfig, Input, Mode, Obstacle, Player
from .game_loop import GameLoop

__all__ = [
    "DrawCommand", "Frame", "GameConfig", "GameLoop",
    "Input", "Mode", "Obstacle", "Player",
]

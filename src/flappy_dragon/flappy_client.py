#!/usr/bin/env python3
"""
flappy_client.py

Pygame host for the game loop: turns key presses into Input events, drives
GameLoop.tick() on a fixed timestep and draws the returned commands on a
character grid.
"""

from collections import deque
from typing import Deque, List, Optional

import pygame

from .constants import GAME_TITLE, TICK_TIME, RENDER_FPS, CELL_SIZE, BLACK
from .data_models import DrawCommand, Frame, GameConfig, Input
from .game_loop import GameLoop

KEY_BINDINGS = {
    pygame.K_SPACE: Input.FLAP,
    pygame.K_r: Input.RESTART,
    pygame.K_ESCAPE: Input.QUIT,
}


def map_event(event) -> Optional[Input]:
    """Translates a pygame event into a game Input, or None if it isn't one."""
    if event.type == pygame.QUIT:
        return Input.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_BINDINGS.get(event.key)
    return None


class InputQueue:
    """Buffers inputs between ticks so the loop sees at most one per tick."""

    def __init__(self):
        self._pending: Deque[Input] = deque()

    def push(self, event: Input):
        # Quit jumps the queue so the window closes without draining presses.
        if event == Input.QUIT:
            self._pending.appendleft(event)
        else:
            self._pending.append(event)

    def pop(self) -> Input:
        return self._pending.popleft() if self._pending else Input.NONE

    def __len__(self):
        return len(self._pending)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.game = GameLoop(config, seed=seed)
        self.inputs = InputQueue()
        self.frame = Frame()

        # Time Management
        self.tick_timer = 0.0
        self.render_delta_time = 0.0

        self.screen = None
        self.font = None
        self.clock = None

    def _init_display(self):
        pygame.init()
        width = self.game.config.screen_width * CELL_SIZE
        height = self.game.config.screen_height * CELL_SIZE
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(GAME_TITLE)
        self.font = pygame.font.SysFont("monospace", CELL_SIZE)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        self._init_display()
        print(f"{GAME_TITLE} started ({self.game.config.screen_width}x"
              f"{self.game.config.screen_height} cells, {int(1 / TICK_TIME)} ticks/s).")
        try:
            running = True
            while running:
                self.render_delta_time = self.clock.tick(RENDER_FPS) / 1000.0

                for event in pygame.event.get():
                    game_input = map_event(event)
                    if game_input is not None:
                        self.inputs.push(game_input)

                # --- Simulation Loop (Fixed Timestep) ---
                self.tick_timer += self.render_delta_time
                while running and self.tick_timer >= TICK_TIME:
                    self.tick_timer -= TICK_TIME
                    running = self.step()

                if running:
                    self._draw(self.frame.commands)
        finally:
            pygame.quit()

    def step(self) -> bool:
        """Runs one game tick. Returns False once the loop has asked to quit."""
        mode_before = self.game.mode
        self.frame = self.game.tick(self.inputs.pop(), TICK_TIME)
        if self.frame.quit:
            print("Quit requested. Exiting.")
            return False

        if self.game.mode != mode_before:
            print(f"Mode {mode_before.value} -> {self.game.mode.value} (score: {self.game.score})")
        return True

    def _draw(self, commands: List[DrawCommand]):
        """Renders the draw commands using Pygame."""
        self.screen.fill(BLACK)
        for command in commands:
            surface = self.font.render(command.text, True, command.color)
            self.screen.blit(surface, (command.x * CELL_SIZE, command.y * CELL_SIZE))
        pygame.display.flip()


def main():
    client = FlappyClient()
    try:
        client.run()
    except KeyboardInterrupt:
        print("Interrupted.")


if __name__ == "__main__":
    main()

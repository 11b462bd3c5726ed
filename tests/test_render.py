"""
Tests for the render description produced for each mode.
"""

from flappy_dragon import GameLoop, Input, Mode, Obstacle
from flappy_dragon.constants import OBSTACLE_GLYPH, PLAYER_GLYPH


def _texts(frame):
    return [command.text for command in frame.commands]


def test_menu_shows_instructions(unit_config):
    frame = GameLoop(unit_config).tick(Input.NONE, 1.0)
    texts = _texts(frame)
    assert texts == [
        "Welcome to Flappy Dragon!",
        "Press SPACE to start",
        "Press R to restart",
        "Press ESC to quit",
    ]
    # Centered on an 80 column screen, around the middle row.
    welcome = frame.commands[0]
    assert welcome.x == (80 - len(welcome.text)) // 2
    assert welcome.y == 23


def test_playing_draws_player_and_score(playing_loop):
    frame = playing_loop.tick(Input.NONE, 1.0)
    player = [c for c in frame.commands if c.text == PLAYER_GLYPH]
    assert len(player) == 1
    assert (player[0].x, player[0].y) == (5, 26)
    assert "Score: 0" in _texts(frame)


def test_playing_draws_obstacle_walls_outside_gap(hover_config):
    loop = GameLoop(hover_config)
    loop.tick(Input.FLAP, 1.0)
    loop.obstacles.append(Obstacle(x=41.0, gap_center=25, gap_size=10))

    frame = loop.tick(Input.NONE, 1.0)
    walls = [c for c in frame.commands if c.text.startswith(OBSTACLE_GLYPH)]
    rows = {c.y for c in walls}

    assert all(c.x == 40 and c.text == OBSTACLE_GLYPH * 2 for c in walls)
    assert rows == set(range(0, 20)) | set(range(31, 50))


def test_obstacle_partly_off_screen_is_clipped(hover_config):
    loop = GameLoop(hover_config)
    loop.tick(Input.FLAP, 1.0)
    loop.obstacles.append(Obstacle(x=0.0, gap_center=25, gap_size=10, scored=True))

    frame = loop.tick(Input.NONE, 1.0)
    walls = [c for c in frame.commands if c.text.startswith(OBSTACLE_GLYPH)]
    assert walls
    assert all(c.x == 0 and c.text == OBSTACLE_GLYPH for c in walls)


def test_player_is_drawn_over_obstacles(hover_config):
    loop = GameLoop(hover_config)
    loop.tick(Input.FLAP, 1.0)
    loop.obstacles.append(Obstacle(x=50.0, gap_center=25, gap_size=10))

    frame = loop.tick(Input.NONE, 1.0)
    texts = _texts(frame)
    assert texts.index(PLAYER_GLYPH) > max(
        i for i, text in enumerate(texts) if text.startswith(OBSTACLE_GLYPH))


def test_game_over_shows_final_score(playing_loop):
    playing_loop.score = 4
    frame = None
    while playing_loop.mode == Mode.PLAYING:
        frame = playing_loop.tick(Input.FLAP, 1.0)

    texts = _texts(frame)
    assert "Game Over!" in texts
    assert "Final score: 4" in texts
    assert "Press R to restart" in texts
    assert PLAYER_GLYPH not in texts

# src/tictactoe/config.py

from __future__ import annotations

BOARD_WIDTH = 3

# Default roster
HUMAN_NAME = "You"
HUMAN_PIECE = "X"
AI_NAME = "Minimax AI"
AI_PIECE = "O"

# Terminal scores. Depth is subtracted from a win and added to a loss,
# so these must stay larger than the deepest possible search (width * width).
WIN_SCORE = 100
LOSS_SCORE = -100
DRAW_SCORE = 0

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # short pause so AI moves aren’t instant

# Self-play benchmark
SELFPLAY_GAMES = 20
SELFPLAY_SEED = 1234

"""
tic-tac-toe with a clickable move history
"""

from .game_logic import GameEngine, GameState, Outcome, evaluate_outcome

__version__ = "1.0.0"

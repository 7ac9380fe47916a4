"""Core game state representation and rules."""

from .game_state import GameState, HUMAN, AI, PLAYER_NAMES, opponent
from .canonical import CanonicalKey, canonical_key
from .rules import (
    IllegalMoveError,
    Move,
    create_starting_state,
    generate_moves,
    apply_move,
    is_terminal,
    terminal_score,
    nim_sum,
    get_winner,
)

__all__ = [
    "GameState",
    "HUMAN",
    "AI",
    "PLAYER_NAMES",
    "opponent",
    "CanonicalKey",
    "canonical_key",
    "IllegalMoveError",
    "Move",
    "create_starting_state",
    "generate_moves",
    "apply_move",
    "is_terminal",
    "terminal_score",
    "nim_sum",
    "get_winner",
]

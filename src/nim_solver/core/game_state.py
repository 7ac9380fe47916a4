"""
Game state representation for Nim.

A Nim game state consists of:
- Pile sizes (objects remaining in each pile)
- Player to move

Pile order does not affect the game value, but it identifies which pile
a move touches when moves are reported back to the player.
"""

from typing import Tuple
from dataclasses import dataclass

from .canonical import CanonicalKey, canonical_key

HUMAN = 1
AI = 2

PLAYER_NAMES = {HUMAN: "You", AI: "AI"}


def opponent(player: int) -> int:
    """Return the other player."""
    return AI if player == HUMAN else HUMAN


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state representation.

    Example: piles=(3, 4, 5), player=AI means three piles holding
    3, 4 and 5 objects with the AI to move.
    """

    piles: Tuple[int, ...]  # Objects in each pile (immutable)
    player: int  # Player to move (HUMAN or AI)

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if not isinstance(self.piles, tuple):
            object.__setattr__(self, "piles", tuple(self.piles))
        if self.player not in (HUMAN, AI):
            raise ValueError(f"Invalid player {self.player}, must be {HUMAN} or {AI}")
        if any(size < 0 for size in self.piles):
            raise ValueError("Negative pile size not allowed")

    @property
    def num_piles(self) -> int:
        return len(self.piles)

    @property
    def total_objects(self) -> int:
        """Objects left on the board (bounds the number of moves remaining)."""
        return sum(self.piles)

    @property
    def canonical_key(self) -> CanonicalKey:
        """Order-independent memo key for this state."""
        return canonical_key(self.piles, self.player)

    def __str__(self) -> str:
        """Human-readable board representation."""
        lines = ["", "Current piles:"]
        for i, size in enumerate(self.piles):
            lines.append(f"Pile {i + 1}: {size}")
        lines.append("")
        lines.append(f"{PLAYER_NAMES[self.player]} to move")
        return "\n".join(lines)

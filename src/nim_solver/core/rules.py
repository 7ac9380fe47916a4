"""
Nim game rules implementation.

Implements standard Nim under normal play:
- A move removes 1..n objects from exactly one non-empty pile
- Players alternate after every move
- The player who removes the last object wins
"""

from dataclasses import dataclass
from functools import reduce
from operator import xor
from typing import List, Optional, Sequence, Union

from .game_state import AI, HUMAN, GameState, opponent


class IllegalMoveError(ValueError):
    """Raised when a move does not fit the current board."""


@dataclass(frozen=True)
class Move:
    """A legal move and the state it leads to."""

    pile_index: int  # 0-based pile index
    amount: int  # Objects removed (1..pile size)
    child: GameState  # Resulting state, opponent to move


def create_starting_state(piles: Sequence[int], first_player: int = HUMAN) -> GameState:
    """
    Create the initial game state.

    Args:
        piles: Initial pile sizes
        first_player: Player who moves first

    Returns:
        Starting GameState
    """
    return GameState(piles=tuple(piles), player=first_player)


def generate_moves(state: GameState) -> List[Move]:
    """
    Generate every legal move for the player to move.

    Moves are ordered by pile index, then by amount removed. Empty piles
    contribute nothing, so a terminal state yields an empty list.

    Args:
        state: Current game state

    Returns:
        List of moves with their child states
    """
    moves = []
    next_player = opponent(state.player)

    for pile_index, size in enumerate(state.piles):
        if size == 0:
            continue
        for take in range(1, size + 1):
            piles = list(state.piles)
            piles[pile_index] -= take
            moves.append(Move(pile_index, take, GameState(tuple(piles), next_player)))

    return moves


def apply_move(state: GameState, pile_index: int, amount: int) -> GameState:
    """
    Apply a move and return the resulting state.

    Args:
        state: Current game state
        pile_index: 0-based index of the pile to take from
        amount: Number of objects to remove

    Returns:
        New GameState after the move, opponent to move

    Raises:
        IllegalMoveError: if the pile index or amount is out of range
    """
    if not 0 <= pile_index < state.num_piles:
        raise IllegalMoveError(
            f"Pile {pile_index + 1} does not exist (board has {state.num_piles} piles)"
        )
    if not 1 <= amount <= state.piles[pile_index]:
        raise IllegalMoveError(
            f"Cannot remove {amount} from pile {pile_index + 1} "
            f"holding {state.piles[pile_index]}"
        )

    piles = list(state.piles)
    piles[pile_index] -= amount
    return GameState(piles=tuple(piles), player=opponent(state.player))


def is_terminal(board: Union[GameState, Sequence[int]]) -> bool:
    """
    Check if the game has ended.

    The game ends when every pile is empty. A board with no piles at all
    is terminal.

    Args:
        board: GameState or bare pile sizes

    Returns:
        True if game is over
    """
    piles = board.piles if isinstance(board, GameState) else board
    return all(size == 0 for size in piles)


def terminal_score(player_to_move: int) -> int:
    """
    Score of an empty board from the AI's perspective.

    The player facing an empty board has just lost, so the AI to move
    scores -1 and the human to move scores +1.
    """
    return -1 if player_to_move == AI else 1


def nim_sum(piles: Sequence[int]) -> int:
    """XOR of all pile sizes. Zero means the player to move loses."""
    return reduce(xor, piles, 0)


def get_winner(state: GameState) -> Optional[int]:
    """
    Get the winner of a finished game.

    Args:
        state: Game state

    Returns:
        The player who moved last, or None if not terminal
    """
    if not is_terminal(state):
        return None

    return opponent(state.player)

"""
Interactive game loop: human versus AI.

Reads the board setup and human moves from the console, asks the solver
for AI moves and alternates turns until the board is empty. The player
who removes the last object wins.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..core import (
    AI,
    HUMAN,
    PLAYER_NAMES,
    GameState,
    apply_move,
    create_starting_state,
    get_winner,
    is_terminal,
)
from ..solver import MinimaxSolver
from ..utils import GameDisplay

logger = logging.getLogger(__name__)


def parse_ints(text: str, count: Optional[int] = None) -> List[int]:
    """
    Parse whitespace-separated integers.

    Args:
        text: Raw input line
        count: Exact number of integers expected, if any

    Returns:
        Parsed integers

    Raises:
        ValueError: on non-integer tokens or a wrong count
    """
    values = [int(token) for token in text.split()]
    if count is not None and len(values) != count:
        raise ValueError(f"Expected {count} numbers, got {len(values)}")
    return values


class GameSession:
    """One game between a human and the AI."""

    def __init__(
        self,
        solver: MinimaxSolver,
        display: GameDisplay,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize game session.

        Args:
            solver: Solver used for AI moves
            display: Output for board and messages
            read_line: Prompt function returning one line of input
                (default: the display console's input)
        """
        self.solver = solver
        self.display = display
        self.read_line = read_line or display.console.input
        self.history: List[Tuple[int, int, int]] = []  # (player, pile_index, amount)

    def ask_piles(self) -> Tuple[int, ...]:
        """Ask for the pile count and the pile sizes."""
        while True:
            try:
                (count,) = parse_ints(self.read_line("Enter number of piles: "), 1)
                if count < 1:
                    raise ValueError("Need at least one pile")
                sizes = parse_ints(self.read_line("Enter pile sizes: "), count)
                return GameState(piles=tuple(sizes), player=HUMAN).piles
            except ValueError as e:
                self.display.log_warning(f"{e}. Try again.")

    def ask_first_player(self) -> int:
        """Ask who moves first."""
        while True:
            try:
                (choice,) = parse_ints(self.read_line("Who goes first? (1 = You, 2 = AI): "), 1)
                if choice not in (HUMAN, AI):
                    raise ValueError(f"Choose {HUMAN} or {AI}")
                return choice
            except ValueError as e:
                self.display.log_warning(f"{e}. Try again.")

    def ask_human_move(self, state: GameState) -> GameState:
        """Read human moves until a legal one is entered, then apply it."""
        while True:
            try:
                pile_number, amount = parse_ints(
                    self.read_line("Your move (pile number & how many to remove): "), 2
                )
                next_state = apply_move(state, pile_number - 1, amount)
            except ValueError as e:
                # IllegalMoveError or unparseable input
                logger.debug(f"Rejected move: {e}")
                self.display.log_warning("Invalid move. Try again.")
                continue

            self.history.append((HUMAN, pile_number - 1, amount))
            return next_state

    def play_ai_move(self, state: GameState) -> GameState:
        """Let the solver pick and apply the AI's move."""
        self.display.log_info("AI is thinking...")
        decision = self.solver.best_move(state.piles)
        self.display.show_ai_move(decision.pile_index, decision.amount)
        self.history.append((AI, decision.pile_index, decision.amount))
        return apply_move(state, decision.pile_index, decision.amount)

    def play(self, piles: Optional[Sequence[int]] = None, first_player: Optional[int] = None) -> int:
        """
        Run the game to completion.

        Args:
            piles: Starting pile sizes (asked for when None)
            first_player: HUMAN or AI (asked for when None)

        Returns:
            The winning player
        """
        if piles is None:
            piles = self.ask_piles()
        if first_player is None:
            first_player = self.ask_first_player()

        state = create_starting_state(piles, first_player)
        logger.info(f"New game: piles {state.piles}, {PLAYER_NAMES[first_player]} first")

        while True:
            self.display.show_board(state.piles)

            if is_terminal(state):
                winner = get_winner(state)
                logger.info(f"Game over after {len(self.history)} moves")
                self.display.show_winner(PLAYER_NAMES[winner])
                return winner

            if state.player == HUMAN:
                state = self.ask_human_move(state)
            else:
                state = self.play_ai_move(state)

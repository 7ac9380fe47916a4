"""
Memoized minimax solver.

Computes exact game values for Nim positions by exhaustive search.
Scores are always from the AI's perspective: +1 means the AI wins with
best play, -1 means it loses.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core import (
    AI,
    CanonicalKey,
    GameState,
    Move,
    generate_moves,
    is_terminal,
    terminal_score,
)

logger = logging.getLogger(__name__)

MemoTable = Dict[CanonicalKey, int]


class NoLegalMovesError(ValueError):
    """Raised when a move is requested on an empty board."""


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search expands more nodes than allowed."""


@dataclass
class SearchStats:
    """Counters for one search."""

    nodes_expanded: int = 0
    cache_hits: int = 0
    terminal_hits: int = 0


@dataclass(frozen=True)
class Decision:
    """The AI's chosen move and the value of the position it was chosen from."""

    pile_index: int
    amount: int
    score: int


class _Frame:
    """A position whose children are still being scored."""

    __slots__ = ("key", "maximizing", "moves", "best")

    def __init__(self, state: GameState, moves: Iterator[Move]):
        self.key = state.canonical_key
        self.maximizing = state.player == AI
        self.moves = moves
        # Worst possible score for the player to move
        self.best = -1 if self.maximizing else 1

    def update(self, score: int) -> None:
        if self.maximizing:
            self.best = max(self.best, score)
        else:
            self.best = min(self.best, score)


class MinimaxSolver:
    """
    Minimax solver with a memo table keyed by canonical state.

    The AI maximizes the score and the human minimizes it. The search
    runs on an explicit stack, so board size is not limited by the
    interpreter's recursion limit.
    """

    def __init__(
        self,
        memo: Optional[MemoTable] = None,
        reuse_memo: bool = False,
        max_nodes: Optional[int] = None,
    ):
        """
        Initialize minimax solver.

        Args:
            memo: Memo table to read and fill (default: a new empty table)
            reuse_memo: Keep the memo table between best_move calls
            max_nodes: Abort a search after expanding this many positions
        """
        self.memo: MemoTable = {} if memo is None else memo
        self.reuse_memo = reuse_memo
        self.max_nodes = max_nodes
        self.stats = SearchStats()

    def evaluate(self, state: GameState) -> int:
        """
        Compute the minimax value of a position.

        Args:
            state: Position to evaluate

        Returns:
            +1 if the AI wins with best play, -1 otherwise
        """
        known = self._known_score(state)
        if known is not None:
            return known

        stack: List[_Frame] = [self._expand(state)]
        frame = stack[-1]

        while stack:
            frame = stack[-1]
            descended = False

            for move in frame.moves:
                score = self._known_score(move.child)
                if score is None:
                    stack.append(self._expand(move.child))
                    descended = True
                    break
                frame.update(score)

            if descended:
                continue

            # All children scored
            self.memo[frame.key] = frame.best
            stack.pop()
            if stack:
                stack[-1].update(frame.best)

        return frame.best

    def best_move(self, piles: Sequence[int]) -> Decision:
        """
        Find the AI's best move.

        Every child of the root is evaluated and the first one with the
        highest score wins, so ties go to the lowest pile index and then
        the smallest amount.

        Args:
            piles: Current pile sizes, AI to move

        Returns:
            Decision with the move and the root score

        Raises:
            NoLegalMovesError: if every pile is empty
        """
        root = GameState(piles=tuple(piles), player=AI)
        if is_terminal(root):
            raise NoLegalMovesError("No legal moves: every pile is empty")

        if not self.reuse_memo:
            self.memo.clear()
        self.stats = SearchStats()

        best: Optional[Move] = None
        best_score = -1

        for move in generate_moves(root):
            score = self.evaluate(move.child)
            if best is None or score > best_score:
                best = move
                best_score = score

        logger.debug(
            f"Searched {root.piles}: {self.stats.nodes_expanded:,} nodes expanded, "
            f"{self.stats.cache_hits:,} cache hits, {len(self.memo):,} memo entries"
        )
        logger.info(
            f"Best move: remove {best.amount} from pile {best.pile_index + 1} "
            f"(score {best_score:+d})"
        )

        return Decision(pile_index=best.pile_index, amount=best.amount, score=best_score)

    def _known_score(self, state: GameState) -> Optional[int]:
        """Score without expanding: terminal rule or memo hit."""
        if is_terminal(state):
            self.stats.terminal_hits += 1
            return terminal_score(state.player)

        score = self.memo.get(state.canonical_key)
        if score is not None:
            self.stats.cache_hits += 1
        return score

    def _expand(self, state: GameState) -> _Frame:
        self.stats.nodes_expanded += 1
        if self.max_nodes is not None and self.stats.nodes_expanded > self.max_nodes:
            raise SearchBudgetExceeded(
                f"Search exceeded {self.max_nodes:,} nodes at {state.piles}"
            )
        return _Frame(state, iter(generate_moves(state)))


def evaluate(state: GameState, memo: Optional[MemoTable] = None) -> int:
    """Minimax value of a position, filling memo if given."""
    return MinimaxSolver(memo=memo).evaluate(state)


def best_ai_move(piles: Sequence[int]) -> Tuple[int, int]:
    """
    Compute the AI's optimal move with a fresh memo table.

    Args:
        piles: Current pile sizes; at least one must be non-zero

    Returns:
        (pile_index, amount_removed)
    """
    decision = MinimaxSolver().best_move(piles)
    return decision.pile_index, decision.amount

"""
Exhaustive check of the solver against nim-sum theory.

Evaluates every board with a given number of piles up to a maximum pile
size and compares each minimax value with the closed-form result: the
player to move loses iff the nim-sum is zero.
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations_with_replacement
from typing import List, Tuple

from tqdm import tqdm

from ..core import AI, HUMAN, GameState, PLAYER_NAMES, nim_sum
from .minimax import MinimaxSolver

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Outcome of an analysis run."""

    positions: int = 0
    wins: int = 0  # Positions won by the player to move
    losses: int = 0
    mismatches: List[Tuple[Tuple[int, ...], int, int]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def expected_score(piles: Tuple[int, ...], player: int) -> int:
    """AI-perspective score predicted by the nim-sum."""
    mover_wins = nim_sum(piles) != 0
    if player == AI:
        return 1 if mover_wins else -1
    return -1 if mover_wins else 1


def analyze(num_piles: int, max_pile: int, show_progress: bool = True) -> AnalysisReport:
    """
    Evaluate every canonical board and compare with the nim-sum oracle.

    Boards are enumerated in non-decreasing pile order, one per canonical
    key, for both players to move. A single memo table is shared across
    the whole run.

    Args:
        num_piles: Piles per board
        max_pile: Largest pile size to enumerate
        show_progress: Show a tqdm progress bar

    Returns:
        AnalysisReport with counts and any mismatches
    """
    if num_piles < 0 or max_pile < 0:
        raise ValueError("num_piles and max_pile must be non-negative")

    boards = list(combinations_with_replacement(range(max_pile + 1), num_piles))
    logger.info(f"Analyzing {len(boards):,} boards ({num_piles} piles, sizes 0-{max_pile})")

    solver = MinimaxSolver()
    report = AnalysisReport()

    with tqdm(
        total=len(boards) * 2, desc="Analyze", unit=" pos", disable=not show_progress
    ) as pbar:
        for piles in boards:
            for player in (AI, HUMAN):
                score = solver.evaluate(GameState(piles=piles, player=player))
                expected = expected_score(piles, player)

                report.positions += 1
                if (score == 1) == (player == AI):
                    report.wins += 1
                else:
                    report.losses += 1

                if score != expected:
                    logger.error(
                        f"Mismatch at {piles} ({PLAYER_NAMES[player]} to move): "
                        f"minimax {score:+d}, nim-sum predicts {expected:+d}"
                    )
                    report.mismatches.append((piles, player, score))

                pbar.update(1)

    logger.info(
        f"Analyzed {report.positions:,} positions: {report.wins:,} wins and "
        f"{report.losses:,} losses for the player to move, "
        f"{len(report.mismatches)} mismatches, {len(solver.memo):,} memo entries"
    )
    return report

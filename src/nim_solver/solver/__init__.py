"""Game-tree search for optimal Nim play."""

from .minimax import (
    Decision,
    MinimaxSolver,
    NoLegalMovesError,
    SearchBudgetExceeded,
    SearchStats,
    best_ai_move,
    evaluate,
)
from .analysis import AnalysisReport, analyze

__all__ = [
    "Decision",
    "MinimaxSolver",
    "NoLegalMovesError",
    "SearchBudgetExceeded",
    "SearchStats",
    "best_ai_move",
    "evaluate",
    "AnalysisReport",
    "analyze",
]

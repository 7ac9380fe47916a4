"""
Main CLI for the Nim solver.
"""

import argparse
import logging
import sys

from ..core import AI, HUMAN, nim_sum
from ..solver import MinimaxSolver, SearchBudgetExceeded, analyze
from ..utils import GameDisplay, setup_rich_logging
from .game import GameSession


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def play_command(args):
    """Play an interactive game against the AI."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    display = GameDisplay()
    solver = MinimaxSolver(reuse_memo=args.reuse_memo, max_nodes=args.max_nodes)
    session = GameSession(solver=solver, display=display)

    first_player = {"human": HUMAN, "ai": AI, None: None}[args.first]

    display.show_header("Welcome to the Nim Game!")

    try:
        session.play(piles=args.piles, first_player=first_player)
    except ValueError as e:
        display.log_error(str(e))
        sys.exit(1)
    except SearchBudgetExceeded as e:
        display.log_error(f"{e}. Try smaller piles or raise --max-nodes.")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        logger.info("Game aborted")
        display.log_warning("Game aborted")
        sys.exit(1)


def move_command(args):
    """Print the AI's best move for a board."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    solver = MinimaxSolver(max_nodes=args.max_nodes)

    try:
        decision = solver.best_move(args.piles)
    except (ValueError, SearchBudgetExceeded) as e:
        # NoLegalMovesError on an empty board
        logger.error(str(e))
        sys.exit(1)

    print(f"Piles: {' '.join(str(p) for p in args.piles)}")
    print(f"Nim-sum: {nim_sum(args.piles)}")
    print(f"Score: {decision.score:+d} ({'win' if decision.score > 0 else 'loss'} for the AI)")
    print(f"Best move: remove {decision.amount} from pile {decision.pile_index + 1}")


def analyze_command(args):
    """Check the solver against nim-sum theory on every small board."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        report = analyze(args.num_piles, args.max_pile, show_progress=not args.no_progress)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if not report.ok:
        logger.error(f"{len(report.mismatches)} positions disagree with the nim-sum")
        sys.exit(1)

    logger.info(f"All {report.positions:,} positions agree with the nim-sum")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Nim against a perfect-play AI")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the AI")
    play_parser.add_argument(
        "--piles", type=int, nargs="+", default=None, help="Starting pile sizes (asked if omitted)"
    )
    play_parser.add_argument(
        "--first", choices=["human", "ai"], default=None, help="Who moves first (asked if omitted)"
    )
    play_parser.add_argument(
        "--reuse-memo", action="store_true", help="Keep the memo table between AI turns"
    )
    play_parser.add_argument(
        "--max-nodes", type=int, default=None, help="Abort an AI search after this many positions"
    )
    play_parser.set_defaults(func=play_command)

    # Move command
    move_parser = subparsers.add_parser("move", help="Show the AI's best move for a board")
    move_parser.add_argument("piles", type=int, nargs="+", help="Pile sizes")
    move_parser.add_argument(
        "--max-nodes", type=int, default=None, help="Abort the search after this many positions"
    )
    move_parser.set_defaults(func=move_command)

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze", help="Verify the solver against the nim-sum on all small boards"
    )
    analyze_parser.add_argument("--num-piles", type=int, required=True)
    analyze_parser.add_argument("--max-pile", type=int, required=True)
    analyze_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    analyze_parser.set_defaults(func=analyze_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()

"""Tower of Hanoi command line.

Usage:
    # Interactive menu
    python -m hanoi

    # Print every tower of a recursive solution for 4 disks
    python -m hanoi --disks 4 --solver recursive

    # Print only the move list
    python -m hanoi --disks 4 --solver iterative --moves

    # Play by yourself, then save the game as an animation
    python -m hanoi --solver manual --gif game.gif
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import EngineConfig
from .console import ConsoleApp
from .render import TowerRenderer, render_history_gif, render_moves
from .solvers import SOLVERS, solve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi",
        description="Solve the Tower of Hanoi by hand or with one of several algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--disks", type=int, default=3, help="Number of disks (default: 3)")
    parser.add_argument(
        "--solver",
        choices=["manual", *SOLVERS],
        help="Strategy to run; omit for the interactive menu",
    )
    parser.add_argument("--gif", help="Write the solution as an animated GIF to this path")
    parser.add_argument("--image", help="Write the final tower as a PNG to this path")
    parser.add_argument("--moves", action="store_true", help="Print the move list (after play for --solver manual)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every move")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.solver is None and (args.gif or args.image):
        parser.error("--gif/--image need --solver")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = EngineConfig(disk_count=args.disks)
        app = ConsoleApp(config)

        if args.solver is None:
            app.run()
            return 0

        if args.solver == "manual":
            history = app.play()
            if args.moves:
                app.say(render_moves(history))
        elif args.moves:
            history = solve(config, args.solver)
            app.say(render_moves(history))
        else:
            history = app.run_strategy(args.solver)
            if history is None:
                return 2

        if args.gif:
            render_history_gif(history, args.gif, config)
        if args.image:
            Path(args.image).parent.mkdir(parents=True, exist_ok=True)
            TowerRenderer(config).render(history.last).save(args.image)
            logger.info("Wrote final tower to %s", args.image)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())

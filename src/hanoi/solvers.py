"""
Automatic Tower of Hanoi solvers.

Every solver starts from initial_tower() and returns a History of 2^N towers
that ends with every disk on the configured target peg. All of them produce
the same history; they differ only in how they get there.
"""

import logging
import sys
from typing import Callable, Dict, List, Tuple

from .config import EngineConfig
from .history import History
from .state import Peg, apply_move, initial_tower, top_score

logger = logging.getLogger(__name__)

# Stack frames kept free below the interpreter recursion limit
RECURSION_HEADROOM = 50


class DiskLimitError(ValueError):
    """Raised when a disk count is too large to solve safely."""


def max_recursive_disks() -> int:
    """Largest disk count the recursive solvers accept under the current recursion limit."""
    return sys.getrecursionlimit() - RECURSION_HEADROOM


def _check_disk_limit(config: EngineConfig, recursive: bool = False) -> None:
    if config.disk_count > config.max_disks:
        raise DiskLimitError(
            f"{config.disk_count} disks exceeds the configured maximum of {config.max_disks} "
            f"(a solution holds 2^{config.disk_count} towers)"
        )
    if recursive and config.disk_count > max_recursive_disks():
        raise DiskLimitError(
            f"{config.disk_count} disks would recurse deeper than the interpreter allows "
            f"(limit {max_recursive_disks()}); use the worklist solver instead"
        )


def _move(history: History, source: Peg, destination: Peg) -> None:
    history.append(apply_move(history.last, source, destination))
    logger.debug("Move %s -> %s", source.value, destination.value)


# ══════════════════════════════════════════════════════════════════════════════
#  ITERATIVE
# ══════════════════════════════════════════════════════════════════════════════

def _solve_iteratively(history: History, first: Peg, second: Peg) -> None:
    """
    Make the only legal move between `first` and `second`.

    The direction comes from the last tower: a disk always moves onto an
    empty peg or onto a wider disk.
    """
    last = history.last
    first_disks, second_disks = last.peg(first), last.peg(second)

    # first is empty so the disk has to come from second
    if not first_disks:
        _move(history, second, first)
        return

    # second is empty so keep the moves as they came
    if not second_disks:
        _move(history, first, second)
        return

    # first has the wider top disk so flip the moves
    if top_score(first_disks) > top_score(second_disks):
        _move(history, second, first)
        return

    _move(history, first, second)


def solve_iteratively(config: EngineConfig) -> History:
    """
    Solve the puzzle with the closed-form iteration.

    Move i (1-based) is always between a fixed pair of pegs chosen by i % 3:
    source/target for 1, source/auxiliary for 2, auxiliary/target for 0.
    With an even number of disks target and auxiliary swap roles.
    """
    _check_disk_limit(config)
    history = History(initial_tower(config.disk_count, config.source))

    source, target, auxiliary = config.source, config.target, config.auxiliary
    if config.disk_count % 2 == 0:
        target, auxiliary = auxiliary, target

    pairs = {
        1: (source, target),
        2: (source, auxiliary),
        0: (auxiliary, target),
    }

    moves = (1 << config.disk_count) - 1
    logger.info("Solving %d disks iteratively (%d moves)", config.disk_count, moves)
    for i in range(1, moves + 1):
        _solve_iteratively(history, *pairs[i % 3])

    return history


# ══════════════════════════════════════════════════════════════════════════════
#  RECURSIVE
# ══════════════════════════════════════════════════════════════════════════════

def _solve_recursively(history: History, n: int, source: Peg, target: Peg, auxiliary: Peg) -> None:
    if n > 0:
        # move the n - 1 smaller disks out of the way onto the auxiliary peg
        _solve_recursively(history, n - 1, source, auxiliary, target)

        # the widest of the n disks is now free to move
        _move(history, source, target)

        # bring the n - 1 disks back on top of it
        _solve_recursively(history, n - 1, auxiliary, target, source)


def solve_recursively(config: EngineConfig) -> History:
    """
    Solve the puzzle by recursive decomposition.

    Recursion depth equals the disk count, which is capped by
    max_recursive_disks().
    """
    _check_disk_limit(config, recursive=True)
    history = History(initial_tower(config.disk_count, config.source))

    logger.info("Solving %d disks recursively", config.disk_count)
    _solve_recursively(history, config.disk_count, config.source, config.target, config.auxiliary)

    return history


# ══════════════════════════════════════════════════════════════════════════════
#  MUTUALLY RECURSIVE
# ══════════════════════════════════════════════════════════════════════════════
#
# Two functions defined in terms of each other. Part A handles the first half
# of every subproblem and part B the second half; their bodies are identical.

def _solve_mutually_recursively_a(history: History, n: int, source: Peg, target: Peg, auxiliary: Peg) -> None:
    if n > 0:
        _solve_mutually_recursively_a(history, n - 1, source, auxiliary, target)
        _move(history, source, target)
        _solve_mutually_recursively_b(history, n - 1, auxiliary, target, source)


def _solve_mutually_recursively_b(history: History, n: int, source: Peg, target: Peg, auxiliary: Peg) -> None:
    if n > 0:
        _solve_mutually_recursively_a(history, n - 1, source, auxiliary, target)
        _move(history, source, target)
        _solve_mutually_recursively_b(history, n - 1, auxiliary, target, source)


def solve_mutually_recursively(config: EngineConfig) -> History:
    """Solve the puzzle with two mutually recursive functions."""
    _check_disk_limit(config, recursive=True)
    history = History(initial_tower(config.disk_count, config.source))

    logger.info("Solving %d disks mutually recursively", config.disk_count)
    _solve_mutually_recursively_a(history, config.disk_count, config.source, config.target, config.auxiliary)

    return history


# ══════════════════════════════════════════════════════════════════════════════
#  WORKLIST
# ══════════════════════════════════════════════════════════════════════════════

def solve_with_worklist(config: EngineConfig) -> History:
    """
    Solve the puzzle with an explicit stack instead of recursion.

    Visits subproblems in the same order as solve_recursively(), so it
    produces the same history without touching the interpreter stack.
    """
    _check_disk_limit(config)
    history = History(initial_tower(config.disk_count, config.source))

    logger.info("Solving %d disks with a worklist", config.disk_count)

    # (n, source, target, auxiliary); n == 0 marks a single move to make
    stack: List[Tuple[int, Peg, Peg, Peg]] = [
        (config.disk_count, config.source, config.target, config.auxiliary)
    ]
    while stack:
        n, source, target, auxiliary = stack.pop()
        if n == 0:
            _move(history, source, target)
            continue

        # pushed in reverse so they run in recursive order
        if n > 1:
            stack.append((n - 1, auxiliary, target, source))
        stack.append((0, source, target, auxiliary))
        if n > 1:
            stack.append((n - 1, source, auxiliary, target))

    return history


SOLVERS: Dict[str, Callable[[EngineConfig], History]] = {
    "iterative": solve_iteratively,
    "recursive": solve_recursively,
    "mutual":    solve_mutually_recursively,
    "worklist":  solve_with_worklist,
}


def solve(config: EngineConfig, strategy: str = "recursive") -> History:
    """Run the solver registered under `strategy`."""
    try:
        solver = SOLVERS[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {strategy!r}; choose from {', '.join(SOLVERS)}"
        ) from None
    return solver(config)

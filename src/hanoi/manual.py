"""Let a player solve the puzzle one move at a time."""

import logging
from typing import Callable, Optional, Tuple

from .config import EngineConfig
from .history import History
from .state import Peg, Tower, initial_tower, is_goal, states_equal, try_move

logger = logging.getLogger(__name__)

# Input collaborator: given the current tower, return (source, destination)
MoveChooser = Callable[[Tower], Tuple[Peg, Peg]]


def solve_manually(
    config: EngineConfig,
    choose_move: MoveChooser,
    on_state: Optional[Callable[[Tower], None]] = None,
) -> History:
    """
    Play until every disk is on the target peg.

    Illegal moves are ignored and the player is asked again with the same
    tower. Only towers that changed are recorded, so the history holds one
    entry per accepted move. Exceptions raised by `choose_move` (for example
    EOFError when input runs out) end the session and propagate.
    """
    history = History(initial_tower(config.disk_count, config.source))
    won = False

    while not won:
        # every accepted move is recorded, so the last tower is the current one
        last = history.last
        if on_state is not None:
            on_state(last)

        source, destination = choose_move(last)
        outcome = try_move(last, source, destination)

        # an unchanged tower means the move was illegal
        if not states_equal(outcome.tower, last):
            history.append(outcome.tower)
        else:
            logger.debug(
                "Rejected move %s -> %s: %s", source.value, destination.value, outcome.reason
            )

        won = is_goal(outcome.tower, config.target, config.disk_count)

    logger.info("Solved %d disks manually in %d moves", config.disk_count, history.move_count())
    return history

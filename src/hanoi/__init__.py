"""
Tower of Hanoi puzzle engine.

Components:
    - state.py   : pegs, towers and move validation (Peg, Tower, apply_move)
    - history.py : ordered record of visited towers (History)
    - solvers.py : iterative, recursive and mutually recursive solvers
    - manual.py  : move-by-move solving driven by an input collaborator
    - config.py  : session configuration (EngineConfig)
    - render.py  : text drawings, images and GIF animations
    - console.py : interactive terminal menu (ConsoleApp)
    - prompts.py : console texts (get_prompt)
"""

from .config import EngineConfig
from .history import History
from .manual import solve_manually
from .solvers import (
    SOLVERS,
    DiskLimitError,
    solve,
    solve_iteratively,
    solve_mutually_recursively,
    solve_recursively,
    solve_with_worklist,
)
from .state import (
    InvalidPegError,
    MoveOutcome,
    Peg,
    Tower,
    apply_move,
    initial_tower,
    is_goal,
    states_equal,
    top_score,
    try_move,
)

__all__ = [
    "EngineConfig",
    "History",
    "solve_manually",
    "SOLVERS",
    "DiskLimitError",
    "solve",
    "solve_iteratively",
    "solve_mutually_recursively",
    "solve_recursively",
    "solve_with_worklist",
    "InvalidPegError",
    "MoveOutcome",
    "Peg",
    "Tower",
    "apply_move",
    "initial_tower",
    "is_goal",
    "states_equal",
    "top_score",
    "try_move",
]

"""
Interactive terminal front end: menu, prompts and drawings.

This module owns all reading and printing. The solvers and the manual
driver never touch the terminal; they get collaborators from here.
"""

from typing import Callable, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule

from .config import EngineConfig
from .history import History
from .manual import solve_manually
from .prompts import get_prompt, menu_choice
from .render import render_history, render_tower
from .solvers import DiskLimitError, solve
from .state import InvalidPegError, Peg, Tower

STRATEGY_NAMES = {
    "iterative": "Iteratively",
    "recursive": "Recursively",
    "mutual": "Mutually Recursively",
    "worklist": "With a worklist",
}


class ConsoleApp:
    """
    Menu driven Tower of Hanoi session.

    `read` takes a prompt and returns one line of input; it defaults to the
    rich console's input(). The disk count lives on self.config and is
    replaced, never mutated, when the player changes it.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        console: Optional[Console] = None,
        read: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.console = console or Console()
        self._read = read or (lambda prompt: self.console.input(prompt, markup=False))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def header(self) -> None:
        self.console.print(
            Panel.fit(f"[bold cyan]{get_prompt('header')}[/bold cyan]", border_style="cyan")
        )

    def show_tower(self, tower: Tower) -> None:
        self.console.print()
        self.console.print(render_tower(tower), markup=False, highlight=False)

    def show_history(self, history: History) -> None:
        self.console.print(render_history(history), markup=False, highlight=False)

    def say(self, text: str, style: str = "") -> None:
        self.console.print(text, style=style or None, markup=False, highlight=False)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def ask_peg(self, prefix: str) -> Peg:
        """Ask for a peg until the answer names one."""
        prompt = get_prompt("peg", prefix=prefix)
        while True:
            try:
                return Peg.parse(self._read(prompt))
            except InvalidPegError:
                self.say(get_prompt("peg_invalid"), style="red")

    def ask_move(self, tower: Tower) -> Tuple[Peg, Peg]:
        source = self.ask_peg("from")
        self.console.print()
        destination = self.ask_peg("to")
        return source, destination

    def ask_disk_count(self) -> EngineConfig:
        """Ask for a positive disk count until one is given; returns the new config."""
        prompt = get_prompt("disk_count")
        while True:
            text = self._read(prompt).strip()
            try:
                return self.config.with_disk_count(int(text))
            except ValueError:
                prompt = get_prompt("disk_count_invalid")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def play(self) -> History:
        """Let the player solve the puzzle by themselves."""
        history = solve_manually(self.config, self.ask_move, on_state=self.show_tower)
        self.show_tower(history.last)
        self.say(get_prompt("won", moves=history.move_count()), style="bold green")
        return history

    def run_strategy(self, strategy: str) -> Optional[History]:
        """Solve with an automatic strategy and draw every tower."""
        try:
            history = solve(self.config, strategy)
        except DiskLimitError as exc:
            self.say(str(exc), style="red")
            return None
        self.show_history(history)
        self.say(
            get_prompt("solved", strategy=STRATEGY_NAMES[strategy], moves=history.move_count()),
            style="green",
        )
        return history

    def run(self) -> None:
        """Show the menu until the player quits."""
        self.header()

        while True:
            self.console.print()
            action = menu_choice(self._read(get_prompt("menu")))
            self.console.print(Rule(style="cyan"))

            if action == "quit":
                return
            if action == "manual":
                self.play()
            elif action == "disk_count":
                self.config = self.ask_disk_count()
            else:
                self.run_strategy(action)

"""Ordered record of every tower visited while solving."""

from typing import Iterator, List

from .state import Move, Tower, moved_disk


class History:
    """
    Every tower from the initial configuration to the last one reached.

    Index 0 is the initial tower. Solvers only ever append, so the last
    entry is always the current tower.
    """

    def __init__(self, initial: Tower):
        self._towers: List[Tower] = [initial]

    def append(self, tower: Tower) -> None:
        self._towers.append(tower)

    @property
    def last(self) -> Tower:
        """The current tower."""
        return self._towers[-1]

    @property
    def initial(self) -> Tower:
        return self._towers[0]

    def moves(self) -> List[Move]:
        """
        Recover the move made between every pair of consecutive towers.

        Raises ValueError if two neighbours are equal or differ by more than
        one legal move.
        """
        moves = []
        for index, (before, after) in enumerate(zip(self._towers, self._towers[1:])):
            move = moved_disk(before, after)
            if move is None:
                raise ValueError(f"No move between history entries {index} and {index + 1}")
            moves.append(move)
        return moves

    def move_count(self) -> int:
        return len(self._towers) - 1

    def __len__(self) -> int:
        return len(self._towers)

    def __iter__(self) -> Iterator[Tower]:
        return iter(self._towers)

    def __getitem__(self, index: int) -> Tower:
        return self._towers[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._towers == other._towers

    def __repr__(self) -> str:
        return f"History({len(self._towers)} towers, last={self.last!r})"

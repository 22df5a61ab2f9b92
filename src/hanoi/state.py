"""
Tower of Hanoi state model and move validation.

A tower is an immutable snapshot of the three pegs. Every move builds a new
tower, so towers can be stored in a history without copying.
"""

import sys
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

# A disk is represented by its width
Disk = int

# Score of an empty peg, larger than any real disk so anything can go on it
EMPTY_PEG_SCORE = sys.maxsize


class InvalidPegError(ValueError):
    """Raised when text cannot be parsed into a peg."""


class Peg(Enum):
    """The three locations a disk can be moved from and to."""

    A = "A"
    B = "B"
    C = "C"

    @property
    def label(self) -> str:
        """Display name of the peg: left, middle or right."""
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Peg":
        """
        Parse user input into a peg.

        Accepts the full names (left, middle, right), their first letters
        (L, M, R) and the identifiers (A, B, C), case-insensitive.
        """
        key = text.strip().upper()
        try:
            return _ALIASES[key]
        except KeyError:
            raise InvalidPegError(f"Unknown peg: {text!r}") from None

    def others(self) -> Tuple["Peg", "Peg"]:
        """The two pegs that are not this one, in A, B, C order."""
        first, second = (p for p in Peg if p is not self)
        return first, second


_LABELS = {Peg.A: "left", Peg.B: "middle", Peg.C: "right"}

_ALIASES = {}
for _peg in Peg:
    _ALIASES[_peg.value] = _peg
    _ALIASES[_peg.label.upper()] = _peg
    _ALIASES[_peg.label[0].upper()] = _peg


def third_peg(first: Peg, second: Peg) -> Peg:
    """Return the peg that is neither `first` nor `second`."""
    if first is second:
        raise ValueError("Pegs must differ to have a third one")
    remaining = set(Peg) - {first, second}
    return remaining.pop()


class Tower(NamedTuple):
    """
    A configuration of disks across three pegs.

    Each peg is a tuple of disk widths from bottom to top, so the last
    element is the top disk.
    """

    left: Tuple[Disk, ...] = ()
    middle: Tuple[Disk, ...] = ()
    right: Tuple[Disk, ...] = ()

    def peg(self, peg: Peg) -> Tuple[Disk, ...]:
        """Disks on `peg`, bottom to top."""
        return self[_INDEX[peg]]

    def disk_count(self) -> int:
        return len(self.left) + len(self.middle) + len(self.right)

    def replace(self, **pegs: Tuple[Disk, ...]) -> "Tower":
        return self._replace(**pegs)


_INDEX = {Peg.A: 0, Peg.B: 1, Peg.C: 2}

Move = Tuple[Peg, Peg, Disk]


class MoveOutcome(NamedTuple):
    """Explicit result of trying a move."""

    tower: Tower
    moved: bool
    reason: str = ""


def top_score(disks: Tuple[Disk, ...]) -> int:
    """
    Score a peg by the width of its top disk.

    An empty peg scores EMPTY_PEG_SCORE. A disk can move from peg a to peg b
    only when a scores no higher than b.
    """
    return disks[-1] if disks else EMPTY_PEG_SCORE


def check_move(tower: Tower, source: Peg, destination: Peg) -> Tuple[bool, str]:
    """
    Check whether moving the top disk of `source` onto `destination` is legal.

    Returns:
        (is_legal, reason) where reason is empty for legal moves
    """
    if source is destination:
        return False, "source and destination are the same peg"

    from_disks = tower.peg(source)
    if not from_disks:
        return False, f"the {source.label} peg is empty"

    to_disks = tower.peg(destination)
    if top_score(from_disks) > top_score(to_disks):
        return False, (
            f"cannot place disk {from_disks[-1]} on smaller disk {to_disks[-1]}"
        )

    return True, ""


def try_move(tower: Tower, source: Peg, destination: Peg) -> MoveOutcome:
    """Apply a move and report whether it happened."""
    legal, reason = check_move(tower, source, destination)
    if not legal:
        return MoveOutcome(tower, False, reason)

    pegs = list(tower)
    src, dst = _INDEX[source], _INDEX[destination]
    disk = pegs[src][-1]
    pegs[src] = pegs[src][:-1]
    pegs[dst] = pegs[dst] + (disk,)
    return MoveOutcome(Tower(*pegs), True)


def apply_move(tower: Tower, source: Peg, destination: Peg) -> Tower:
    """
    Move the top disk of `source` onto `destination`.

    Never raises. An illegal move returns `tower` unchanged, so callers detect
    a rejected move with states_equal().
    """
    return try_move(tower, source, destination).tower


def states_equal(a: Tower, b: Tower) -> bool:
    """Same number of disks on every peg and the same widths in order."""
    return all(
        len(a.peg(p)) == len(b.peg(p))
        and all(x == y for x, y in zip(a.peg(p), b.peg(p)))
        for p in Peg
    )


def is_goal(tower: Tower, target: Peg, disk_count: int) -> bool:
    """All `disk_count` disks sit on `target` and the other pegs are empty."""
    first, second = target.others()
    return (
        not tower.peg(first)
        and not tower.peg(second)
        and len(tower.peg(target)) == disk_count
    )


def initial_tower(disk_count: int, source: Peg = Peg.A) -> Tower:
    """
    Build the starting tower with every disk on `source`.

    Disks get odd widths (1, 3, 5, ...) so they draw symmetrically around the
    peg, widest at the bottom.
    """
    if disk_count < 1:
        raise ValueError(f"disk_count must be at least 1, got {disk_count}")
    disks = tuple(i * 2 + 1 for i in range(disk_count - 1, -1, -1))
    return Tower().replace(**{source.label: disks})


def get_valid_moves(tower: Tower) -> List[Move]:
    """
    Get all legal moves from the current tower.

    Returns:
        List of (source, destination, disk) tuples
    """
    moves = []
    for src in Peg:
        disks = tower.peg(src)
        if not disks:
            continue
        for dst in Peg:
            if check_move(tower, src, dst)[0]:
                moves.append((src, dst, disks[-1]))
    return moves


def disk_multiset(tower: Tower) -> List[Disk]:
    """Sorted widths of every disk on the tower."""
    return sorted(tower.left + tower.middle + tower.right)


def moved_disk(before: Tower, after: Tower) -> Optional[Move]:
    """
    Find the single move that turns `before` into `after`.

    Returns None when the towers are equal.
    """
    if states_equal(before, after):
        return None
    for src, dst, disk in get_valid_moves(before):
        if states_equal(apply_move(before, src, dst), after):
            return src, dst, disk
    raise ValueError("Towers do not differ by exactly one legal move")

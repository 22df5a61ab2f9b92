import pytest

from hanoi.state import (
    EMPTY_PEG_SCORE,
    InvalidPegError,
    Peg,
    Tower,
    apply_move,
    check_move,
    disk_multiset,
    get_valid_moves,
    initial_tower,
    is_goal,
    moved_disk,
    states_equal,
    third_peg,
    top_score,
    try_move,
)

# ---------------------------------------------------------------------------
# Pegs
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("left", Peg.A), ("LEFT", Peg.A), ("l", Peg.A), ("a", Peg.A),
    ("Middle", Peg.B), ("M", Peg.B), ("b", Peg.B),
    (" right ", Peg.C), ("r", Peg.C), ("C", Peg.C),
])
def test_peg_parse_accepts_names_and_letters(text, expected):
    assert Peg.parse(text) is expected


@pytest.mark.parametrize("text", ["", "up", "lft", "d", "1"])
def test_peg_parse_rejects_anything_else(text):
    with pytest.raises(InvalidPegError, match="Unknown peg"):
        Peg.parse(text)


def test_third_peg():
    assert third_peg(Peg.A, Peg.C) is Peg.B
    assert third_peg(Peg.C, Peg.B) is Peg.A
    with pytest.raises(ValueError):
        third_peg(Peg.A, Peg.A)


def test_peg_others():
    assert Peg.B.others() == (Peg.A, Peg.C)

# ---------------------------------------------------------------------------
# Initial tower and scoring
# ---------------------------------------------------------------------------

def test_initial_tower_uses_odd_widths_bottom_widest():
    assert initial_tower(1) == Tower((1,), (), ())
    assert initial_tower(3) == Tower((5, 3, 1), (), ())


def test_initial_tower_on_another_source():
    assert initial_tower(2, Peg.B) == Tower((), (3, 1), ())


@pytest.mark.parametrize("count", [0, -1])
def test_initial_tower_rejects_non_positive_counts(count):
    with pytest.raises(ValueError, match="at least 1"):
        initial_tower(count)


def test_top_score():
    assert top_score((5, 3)) == 3
    assert top_score(()) == EMPTY_PEG_SCORE
    assert EMPTY_PEG_SCORE > 10 ** 9

# ---------------------------------------------------------------------------
# Move validation
# ---------------------------------------------------------------------------

class TestApplyMove:

    def setup_method(self):
        self.tower = Tower((5, 3), (1,), ())

    def test_moves_top_disk_onto_empty_peg(self):
        moved = apply_move(self.tower, Peg.A, Peg.C)
        assert moved == Tower((5,), (1,), (3,))

    def test_moves_smaller_disk_onto_wider(self):
        moved = apply_move(self.tower, Peg.B, Peg.A)
        assert moved == Tower((5, 3, 1), (), ())

    def test_same_peg_is_a_no_op(self):
        assert states_equal(apply_move(self.tower, Peg.A, Peg.A), self.tower)

    def test_empty_source_is_a_no_op(self):
        assert states_equal(apply_move(self.tower, Peg.C, Peg.A), self.tower)

    def test_wider_onto_narrower_is_a_no_op(self):
        assert states_equal(apply_move(self.tower, Peg.A, Peg.B), self.tower)

    def test_input_tower_is_not_modified(self):
        apply_move(self.tower, Peg.A, Peg.C)
        assert self.tower == Tower((5, 3), (1,), ())

    def test_try_move_reports_reasons(self):
        assert try_move(self.tower, Peg.A, Peg.A).reason == "source and destination are the same peg"
        assert "empty" in try_move(self.tower, Peg.C, Peg.B).reason
        outcome = try_move(self.tower, Peg.A, Peg.B)
        assert not outcome.moved
        assert outcome.tower is self.tower
        assert "smaller disk 1" in outcome.reason

    def test_try_move_success(self):
        outcome = try_move(self.tower, Peg.B, Peg.C)
        assert outcome.moved
        assert outcome.reason == ""
        assert outcome.tower == Tower((5, 3), (), (1,))


def test_every_legal_move_moves_exactly_one_disk():
    towers = [initial_tower(3), Tower((5,), (3,), (1,)), Tower((), (5, 1), (3,))]
    for tower in towers:
        for src in Peg:
            for dst in Peg:
                legal, _ = check_move(tower, src, dst)
                after = apply_move(tower, src, dst)
                assert disk_multiset(after) == disk_multiset(tower)
                if not legal:
                    assert states_equal(after, tower)
                    continue
                assert after.peg(dst)[-1] == tower.peg(src)[-1]
                assert after.peg(dst)[:-1] == tower.peg(dst)
                assert after.peg(src) == tower.peg(src)[:-1]
                untouched = third_peg(src, dst)
                assert after.peg(untouched) == tower.peg(untouched)


def test_get_valid_moves():
    assert get_valid_moves(initial_tower(2)) == [(Peg.A, Peg.B, 1), (Peg.A, Peg.C, 1)]
    assert get_valid_moves(Tower((5,), (3,), (1,))) == [
        (Peg.B, Peg.A, 3), (Peg.C, Peg.A, 1), (Peg.C, Peg.B, 1)
    ]


def test_states_equal_compares_every_peg_in_order():
    assert states_equal(Tower((3, 1), (), ()), Tower((3, 1), (), ()))
    assert not states_equal(Tower((3, 1), (), ()), Tower((3,), (1,), ()))
    assert not states_equal(Tower((3, 1), (), ()), Tower((1, 3), (), ()))


def test_is_goal():
    assert is_goal(Tower((), (), (3, 1)), Peg.C, 2)
    assert not is_goal(Tower((), (1,), (3,)), Peg.C, 2)
    assert not is_goal(Tower((), (), (3, 1)), Peg.B, 2)
    assert not is_goal(Tower((), (), (3,)), Peg.C, 2)


def test_moved_disk():
    assert moved_disk(initial_tower(2), Tower((3,), (), (1,))) == (Peg.A, Peg.C, 1)
    assert moved_disk(initial_tower(2), initial_tower(2)) is None
    with pytest.raises(ValueError, match="exactly one legal move"):
        moved_disk(initial_tower(2), Tower((), (), (3, 1)))

import io

import pytest
from rich.console import Console

from hanoi import __main__ as cli
from hanoi.config import EngineConfig
from hanoi.console import ConsoleApp
from hanoi.prompts import get_prompt, menu_choice
from hanoi.state import Peg, Tower


class FakeInput:
    """Replays canned answers and records every prompt shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def make_app(answers, **config):
    reader = FakeInput(answers)
    out = io.StringIO()
    app = ConsoleApp(
        EngineConfig(**config),
        console=Console(file=out, width=200, color_system=None),
        read=reader,
    )
    return app, reader, out

# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("keyword, action", [
    ("1", "manual"), ("b", "manual"), ("By", "manual"),
    ("2", "iterative"), ("i", "iterative"),
    ("3", "recursive"), ("R", "recursive"),
    ("4", "mutual"), ("m", "mutual"),
    ("5", "disk_count"), ("c", "disk_count"),
    ("q", "quit"), ("", "quit"), ("9", "quit"),
])
def test_menu_choice(keyword, action):
    assert menu_choice(keyword) == action


def test_get_prompt_fills_placeholders():
    assert get_prompt("peg", prefix="from") == "from [ left | middle | right ]: "
    assert get_prompt("won", moves=7) == "congratulations! you have won in 7 moves"

# ---------------------------------------------------------------------------
# Input collaborators
# ---------------------------------------------------------------------------

def test_ask_peg_reprompts_until_valid():
    app, reader, out = make_app(["up", "", "Middle"])
    assert app.ask_peg("from") is Peg.B
    assert len(reader.prompts) == 3
    assert out.getvalue().count("invalid input! please try again") == 2


def test_ask_disk_count_reprompts_until_positive():
    app, reader, _ = make_app(["abc", "0", "-2", " 4 "])
    config = app.ask_disk_count()

    assert config.disk_count == 4
    assert reader.prompts[0] == get_prompt("disk_count")
    assert reader.prompts[1:] == [get_prompt("disk_count_invalid")] * 3

# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

def test_play_ignores_illegal_moves():
    app, _, out = make_app(["l", "l", "l", "r"], disk_count=1)
    history = app.play()

    assert history.move_count() == 1
    assert history.last == Tower((), (), (1,))
    assert "congratulations! you have won in 1 moves" in out.getvalue()


def test_run_strategy_draws_every_tower():
    app, _, out = make_app([], disk_count=2)
    history = app.run_strategy("iterative")

    assert len(history) == 4
    assert out.getvalue().count("_" * 13) == 4
    assert "Iteratively: 3 moves" in out.getvalue()


def test_run_strategy_reports_disk_limit():
    app, _, out = make_app([], disk_count=4, max_disks=3)
    assert app.run_strategy("recursive") is None
    assert "configured maximum of 3" in out.getvalue()


def test_menu_changes_disk_count_then_solves_and_quits():
    app, _, out = make_app(["5", "1", "3", "q"])
    app.run()

    assert app.config.disk_count == 1
    assert "Recursively: 1 moves" in out.getvalue()


def test_menu_stops_when_input_runs_out():
    app, _, _ = make_app([])
    with pytest.raises(EOFError):
        app.run()

# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def test_cli_prints_move_list(capsys):
    assert cli.main(["--disks", "2", "--solver", "recursive", "--moves"]) == 0
    assert "3. disk 1: B (middle) -> C (right)" in capsys.readouterr().out


def test_cli_rejects_invalid_disk_count(capsys):
    assert cli.main(["--disks", "0", "--solver", "iterative"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_rejects_unknown_solver():
    with pytest.raises(SystemExit):
        cli.main(["--solver", "quantum"])


def test_cli_writes_gif(tmp_path):
    path = tmp_path / "solution.gif"
    assert cli.main(["--disks", "1", "--solver", "worklist", "--moves", "--gif", str(path)]) == 0
    assert path.exists()


def test_cli_writes_image_into_missing_directories(tmp_path):
    path = tmp_path / "out" / "final" / "tower.png"
    assert cli.main(["--disks", "1", "--solver", "recursive", "--moves", "--image", str(path)]) == 0
    assert path.exists()


@pytest.mark.parametrize("flag", ["--gif", "--image"])
def test_cli_menu_mode_rejects_output_files(flag, tmp_path, monkeypatch, capsys):
    def no_menu(self):
        raise AssertionError("menu should not start")

    monkeypatch.setattr(ConsoleApp, "run", no_menu)
    path = tmp_path / "out.file"

    with pytest.raises(SystemExit) as exc:
        cli.main([flag, str(path)])

    assert exc.value.code == 2
    assert "need --solver" in capsys.readouterr().err
    assert not path.exists()


def test_cli_prints_move_list_after_manual_play(monkeypatch, capsys):
    answers = iter(["left", "right"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))

    assert cli.main(["--disks", "1", "--solver", "manual", "--moves"]) == 0
    out = capsys.readouterr().out
    assert "congratulations! you have won in 1 moves" in out
    assert "1. disk 1: A (left) -> C (right)" in out


def test_console_module_is_documented():
    import hanoi.console

    assert hanoi.console.__doc__.strip().startswith("Interactive terminal front end")

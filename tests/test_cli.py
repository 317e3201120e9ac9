import io

import pytest

from treasurehunt.cli import main, prompt_treasure
from treasurehunt.manager import HuntError
from treasurehunt.records import Treasure

ANSWERS = "alice\n45.5\n21.25\nunder the bridge\n100\n"


@pytest.fixture
def root(tmp_path, monkeypatch):
    (tmp_path / "hunts").mkdir()
    (tmp_path / "logs").mkdir()
    (tmp_path / "masterLog.txt").touch()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def reader(text):
    lines = iter(io.StringIO(text).readlines())
    return lambda: next(lines, "")


def test_prompt_treasure_reads_fields():
    written = []
    treasure = prompt_treasure("gold", reader(ANSWERS), written.append)
    assert treasure == Treasure("gold", "alice", 45.5, 21.25, "under the bridge", 100)
    assert written[0] == "Now, let's add the treasure: gold\n"
    assert "Value(Integer):" in written


def test_prompt_treasure_skips_blank_lines_for_words():
    treasure = prompt_treasure("gold", reader("\nalice extra\n1\n2\nclue\n3\n"), lambda s: None)
    assert treasure.user == "alice"
    assert treasure.value == 3


def test_prompt_treasure_rejects_bad_number():
    with pytest.raises(HuntError):
        prompt_treasure("gold", reader("alice\nnorth\n"), lambda s: None)


def test_prompt_treasure_end_of_input():
    with pytest.raises(HuntError):
        prompt_treasure("gold", reader("alice\n"), lambda s: None)


def test_main_add_and_view(root, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(ANSWERS))
    assert main(["--add", "h1", "gold"]) == 0
    expected = Treasure("gold", "alice", 45.5, 21.25, "under the bridge", 100)
    assert (root / "hunts" / "h1" / "treasure.txt").read_text() == expected.to_line()
    log = (root / "hunts" / "h1" / "logged_hunt.txt").read_text()
    assert log.splitlines()[0].endswith("--add h1 gold ")
    capsys.readouterr()
    assert main(["--view", "h1", "gold"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("---gold---\n")
    assert "value: 100;" in out


def test_main_view_unknown_treasure(root, capsys):
    (root / "hunts" / "h1").mkdir()
    (root / "hunts" / "h1" / "treasure.txt").touch()
    assert main(["--view", "h1", "gold"]) == 0
    assert "does not exist in the hunt 'h1'" in capsys.readouterr().err


def test_main_list(root, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(ANSWERS))
    main(["--add", "h1", "gold"])
    capsys.readouterr()
    assert main(["--list", "h1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("h1, ")
    assert lines[1] == "-" * 64
    assert lines[2].startswith("gold, alice")


def test_main_remove_hunt(root):
    assert main(["--add", "h1"]) == 0
    assert main(["--remove_hunt", "h1"]) == 0
    assert not (root / "hunts" / "h1").exists()
    assert (root / "masterLog.txt").read_text().startswith("h1\n")


def test_main_wrong_option(capsys):
    assert main(["--bogus"]) == 1
    captured = capsys.readouterr()
    assert "--add <hunt_id>" in captured.out
    assert "Wrong input" in captured.err


def test_main_missing_arguments(capsys):
    assert main(["--view", "h1"]) == 1
    assert "--remove_hunt <hunt_id>" in capsys.readouterr().out


def test_main_missing_hunt_fails(root):
    assert main(["--list", "nope"]) == 255
import pytest

from treasurehunt.records import Treasure, treasure_id_of


def _sample():
    return Treasure("t1", "alice", 45.5, 21.25, "under the bridge", 100)


def test_to_line_format():
    assert _sample().to_line() == "t1, alice, 45.500000, 21.250000, under the bridge, 100\n"


def test_round_trip_preserves_values():
    original = _sample()
    parsed = Treasure.from_line(original.to_line())
    assert parsed.treasure_id == original.treasure_id
    assert parsed.user.strip() == original.user
    assert parsed.latitude == original.latitude
    assert parsed.longitude == original.longitude
    assert parsed.clue.strip() == original.clue
    assert parsed.value == original.value


def test_from_line_keeps_leading_spaces():
    parsed = Treasure.from_line(_sample().to_line())
    assert parsed.user == " alice"
    assert parsed.clue == " under the bridge"


def test_describe_of_parsed_record():
    parsed = Treasure.from_line(_sample().to_line())
    assert parsed.describe() == (
        "User:  alice, latitude: 45.500000, longitude: 21.250000, "
        "clue:  under the bridge, value: 100;"
    )


def test_from_line_parses_numeric_prefixes():
    parsed = Treasure.from_line("t9, bob, 12abc, , clue, 7xyz\n")
    assert parsed.latitude == 12.0
    assert parsed.longitude == 0.0
    assert parsed.value == 7


def test_from_line_comma_in_clue_shifts_fields():
    parsed = Treasure.from_line("t1, a, 1, 2, x, y, 3\n")
    assert parsed.clue == " x"
    assert parsed.value == 0


@pytest.mark.parametrize("line", ["", ",,,"])
def test_from_line_rejects_blank(line):
    with pytest.raises(ValueError):
        Treasure.from_line(line)


@pytest.mark.parametrize(
    "line, expected",
    [("a,b", "a"), (",,x,y", "x"), ("", None), (",,", None), ("solo", "solo")],
)
def test_treasure_id_of(line, expected):
    assert treasure_id_of(line) == expected


def test_treasure_id_of_matches_record():
    treasure = _sample()
    assert treasure_id_of(treasure.to_line()) == treasure.treasure_id
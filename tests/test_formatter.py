import pytest

from vertexcover.formatter import (
    CommandError,
    parse_command,
    parse_edges,
    parse_shortest_path,
    parse_vertices,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("V 5", "V"),
        ("  E {<1,2>}", "E"),
        ("S 1 2", "S"),
        ("G", "G"),
    ],
)
def test_parse_command_letters(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["V 5!", "E {<1,2>} #", "S 1 2 |", "V 5 ~"])
def test_parse_command_rejects_invalid_characters(line):
    with pytest.raises(CommandError, match="invalid characters"):
        parse_command(line)


@pytest.mark.parametrize("line", ["X 5", "", "5 V"])
def test_parse_command_rejects_unknown_command(line):
    with pytest.raises(CommandError, match="Invalid command format"):
        parse_command(line)


def test_command_error_is_value_error():
    with pytest.raises(ValueError):
        parse_command("Q")


@pytest.mark.parametrize("line, expected", [("V 5", 5), ("  V   12  ", 12), ("V 0", 0)])
def test_parse_vertices(line, expected):
    assert parse_vertices(line) == expected


@pytest.mark.parametrize("line", ["V", "V five", "V 5 6", "E 5"])
def test_parse_vertices_bad_format(line):
    with pytest.raises(CommandError, match="Invalid V command format"):
        parse_vertices(line)


def test_parse_vertices_negative():
    with pytest.raises(CommandError, match="positive"):
        parse_vertices("V -3")


def test_parse_edges_default_weight():
    assert parse_edges("E {<1,2>,<2,3>}") == [(1, 2, 1), (2, 3, 1)]


def test_parse_edges_weight_carries_over():
    assert parse_edges("E {<1,2>,<2,3,4>,<3,1>}") == [(1, 2, 1), (2, 3, 4), (3, 1, 4)]


def test_parse_edges_with_whitespace():
    assert parse_edges("E { < 1 , 2 > , < 3 , 4 , 7 > }") == [(1, 2, 1), (3, 4, 7)]


@pytest.mark.parametrize(
    "line",
    ["E {}", "E <1,2>", "E {<1>}", "E {<1,2>,}", "V {<1,2>}"],
)
def test_parse_edges_bad_format(line):
    with pytest.raises(CommandError, match="Invalid E command format"):
        parse_edges(line)


def test_parse_edges_count_matches_input():
    line = "E {" + ",".join(f"<{i},{i + 1}>" for i in range(1, 9)) + "}"
    edges = parse_edges(line)
    assert [(a, b) for a, b, _ in edges] == [(i, i + 1) for i in range(1, 9)]


@pytest.mark.parametrize("line, expected", [("S 1 2", (1, 2)), (" S  4   3 ", (4, 3))])
def test_parse_shortest_path(line, expected):
    assert parse_shortest_path(line) == expected


@pytest.mark.parametrize("line", ["S 1", "S a b", "S 1 2 3"])
def test_parse_shortest_path_bad_format(line):
    with pytest.raises(CommandError, match="Invalid S command format"):
        parse_shortest_path(line)


def test_parse_shortest_path_negative():
    with pytest.raises(CommandError, match="positive"):
        parse_shortest_path("S -1 2")


def test_parse_shortest_path_same_vertex():
    with pytest.raises(CommandError, match="unique"):
        parse_shortest_path("S 2 2")
import io

import pytest

from vertexcover.benchmark import (
    append_record,
    build_cnf,
    edge_map,
    format_cover,
    greedy_cover1,
    greedy_cover2,
    main,
    parse_clause,
    parse_cnf_header,
    parse_edge_list,
    parse_vertex_count,
    solve_cover,
)
from vertexcover.formatter import CommandError

TRIANGLE = [(1, 2), (2, 3), (1, 3)]
PATH = [(1, 2), (2, 3), (3, 4), (4, 5)]


def covers(cover, edges):
    chosen = set(cover)
    return all(a in chosen or b in chosen for a, b in edges)


def test_parse_vertex_count():
    assert parse_vertex_count("V 5") == 5
    assert parse_vertex_count("  V   12  ") == 12


def test_parse_vertex_count_rejects_bad_line():
    with pytest.raises(CommandError):
        parse_vertex_count("V five")


def test_parse_cnf_header():
    assert parse_cnf_header("p cnf 3 4") == (3, 4)
    with pytest.raises(CommandError):
        parse_cnf_header("p dnf 3 4")


def test_parse_clause_keeps_terminator():
    assert parse_clause("1 -2 3 0") == [1, -2, 3, 0]


def test_parse_edge_list():
    assert parse_edge_list("E {<1,2>,<2,3>}") == [(1, 2), (2, 3)]
    assert parse_edge_list("E {}") == []


def test_build_cnf_clauses_are_terminated():
    lines = build_cnf(3, TRIANGLE, 2)
    assert all(parse_clause(line)[-1] == 0 for line in lines[1:])


def test_build_cnf_literals_within_range():
    n, k = 5, 3
    lines = build_cnf(n, PATH, k)
    literals = [lit for line in lines[1:] for lit in parse_clause(line) if lit]
    assert max(abs(lit) for lit in literals) == n * k


def test_build_cnf_single_edge():
    assert build_cnf(2, [(1, 2)], 1) == ["p cnf 2 3", "1 2 0", "-2 -1 0", "1 2 0"]


def test_build_cnf_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        build_cnf(2, [(1, 3)], 1)


@pytest.mark.parametrize("k", [1, 2, 3])
def test_solve_cover_triangle(k):
    cover = solve_cover(3, TRIANGLE, k)
    if k == 1:
        assert cover == []
    else:
        assert len(cover) == k
        assert covers(cover, TRIANGLE)
        assert cover == sorted(cover)


def test_solve_cover_path_minimum():
    cover = solve_cover(5, PATH, 2)
    assert len(cover) == 2
    assert covers(cover, PATH)
    assert solve_cover(5, PATH, 1) == []


def test_format_cover_sorts_and_counts():
    assert format_cover([3, 1, 2]) == "1 2 3 (3)"
    assert format_cover([]) == "(0)"


def test_edge_map_is_undirected_and_ordered():
    result = edge_map([(3, 1), (1, 2)])
    assert result == {1: [3, 2], 2: [1], 3: [1]}
    assert list(result) == [1, 2, 3]


def test_greedy_cover1_star_takes_centre():
    assert greedy_cover1([(1, 2), (1, 3), (1, 4)]) == [1]


@pytest.mark.parametrize("edges", [TRIANGLE, PATH, [(1, 2), (3, 4), (2, 3)]])
def test_greedy_covers_are_valid(edges):
    vertices = {v for edge in edges for v in edge}
    first = set(greedy_cover1(edges))
    second = set(greedy_cover2(edges))
    assert all(a in first or b in first for a, b in edges)
    assert all(a in second or b in second for a, b in edges)
    assert first <= vertices
    assert second <= vertices


def test_greedy_cover2_single_edge():
    assert greedy_cover2([(1, 2)]) == [1, 2]


def test_greedy_does_not_change_input():
    edges = list(PATH)
    greedy_cover1(edges)
    greedy_cover2(edges)
    assert edges == PATH


def test_greedy_empty_graph():
    assert greedy_cover1([]) == []
    assert greedy_cover2([]) == []


def test_append_record_appends(tmp_path):
    target = tmp_path / "record.txt"
    assert append_record("a\n", str(target)) is True
    assert append_record("b\n", str(target)) is True
    assert target.read_text() == "a\nb\n"


def test_append_record_missing_directory(tmp_path):
    assert append_record("a", str(tmp_path / "missing" / "record.txt")) is False


def test_main_triangle(tmp_path, monkeypatch, capsys):
    record = tmp_path / "record.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("V 3\nE {<1,2>,<2,3>,<1,3>}\n"))
    assert main(["--output", str(record)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("VC-EXACT: ")
    assert lines[0].endswith("(2)")
    assert lines[1] == "VC-GREEDY-1: " + format_cover(greedy_cover1(TRIANGLE))
    assert lines[2] == "VC-GREEDY-2: " + format_cover(greedy_cover2(TRIANGLE))
    text = record.read_text()
    assert text.startswith("3\n")
    assert "VC-GREEDY-1: " in text
    assert "VC-EXACT: " in text


def test_main_ignores_unterminated_line(tmp_path, monkeypatch, capsys):
    record = tmp_path / "record.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("V 3\nE {<1,2>}"))
    assert main(["--output", str(record)]) == 0
    assert capsys.readouterr().out == ""
    assert record.read_text() == "3\n"


def test_main_reports_edges_without_vertices(tmp_path, monkeypatch, capsys):
    record = tmp_path / "record.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("E {<1,2>,<2,3>,<1,3>}\n"))
    assert main(["--output", str(record)]) == 0
    assert "Error:" in capsys.readouterr().err
import networkx as nx
import pytest

from graph.errors import ConflictDetected
from graph.verify import assert_all_distinct, find_conflicts, print_check_summary, verify, verify_coloring


def test_proper_coloring_passes():
    G = nx.cycle_graph(4)
    col = {0: 0, 1: 1, 2: 0, 3: 1}
    assert find_conflicts(G, col) == []
    verify(G, col)
    rep = verify_coloring(G, col, allowed_colors=range(2))
    assert rep["feasible"]
    assert rep["num_used_colors"] == 2


def test_conflicts_are_reported_with_color():
    G = nx.path_graph(3)
    col = {0: 5, 1: 5, 2: 1}
    assert find_conflicts(G, col) == [(0, 1, 5)]
    with pytest.raises(ConflictDetected) as ei:
        verify(G, col)
    assert ei.value.conflicts == [(0, 1, 5)]


def test_verification_is_idempotent():
    G = nx.petersen_graph()
    col = {v: v % 3 for v in G.nodes()}
    first = find_conflicts(G, col)
    assert first == find_conflicts(G, col)
    assert verify_coloring(G, col) == verify_coloring(G, col)
    assert col == {v: v % 3 for v in G.nodes()}


def test_report_flags_missing_and_out_of_range():
    G = nx.path_graph(3)
    rep = verify_coloring(G, {0: 0, 1: 3, 2: None}, allowed_colors=range(2))
    assert rep["missing_nodes"] == [2]
    assert rep["out_of_range_nodes"] == [1]
    assert not rep["feasible"]


def test_all_distinct():
    G = nx.complete_graph(4)
    assert_all_distinct(G, {0: 0, 1: 1, 2: 2, 3: 3})
    with pytest.raises(ConflictDetected):
        assert_all_distinct(G, {0: 0, 1: 1, 2: 2, 3: 2})


def test_summary_lists_what_is_wrong(capsys):
    G = nx.path_graph(4)
    rep = verify_coloring(G, {0: 1, 1: 1, 2: -1, 3: None}, allowed_colors=range(2))
    print_check_summary(rep, prefix="[T] ")
    out = capsys.readouterr().out
    assert "[T] feasible=False | colors=2 | conflicts=1" in out
    assert "[T] uncolored: 1 node(s), first [3]" in out
    assert "[T] invalid color: 1 node(s), first [2]" in out
    assert "[T] same-color edges (u, v, color): [(0, 1, 1)]" in out


def test_summary_is_one_line_when_feasible(capsys):
    G = nx.path_graph(3)
    print_check_summary(verify_coloring(G, {0: 0, 1: 1, 2: 0}))
    assert capsys.readouterr().out == "[Check] feasible=True | colors=2 | conflicts=0\n"

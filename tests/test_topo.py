import pytest

from critpath.errors import CycleDetected
from critpath.graph_helpers import build_graph
from critpath.models import VisitState
from critpath.topo import topological_order


def assert_consistent(G, order):
    position = {task: i for i, task in enumerate(order)}
    assert sorted(order) == sorted(G.nodes)
    for u, v in G.edges:
        assert position[u] < position[v], f"{u} should come before {v}"


def test_diamond_order(diamond):
    G = build_graph(diamond)
    order = topological_order(G)
    assert_consistent(G, order)
    assert order[0] == "A"
    assert order[-1] == "D"


def test_demo_order(demo):
    G = build_graph(demo)
    assert_consistent(G, topological_order(G))


def test_all_done_after_sort(demo):
    G = build_graph(demo)
    topological_order(G)
    assert all(state is VisitState.DONE for _, state in G.nodes(data="state"))


def test_order_is_deterministic(demo):
    first = topological_order(build_graph(demo))
    second = topological_order(build_graph(demo))
    assert first == second


def test_sort_twice_on_same_graph(demo):
    G = build_graph(demo)
    assert topological_order(G) == topological_order(G)


def test_empty_graph():
    assert topological_order(build_graph([])) == []


def test_isolated_tasks():
    G = build_graph([("A", 1, "-"), ("B", 1, "-"), ("C", 1, "-")])
    assert sorted(topological_order(G)) == ["A", "B", "C"]


def test_two_task_cycle(two_cycle):
    G = build_graph(two_cycle)
    with pytest.raises(CycleDetected) as exc:
        topological_order(G)
    assert set(exc.value.edge) == {"X", "Y"}
    assert exc.value.cycle[0] == exc.value.cycle[-1]
    assert "cycle involving" in str(exc.value)


def test_self_loop_is_a_cycle():
    G = build_graph([("A", 1, "A")])
    with pytest.raises(CycleDetected) as exc:
        topological_order(G)
    assert exc.value.edge == ("A", "A")
    assert exc.value.cycle == ["A", "A"]


def test_cycle_path_reported():
    G = build_graph([
        ("S", 1, "-"),
        ("P", 1, "S,R"),
        ("Q", 1, "P"),
        ("R", 1, "Q"),
    ])
    with pytest.raises(CycleDetected) as exc:
        topological_order(G)
    cycle = exc.value.cycle
    assert cycle[0] == cycle[-1]
    assert set(cycle) == {"P", "Q", "R"}
    # every step along the reported cycle is a real edge
    for u, v in zip(cycle, cycle[1:]):
        assert G.has_edge(u, v)


def test_cycle_in_later_component_still_fails():
    G = build_graph([("A", 1, "-"), ("B", 1, "A"), ("X", 1, "Y"), ("Y", 1, "X")])
    with pytest.raises(CycleDetected):
        topological_order(G)


def test_deep_chain_does_not_hit_recursion_limit():
    n = 5000
    records = [("t0", 1, "-")] + [(f"t{i}", 1, f"t{i - 1}") for i in range(1, n)]
    order = topological_order(build_graph(records))
    assert order == [f"t{i}" for i in range(n)]


def test_cycle_error_carries_the_real_path():
    G = build_graph([("A", 1, "C"), ("B", 1, "A"), ("C", 1, "B")])
    with pytest.raises(CycleDetected) as exc:
        topological_order(G)
    assert exc.value.cycle == ["A", "B", "C", "A"]
    assert exc.value.edge == ("C", "A")
    assert "A -> B -> C -> A" in str(exc.value)
    # the path is always given, never guessed from the edge
    with pytest.raises(TypeError):
        CycleDetected(("C", "A"))

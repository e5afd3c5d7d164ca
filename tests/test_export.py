import json

import pydot
import pytest

from critpath.export import format_table, summary_frame, to_dot, to_node_link, write_export
from critpath.schedule import compute_schedule


@pytest.fixture
def schedule(diamond):
    return compute_schedule(diamond)


def test_summary_frame(schedule):
    df = summary_frame(schedule)
    assert list(df.columns) == ["Task", "Duration", "ES", "EF", "LS", "LF", "Slack", "Critical"]
    assert list(df["Task"]) == schedule.order
    row = df.set_index("Task").loc["C"]
    assert (row["ES"], row["EF"], row["LS"], row["LF"], row["Slack"]) == (2, 3, 4, 5, 2)
    assert row["Critical"] == "No"


def test_format_table(schedule):
    text = format_table(schedule)
    assert "Project duration: 9" in text
    assert "Critical path: A -> B -> D" in text


def test_node_link_export(schedule):
    data = to_node_link(schedule)
    # round trips through json untouched
    data = json.loads(json.dumps(data))
    assert data["graph"]["project_duration"] == 9
    assert data["graph"]["critical_path"] == ["A", "B", "D"]
    nodes = {n["id"]: n for n in data["nodes"]}
    assert nodes["C"] == {
        "id": "C", "duration": 1, "es": 2, "ef": 3, "ls": 4, "lf": 5, "slack": 2, "critical": False
    }
    edges = {(e["source"], e["target"]): e["critical"] for e in data["edges"]}
    assert edges == {("A", "B"): True, ("A", "C"): False, ("B", "D"): True, ("C", "D"): False}


def test_dot_export(schedule):
    graph = pydot.graph_from_dot_data(to_dot(schedule))[0]
    names = {n.get_name().strip('"') for n in graph.get_nodes()}
    assert {"A", "B", "C", "D"} <= names
    colors = {
        (e.get_source().strip('"'), e.get_destination().strip('"')): e.get("color").strip('"')
        for e in graph.get_edges()
    }
    assert colors[("A", "B")] == "#E57373"
    assert colors[("A", "C")] == "#64B5F6"


def test_write_export(schedule, tmp_path):
    out = write_export(schedule, tmp_path / "schedule.json")
    assert json.loads(out.read_text(encoding="utf-8"))["graph"]["project_duration"] == 9
    out = write_export(schedule, tmp_path / "schedule.dot")
    assert out.read_text(encoding="utf-8").lstrip().startswith(("digraph", "strict digraph"))
    with pytest.raises(ValueError):
        write_export(schedule, tmp_path / "schedule.png")


def test_dot_keeps_ids_with_colons_apart():
    schedule = compute_schedule([("phase:1", 2, "-"), ("phase:2", 3, "phase:1")])
    graph = pydot.graph_from_dot_data(to_dot(schedule))[0]
    names = {n.get_name().strip('"') for n in graph.get_nodes()}
    assert {"phase:1", "phase:2"} <= names
    assert "phase" not in names
    edges = [(e.get_source().strip('"'), e.get_destination().strip('"')) for e in graph.get_edges()]
    assert edges == [("phase:1", "phase:2")]

"""
renderers over a finished Schedule: summary table, node-link json, graphviz dot
"""
import json
import logging
from pathlib import Path

import networkx as nx
import pandas as pd
from networkx.readwrite import json_graph

logger = logging.getLogger(__name__)

CRITICAL_COLOR = "#E57373"
NORMAL_COLOR = "#64B5F6"


def summary_frame(schedule):
    """one row per task in topological order: Task, Duration, ES, EF, LS, LF, Slack, Critical"""
    rows = []
    for t in schedule.tasks():
        rows.append({
            "Task": t.id,
            "Duration": t.duration,
            "ES": t.es,
            "EF": t.ef,
            "LS": t.ls,
            "LF": t.lf,
            "Slack": t.slack,
            "Critical": "Yes" if t.is_critical else "No"
        })
    return pd.DataFrame(rows, columns=["Task", "Duration", "ES", "EF", "LS", "LF", "Slack", "Critical"])


def format_table(schedule):
    """plain text report: the summary table, project duration and the critical sequence"""
    lines = [
        summary_frame(schedule).to_string(index=False),
        "",
        f"Project duration: {schedule.project_duration}",
        f"Critical path: {' -> '.join(schedule.critical_path)}",
    ]
    return "\n".join(lines)


def _export_graph(schedule):
    """copy of the task graph holding only the attributes renderers are allowed to see"""
    H = nx.DiGraph(
        project_duration=schedule.project_duration,
        order=list(schedule.order),
        critical_path=list(schedule.critical_path)
    )
    for t in schedule.tasks():
        H.add_node(
            t.id,
            duration=t.duration,
            es=t.es,
            ef=t.ef,
            ls=t.ls,
            lf=t.lf,
            slack=t.slack,
            critical=t.is_critical
        )
    critical = set(schedule.critical_edges())
    for u, v in schedule.graph.edges():
        H.add_edge(u, v, critical=(u, v) in critical)
    return H


def to_node_link(schedule):
    """json-serialisable {"nodes": [...], "edges": [...], "graph": {...}} for visualisation tools"""
    return json_graph.node_link_data(_export_graph(schedule), edges="edges")


def _dot_quote(text):
    """double-quoted dot id; inside quotes ":" is part of the name, not a port"""
    return '"' + str(text).replace('"', '\\"') + '"'


def to_dot(schedule):
    """graphviz description with critical tasks and edges drawn in red"""
    H = _export_graph(schedule)
    D = nx.DiGraph(rankdir="LR")
    for task, data in H.nodes(data=True):
        color = CRITICAL_COLOR if data["critical"] else NORMAL_COLOR
        D.add_node(
            _dot_quote(task),
            shape="box",
            color=color,
            penwidth=2 if data["critical"] else 1,
            label=_dot_quote(
                f"{task} ({data['duration']})\\n"
                f"ES {data['es']} EF {data['ef']}\\n"
                f"LS {data['ls']} LF {data['lf']}\\n"
                f"slack {data['slack']}"
            )
        )
    for u, v, crit in H.edges(data="critical"):
        D.add_edge(
            _dot_quote(u),
            _dot_quote(v),
            color=CRITICAL_COLOR if crit else NORMAL_COLOR,
            penwidth=2 if crit else 1
        )
    return nx.nx_pydot.to_pydot(D).to_string()


def write_export(schedule, path):
    """
    input: schedule, output path ending in .json, .dot or .gv
    writes the matching rendering and returns the path
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(to_node_link(schedule), indent=2), encoding="utf-8")
    elif suffix in (".dot", ".gv"):
        path.write_text(to_dot(schedule), encoding="utf-8")
    else:
        raise ValueError(f"Unsupported export format '{path.suffix}'. Use .json or .dot")
    logger.info(f"Exported schedule to {path}")
    return path

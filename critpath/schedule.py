"""
runs the whole computation: build → sort → forward pass → backward pass → slack → critical path
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import networkx as nx

from critpath import critical_path as cp
from critpath.cpm import backward_pass, calculate_slack, forward_pass, project_duration
from critpath.graph_helpers import build_graph, reset_timing
from critpath.models import TaskTiming
from critpath.topo import topological_order

logger = logging.getLogger(__name__)


@dataclass
class Schedule:
    """a finished, cycle-free schedule; never built from a partial run"""
    graph: nx.DiGraph
    order: List[str]
    project_duration: int
    critical_path: List[str]
    critical_chain: List[str]
    dangling: List[Tuple[str, str]] = field(default_factory=list)

    def task(self, task_id):
        node = self.graph.nodes[task_id]
        return TaskTiming(
            id=task_id,
            duration=node["duration"],
            es=node["es"],
            ef=node["ef"],
            ls=node["ls"],
            lf=node["lf"],
            slack=node["slack"],
            is_critical=node["slack"] == 0
        )

    def tasks(self):
        return [self.task(t) for t in self.order]

    def critical_edges(self):
        return cp.critical_edges(self.graph)


def run_schedule(G):
    """
    input: a task graph from build_graph
    output: Schedule
    a CycleDetected from the sort propagates before any timing value is written
    """
    reset_timing(G)
    topo_sorted = topological_order(G)
    es_dict, ef_dict = forward_pass(G, topo_sorted)
    total_dur = project_duration(G)
    ls_dict, lf_dict = backward_pass(G, topo_sorted, total_dur)
    calculate_slack(G, topo_sorted, es_dict, ls_dict)

    critical = cp.critical_tasks(G, topo_sorted)
    logger.info(f"Project duration: {total_dur}")
    logger.info(f"Critical path: {' -> '.join(critical)}")
    return Schedule(
        graph=G,
        order=topo_sorted,
        project_duration=total_dur,
        critical_path=critical,
        critical_chain=cp.critical_chain(G, topo_sorted),
        dangling=list(G.graph.get("dangling", []))
    )


def compute_schedule(records, **builder_options):
    """build_graph(records, **builder_options) followed by run_schedule"""
    return run_schedule(build_graph(records, **builder_options))

"""
depth first topological sort with three-colour cycle detection
"""
import logging

from critpath.errors import CycleDetected
from critpath.models import VisitState

logger = logging.getLogger(__name__)


def topological_order(G):
    """
    input: the task graph built by build_graph
    output: list of every task id, each predecessor placed before all of its successors
    raises CycleDetected (and stops right there) when an in-progress task is reached again
    """
    # every sort starts from a clean slate
    for _, data in G.nodes(data=True):
        data["state"] = VisitState.UNVISITED

    finish_order = []
    for root in G:
        if G.nodes[root]["state"] is VisitState.UNVISITED:
            _visit(G, root, finish_order)

    # a task finishes only after all its successors did, so reversing gives sources first
    finish_order.reverse()
    logger.debug(f"Topological order: {finish_order}")
    return finish_order


def _visit(G, root, finish_order):
    """iterative dfs from root; the stack holds (task, iterator over its successors)"""
    nodes = G.nodes
    nodes[root]["state"] = VisitState.IN_PROGRESS
    stack = [(root, iter(G.successors(root)))]
    while stack:
        task, succs = stack[-1]
        for succ in succs:
            state = nodes[succ]["state"]
            if state is VisitState.IN_PROGRESS:
                path = [t for t, _ in stack]
                cycle = path[path.index(succ):] + [succ]
                logger.error(f"Cycle detected: {' -> '.join(cycle)}")
                raise CycleDetected((task, succ), cycle)
            if state is VisitState.UNVISITED:
                nodes[succ]["state"] = VisitState.IN_PROGRESS
                stack.append((succ, iter(G.successors(succ))))
                break
        else:
            # all successors done
            stack.pop()
            nodes[task]["state"] = VisitState.DONE
            finish_order.append(task)

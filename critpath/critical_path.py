"""
zero-slack tasks and edges of a scheduled task graph
"""


def is_critical(G, task):
    return G.nodes[task]["slack"] == 0


def critical_tasks(G, topo_sorted):
    """every zero-slack task, in topological order (may span several parallel critical branches)"""
    return [task for task in topo_sorted if is_critical(G, task)]


def is_critical_edge(G, u, v):
    """both ends critical and no gap between them: u finishes exactly when v starts"""
    return is_critical(G, u) and is_critical(G, v) and G.nodes[u]["ef"] == G.nodes[v]["es"]


def critical_edges(G):
    return [(u, v) for u, v in G.edges() if is_critical_edge(G, u, v)]


def critical_chain(G, topo_sorted):
    """
    input: the scheduled graph and its topological order
    output: one connected critical path from a task starting at 0 to a sink,
            taking the earliest critical successor in topological order at each step
    """
    position = {task: i for i, task in enumerate(topo_sorted)}
    start = next(
        (t for t in topo_sorted if is_critical(G, t) and G.nodes[t]["es"] == 0), None
    )
    if start is None:
        return []
    chain = [start]
    while True:
        nexts = [s for s in G.successors(chain[-1]) if is_critical_edge(G, chain[-1], s)]
        if not nexts:
            return chain
        chain.append(min(nexts, key=position.__getitem__))

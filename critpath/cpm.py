import logging

from critpath.errors import InconsistentScheduleError

logger = logging.getLogger(__name__)


def forward_pass(G, topo_sorted):
    """
    input: the task graph, the sorted task ids
    output:
        dict that maps each task with its earliest start time
        dict that maps each task with its earliest finish time
    the same values are written onto the nodes as "es" / "ef"
    """
    #storing the es and ef values
    es_dict = {}
    ef_dict = {}
    #for each task calculate es (maximum of the prev efs) and ef (es + duration)
    for task in topo_sorted:
        node = G.nodes[task]
        es = max((ef_dict[p] for p in G.predecessors(task)), default=0) #largest ef of predecessors, 0 for a source
        ef = es + node["duration"]
        node["es"], node["ef"] = es, ef
        es_dict[task] = es
        ef_dict[task] = ef
    return es_dict, ef_dict


def project_duration(G):
    """
    input: the task graph after the forward pass
    output: the largest earliest finish among tasks nothing depends on (0 for an empty graph)
    """
    return max((ef for task, ef in G.nodes(data="ef") if G.out_degree(task) == 0), default=0)


def backward_pass(G, topo_sorted, total_dur):
    """
    input: the task graph, the sorted task ids, total duration to finish project
    output:
        dict that maps each task with its latest start time
        dict that maps each task with its latest finish time
    the same values are written onto the nodes as "ls" / "lf"
    """
    #for storing the vals
    ls_dict = {}
    lf_dict = {}
    #walk the sorted list backwards so every successor is already settled
    for task in reversed(topo_sorted):
        node = G.nodes[task]
        lf = min((ls_dict[s] for s in G.successors(task)), default=total_dur) #sinks finish with the project
        ls = lf - node["duration"]
        node["lf"], node["ls"] = lf, ls
        lf_dict[task] = lf
        ls_dict[task] = ls
    return ls_dict, lf_dict


def calculate_slack(G, topo_sorted, es_dict, ls_dict):
    """
    input:
        the graph
        sorted task ids
        dict mapping task to earliest start time
        dict mapping task to latest start time
    output:
        dict with slack per task
    raises InconsistentScheduleError on a negative slack
    """
    slack_dict = {}
    for task in topo_sorted:
        slack = ls_dict[task] - es_dict[task]
        if slack < 0:
            logger.error(f"Negative slack {slack} on '{task}'")
            raise InconsistentScheduleError(task, slack)
        G.nodes[task]["slack"] = slack
        slack_dict[task] = slack
    return slack_dict

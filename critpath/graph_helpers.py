# front matter
import logging
import re
import networkx as nx

from critpath import config
from critpath.errors import DuplicateTaskError, InvalidTaskError
from critpath.models import TaskRecord, VisitState

logger = logging.getLogger(__name__)

# timing attributes every node carries; None until the passes run
TIMING_ATTRS = ("es", "ef", "ls", "lf", "slack")


def parse_precedence(spec, delimiters=None, empty_markers=None):
    """
    input: a precedence spec like "A, B" / "A;B" / "-", or an already split list of ids
    output: list of trimmed predecessor ids, in order, without repeats or empty markers
    """
    delimiters = config.DELIMITERS if delimiters is None else delimiters
    empty_markers = config.EMPTY_MARKERS if empty_markers is None else empty_markers
    if spec is None:
        return []
    if isinstance(spec, str):
        if delimiters:
            parts = re.split("[" + re.escape(delimiters) + "]", spec)
        else:
            parts = [spec]
    else:
        parts = [str(p) for p in spec]
    preds = []
    for part in parts:
        pred = part.strip()
        # drop "-", blanks and repeats ("A,A" is one edge)
        if pred in empty_markers or pred == "" or pred in preds:
            continue
        preds.append(pred)
    return preds


def _clean_record(record):
    """
    input: a TaskRecord or an (id, duration, precedence) tuple
    output: (id, duration, precedence) with the id trimmed and duration checked
    """
    if isinstance(record, TaskRecord):
        task_id, duration, precedence = record.id, record.duration, record.precedence
    else:
        try:
            task_id, duration, precedence = record
        except (TypeError, ValueError):
            raise InvalidTaskError(f"Expected (id, duration, precedence), got {record!r}") from None

    if not isinstance(task_id, str) or not task_id.strip():
        raise InvalidTaskError(f"Task id must be a non-empty string, got {task_id!r}")
    task_id = task_id.strip()

    # bools are ints in python, but "True days" is not a duration
    if isinstance(duration, bool):
        raise InvalidTaskError(f"Duration of '{task_id}' must be an integer, got {duration!r}")
    if isinstance(duration, float) and duration.is_integer():
        duration = int(duration)
    if not isinstance(duration, int):
        try:
            duration = int(duration.__index__())
        except AttributeError:
            raise InvalidTaskError(
                f"Duration of '{task_id}' must be an integer, got {duration!r}"
            ) from None
    if duration < 0:
        raise InvalidTaskError(f"Duration of '{task_id}' must be non-negative, got {duration}")
    return task_id, duration, precedence


def build_graph(records, delimiters=None, empty_markers=None, on_duplicate=None):
    """
    inputs:
        records → iterable of TaskRecord or (id, duration, precedence_spec)
        delimiters / empty_markers → how precedence specs are split (config defaults)
        on_duplicate → "overwrite" (later record wins) or "error" (raise DuplicateTaskError)
    output: G → a networkx.DiGraph, one node per task, an edge pred -> task per known predecessor
    """
    on_duplicate = (on_duplicate or config.ON_DUPLICATE).lower()
    if on_duplicate not in config.DUPLICATE_POLICIES:
        raise ValueError(
            f"on_duplicate must be one of {', '.join(config.DUPLICATE_POLICIES)}, got '{on_duplicate}'"
        )

    G = nx.DiGraph()
    G.graph["dangling"] = []
    # first pass: tasks and their raw predecessor lists
    for record in records:
        task_id, dur, precedence = _clean_record(record)
        if task_id in G:
            if on_duplicate == "error":
                raise DuplicateTaskError(task_id)
            logger.warning(f"Duplicate task '{task_id}': keeping the later definition")
            G.nodes[task_id].clear()
        G.add_node(
            task_id,
            duration=dur,
            predecessors=parse_precedence(precedence, delimiters, empty_markers),
            state=VisitState.UNVISITED,
            **{attr: None for attr in TIMING_ATTRS}
        )

    # second pass: successors are the transpose of the predecessor lists
    for task_id, preds in G.nodes(data="predecessors"):
        for pred in preds:
            if pred in G:
                G.add_edge(pred, task_id)
            else:
                G.graph["dangling"].append((task_id, pred))
                logger.warning(f"Task '{task_id}' lists unknown predecessor '{pred}'; ignored")

    logger.debug(f"Built task graph: {G.number_of_nodes()} tasks, {G.number_of_edges()} edges")
    return G


def reset_timing(G):
    """clears the visit state and every timing attribute so a run starts from scratch"""
    for _, data in G.nodes(data=True):
        data["state"] = VisitState.UNVISITED
        for attr in TIMING_ATTRS:
            data[attr] = None
    return G

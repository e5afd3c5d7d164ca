"""Critical path (CPM) scheduling over a task precedence graph."""
from critpath.errors import (
    CycleDetected,
    DuplicateTaskError,
    InconsistentScheduleError,
    InputFormatError,
    InvalidTaskError,
    ScheduleError,
)
from critpath.graph_helpers import build_graph, parse_precedence
from critpath.models import TaskRecord, TaskTiming, VisitState
from critpath.schedule import Schedule, compute_schedule, run_schedule
from critpath.topo import topological_order

__version__ = "0.1.0"

__all__ = [
    "CycleDetected",
    "DuplicateTaskError",
    "InconsistentScheduleError",
    "InputFormatError",
    "InvalidTaskError",
    "ScheduleError",
    "Schedule",
    "TaskRecord",
    "TaskTiming",
    "VisitState",
    "build_graph",
    "compute_schedule",
    "parse_precedence",
    "run_schedule",
    "topological_order",
]

"""
exceptions raised while building or scheduling a task graph
"""


class ScheduleError(Exception):
    """base class for everything that stops a schedule from being computed"""


class CycleDetected(ScheduleError):
    """
    raised by the topological sort when a successor that is still in progress is reached again
    edge: the (from, to) pair that closes the cycle
    cycle: the ids along the cycle, first and last being the same
    """

    def __init__(self, edge, cycle):
        self.edge = tuple(edge)
        self.cycle = list(cycle)
        super().__init__(
            f"computation could not complete: cycle involving {' -> '.join(map(str, self.cycle))}"
        )


class InvalidTaskError(ScheduleError, ValueError):
    """a record with an empty id or a duration that is not a non-negative integer"""


class DuplicateTaskError(InvalidTaskError):
    """same task id given twice while duplicates are rejected"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Duplicate task id: '{task_id}'")


class InconsistentScheduleError(ScheduleError):
    """negative slack after both passes; the duration or edge data is broken"""

    def __init__(self, task_id, slack):
        self.task_id = task_id
        self.slack = slack
        super().__init__(f"Task '{task_id}' ended with negative slack ({slack})")


class InputFormatError(ScheduleError, ValueError):
    """unsupported file type or missing columns in a task table"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union


class VisitState(Enum):
    """dfs marker kept on every node while sorting"""
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass(frozen=True)
class TaskRecord:
    """one input row: id, duration and the precedence spec ("A,B", "-" or a list of ids)"""
    id: str
    duration: int
    precedence: Union[str, Sequence[str], None] = ""


@dataclass(frozen=True)
class TaskTiming:
    """one output row, as handed to the renderers"""
    id: str
    duration: int
    es: Optional[int]
    ef: Optional[int]
    ls: Optional[int]
    lf: Optional[int]
    slack: Optional[int]
    is_critical: bool

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival_time < 0:
            raise ValueError(f"arrival_time cannot be negative (process {self.pid})")
        if self.burst_time <= 0:
            raise ValueError(f"burst_time must be positive (process {self.pid})")


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ScheduleRow:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass
class RunSummary:
    average_waiting: float
    average_turnaround: float
    throughput: float


@dataclass
class ScheduleResult:
    algorithm: str
    timeline: List[ScheduledSlice] = field(default_factory=list)
    rows: List[ScheduleRow] = field(default_factory=list)
    summary: RunSummary | None = None

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Process:
    """
    One process record of a workload.

    ``remaining``, ``start_time`` and ``finish_time`` are scheduling state and
    are mutated in place by a simulator. ``None`` means "not dispatched yet".
    """

    id: int
    arrival: int
    burst: int
    remaining: Optional[int] = None
    start_time: Optional[int] = None
    finish_time: Optional[int] = None

    def __post_init__(self) -> None:
        if self.remaining is None:
            self.remaining = self.burst

    def reset(self) -> None:
        self.remaining = self.burst
        self.start_time = None
        self.finish_time = None

    @property
    def is_scheduled(self) -> bool:
        return self.start_time is not None and self.finish_time is not None


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class WorkloadMetrics:
    avg_turnaround: float
    avg_response: float
    avg_waiting: float
    throughput: float
    makespan: int
    cpu_busy_time: int
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[Process] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    metrics: Optional[WorkloadMetrics] = None

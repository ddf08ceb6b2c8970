from __future__ import annotations

from pathlib import Path
from typing import Optional


class SchedulerError(Exception):
    """Base class for every failure the simulator reports."""

    exit_code = 1


class LoadError(SchedulerError):
    exit_code = 3

    def __init__(self, path: str | Path, cause: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = f": {cause}" if cause is not None else ""
        super().__init__(f"cannot load workload {self.path}{reason}")


class InvalidRecord(SchedulerError):
    exit_code = 4

    def __init__(self, path: str | Path, line_number: int, reason: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: invalid record: {reason}")


class EmptyWorkload(SchedulerError):
    exit_code = 5

    def __init__(self, source: str | Path | None = None) -> None:
        self.source = source
        where = f" in {source}" if source is not None else ""
        super().__init__(f"no valid process records{where}")


class InvalidQuantum(SchedulerError):
    exit_code = 6

    def __init__(self, quantum) -> None:
        self.quantum = quantum
        super().__init__(f"Round Robin requires a positive quantum, got {quantum!r}")


class DegenerateWorkload(SchedulerError):
    exit_code = 7

    def __init__(self) -> None:
        super().__init__("makespan is zero; throughput is undefined")


class IncompleteSchedule(SchedulerError):
    exit_code = 8

    def __init__(self, pid: int) -> None:
        self.pid = pid
        super().__init__(f"process {pid} has not been scheduled to completion")

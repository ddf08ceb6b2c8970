from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from .errors import InvalidQuantum
from .metrics import compute_metrics
from .models import Process, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)


def schedule_fcfs(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes are dispatched in the order given; sort them by arrival first
    if strict arrival order is wanted. Records are annotated in place.
    """
    time = 0
    timeline: List[ScheduledSlice] = []

    for p in processes:
        if time < p.arrival:
            time = p.arrival

        p.start_time = time
        p.finish_time = time + p.burst
        p.remaining = 0

        timeline.append(ScheduledSlice(pid=p.id, start_time=p.start_time, end_time=p.finish_time))
        logger.debug("FCFS: process %d runs %d..%d", p.id, p.start_time, p.finish_time)

        time = p.finish_time

    result = ScheduleResult(algorithm="FCFS", quantum=quantum, processes=processes, timeline=timeline)
    result.metrics = compute_metrics(processes, timeline)
    return result


def schedule_rr(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    The workload is expected in arrival order. A process is admitted to the
    ready queue once the clock reaches its arrival; admission stops at the
    first process that has not arrived yet, so input order gates admission.

    When a slice ends exactly when new processes arrive, the arrivals are
    queued ahead of the preempted process.
    """
    if quantum is None or quantum <= 0:
        raise InvalidQuantum(quantum)

    n = len(processes)
    time = 0
    timeline: List[ScheduledSlice] = []

    # Ready queue of indices into ``processes``.
    ready: Deque[int] = deque()
    next_unarrived = 0
    completed = 0

    def admit_arrivals(current_time: int) -> None:
        nonlocal next_unarrived
        while next_unarrived < n and processes[next_unarrived].arrival <= current_time:
            ready.append(next_unarrived)
            next_unarrived += 1

    admit_arrivals(time)

    while completed < n:
        if not ready:
            # CPU idle: skip straight to the next arrival instead of ticking.
            time = processes[next_unarrived].arrival
            logger.debug("RR: CPU idle until %d", time)
            admit_arrivals(time)
            continue

        idx = ready.popleft()
        p = processes[idx]

        # First dispatch fixes the response time.
        if p.start_time is None:
            p.start_time = time

        run_time = min(quantum, p.remaining)
        timeline.append(ScheduledSlice(pid=p.id, start_time=time, end_time=time + run_time))

        time += run_time
        p.remaining -= run_time

        admit_arrivals(time)

        if p.remaining > 0:
            ready.append(idx)
        else:
            p.finish_time = time
            completed += 1
            logger.debug("RR: process %d finished at %d", p.id, time)

    logger.debug("RR: %d slices dispatched with quantum %d", len(timeline), quantum)

    result = ScheduleResult(algorithm="Round Robin", quantum=quantum, processes=processes, timeline=timeline)
    result.metrics = compute_metrics(processes, timeline)
    return result


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. The quantum only matters for
    round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown or unimplemented algorithm '{name}'")

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)

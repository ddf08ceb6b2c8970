from __future__ import annotations

import logging
from typing import List, Optional

from .errors import DegenerateWorkload, EmptyWorkload, IncompleteSchedule
from .models import Process, ScheduledSlice, WorkloadMetrics

logger = logging.getLogger(__name__)


def compute_metrics(
    processes: List[Process],
    timeline: Optional[List[ScheduledSlice]] = None,
) -> WorkloadMetrics:
    """
    Reduce a scheduled workload to average turnaround, average response and
    throughput (plus waiting time and CPU utilization).

    Every process must carry both a start and a finish time. CPU busy time is
    measured from the slice trace when one is given, otherwise from bursts.
    """
    if not processes:
        raise EmptyWorkload()

    for p in processes:
        if not p.is_scheduled:
            raise IncompleteSchedule(p.id)

    n = len(processes)
    makespan = max(p.finish_time for p in processes)
    if makespan == 0:
        raise DegenerateWorkload()

    turnaround = [p.finish_time - p.arrival for p in processes]
    response = [p.start_time - p.arrival for p in processes]
    waiting = [tat - p.burst for tat, p in zip(turnaround, processes)]

    if timeline is None:
        cpu_busy_time = sum(p.burst for p in processes)
    else:
        cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in timeline)

    metrics = WorkloadMetrics(
        avg_turnaround=sum(turnaround) / n,
        avg_response=sum(response) / n,
        avg_waiting=sum(waiting) / n,
        throughput=n / makespan,
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        cpu_utilization=cpu_busy_time / makespan,
    )
    logger.debug("Metrics for %d processes: %s", n, metrics)
    return metrics

from __future__ import annotations

from typing import List

from .models import ScheduleResult


def report_title(result: ScheduleResult) -> str:
    if result.quantum is not None and result.algorithm == "Round Robin":
        return f"{result.algorithm} Scheduling (Quantum={result.quantum}):"
    return f"{result.algorithm} Scheduling:"


def format_report(result: ScheduleResult) -> str:
    """
    Render one report block: a title line and three metric lines with two
    decimal places.
    """
    if result.metrics is None:
        raise ValueError(f"{result.algorithm} result has no metrics to report")

    m = result.metrics
    lines: List[str] = [
        report_title(result),
        f"Average Turnaround Time: {m.avg_turnaround:.2f}",
        f"Average Response Time: {m.avg_response:.2f}",
        f"Throughput: {m.throughput:.2f} processes/ut",
    ]
    return "\n".join(lines)

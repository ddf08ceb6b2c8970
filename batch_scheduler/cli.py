from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import run_algorithm
from .errors import SchedulerError
from .models import Process, ScheduleResult
from .report import format_report
from .workload_io import clone_workload, load_workload, sort_by_arrival

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scheduler",
        description=(
            "Batch CPU scheduling simulator. Runs FCFS and Round Robin on a "
            "workload file and reports average turnaround time, average "
            "response time and throughput."
        ),
        epilog=(
            "The workload file starts with a header line, followed by one "
            "'id arrival burst' record per line. Processes are scheduled in "
            "file order unless --sort-by-arrival is given. Malformed lines are "
            "skipped silently unless --strict is given."
        ),
    )
    parser.add_argument(
        "process_file",
        help="Path to the workload text file.",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--sort-by-arrival",
        action="store_true",
        help="Stable-sort processes by arrival time before scheduling.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed lines instead of skipping them.",
    )
    parser.add_argument(
        "--show-workload",
        action="store_true",
        help="List the loaded processes before the report.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log loader and scheduler decisions to stderr.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("batch_scheduler")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def simulate(
    workload_path: str | Path,
    quantum: int = DEFAULT_QUANTUM,
    strict: bool = False,
    arrival_order: bool = False,
) -> List[ScheduleResult]:
    """
    Load a workload and run FCFS, then Round Robin, each on its own copy.

    Any SchedulerError propagates; nothing is returned for a partial run.
    """
    processes = load_workload(workload_path, strict=strict)
    if arrival_order:
        processes = sort_by_arrival(processes)

    fcfs = run_algorithm("fcfs", clone_workload(processes))
    rr = run_algorithm("rr", clone_workload(processes), quantum=quantum)
    return [fcfs, rr]


def build_workload_table(processes: List[Process]) -> Table:
    table = Table(title="Loaded processes", box=box.SIMPLE_HEAVY)
    table.add_column("ID", justify="center")
    table.add_column("Arrival", justify="right")
    table.add_column("Burst", justify="right")

    for p in processes:
        table.add_row(str(p.id), str(p.arrival), str(p.burst))

    return table


def _print_results(results: List[ScheduleResult], console: Console, show_workload: bool) -> None:
    if show_workload:
        # Every result holds a copy of the same workload, in scheduling order.
        console.print(build_workload_table(results[0].processes))
        console.print()

    for i, result in enumerate(results):
        if i:
            console.print()
        console.print(format_report(result), markup=False, emoji=False)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False)

    try:
        results = simulate(
            args.process_file,
            quantum=args.quantum,
            strict=args.strict,
            arrival_order=args.sort_by_arrival,
        )
    except SchedulerError as exc:
        logger.debug("Simulation failed", exc_info=True)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return exc.exit_code

    _print_results(results, console, show_workload=args.show_workload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

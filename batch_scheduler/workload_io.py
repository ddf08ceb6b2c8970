from __future__ import annotations

import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Set, Tuple

from .errors import EmptyWorkload, InvalidRecord, LoadError
from .models import Process

logger = logging.getLogger(__name__)

# ASCII digits only: int() alone would also take "1_0" or non-Latin digits.
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def load_workload(path: str | Path, strict: bool = False) -> List[Process]:
    """
    Load a workload from a whitespace-delimited text file into a list of
    Process objects, in input order.

    The first line is a header and is discarded. Every other line holds
    ``id arrival burst``. Blank lines are always skipped; malformed lines are
    skipped unless ``strict`` is set, in which case they raise InvalidRecord.
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(path, exc) from exc

    processes: List[Process] = []
    seen_ids: Set[int] = set()

    # Line 1 is the header.
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        fields = _parse_fields(line)
        if fields is None:
            if strict:
                raise InvalidRecord(path, line_number, f"expected three integers, got {line.strip()!r}")
            logger.debug("Skipping malformed line %d of %s: %r", line_number, path, line.strip())
            continue

        process = _process_from_fields(fields, path, line_number)
        if process.id in seen_ids:
            raise InvalidRecord(path, line_number, f"duplicate process id {process.id}")
        seen_ids.add(process.id)
        processes.append(process)

    if not processes:
        raise EmptyWorkload(path)

    logger.debug("Loaded %d processes from %s", len(processes), path)
    return processes


def _parse_fields(line: str) -> Optional[Tuple[int, int, int]]:
    tokens = line.split()
    if len(tokens) != 3:
        return None
    if not all(INTEGER_TOKEN.fullmatch(tok) for tok in tokens):
        return None
    pid, arrival, burst = (int(tok) for tok in tokens)
    return pid, arrival, burst


def _process_from_fields(fields: Tuple[int, int, int], path: Path, line_number: int) -> Process:
    pid, arrival, burst = fields
    if pid < 0:
        raise InvalidRecord(path, line_number, f"negative process id {pid}")
    if arrival < 0:
        raise InvalidRecord(path, line_number, f"negative arrival time {arrival}")
    if burst <= 0:
        raise InvalidRecord(path, line_number, f"burst must be positive, got {burst}")
    return Process(id=pid, arrival=arrival, burst=burst)


def clone_workload(processes: List[Process]) -> List[Process]:
    """
    Return fresh copies of the records with their scheduling state reset, so
    one simulation run cannot leak into the next.
    """
    return [replace(p, remaining=p.burst, start_time=None, finish_time=None) for p in processes]


def sort_by_arrival(processes: List[Process]) -> List[Process]:
    # sorted() is stable: ties keep their input order.
    return sorted(processes, key=lambda p: p.arrival)

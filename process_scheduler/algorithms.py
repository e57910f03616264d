from __future__ import annotations

import copy
import logging
from typing import Callable, Dict, List, Sequence

from .metrics import build_row, finalize
from .models import Process, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)

FCFS_TITLE = "First-come, first-serve"
SJF_TITLE = "Shortest Job First (preemptive)"
PRIORITY_TITLE = "Shortest Job First Priority (preemptive)"
RR_TITLE = "Round-Robin (non-preemptive)"

RR_QUANTUM = 1


def _working_copy(processes: Sequence[Process]) -> List[Process]:
    # Every run owns its list so earlier runs can never leak into later ones.
    return copy.deepcopy(list(processes))


def schedule_fcfs(processes: Sequence[Process], title: str = FCFS_TITLE) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive).

    Processes are served in the order given, not re-sorted by arrival.
    """
    working = _working_copy(processes)
    result = ScheduleResult(algorithm=title)

    service_time = 0
    for p in working:
        # An idle CPU waits for the next process instead of running early.
        start_time = max(service_time, p.arrival_time)
        completion_time = start_time + p.burst_time

        result.timeline.append(ScheduledSlice(pid=p.pid, start_time=start_time, end_time=completion_time))
        result.rows.append(build_row(p, completion_time))
        logger.debug("%s: process %s runs %d-%d", title, p.pid, start_time, completion_time)

        service_time = completion_time

    finalize(result)
    return result


def _run_to_completion(
    processes: Sequence[Process],
    title: str,
    selection_key: Callable[[Process, Dict[int, int]], int],
) -> ScheduleResult:
    """
    Shared loop for the SJF and Priority schedulers.

    At each decision point the arrived process with the smallest
    ``selection_key`` is picked; ties go to whichever comes first in the
    pending list. The chosen process then runs until it is done.
    """
    pending = _working_copy(processes)
    remaining = {p.pid: p.burst_time for p in pending}
    result = ScheduleResult(algorithm=title)

    time = 0
    while pending:
        chosen_index = None
        for i, p in enumerate(pending):
            if p.arrival_time > time:
                continue
            if chosen_index is None or selection_key(p, remaining) < selection_key(pending[chosen_index], remaining):
                chosen_index = i

        if chosen_index is None:
            # Nothing has arrived yet; jump to the next arrival.
            time = min(p.arrival_time for p in pending)
            logger.debug("%s: CPU idle until %d", title, time)
            continue

        p = pending.pop(chosen_index)
        start_time = time
        completion_time = start_time + remaining[p.pid]
        remaining[p.pid] = 0

        result.timeline.append(ScheduledSlice(pid=p.pid, start_time=start_time, end_time=completion_time))
        result.rows.append(build_row(p, completion_time))
        logger.debug("%s: process %s selected, runs %d-%d", title, p.pid, start_time, completion_time)

        time = completion_time

    finalize(result)
    return result


def schedule_sjf(processes: Sequence[Process], title: str = SJF_TITLE) -> ScheduleResult:
    """
    Shortest Job First.

    Among arrived processes, the one with the smallest remaining burst is
    chosen. A shorter job arriving mid-run waits for the next decision point.
    """
    return _run_to_completion(processes, title, lambda p, remaining: remaining[p.pid])


def schedule_priority(processes: Sequence[Process], title: str = PRIORITY_TITLE) -> ScheduleResult:
    """
    Priority scheduling. Lower numeric priority value means higher priority.
    """
    return _run_to_completion(processes, title, lambda p, remaining: p.priority)


def schedule_rr(processes: Sequence[Process], title: str = RR_TITLE) -> ScheduleResult:
    """
    Round Robin with a one unit quantum.

    The pending list is scanned in order and every arrived process gets one
    unit of CPU. When a process finishes it is dropped from the list and the
    scan starts again from the front; a process that merely used its quantum
    lets the scan move on to the next one.
    """
    pending = _working_copy(processes)
    remaining = {p.pid: p.burst_time for p in pending}
    result = ScheduleResult(algorithm=title)

    time = 0
    while pending:
        ran = False
        for i, p in enumerate(pending):
            if p.arrival_time > time:
                continue

            run_time = min(remaining[p.pid], RR_QUANTUM)
            remaining[p.pid] -= run_time
            result.timeline.append(ScheduledSlice(pid=p.pid, start_time=time, end_time=time + run_time))
            time += run_time
            ran = True

            if remaining[p.pid] == 0:
                result.rows.append(build_row(p, time))
                logger.debug("%s: process %s completes at %d", title, p.pid, time)
                del pending[i]
                break

        if not ran:
            time = min(p.arrival_time for p in pending)
            logger.debug("%s: CPU idle until %d", title, time)

    finalize(result)
    return result


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[Process]) -> ScheduleResult:
    """
    Dispatch to the requested algorithm by its short name.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    return func(processes)


def run_all(processes: Sequence[Process], names: Sequence[str] = tuple(ALGORITHMS)) -> List[ScheduleResult]:
    return [run_algorithm(name, processes) for name in names]

from __future__ import annotations

from typing import List

from .models import Process, RunSummary, ScheduleResult, ScheduleRow


def build_row(process: Process, completion_time: int) -> ScheduleRow:
    """
    Per-process timing row for a process that finished at ``completion_time``.

    Waiting time is everything between arrival and completion that was not
    spent running, so it holds for both run-to-completion and time-sliced
    schedulers.
    """
    turnaround_time = completion_time - process.arrival_time
    waiting_time = turnaround_time - process.burst_time

    return ScheduleRow(
        pid=process.pid,
        priority=process.priority,
        burst_time=process.burst_time,
        arrival_time=process.arrival_time,
        waiting_time=waiting_time,
        turnaround_time=turnaround_time,
        completion_time=completion_time,
    )


def summarize_rows(rows: List[ScheduleRow]) -> RunSummary:
    """
    Averages and throughput over a finished run.

    An empty run has no meaningful averages; every field is NaN rather than
    a division error.
    """
    n = len(rows)
    if n == 0:
        nan = float("nan")
        return RunSummary(average_waiting=nan, average_turnaround=nan, throughput=nan)

    total_wait = sum(r.waiting_time for r in rows)
    total_turnaround = sum(r.turnaround_time for r in rows)
    last_completion = max(r.completion_time for r in rows)

    return RunSummary(
        average_waiting=total_wait / n,
        average_turnaround=total_turnaround / n,
        throughput=n / last_completion if last_completion > 0 else float("nan"),
    )


def cpu_busy_time(result: ScheduleResult) -> int:
    return sum(slice_.end_time - slice_.start_time for slice_ in result.timeline)


def finalize(result: ScheduleResult) -> RunSummary:
    """
    Attach the run summary to ``result`` once all rows are in.
    """
    summary = summarize_rows(result.rows)
    result.summary = summary
    return summary

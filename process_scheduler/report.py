from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from .gantt import build_rich_gantt, render_gantt
from .models import RunSummary, ScheduleResult

HEADERS = ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]


def _fmt(value: float) -> str:
    # NaN formats as "nan" which is what an empty run should show.
    return f"{value:.2f}"


def build_schedule_table(result: ScheduleResult) -> Table:
    """
    Schedule table with one row per process in completion order and a footer
    carrying the run averages and throughput.
    """
    summary = result.summary or RunSummary(float("nan"), float("nan"), float("nan"))
    footers = [
        "",
        "",
        "",
        "",
        f"Average\n{_fmt(summary.average_waiting)}",
        f"Average\n{_fmt(summary.average_turnaround)}",
        f"Throughput\n{_fmt(summary.throughput)}/t",
    ]

    table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for header, footer in zip(HEADERS, footers):
        justify = "center" if header in {"ID", "Priority"} else "right"
        table.add_column(header, footer=footer, justify=justify)

    for row in result.rows:
        table.add_row(
            str(row.pid),
            str(row.priority),
            str(row.burst_time),
            str(row.arrival_time),
            str(row.waiting_time),
            str(row.turnaround_time),
            str(row.completion_time),
        )

    return table


def print_result(result: ScheduleResult, console: Console, plain: bool = False) -> None:
    console.print(Rule(result.algorithm))
    console.print()

    if plain:
        console.print(render_gantt(result.timeline), markup=False, highlight=False)
    else:
        console.print(build_rich_gantt(result.timeline))

    console.print()
    console.print(build_schedule_table(result))
    console.print()


def build_comparison_table(results: Sequence[ScheduleResult]) -> Table:
    table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    table.add_column("Algorithm")
    table.add_column("Avg waiting", justify="right")
    table.add_column("Avg turnaround", justify="right")
    table.add_column("Throughput", justify="right")

    for result in results:
        summary = result.summary
        table.add_row(
            result.algorithm,
            _fmt(summary.average_waiting),
            _fmt(summary.average_turnaround),
            f"{_fmt(summary.throughput)}/t",
        )

    return table

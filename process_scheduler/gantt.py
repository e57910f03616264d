from __future__ import annotations

from typing import List, Tuple

from rich.panel import Panel
from rich.text import Text

from .models import ScheduledSlice

CELL_WIDTH = 8
PALETTE = ("red", "green", "yellow", "blue", "magenta", "cyan")


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: one bar cell per slice, then the start time of
    each slice and the stop time of the last one.
    """
    if not slices:
        return "Gantt schedule\n(no execution)"

    bar = "|"
    for sl in slices:
        pid = str(sl.pid)
        padding = " " * ((CELL_WIDTH - len(pid)) // 2)
        bar += f"{padding}{pid}{padding}|"

    time_marks = "\t".join(str(sl.start_time) for sl in slices)
    time_marks += f"\t{slices[-1].end_time}"

    return "\n".join(["Gantt schedule", bar, time_marks])


def _cells(slices: List[ScheduledSlice]) -> List[Tuple[str, int, str]]:
    """
    Lay the slices out as fixed-width cells: ``(label, start time, style)``.

    A gap between one slice's stop and the next one's start becomes an
    ``idle`` cell.
    """
    colors = {
        pid: PALETTE[i % len(PALETTE)]
        for i, pid in enumerate(dict.fromkeys(sl.pid for sl in slices))
    }
    cells = []
    clock = 0
    for sl in slices:
        if sl.start_time > clock:
            cells.append(("idle", clock, "dim"))
        cells.append((str(sl.pid), sl.start_time, f"bold black on {colors[sl.pid]}"))
        clock = sl.end_time
    return cells


def time_marks(slices: List[ScheduledSlice]) -> str:
    """
    Time axis for the rich chart, each mark placed under its cell boundary.
    """
    if not slices:
        return ""

    marks = [start for _, start, _ in _cells(slices)] + [slices[-1].end_time]
    line = ""
    for i, mark in enumerate(marks):
        pad = max(i * CELL_WIDTH - len(line), 1 if line else 0)
        line += " " * pad + str(mark)
    return line


def build_rich_gantt(slices: List[ScheduledSlice]) -> Panel:
    """
    Colored Gantt chart with the time axis underneath, framed in a panel.
    """
    if not slices:
        return Panel("No execution", title="Gantt schedule")

    bar = Text("|")
    for label, _, style in _cells(slices):
        bar.append(label.center(CELL_WIDTH - 1), style=style)
        bar.append("|")

    chart = Text("\n").join([bar, Text(time_marks(slices), style="dim")])
    return Panel.fit(chart, title="Gantt schedule")

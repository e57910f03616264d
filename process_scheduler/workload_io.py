from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import List, Sequence

from .models import Process

logger = logging.getLogger(__name__)

FIELDS = ("id", "burst", "arrival", "priority")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class LoadError(ValueError):
    """Raised when a workload file cannot be turned into processes."""


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a CSV or JSON file into a list of Process objects.

    CSV rows have no header and read ``id,burst,arrival[,priority]``.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        processes = _load_csv(path)
    elif suffix == ".json":
        processes = _load_json(path)
    else:
        raise LoadError(f"Unsupported workload format: {suffix} (use .csv or .json)")

    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        try:
            rows = list(csv.reader(f))
        except UnicodeDecodeError as exc:
            raise LoadError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        except csv.Error as exc:
            raise LoadError(f"{path}: invalid CSV ({exc})") from exc

    processes: List[Process] = []
    for line_no, row in enumerate(rows, start=1):
        if not row or all(not field.strip() for field in row):
            continue
        processes.append(_process_from_fields(row, f"{path}:{line_no}"))
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except UnicodeDecodeError as exc:
            raise LoadError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise LoadError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(raw, list):
        raise LoadError("JSON workload must be a list of process records")

    processes: List[Process] = []
    for idx, entry in enumerate(raw):
        where = f"{path}[{idx}]"
        if isinstance(entry, dict):
            processes.append(_process_from_mapping(entry, where))
        elif isinstance(entry, list):
            processes.append(_process_from_fields(entry, where))
        else:
            raise LoadError(f"{where}: invalid process entry {entry!r}")
    return processes


def _process_from_mapping(mapping: dict, where: str) -> Process:
    missing = [key for key in FIELDS[:3] if key not in mapping]
    if missing:
        raise LoadError(f"{where}: missing field(s) {', '.join(missing)}")

    fields = [mapping[key] for key in FIELDS[:3]]
    if mapping.get("priority") not in (None, ""):
        fields.append(mapping["priority"])
    return _process_from_fields(fields, where)


def _process_from_fields(fields: Sequence, where: str) -> Process:
    if len(fields) not in (3, 4):
        raise LoadError(f"{where}: expected 3 or 4 fields (id, burst, arrival[, priority]), got {len(fields)}")

    try:
        values = [_to_int(value) for value in fields]
    except (TypeError, ValueError) as exc:
        raise LoadError(f"{where}: invalid process entry {list(fields)!r}") from exc

    pid, burst_time, arrival_time = values[:3]
    priority = values[3] if len(values) == 4 else 0

    try:
        return Process(pid=pid, arrival_time=arrival_time, burst_time=burst_time, priority=priority)
    except ValueError as exc:
        raise LoadError(f"{where}: {exc}") from exc


def _to_int(value) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not process fields")
    if isinstance(value, str):
        text = value.strip()
        if not INTEGER_RE.fullmatch(text):
            raise ValueError(f"not a base-10 integer: {value!r}")
        return int(text, 10)
    if isinstance(value, int):
        return value
    raise TypeError(f"expected an integer, got {value!r}")

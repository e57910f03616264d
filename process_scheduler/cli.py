from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .algorithms import ALGORITHMS, run_all
from .report import build_comparison_table, print_result
from .workload_io import LoadError, load_workload

logger = logging.getLogger("process_scheduler")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling decision.",
    )

    parser = argparse.ArgumentParser(
        prog="process-scheduler",
        description="CPU scheduling simulator (FCFS, SJF, Priority, Round-Robin).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", parents=[common], help="Schedule a workload file and print each result.")
    run_parser.add_argument("workload", help="Path to CSV or JSON workload file.")
    run_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=list(ALGORITHMS),
        default=list(ALGORITHMS),
        help="Algorithms to run, in order (default: fcfs sjf priority rr).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the Gantt chart as plain text instead of colored bars.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        parents=[common],
        help="Run several algorithms on the same workload and compare averages.",
    )
    compare_parser.add_argument("workload", help="Path to CSV or JSON workload file.")
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=list(ALGORITHMS),
        default=list(ALGORITHMS),
        help="Algorithms to compare (default: fcfs sjf priority rr).",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = Console()

    try:
        processes = load_workload(Path(args.workload))
    except LoadError as exc:
        logger.error("Could not load workload: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Could not open workload: %s", exc)
        return 1

    results = run_all(processes, args.algorithms)

    try:
        if args.command == "run":
            for result in results:
                print_result(result, console, plain=args.plain)
        else:
            console.print(build_comparison_table(results))
    except OSError as exc:
        logger.warning("Could not write schedule output: %s", exc)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

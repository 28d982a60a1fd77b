"""
Command line entry point: analyze a transcript and print the size report.
"""

import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from nospace.config.settings import configure_logging, settings
from nospace.container import container
from nospace.entities.filesystem import Filesystem
from nospace.exceptions import BaseAppError
from nospace.use_cases.filesystem.size_report import SMALL_DIRECTORY_LIMIT
from nospace.use_cases.transcript.analyze_transcript import TranscriptAnalysis

logger = logging.getLogger(__name__)


def _rich_tree(filesystem: Filesystem) -> Tree:
    root = Tree(Text(str(filesystem.get(filesystem.root)), style="bold blue"))
    branches: dict[int, Tree] = {filesystem.root: root}
    for edge, node_id in filesystem.traverse():
        if edge != "start" or node_id == filesystem.root:
            continue
        entry = filesystem.get(node_id)
        style = "bold blue" if entry.is_dir else ""
        parent = branches[filesystem.parent(node_id)]
        branches[node_id] = parent.add(Text(str(entry), style=style))
    return root


def _print_pretty(
    analysis: TranscriptAnalysis, show_tree: bool, console: Console | None = None
) -> None:
    console = console or Console(soft_wrap=True)
    report = analysis.report

    if show_tree:
        console.print(
            Panel(
                _rich_tree(analysis.filesystem),
                title=analysis.path,
                box=box.ROUNDED,
                border_style="magenta",
                expand=True,
            )
        )

    table = Table(title="Directory sizes", box=box.ROUNDED)
    table.add_column("Question")
    table.add_column("Answer", justify="right")
    table.add_row("Total used space", str(report.total_size))
    table.add_row(
        f"Sum of directory sizes under {SMALL_DIRECTORY_LIMIT}",
        str(report.small_directories_total),
    )
    table.add_row("Space to free", str(report.space_to_free))
    table.add_row("Size of directory to free", str(report.directory_to_free_size))
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nospace",
        description=(
            "Replay a cd/ls terminal transcript and report directory sizes."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Transcript file (default: $NOSPACE_INPUT)",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the reconstructed filesystem tree",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=settings.pretty,
        help="Pretty print output with colors",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override $NOSPACE_LOG_LEVEL",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    path = args.input or settings.input_path
    if not path:
        print("No transcript given and NOSPACE_INPUT is not set", file=sys.stderr)
        return 2

    try:
        analysis = container.get_analyze_transcript_use_case().execute(path)
    except BaseAppError as e:
        logger.error(f"Analysis failed: {e}")
        print("Error:", e, file=sys.stderr)
        return 1

    if args.pretty:
        _print_pretty(analysis, args.tree)
    else:
        if args.tree:
            print(analysis.filesystem.render(), end="")
        report = analysis.report
        print(
            f"[Part 1] Sum of directory sizes under {SMALL_DIRECTORY_LIMIT}: {report.small_directories_total}"
        )
        print(f"[Part 2] Size of directory to free: {report.directory_to_free_size}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

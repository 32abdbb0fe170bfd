from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from textfinder.core.finder import list_text_files
from textfinder.core.schemas import Listing

DEMO_DIR = Path("tests", "resources", "text")
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

console = Console()


def render_listing_console(listing: Listing) -> None:
    console.print(f"[bold]Directory:[/bold] {listing.is_directory}")

    if listing.files:
        t = Table(title=f"Text files in {escape(listing.path)}")
        t.add_column("#", justify="right")
        t.add_column("Path")

        for idx, f in enumerate(listing.files, start=1):
            t.add_row(str(idx), escape(f))

        console.print(t)

    console.print(f"[bold]Found:[/bold] {listing.count}")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="textfinder", description="List .txt/.text files under a path")
    ap.add_argument(
        "target",
        nargs="?",
        default=str(DEMO_DIR),
        help=f"File or directory to search (default: {DEMO_DIR}, relative to the current directory)",
    )
    ap.add_argument("--json", action="store_true", help="Print the listing as JSON")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (e.g., DEBUG, INFO)",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    target = Path(args.target)
    try:
        listing = Listing.from_paths(target, list_text_files(target))
    except OSError as e:
        console.print(f"[red]Cannot list {escape(str(target))}: {escape(str(e))}[/red]")
        raise SystemExit(2)

    if args.json:
        print(json.dumps(listing.model_dump(), indent=2))
    else:
        render_listing_console(listing)


if __name__ == "__main__":
    main()

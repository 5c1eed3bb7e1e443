"""Command line helpers for SecretForge."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from .app import SecretTracker
from .config import SecretForgeConfig
from .loaders import load_catalog_from_json, validate_catalog_file
from .validators import validate_tracker

console = Console()


def run_validate(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="SecretForge catalog validator")
    parser.add_argument(
        "catalog",
        nargs="?",
        help="Path to catalog JSON file (defaults to SECRETFORGE_CATALOG_PATH)",
    )
    args = parser.parse_args(argv)

    config = SecretForgeConfig.from_env()
    path = args.catalog or config.catalog_path
    if not path:
        parser.error("no catalog given and SECRETFORGE_CATALOG_PATH is not set")

    errors = validate_catalog_file(Path(path))
    if errors:
        console.print("[bold red]Catalog errors:[/bold red]")
        for err in errors:
            console.print(f"- {err}")
        sys.exit(1)

    tracker = SecretTracker(config)
    load_catalog_from_json(tracker, path)
    issues = validate_tracker(tracker)
    if issues:
        console.print("[bold yellow]Configuration issues:[/bold yellow]")
        for issue in issues:
            console.print(f"- {issue}")
        sys.exit(1)
    console.print(f"[bold green]Catalog is valid[/bold green] ({len(tracker.catalog)} cards)")

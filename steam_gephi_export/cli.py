"""Command-line entry point for the Gephi exporter."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from termcolor import colored

from .config import Config
from .db import DbClient
from .errors import AppError, print_error
from .exporter import GEPHI_CSV_FILENAME, export_to_gephi_csv

_RULE = "--------------------------------------------------"


def _step(number: int, title: str) -> None:
    print()
    print(colored(f"Step {number}:", "yellow", attrs=["bold"]), colored(title, "yellow"))


def run_exporter() -> None:
    """Load configuration, read the users and write the Gephi CSV file."""
    _step(1, "Loading Configuration")
    config = Config.from_env()
    print(colored("✔️", "green"), "Configuration loaded successfully.")

    _step(2, "Connecting to Database")
    with DbClient.connect(config) as db:
        print(colored("✔️", "green"), "Database connection established.")

        _step(3, "Fetching Steam User Data")
        users = db.get_all_monitored_steam_users()

    if not users:
        print(
            colored("⚠️", "yellow"),
            colored("Warning:", "yellow", attrs=["bold"]),
            "No users found in the database. Nothing to export.",
        )
        return
    print(colored("✔️", "green"), f"Fetched data for {colored(str(len(users)), 'cyan')} users.")

    _step(4, "Exporting to Gephi CSV")
    export_to_gephi_csv(users)
    print(colored("✔️", "green"), "Data exported to Gephi CSV successfully.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the exporter and return the process exit status."""
    parser = argparse.ArgumentParser(
        description="Export the friend graph of monitored Steam users as a Gephi edge list."
    )
    parser.parse_args(argv)

    print()
    print(
        colored("🚀", "light_yellow"),
        colored("Steam Activity Feed Gephi Exporter", "light_cyan", attrs=["bold"]),
        colored("v0.1.0", attrs=["dark"]),
        colored("🚀", "light_yellow"),
    )
    print(colored(_RULE, "dark_grey"))

    try:
        run_exporter()
    except AppError as error:
        print_error(error)
        return 1

    print(colored(_RULE, "dark_grey"))
    print(
        colored("✨", "magenta"),
        "🎉",
        colored("Export process completed successfully!", "green", attrs=["bold"]),
        "🎉",
        colored("✨", "magenta"),
    )
    print(
        colored("💡", "yellow"),
        "You can find the Gephi graph file at:",
        colored(GEPHI_CSV_FILENAME, "cyan", attrs=["underline"]),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Writing friend relationships as a Gephi edge list."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterable, Iterator
from typing import Union

from termcolor import colored

from .errors import ExportError
from .models import MonitoredSteamUser

GEPHI_CSV_FILENAME = "steam_friends_graph.csv"
HEADER = ("Source", "Target")


def iter_edges(users: Iterable[MonitoredSteamUser]) -> Iterator[tuple[str, str]]:
    """Yield (source, target) Steam id pairs for every current friendship."""
    for user in users:
        if not user.current_friends:
            print(
                colored("ℹ️", "blue"),
                f"User {colored(user.steam_id, 'cyan')} has no friends in "
                "currentFriends list, skipping.",
            )
            continue
        for friend in user.current_friends:
            yield user.steam_id, friend.steam_id


def export_to_gephi_csv(
    users: Iterable[MonitoredSteamUser],
    path: Union[str, "os.PathLike[str]"] = GEPHI_CSV_FILENAME,
) -> int:
    """Write the friend graph to a CSV edge list and return the number of edges."""
    shown = colored(os.fspath(path), "cyan")
    print(colored("📊", "yellow"), f"Starting Gephi CSV export to '{shown}'...")

    edge_count = 0
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            for edge in iter_edges(users):
                if edge_count == 0:
                    writer.writerow(HEADER)
                writer.writerow(edge)
                edge_count += 1
    except OSError as exc:
        raise ExportError(str(exc)) from exc

    print(
        colored("✅", "green"),
        f"Successfully exported {colored(str(edge_count), 'cyan')} edges to '{shown}'.",
    )
    return edge_count
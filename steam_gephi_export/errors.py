"""Error types raised by the exporter and a helper to report them."""

from __future__ import annotations

import sys

from termcolor import colored


class AppError(Exception):
    """Base class for every failure the exporter reports."""

    prefix = "Application error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class EnvVarNotFoundError(AppError):
    """A required environment variable is missing or empty."""

    prefix = "Environment variable not found"


class DatabaseError(AppError):
    """Connecting to or querying MongoDB failed."""

    prefix = "MongoDB error"


class DocumentError(AppError):
    """A stored document does not have the expected shape."""

    prefix = "MongoDB BSON serialization/deserialization error"


class ExportError(AppError):
    """Writing the CSV output failed."""

    prefix = "I/O error"


def print_error(error: BaseException) -> None:
    """Print an error to standard error in red."""
    print(
        colored("❌ Error:", "red", attrs=["bold"]),
        colored(str(error), "red"),
        file=sys.stderr,
    )
"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from termcolor import colored

from .errors import EnvVarNotFoundError

_URI_VARIABLE = "MONGODB_URI"


@dataclass(frozen=True)
class Config:
    """Settings the exporter needs to run."""

    mongodb_uri: str

    @classmethod
    def from_env(cls) -> "Config":
        """Build the configuration from the environment and an optional .env file."""
        print(colored("⚙️", "yellow"), "Loading environment variables...")
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        uri = os.environ.get(_URI_VARIABLE)
        if uri is None:
            raise EnvVarNotFoundError(_URI_VARIABLE)
        if not uri:
            raise EnvVarNotFoundError(f"{_URI_VARIABLE} value is empty")

        print(
            colored("✅", "green"),
            f"Successfully loaded {colored(_URI_VARIABLE, 'cyan')} environment variable.",
        )
        return cls(mongodb_uri=uri)
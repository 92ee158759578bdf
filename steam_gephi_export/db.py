"""Access to the MongoDB collection of monitored Steam users."""

from __future__ import annotations

from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from termcolor import colored

from .config import Config
from .errors import DatabaseError
from .models import MonitoredSteamUser

DATABASE_NAME = "steam_intel"
COLLECTION_NAME = "monitoredsteamusers"


class DbClient:
    """A connection to the database holding monitored users."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def connect(cls, config: Config) -> "DbClient":
        """Connect to MongoDB and confirm the server answers a ping."""
        print(colored("🔗", "yellow"), "Attempting to connect to MongoDB...")
        try:
            client = MongoClient(config.mongodb_uri)
            client.admin.command("ping")
        except PyMongoError as exc:
            raise DatabaseError(str(exc)) from exc
        print(colored("✅", "green"), "Successfully connected to MongoDB!")
        return cls(client)

    def get_all_monitored_steam_users(self) -> list[MonitoredSteamUser]:
        """Fetch and decode every document in the monitored users collection."""
        print(
            colored("📥", "yellow"),
            f"Fetching all monitored Steam users from '{colored(COLLECTION_NAME, 'cyan')}' "
            f"collection in '{colored(DATABASE_NAME, 'cyan')}' database...",
        )
        collection = self._client[DATABASE_NAME][COLLECTION_NAME]
        try:
            users = [MonitoredSteamUser.from_document(doc) for doc in collection.find({})]
        except PyMongoError as exc:
            raise DatabaseError(str(exc)) from exc
        print(
            colored("✅", "green"),
            f"Successfully fetched {colored(str(len(users)), 'cyan')} users.",
        )
        return users

    def close(self) -> None:
        """Close the underlying connection."""
        self._client.close()

    def __enter__(self) -> "DbClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
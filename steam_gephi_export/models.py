"""Typed views of the documents stored for monitored Steam users."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId

from .errors import DocumentError


def _ensure_mapping(doc: Any, name: str) -> Mapping:
    if not isinstance(doc, Mapping):
        raise DocumentError(f"expected a document for {name}, found {type(doc).__name__}")
    return doc


def _check(key: str, value: Any, kind: type) -> Any:
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise DocumentError(
            f"invalid type for field `{key}`: expected {kind.__name__}, "
            f"found {type(value).__name__}"
        )
    return value


def _required(doc: Mapping, key: str, kind: type = object) -> Any:
    if key not in doc:
        raise DocumentError(f"missing field `{key}`")
    return _check(key, doc[key], kind)


def _optional(doc: Mapping, key: str, kind: type, default: Any = None) -> Any:
    value = doc.get(key)
    return default if value is None else _check(key, value, kind)


def _as_utc(key: str, value: Any) -> datetime:
    _check(key, value, datetime)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _timestamp(doc: Mapping, key: str = "timestamp") -> datetime:
    return _as_utc(key, _required(doc, key, datetime))


def _optional_timestamp(doc: Mapping, key: str) -> Optional[datetime]:
    value = doc.get(key)
    return None if value is None else _as_utc(key, value)


def _entries(doc: Mapping, keys: tuple[str, ...], model: Any) -> list:
    for key in keys:
        if key in doc:
            value = doc[key]
            break
    else:
        return []
    if value is None:
        return []
    _check(key, value, list)
    return [model.from_document(item) for item in value]


@dataclass
class FriendEntry:
    """One friend in a user's friend list."""

    steam_id: str
    friend_since: int

    @classmethod
    def from_document(cls, doc: Mapping) -> "FriendEntry":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(
            steam_id=_required(doc, "steamId", str),
            friend_since=_required(doc, "friendSince", int),
        )


@dataclass
class FriendListChange:
    """A recorded change to a user's friend list."""

    timestamp: datetime
    new_friend_count: int
    added: list[FriendEntry] = field(default_factory=list)
    removed: list[FriendEntry] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Mapping) -> "FriendListChange":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(
            timestamp=_timestamp(doc),
            new_friend_count=_required(doc, "newFriendCount", int),
            added=_entries(doc, ("added",), FriendEntry),
            removed=_entries(doc, ("removed",), FriendEntry),
        )


@dataclass
class ActivityEntry:
    """A snapshot of a user's visible activity."""

    timestamp: datetime
    persona_state_text: Optional[str] = None
    current_game_name: Optional[str] = None
    owned_games_count: Optional[int] = None

    @classmethod
    def from_document(cls, doc: Mapping) -> "ActivityEntry":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(
            timestamp=_timestamp(doc),
            persona_state_text=_optional(doc, "personaStateText", str),
            current_game_name=_optional(doc, "currentGameName", str),
            owned_games_count=_optional(doc, "ownedGamesCount", int),
        )


@dataclass
class PersonaNameChange:
    """A recorded change of display name."""

    timestamp: datetime
    new_name: str
    old_name: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping) -> "PersonaNameChange":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(
            timestamp=_timestamp(doc),
            new_name=_required(doc, "newName", str),
            old_name=_optional(doc, "oldName", str),
        )


@dataclass
class PlayerSummarySnapshot:
    """A stored copy of a player summary at a point in time."""

    timestamp: datetime
    summary: Any

    @classmethod
    def from_document(cls, doc: Mapping) -> "PlayerSummarySnapshot":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(timestamp=_timestamp(doc), summary=_required(doc, "summary"))


@dataclass
class MonitoredSteamUser:
    """A Steam user being watched, as stored in the database."""

    steam_id: str
    discord_channel_id: str
    added_by: str
    id: Optional[ObjectId] = None
    custom_url: Optional[str] = None
    label: Optional[str] = None
    monitor_comments: bool = True
    monitor_online_status: bool = True
    last_comment_timestamp: Optional[int] = None
    last_online_timestamp: Optional[int] = None
    last_persona_state_text: Optional[str] = None
    friend_list_private: bool = False
    current_friends: list[FriendEntry] = field(default_factory=list)
    friend_list_change_history: list[FriendListChange] = field(default_factory=list)
    activity_history: list[ActivityEntry] = field(default_factory=list)
    last_known_current_game_name: Optional[str] = None
    last_owned_games_count: Optional[int] = None
    current_persona_name: Optional[str] = None
    persona_name_history: list[PersonaNameChange] = field(default_factory=list)
    priority: int = 2
    is_profile_private: bool = False
    current_player_summary: Any = None
    player_summary_history: list[PlayerSummarySnapshot] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Mapping) -> "MonitoredSteamUser":
        doc = _ensure_mapping(doc, cls.__name__)
        return cls(
            id=_optional(doc, "_id", ObjectId),
            steam_id=_required(doc, "steamId", str),
            custom_url=_optional(doc, "customUrl", str),
            label=_optional(doc, "label", str),
            discord_channel_id=_required(doc, "discordChannelId", str),
            monitor_comments=_optional(doc, "monitorComments", bool, True),
            monitor_online_status=_optional(doc, "monitorOnlineStatus", bool, True),
            last_comment_timestamp=_optional(doc, "lastCommentTimestamp", int),
            last_online_timestamp=_optional(doc, "lastOnlineTimestamp", int),
            last_persona_state_text=_optional(doc, "lastPersonaStateText", str),
            friend_list_private=_optional(doc, "friendListPrivate", bool, False),
            current_friends=_entries(doc, ("currentFriends", "current_friends"), FriendEntry),
            friend_list_change_history=_entries(
                doc, ("friendListChangeHistory",), FriendListChange
            ),
            activity_history=_entries(doc, ("activityHistory",), ActivityEntry),
            last_known_current_game_name=_optional(doc, "lastKnownCurrentGameName", str),
            last_owned_games_count=_optional(doc, "lastOwnedGamesCount", int),
            current_persona_name=_optional(doc, "currentPersonaName", str),
            persona_name_history=_entries(doc, ("personaNameHistory",), PersonaNameChange),
            priority=_optional(doc, "priority", int, 2),
            is_profile_private=_optional(doc, "isProfilePrivate", bool, False),
            current_player_summary=doc.get("currentPlayerSummary"),
            player_summary_history=_entries(
                doc, ("playerSummaryHistory",), PlayerSummarySnapshot
            ),
            added_by=_required(doc, "addedBy", str),
            created_at=_optional_timestamp(doc, "createdAt"),
            updated_at=_optional_timestamp(doc, "updatedAt"),
        )
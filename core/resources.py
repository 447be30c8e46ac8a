"""Helix endpoint table."""

from typing import Dict, NamedTuple, Tuple

class Resource(NamedTuple):
    """One Helix endpoint."""
    method: str
    path: str
    verb: str
    options: Tuple[str, ...]
    doc: str


_PAGINATION = ("first", "after", "before")

RESOURCES: Dict[str, Resource] = {r.path: r for r in (
    Resource("get_games", "games", "GET",
             ("id", "name"),
             "Fetch games by ID or name."),
    Resource("get_top_games", "games/top", "GET",
             _PAGINATION,
             "Fetch games sorted by number of current viewers."),
    Resource("get_clips", "clips", "GET",
             ("broadcaster_id", "game_id", "id") + _PAGINATION
             + ("started_at", "ended_at"),
             "Fetch clips by broadcaster, game or clip ID."),
    Resource("get_streams", "streams", "GET",
             ("user_id", "user_login", "game_id", "language", "type")
             + _PAGINATION,
             "Fetch active streams."),
    Resource("get_stream_tags", "streams/tags", "GET",
             ("broadcaster_id",),
             "Fetch the tags applied to a broadcaster's stream."),
    Resource("get_users", "users", "GET",
             ("id", "login"),
             "Fetch users by ID or login name."),
    Resource("get_users_follows", "users/follows", "GET",
             ("from_id", "to_id", "first", "after"),
             "Fetch follow relationships between users."),
    Resource("get_videos", "videos", "GET",
             ("id", "user_id", "game_id") + _PAGINATION
             + ("language", "period", "sort", "type"),
             "Fetch videos by ID, user or game."),
)}


def get_resource(path: str) -> Resource:
    """Look up a resource by its path."""
    try:
        return RESOURCES[path]
    except KeyError:
        raise ValueError(f"Unknown Helix resource: {path}") from None

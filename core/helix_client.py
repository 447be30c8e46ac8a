"""Helix API client: one method per endpoint."""

from typing import Any, Optional, Union
from config.settings import Config
from core.api_client import BaseAPIClient
from core.query_builder import build_url
from core.resources import RESOURCES, Resource, get_resource


def _endpoint(path: str):
    resource = RESOURCES[path]

    def method(self, **options) -> Any:
        return self.call(resource, **options)

    method.__name__ = resource.method
    method.__qualname__ = f"HelixClient.{resource.method}"
    method.__doc__ = resource.doc
    return method


class HelixClient(BaseAPIClient):
    """Client for the Twitch Helix API."""

    def __init__(self, client_id: str, bearer_token: str, logger=None):
        super().__init__(client_id, bearer_token, Config.HELIX_BASE, logger)

    def call(self, resource: Union[str, Resource], **options) -> Any:
        """Request a resource with the given options."""
        if not isinstance(resource, Resource):
            resource = get_resource(resource)

        unknown = [key for key in options if key not in resource.options]
        if unknown:
            raise ValueError(
                f"Unsupported option(s) for {resource.path}: {', '.join(unknown)}")

        url = build_url(resource.path, options, self.base_url)
        return self.execute(url, resource.verb)

    get_games = _endpoint("games")
    get_top_games = _endpoint("games/top")
    get_clips = _endpoint("clips")
    get_streams = _endpoint("streams")
    get_stream_tags = _endpoint("streams/tags")
    get_users = _endpoint("users")
    get_users_follows = _endpoint("users/follows")
    get_videos = _endpoint("videos")

    def get_game_by_id(self, game_id: str) -> Any:
        """Fetch game information by the game ID."""
        return self.call("games", id=game_id)

    def _get_clips(self, selector: str, query: str, limit: int,
                   forward_pagination: Optional[str],
                   backward_pagination: Optional[str],
                   started_at: Optional[str],
                   ended_at: Optional[str]) -> Any:
        options = {
            selector: query,
            "first": limit,
            "after": forward_pagination,
            "before": backward_pagination,
            "started_at": started_at,
            "ended_at": ended_at,
        }
        return self.call("clips", **options)

    def get_clips_by_broadcaster(self, broadcaster_id: str,
                                 limit: int = Config.DEFAULT_CLIP_LIMIT,
                                 forward_pagination: Optional[str] = None,
                                 backward_pagination: Optional[str] = None,
                                 started_at: Optional[str] = None,
                                 ended_at: Optional[str] = None) -> Any:
        """
        Fetch clips by the broadcaster's ID.

        Args:
            broadcaster_id: ID of the broadcaster
            limit: Number of clips to return (max 100)
            forward_pagination: Cursor for forward pagination
            backward_pagination: Cursor for backward pagination
            started_at: Starting date in RFC3339 format
            ended_at: Ending date in RFC3339 format
        """
        return self._get_clips("broadcaster_id", broadcaster_id, limit,
                               forward_pagination, backward_pagination,
                               started_at, ended_at)

    def get_clips_by_game_id(self, game_id: str,
                             limit: int = Config.DEFAULT_CLIP_LIMIT,
                             forward_pagination: Optional[str] = None,
                             backward_pagination: Optional[str] = None,
                             started_at: Optional[str] = None,
                             ended_at: Optional[str] = None) -> Any:
        """Fetch clips by the game ID."""
        return self._get_clips("game_id", game_id, limit,
                               forward_pagination, backward_pagination,
                               started_at, ended_at)

    def get_clips_by_clip_id(self, clip_id: str,
                             limit: int = Config.DEFAULT_CLIP_LIMIT,
                             forward_pagination: Optional[str] = None,
                             backward_pagination: Optional[str] = None,
                             started_at: Optional[str] = None,
                             ended_at: Optional[str] = None) -> Any:
        """Fetch clips by one or more clip IDs."""
        return self._get_clips("id", clip_id, limit,
                               forward_pagination, backward_pagination,
                               started_at, ended_at)

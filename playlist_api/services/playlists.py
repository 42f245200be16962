from __future__ import annotations

import logging

from playlist_api.core.errors import InvariantViolation, NotFoundError
from playlist_api.repositories.interfaces import (
    PlaylistRepository,
    PlaylistSongRepository,
    SongCatalog,
)
from playlist_api.schemas.playlist import PlaylistDetail, PlaylistSummary
from playlist_api.services.access import (
    PLAYLIST_NOT_FOUND_MESSAGE,
    AccessDecision,
    AccessResolver,
)

logger = logging.getLogger(__name__)

SONG_NOT_FOUND_MESSAGE = "Song not found"


class PlaylistService:
    """Playlist and membership operations, each gated by ``AccessResolver``.

    Reading and adding songs is open to owners and collaborators. Removing
    songs and deleting the playlist are owner-only.
    """

    def __init__(
        self,
        playlists: PlaylistRepository,
        playlist_songs: PlaylistSongRepository,
        songs: SongCatalog,
        resolver: AccessResolver,
    ) -> None:
        self.playlists = playlists
        self.playlist_songs = playlist_songs
        self.songs = songs
        self.resolver = resolver

    def _authorize(
        self,
        decision: AccessDecision,
        *,
        operation: str,
        playlist_id: str,
        user_id: str,
    ) -> AccessDecision:
        if not decision.granted:
            logger.warning(
                "%s refused playlist_id=%s user_id=%s decision=%s",
                operation,
                playlist_id,
                user_id,
                decision.value,
            )
        return decision.ensure(operation)

    def create_playlist(self, name: str, owner: str) -> str:
        if not name or not name.strip():
            raise InvariantViolation("Playlist name must not be empty", operation="create_playlist")
        playlist_id = self.playlists.insert(name=name, owner=owner)
        logger.info("Playlist created playlist_id=%s owner=%s", playlist_id, owner)
        return playlist_id

    def list_playlists(self, user_id: str) -> list[PlaylistSummary]:
        return self.playlists.list_for_user(user_id)

    def get_playlist_songs(self, playlist_id: str, user_id: str) -> PlaylistDetail:
        operation = "get_playlist_songs"
        self._authorize(
            self.resolver.resolve_access(playlist_id, user_id),
            operation=operation,
            playlist_id=playlist_id,
            user_id=user_id,
        )
        summary = self.playlists.get_summary(playlist_id)
        if summary is None:
            raise NotFoundError(PLAYLIST_NOT_FOUND_MESSAGE, operation=operation)
        songs = self.playlist_songs.list_members(playlist_id)
        return PlaylistDetail(**summary.model_dump(), songs=songs)

    def add_song(self, playlist_id: str, song_id: str, user_id: str) -> str:
        operation = "add_song"
        decision = self._authorize(
            self.resolver.resolve_access(playlist_id, user_id),
            operation=operation,
            playlist_id=playlist_id,
            user_id=user_id,
        )
        if not self.songs.exists(song_id):
            raise NotFoundError(SONG_NOT_FOUND_MESSAGE, operation=operation)
        membership_id = self.playlist_songs.add_membership(playlist_id, song_id)
        logger.info(
            "Song added playlist_id=%s song_id=%s user_id=%s decision=%s",
            playlist_id,
            song_id,
            user_id,
            decision.value,
        )
        return membership_id

    def remove_song(self, playlist_id: str, song_id: str, user_id: str) -> None:
        operation = "remove_song"
        self._authorize(
            self.resolver.resolve_ownership(playlist_id, user_id),
            operation=operation,
            playlist_id=playlist_id,
            user_id=user_id,
        )
        self.playlist_songs.remove_membership(playlist_id, song_id)
        logger.info(
            "Song removed playlist_id=%s song_id=%s user_id=%s",
            playlist_id,
            song_id,
            user_id,
        )

    def delete_playlist(self, playlist_id: str, user_id: str) -> None:
        operation = "delete_playlist"
        self._authorize(
            self.resolver.resolve_ownership(playlist_id, user_id),
            operation=operation,
            playlist_id=playlist_id,
            user_id=user_id,
        )
        self.playlists.delete(playlist_id)
        logger.info("Playlist deleted playlist_id=%s user_id=%s", playlist_id, user_id)

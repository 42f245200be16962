"""Storage contracts consumed by the access resolver and playlist service.

The SQLAlchemy implementations live beside this module; tests substitute
in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from playlist_api.models.playlist import Playlist
from playlist_api.schemas.playlist import PlaylistSummary, SongSummary


class PlaylistRepository(Protocol):
    def find_by_id(self, playlist_id: str) -> Playlist | None: ...

    def get_summary(self, playlist_id: str) -> PlaylistSummary | None: ...

    def insert(self, *, name: str, owner: str) -> str: ...

    def delete(self, playlist_id: str) -> None: ...

    def list_for_user(self, user_id: str) -> list[PlaylistSummary]: ...


class CollaborationRepository(Protocol):
    def is_collaborator(self, playlist_id: str, user_id: str) -> bool: ...


class PlaylistSongRepository(Protocol):
    def add_membership(self, playlist_id: str, song_id: str) -> str: ...

    def list_members(self, playlist_id: str) -> list[SongSummary]: ...

    def remove_membership(self, playlist_id: str, song_id: str) -> None: ...


class SongCatalog(Protocol):
    def exists(self, song_id: str) -> bool: ...

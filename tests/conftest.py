from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from playlist_api.core.errors import InvariantViolation, NotFoundError
from playlist_api.models.base import Base
from playlist_api.models.playlist import Playlist
from playlist_api.schemas.playlist import PlaylistSummary, SongSummary


class FakePlaylistRepository:
    def __init__(self):
        self.rows: dict[str, Playlist] = {}
        self.usernames: dict[str, str] = {}
        self.lookups = 0
        self.deleted: list[str] = []

    def seed(self, playlist_id: str, owner: str, *, name: str = "Mix") -> Playlist:
        playlist = Playlist(id=playlist_id, name=name, owner=owner)
        self.rows[playlist_id] = playlist
        return playlist

    def find_by_id(self, playlist_id):
        self.lookups += 1
        return self.rows.get(playlist_id)

    def get_summary(self, playlist_id):
        playlist = self.rows.get(playlist_id)
        if playlist is None:
            return None
        return PlaylistSummary(
            id=playlist.id,
            name=playlist.name,
            username=self.usernames.get(playlist.owner),
        )

    def insert(self, *, name, owner):
        playlist_id = f"playlist-{len(self.rows) + 1:016d}"
        self.seed(playlist_id, owner, name=name)
        return playlist_id

    def delete(self, playlist_id):
        if self.rows.pop(playlist_id, None) is None:
            raise NotFoundError("Playlist could not be deleted. Id not found")
        self.deleted.append(playlist_id)

    def list_for_user(self, user_id):
        return [
            self.get_summary(playlist_id)
            for playlist_id, playlist in self.rows.items()
            if playlist.owner == user_id
        ]


class FakeCollaborationRepository:
    def __init__(self, grants=(), error: Exception | None = None):
        self.grants = set(grants)
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def is_collaborator(self, playlist_id, user_id):
        self.calls.append((playlist_id, user_id))
        if self.error is not None:
            raise self.error
        return (playlist_id, user_id) in self.grants


class FakePlaylistSongRepository:
    def __init__(self):
        self.memberships: list[tuple[str, str, str]] = []
        self.catalog: dict[str, SongSummary] = {}

    def add_membership(self, playlist_id, song_id):
        membership_id = f"membership-{len(self.memberships) + 1}"
        self.memberships.append((membership_id, playlist_id, song_id))
        return membership_id

    def list_members(self, playlist_id):
        songs = [
            self.catalog[song_id]
            for _, member_playlist_id, song_id in self.memberships
            if member_playlist_id == playlist_id
        ]
        if not songs:
            raise NotFoundError("Playlist not found")
        return songs

    def remove_membership(self, playlist_id, song_id):
        remaining = [
            row for row in self.memberships if (row[1], row[2]) != (playlist_id, song_id)
        ]
        if len(remaining) == len(self.memberships):
            raise InvariantViolation("Song could not be removed")
        self.memberships = remaining


class FakeSongCatalog:
    def __init__(self, song_ids=()):
        self.song_ids = set(song_ids)

    def exists(self, song_id):
        return song_id in self.song_ids


@pytest.fixture
def session_factory(tmp_path):
    db_path = tmp_path / "playlists.db"
    engine = create_engine(
        f"sqlite:///{db_path}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()

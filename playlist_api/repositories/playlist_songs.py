import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from playlist_api.core.config import MEMBERSHIP_ID_LENGTH
from playlist_api.core.errors import InvariantViolation, NotFoundError
from playlist_api.models.playlist import PlaylistSong
from playlist_api.models.song import Song
from playlist_api.schemas.playlist import SongSummary


class SqlPlaylistSongRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add_membership(self, playlist_id: str, song_id: str) -> str:
        membership = PlaylistSong(
            id=uuid.uuid4().hex[:MEMBERSHIP_ID_LENGTH],
            playlist_id=playlist_id,
            song_id=song_id,
        )
        self.db.add(membership)
        self.db.commit()
        self.db.refresh(membership)
        if not membership.id:
            raise InvariantViolation(
                "Song could not be added to playlist", operation="add_membership"
            )
        return membership.id

    def list_members(self, playlist_id: str) -> list[SongSummary]:
        rows = self.db.execute(
            select(Song.id, Song.title, Song.performer)
            .join(PlaylistSong, PlaylistSong.song_id == Song.id)
            .where(PlaylistSong.playlist_id == playlist_id)
        ).all()
        # An empty playlist is reported the same way as a missing one.
        if not rows:
            raise NotFoundError("Playlist not found", operation="list_members")
        return [SongSummary.model_validate(row) for row in rows]

    def remove_membership(self, playlist_id: str, song_id: str) -> None:
        result = self.db.execute(
            delete(PlaylistSong)
            .where(PlaylistSong.playlist_id == playlist_id)
            .where(PlaylistSong.song_id == song_id)
        )
        self.db.commit()
        if not result.rowcount:
            raise InvariantViolation("Song could not be removed", operation="remove_membership")

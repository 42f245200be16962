import uuid

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from playlist_api.core.config import PLAYLIST_ID_LENGTH, PLAYLIST_ID_PREFIX
from playlist_api.core.errors import InvariantViolation, NotFoundError
from playlist_api.models.collaboration import Collaboration
from playlist_api.models.playlist import Playlist
from playlist_api.models.user import User
from playlist_api.schemas.playlist import PlaylistSummary


def generate_playlist_id() -> str:
    return f"{PLAYLIST_ID_PREFIX}{uuid.uuid4().hex[:PLAYLIST_ID_LENGTH]}"


def _summary_query():
    return select(Playlist.id, Playlist.name, User.username).outerjoin(
        User, User.id == Playlist.owner
    )


class SqlPlaylistRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, playlist_id: str) -> Playlist | None:
        return self.db.execute(
            select(Playlist).where(Playlist.id == playlist_id)
        ).scalar_one_or_none()

    def get_summary(self, playlist_id: str) -> PlaylistSummary | None:
        row = self.db.execute(
            _summary_query().where(Playlist.id == playlist_id)
        ).one_or_none()
        if row is None:
            return None
        return PlaylistSummary.model_validate(row)

    def insert(self, *, name: str, owner: str) -> str:
        playlist = Playlist(id=generate_playlist_id(), name=name, owner=owner)
        self.db.add(playlist)
        self.db.commit()
        self.db.refresh(playlist)
        if not playlist.id:
            raise InvariantViolation("Playlist could not be added", operation="insert_playlist")
        return playlist.id

    def delete(self, playlist_id: str) -> None:
        result = self.db.execute(delete(Playlist).where(Playlist.id == playlist_id))
        self.db.commit()
        if not result.rowcount:
            raise NotFoundError(
                "Playlist could not be deleted. Id not found",
                operation="delete_playlist",
            )

    def list_for_user(self, user_id: str) -> list[PlaylistSummary]:
        collaborating = select(Collaboration.playlist_id).where(
            Collaboration.user_id == user_id
        )
        rows = self.db.execute(
            _summary_query()
            .where(or_(Playlist.owner == user_id, Playlist.id.in_(collaborating)))
            .order_by(Playlist.name, Playlist.id)
        ).all()
        return [PlaylistSummary.model_validate(row) for row in rows]

from sqlalchemy import select
from sqlalchemy.orm import Session

from playlist_api.models.song import Song


class SqlSongCatalog:
    def __init__(self, db: Session) -> None:
        self.db = db

    def exists(self, song_id: str) -> bool:
        found = self.db.execute(
            select(Song.id).where(Song.id == song_id)
        ).scalar_one_or_none()
        return found is not None

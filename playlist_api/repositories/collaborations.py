from sqlalchemy import select
from sqlalchemy.orm import Session

from playlist_api.models.collaboration import Collaboration


class SqlCollaborationRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def is_collaborator(self, playlist_id: str, user_id: str) -> bool:
        found = self.db.execute(
            select(Collaboration.id)
            .where(Collaboration.playlist_id == playlist_id)
            .where(Collaboration.user_id == user_id)
            .limit(1)
        ).scalar_one_or_none()
        return found is not None

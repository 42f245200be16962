from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from playlist_api.models.base import Base


class Collaboration(Base):
    __tablename__ = "collaborations"
    __table_args__ = (
        UniqueConstraint(
            "playlist_id",
            "user_id",
            name="uq_collaborations_playlist_user",
        ),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    playlist_id: Mapped[str] = mapped_column(
        String, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from playlist_api.models.base import Base


class Playlist(Base):
    __tablename__ = "playlists"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    owner: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )


class PlaylistSong(Base):
    # No uniqueness on (playlist_id, song_id): membership is a multiset.
    __tablename__ = "playlist_songs"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    playlist_id: Mapped[str] = mapped_column(
        String, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    song_id: Mapped[str] = mapped_column(
        String, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False
    )

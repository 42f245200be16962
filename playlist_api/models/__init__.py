from playlist_api.models.base import Base
from playlist_api.models.collaboration import Collaboration
from playlist_api.models.playlist import Playlist, PlaylistSong
from playlist_api.models.song import Song
from playlist_api.models.user import User

__all__ = [
    "Base",
    "Collaboration",
    "Playlist",
    "PlaylistSong",
    "Song",
    "User",
]

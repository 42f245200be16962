from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from playlist_api.core.config import USER_ID_HEADER
from playlist_api.core.db import get_db
from playlist_api.repositories.collaborations import SqlCollaborationRepository
from playlist_api.repositories.playlist_songs import SqlPlaylistSongRepository
from playlist_api.repositories.playlists import SqlPlaylistRepository
from playlist_api.repositories.songs import SqlSongCatalog
from playlist_api.services.access import AccessResolver
from playlist_api.services.playlists import PlaylistService


def get_current_user_id(request: Request) -> str:
    """Acting user id, set by the authentication gateway in front of this API."""
    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing authentication")
    return user_id


def build_playlist_service(db: Session) -> PlaylistService:
    playlists = SqlPlaylistRepository(db)
    resolver = AccessResolver(playlists, SqlCollaborationRepository(db))
    return PlaylistService(
        playlists,
        SqlPlaylistSongRepository(db),
        SqlSongCatalog(db),
        resolver,
    )


def get_playlist_service(db: Session = Depends(get_db)) -> PlaylistService:
    return build_playlist_service(db)

from fastapi import APIRouter, Depends, status

from playlist_api.api.deps import get_current_user_id, get_playlist_service
from playlist_api.schemas.playlist import PlaylistCreate, PlaylistSongPayload
from playlist_api.services.playlists import PlaylistService

router = APIRouter(tags=["playlists"])


@router.post("", status_code=status.HTTP_201_CREATED)
def post_playlist(
    payload: PlaylistCreate,
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    playlist_id = service.create_playlist(payload.name, user_id)
    return {
        "status": "success",
        "message": "Playlist added",
        "data": {"playlistId": playlist_id},
    }


@router.get("")
def get_playlists(
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    playlists = service.list_playlists(user_id)
    return {
        "status": "success",
        "data": {"playlists": [playlist.model_dump() for playlist in playlists]},
    }


@router.delete("/{playlist_id}")
def delete_playlist(
    playlist_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    service.delete_playlist(playlist_id, user_id)
    return {"status": "success", "message": "Playlist deleted"}


@router.post("/{playlist_id}/songs", status_code=status.HTTP_201_CREATED)
def post_playlist_song(
    playlist_id: str,
    payload: PlaylistSongPayload,
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    service.add_song(playlist_id, payload.song_id, user_id)
    return {"status": "success", "message": "Song added to playlist"}


@router.get("/{playlist_id}/songs")
def get_playlist_songs(
    playlist_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    playlist = service.get_playlist_songs(playlist_id, user_id)
    return {"status": "success", "data": {"playlist": playlist.model_dump()}}


@router.delete("/{playlist_id}/songs")
def delete_playlist_song(
    playlist_id: str,
    payload: PlaylistSongPayload,
    user_id: str = Depends(get_current_user_id),
    service: PlaylistService = Depends(get_playlist_service),
):
    service.remove_song(playlist_id, payload.song_id, user_id)
    return {"status": "success", "message": "Song removed from playlist"}

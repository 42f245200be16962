from playlist_api.api.routes.playlists import router as playlists_router

__all__ = ["playlists_router"]

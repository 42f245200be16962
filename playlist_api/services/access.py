"""Ownership and collaboration checks for playlists.

``AccessResolver`` answers, for a (playlist, user) pair, one of four
decisions. It never raises for a denial; callers turn a decision into an
error with ``AccessDecision.ensure``.
"""

from __future__ import annotations

import logging
from enum import Enum

from playlist_api.core.errors import AccessDeniedError, NotFoundError
from playlist_api.repositories.interfaces import CollaborationRepository, PlaylistRepository

logger = logging.getLogger(__name__)

PLAYLIST_NOT_FOUND_MESSAGE = "Playlist not found"
ACCESS_DENIED_MESSAGE = "You are not allowed to access this resource"


class AccessDecision(str, Enum):
    OWNER = "owner"
    COLLABORATOR = "collaborator"
    DENIED = "denied"
    NOT_FOUND = "not_found"

    @property
    def granted(self) -> bool:
        return self in (AccessDecision.OWNER, AccessDecision.COLLABORATOR)

    def ensure(self, operation: str) -> AccessDecision:
        """Return the decision unchanged when it grants access, else raise."""
        if self is AccessDecision.NOT_FOUND:
            raise NotFoundError(PLAYLIST_NOT_FOUND_MESSAGE, operation=operation)
        if self is AccessDecision.DENIED:
            raise AccessDeniedError(ACCESS_DENIED_MESSAGE, operation=operation)
        return self


class AccessResolver:
    def __init__(
        self,
        playlists: PlaylistRepository,
        collaborations: CollaborationRepository,
    ) -> None:
        self.playlists = playlists
        self.collaborations = collaborations

    def resolve_ownership(self, playlist_id: str, user_id: str) -> AccessDecision:
        playlist = self.playlists.find_by_id(playlist_id)
        if playlist is None:
            return AccessDecision.NOT_FOUND
        if playlist.owner == user_id:
            return AccessDecision.OWNER
        return AccessDecision.DENIED

    def resolve_access(self, playlist_id: str, user_id: str) -> AccessDecision:
        ownership = self.resolve_ownership(playlist_id, user_id)
        if ownership is not AccessDecision.DENIED:
            return ownership

        # The ownership denial stands unless a collaboration grant is found.
        # A failing probe never replaces it with a different outcome.
        try:
            is_collaborator = self.collaborations.is_collaborator(playlist_id, user_id)
        except Exception as exc:
            logger.warning(
                "Collaboration check failed playlist_id=%s user_id=%s error=%s",
                playlist_id,
                user_id,
                exc,
            )
            return ownership

        if is_collaborator:
            return AccessDecision.COLLABORATOR
        return ownership

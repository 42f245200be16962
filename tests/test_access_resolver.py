from __future__ import annotations

import unittest

import pytest

from conftest import FakeCollaborationRepository, FakePlaylistRepository
from playlist_api.core.errors import AccessDeniedError, NotFoundError
from playlist_api.services.access import AccessDecision, AccessResolver


def _make_resolver(grants=(), error=None):
    playlists = FakePlaylistRepository()
    playlists.seed("PL1", "U1")
    collaborations = FakeCollaborationRepository(grants, error=error)
    return AccessResolver(playlists, collaborations), playlists, collaborations


def test_owner_resolves_to_owner_without_collaboration_lookup() -> None:
    resolver, _, collaborations = _make_resolver(grants=[("PL1", "U1")])

    assert resolver.resolve_access("PL1", "U1") is AccessDecision.OWNER
    assert resolver.resolve_ownership("PL1", "U1") is AccessDecision.OWNER
    assert collaborations.calls == []


def test_missing_playlist_is_not_found_for_both_checks() -> None:
    resolver, _, collaborations = _make_resolver()

    assert resolver.resolve_ownership("PL2", "U1") is AccessDecision.NOT_FOUND
    assert resolver.resolve_access("PL2", "U9") is AccessDecision.NOT_FOUND
    assert collaborations.calls == []


def test_collaborator_is_granted_general_access_only() -> None:
    resolver, _, collaborations = _make_resolver(grants=[("PL1", "U2")])

    assert resolver.resolve_access("PL1", "U2") is AccessDecision.COLLABORATOR
    assert resolver.resolve_ownership("PL1", "U2") is AccessDecision.DENIED
    assert collaborations.calls == [("PL1", "U2")]


def test_stranger_is_denied() -> None:
    resolver, _, _ = _make_resolver(grants=[("PL1", "U2")])

    assert resolver.resolve_access("PL1", "U3") is AccessDecision.DENIED


@pytest.mark.parametrize(
    "error",
    [NotFoundError("Collaborator not found"), RuntimeError("connection reset")],
)
def test_failing_collaboration_probe_keeps_original_denial(error) -> None:
    resolver, _, collaborations = _make_resolver(error=error)

    assert resolver.resolve_access("PL1", "U2") is AccessDecision.DENIED
    assert collaborations.calls == [("PL1", "U2")]


def test_playlist_lookup_failure_propagates() -> None:
    resolver, playlists, _ = _make_resolver()

    def broken_lookup(_playlist_id):
        raise RuntimeError("database unavailable")

    playlists.find_by_id = broken_lookup

    with pytest.raises(RuntimeError, match="database unavailable"):
        resolver.resolve_access("PL1", "U1")


def test_resolve_access_is_idempotent() -> None:
    resolver, _, _ = _make_resolver(grants=[("PL1", "U2")])

    for user_id in ("U1", "U2", "U3"):
        first = resolver.resolve_access("PL1", user_id)
        second = resolver.resolve_access("PL1", user_id)
        assert first is second


class AccessDecisionEnsureTest(unittest.TestCase):
    def test_granting_decisions_pass_through(self):
        self.assertIs(AccessDecision.OWNER.ensure("get"), AccessDecision.OWNER)
        self.assertIs(AccessDecision.COLLABORATOR.ensure("get"), AccessDecision.COLLABORATOR)

    def test_denied_raises_access_denied_with_operation(self):
        with self.assertRaises(AccessDeniedError) as ctx:
            AccessDecision.DENIED.ensure("add_song")
        self.assertEqual(ctx.exception.operation, "add_song")
        self.assertEqual(ctx.exception.status_code, 403)

    def test_not_found_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            AccessDecision.NOT_FOUND.ensure("delete_playlist")
        self.assertEqual(str(ctx.exception), "delete_playlist: Playlist not found")


if __name__ == "__main__":
    unittest.main()

# ABOUTME: Unit tests for team scope resolution.
# ABOUTME: An explicit team id wins; otherwise the client default is used.

from vercel_client.core.scope import resolve_scope


class TestResolveScope:
    """Tests for resolve_scope."""

    def test_empty_explicit_falls_back_to_default(self) -> None:
        assert resolve_scope("", "team-default") == "team-default"

    def test_explicit_wins(self) -> None:
        assert resolve_scope("team-x", "team-default") == "team-x"

    def test_none_explicit_falls_back_to_default(self) -> None:
        assert resolve_scope(None, "team-default") == "team-default"

    def test_both_empty(self) -> None:
        assert resolve_scope("", "") == ""

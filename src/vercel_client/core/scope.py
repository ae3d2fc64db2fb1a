# ABOUTME: Resolves the team a request acts on.
# ABOUTME: A per-call team id wins over the client-wide default.


def resolve_scope(explicit: str | None, default: str) -> str:
    """Return explicit if it is a non-empty string, otherwise default."""
    if explicit:
        return explicit
    return default

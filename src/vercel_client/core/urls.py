# ABOUTME: URL construction for Vercel API endpoints.
# ABOUTME: Escapes each path segment on its own before substituting it into a path template.

from urllib.parse import quote

# Sub-delimiters that are legal inside a single path segment.
_SEGMENT_SAFE = "$&+:=@"


def escape_segment(value: str) -> str:
    """Percent-escape a value for use as exactly one path segment."""
    return quote(value, safe=_SEGMENT_SAFE)


def build_url(base_url: str, template: str, *values: str) -> str:
    """Compose an absolute URL from a base, a ``%s`` path template and raw values.

    Each value is escaped independently so an embedded ``/``, ``?`` or space
    cannot change the route, e.g.::

        build_url("https://api.vercel.com", "/v2/teams/%s", "a/b")
        # -> "https://api.vercel.com/v2/teams/a%2Fb"
    """
    escaped = tuple(escape_segment(value) for value in values)
    return f"{base_url}{template}" % escaped


def with_team(url: str, team_id: str) -> str:
    """Append a teamId query parameter when team_id is non-empty."""
    if not team_id:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}teamId={quote(team_id, safe='')}"

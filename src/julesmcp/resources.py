"""Resource name resolution for Jules API identifiers.

The API addresses everything by resource name (``sessions/123``,
``sources/github-acme-widgets``, ``sessions/123/activities/abc``). Callers may
pass either a bare id or the full name; these helpers normalize both forms.
The check is a plain prefix test, malformed ids surface as a not-found error
from the API.
"""

SESSIONS = "sessions"
SOURCES = "sources"


def resolve_name(identifier: str, collection: str) -> str:
    """Return ``collection/identifier`` unless the identifier is already qualified."""
    prefix = f"{collection}/"
    if identifier.startswith(prefix):
        return identifier
    return f"{prefix}{identifier}"


def session_name(session_id: str) -> str:
    return resolve_name(session_id, SESSIONS)


def source_name(source_id: str) -> str:
    return resolve_name(source_id, SOURCES)


def activity_name(session_id: str, activity_id: str) -> str:
    """Resolve an activity id within a session.

    A fully qualified activity name (``sessions/.../activities/...``) is used
    as-is, so an activity's own ``name`` can be passed straight through.
    """
    if activity_id.startswith(f"{SESSIONS}/"):
        return activity_id
    return f"{session_name(session_id)}/activities/{activity_id}"


def github_source_name(owner: str, repo: str) -> str:
    """Source name Jules assigns to a connected GitHub repository."""
    return f"{SOURCES}/github-{owner}-{repo}"

"""Text rendering for MCP tool responses."""

from julesmcp.api.models import (
    Activity,
    ActivityKind,
    ActivityPayload,
    ListActivitiesResponse,
    ListSessionsResponse,
    ListSourcesResponse,
    Session,
    Source,
)


def _payload_line(kind: ActivityKind, payload: ActivityPayload) -> str:
    if kind is ActivityKind.PLAN_GENERATED:
        return f"Plan Generated: {payload.plan.id}"
    if kind is ActivityKind.PLAN_APPROVED:
        return f"Plan Approved: {payload.plan_id}"
    if kind is ActivityKind.USER_MESSAGED:
        return f"User: {payload.user_message}"
    if kind is ActivityKind.AGENT_MESSAGED:
        return f"Agent: {payload.agent_message}"
    if kind is ActivityKind.PROGRESS_UPDATED:
        return f"Progress: {payload.title}"
    if kind is ActivityKind.SESSION_COMPLETED:
        return "Session Completed"
    return f"FAILED: {payload.reason}"


def format_activity(activity: Activity) -> str:
    """``[time] description (originator)`` plus one line per payload found."""
    lines = [f"[{activity.create_time}] {activity.description} ({activity.originator})"]
    for kind, payload in activity.payloads():
        lines.append(f"  {_payload_line(kind, payload)}")
    return "\n".join(lines)


def format_session_line(session: Session) -> str:
    return f"- [{session.state}] {session.title or session.name} (ID: {session.id})"


def format_source_line(source: Source) -> str:
    repo = source.github_repo
    location = f"{repo.owner}/{repo.repo}" if repo else "unknown"
    return f"- [{source.id}] {source.name} (Repo: {location})"


def format_created_session(session: Session) -> str:
    lines = [
        "Session Created!",
        f"ID: {session.id}",
        f"Name: {session.name}",
        f"State: {session.state}",
        f"URL: {session.url}",
    ]
    context = session.source_context
    if context:
        repo_context = context.github_repo_context
        branch = repo_context.starting_branch if repo_context and repo_context.starting_branch else "default"
        lines.append(f"Source: {context.source} ({branch})")
    return "\n".join(lines)


def _with_page_token(text: str, token: str | None) -> str:
    if token:
        return f"{text}\n\nNext page token: {token}"
    return text


def format_session_list(response: ListSessionsResponse) -> str:
    if not response.sessions:
        return _with_page_token("No sessions found.", response.next_page_token)
    body = "\n".join(format_session_line(s) for s in response.sessions)
    return _with_page_token(f"Sessions:\n{body}", response.next_page_token)


def format_activity_list(session_id: str, response: ListActivitiesResponse) -> str:
    if not response.activities:
        return _with_page_token("No activities found.", response.next_page_token)
    body = "\n".join(format_activity(a) for a in response.activities)
    return _with_page_token(f"Activities for {session_id}:\n{body}", response.next_page_token)


def format_source_list(response: ListSourcesResponse) -> str:
    if not response.sources:
        return _with_page_token("No sources found.", response.next_page_token)
    body = "\n".join(format_source_line(s) for s in response.sources)
    return _with_page_token(f"Sources:\n{body}", response.next_page_token)

"""MCP server exposing Jules sessions, activities and sources as tools."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Annotated, Literal, TypeVar

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from julesmcp.api.client import ApiResult, JulesClient
from julesmcp.api.models import (
    AutomationMode,
    CreateSessionRequest,
    GitHubRepoContext,
    SourceContext,
)
from julesmcp.config import (
    DEFAULT_ACTIVITY_PAGE_SIZE,
    DEFAULT_SESSION_PAGE_SIZE,
    DEFAULT_SOURCE_PAGE_SIZE,
    DEFAULT_STARTING_BRANCH,
    SERVER_NAME,
)
from julesmcp.git_context import GitContext, get_current_git_context
from julesmcp.mcp.formatting import (
    format_activity_list,
    format_created_session,
    format_session_list,
    format_source_list,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SessionId = Annotated[str, Field(description="The session ID or resource name (sessions/...).")]
PageToken = Annotated[
    str | None,
    Field(description="Token from a previous call's 'Next page token' line, to fetch the next page."),
]


def _unwrap(result: ApiResult[T], prefix: str = "Error") -> T:
    """Return the result value or report the failure as a tool error."""
    if not result.ok:
        raise ToolError(f"{prefix}: {result.error.message}")
    return result.value


class JulesTools:
    """Tool handlers. Each call is one independent API round trip."""

    def __init__(
        self,
        client: JulesClient,
        git_context: Callable[[], GitContext | None] = get_current_git_context,
    ):
        self.client = client
        self._git_context = git_context

    async def resolve_source_context(
        self,
        source_repo: str | None,
        starting_branch: str | None,
        include_current_branch: bool,
    ) -> SourceContext | None:
        """Pick the source context for a new session.

        An explicit source_repo wins, then the current git branch when
        requested, else no source at all.
        """
        if source_repo:
            return SourceContext(
                source=source_repo,
                github_repo_context=GitHubRepoContext(
                    starting_branch=starting_branch or DEFAULT_STARTING_BRANCH
                ),
            )
        if include_current_branch:
            git = await asyncio.to_thread(self._git_context)
            if git is None:
                logger.info("No GitHub context for the working directory, creating session without a source")
                return None
            return SourceContext(
                source=git.source,
                github_repo_context=GitHubRepoContext(starting_branch=git.branch),
            )
        return None

    async def create_session(
        self,
        prompt: Annotated[str, Field(description="The task description for Jules.")],
        title: Annotated[str | None, Field(description="Optional title for the session.")] = None,
        include_current_branch: Annotated[
            bool,
            Field(description="If true, tries to attach the current git repo/branch context."),
        ] = False,
        source_repo: Annotated[
            str | None,
            Field(
                description="Explicit source name (e.g. sources/github-owner-repo). "
                "Overrides include_current_branch."
            ),
        ] = None,
        starting_branch: Annotated[
            str | None,
            Field(description="Branch to start from (defaults to main if not specified)."),
        ] = None,
        require_plan_approval: Annotated[
            bool | None,
            Field(description="If true, plans require approval before execution."),
        ] = None,
        automation_mode: Annotated[
            Literal["AUTO_CREATE_PR"] | None,
            Field(description="Set automation mode (e.g. AUTO_CREATE_PR)."),
        ] = None,
    ) -> str:
        source_context = await self.resolve_source_context(
            source_repo, starting_branch, include_current_branch
        )
        request = CreateSessionRequest(
            prompt=prompt,
            title=title,
            source_context=source_context,
            require_plan_approval=require_plan_approval,
            automation_mode=AutomationMode(automation_mode) if automation_mode else None,
        )
        session = _unwrap(
            await self.client.create_session(request), prefix="Failed to create session"
        )
        logger.info("Created session %s", session.name)
        return format_created_session(session)

    async def list_sessions(
        self,
        limit: Annotated[int, Field(description="Number of sessions to return.", ge=1)] = DEFAULT_SESSION_PAGE_SIZE,
        page_token: PageToken = None,
    ) -> str:
        response = _unwrap(await self.client.list_sessions(limit, page_token))
        return format_session_list(response)

    async def get_session(self, session_id: SessionId) -> str:
        return _unwrap(await self.client.get_session(session_id)).to_json()

    async def list_activities(
        self,
        session_id: SessionId,
        limit: Annotated[
            int, Field(description="Number of activities to return.", ge=1)
        ] = DEFAULT_ACTIVITY_PAGE_SIZE,
        page_token: PageToken = None,
    ) -> str:
        response = _unwrap(await self.client.list_activities(session_id, limit, page_token))
        return format_activity_list(session_id, response)

    async def get_activity(
        self,
        session_id: SessionId,
        activity_id: Annotated[
            str, Field(description="The activity ID or its full resource name.")
        ],
    ) -> str:
        return _unwrap(await self.client.get_activity(session_id, activity_id)).to_json()

    async def send_message(
        self,
        session_id: SessionId,
        message: Annotated[str, Field(description="The message content.")],
    ) -> str:
        _unwrap(await self.client.send_message(session_id, message))
        return f"Message sent to {session_id}."

    async def approve_plan(self, session_id: SessionId) -> str:
        _unwrap(await self.client.approve_plan(session_id))
        return f"Plan approved for {session_id}."

    async def delete_session(self, session_id: SessionId) -> str:
        _unwrap(await self.client.delete_session(session_id))
        return f"Session {session_id} deleted."

    async def list_sources(
        self,
        limit: Annotated[int, Field(description="Number of sources to return.", ge=1)] = DEFAULT_SOURCE_PAGE_SIZE,
        filter: Annotated[
            str | None, Field(description="Filter expression (e.g. name=sources/foo).")
        ] = None,
        page_token: PageToken = None,
    ) -> str:
        response = _unwrap(await self.client.list_sources(limit, page_token, filter))
        return format_source_list(response)

    async def get_source(
        self,
        source_id: Annotated[str, Field(description="The source ID or resource name (sources/...).")],
    ) -> str:
        return _unwrap(await self.client.get_source(source_id)).to_json()


# Tool name -> (handler attribute, description)
TOOLS = {
    "jules_create_session": ("create_session", "Delegate a coding task to Jules. Starts a new session."),
    "jules_list_sessions": ("list_sessions", "List recent Jules sessions to check their status."),
    "jules_get_session": ("get_session", "Get details of a specific Jules session."),
    "jules_list_activities": ("list_activities", "List activities (events) for a session to review progress."),
    "jules_get_activity": ("get_activity", "Get details of a specific activity."),
    "jules_send_message": ("send_message", "Send a message to the session (intervention or feedback)."),
    "jules_approve_plan": ("approve_plan", "Approve a plan that is awaiting approval."),
    "jules_delete_session": ("delete_session", "Delete a session."),
    "jules_list_sources": ("list_sources", "List connected source repositories."),
    "jules_get_source": ("get_source", "Get details of a specific source."),
}


def create_server(tools: JulesTools) -> FastMCP:
    """Build a FastMCP server with every Jules tool registered."""

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await tools.client.aclose()

    mcp = FastMCP(SERVER_NAME, lifespan=lifespan)
    for name, (attr, description) in TOOLS.items():
        mcp.add_tool(getattr(tools, attr), name=name, description=description)
    return mcp

"""Wire models for the Jules REST API.

Field names are snake_case in Python and camelCase on the wire. Unknown fields
are kept so detail views can show the full remote payload.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JulesModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict:
        """Serialize with API field names, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self) -> str:
        """Pretty JSON of exactly the fields the API sent."""
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=2)


class SessionState(str, Enum):
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    QUEUED = "QUEUED"
    PLANNING = "PLANNING"
    AWAITING_PLAN_APPROVAL = "AWAITING_PLAN_APPROVAL"
    AWAITING_USER_FEEDBACK = "AWAITING_USER_FEEDBACK"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    FAILED = "FAILED"
    COMPLETED = "COMPLETED"


class AutomationMode(str, Enum):
    AUTOMATION_MODE_UNSPECIFIED = "AUTOMATION_MODE_UNSPECIFIED"
    AUTO_CREATE_PR = "AUTO_CREATE_PR"


# ── Sources ──────────────────────────────────────────────────────


class GitHubBranch(JulesModel):
    display_name: str | None = None


class GitHubRepo(JulesModel):
    owner: str | None = None
    repo: str | None = None
    is_private: bool = False
    default_branch: GitHubBranch | None = None
    branches: list[GitHubBranch] = Field(default_factory=list)


class Source(JulesModel):
    """A repository connected to Jules."""

    name: str
    id: str
    github_repo: GitHubRepo | None = None


class GitHubRepoContext(JulesModel):
    starting_branch: str | None = None


class SourceContext(JulesModel):
    """Binds a new session to a source and starting branch."""

    source: str
    github_repo_context: GitHubRepoContext | None = None


# ── Sessions ─────────────────────────────────────────────────────


class PullRequest(JulesModel):
    url: str | None = None
    number: int | None = None


class SessionOutput(JulesModel):
    pull_request: PullRequest | None = None


class Session(JulesModel):
    """A delegated task run. ``name`` is always ``sessions/{id}``."""

    name: str
    id: str
    prompt: str = ""
    title: str | None = None
    # Plain string so states added by newer API versions still decode
    state: str = SessionState.STATE_UNSPECIFIED.value
    url: str = ""
    source_context: SourceContext | None = None
    require_plan_approval: bool | None = None
    automation_mode: str | None = None
    outputs: list[SessionOutput] | SessionOutput | None = None
    create_time: str | None = None
    update_time: str | None = None


class CreateSessionRequest(JulesModel):
    prompt: str
    title: str | None = None
    source_context: SourceContext | None = None
    require_plan_approval: bool | None = None
    automation_mode: AutomationMode | None = None


class SendMessageRequest(JulesModel):
    prompt: str


# ── Activities ───────────────────────────────────────────────────


class PlanStep(JulesModel):
    id: str = ""
    index: int = 0
    title: str = ""
    description: str = ""


class Plan(JulesModel):
    id: str | None = None
    steps: list[PlanStep] = Field(default_factory=list)
    create_time: str | None = None


class PlanGenerated(JulesModel):
    plan: Plan


class PlanApproved(JulesModel):
    plan_id: str = ""


class UserMessaged(JulesModel):
    user_message: str = ""


class AgentMessaged(JulesModel):
    agent_message: str = ""


class ProgressUpdated(JulesModel):
    title: str = ""
    description: str = ""


class SessionCompleted(JulesModel):
    pass


class SessionFailed(JulesModel):
    reason: str = ""


class ActivityKind(str, Enum):
    """The closed set of activity payloads, in display order."""

    PLAN_GENERATED = "planGenerated"
    PLAN_APPROVED = "planApproved"
    USER_MESSAGED = "userMessaged"
    AGENT_MESSAGED = "agentMessaged"
    PROGRESS_UPDATED = "progressUpdated"
    SESSION_COMPLETED = "sessionCompleted"
    SESSION_FAILED = "sessionFailed"


ActivityPayload = (
    PlanGenerated
    | PlanApproved
    | UserMessaged
    | AgentMessaged
    | ProgressUpdated
    | SessionCompleted
    | SessionFailed
)


class Activity(JulesModel):
    """One immutable event in a session's history."""

    name: str
    id: str
    originator: str = "system"
    description: str = ""
    create_time: str | None = None
    plan_generated: PlanGenerated | None = None
    plan_approved: PlanApproved | None = None
    user_messaged: UserMessaged | None = None
    agent_messaged: AgentMessaged | None = None
    progress_updated: ProgressUpdated | None = None
    session_completed: SessionCompleted | None = None
    session_failed: SessionFailed | None = None

    def payloads(self) -> list[tuple[ActivityKind, ActivityPayload]]:
        """All populated payload variants. Normally zero or one."""
        found = []
        for kind in ActivityKind:
            payload = getattr(self, _KIND_FIELDS[kind])
            if payload is not None:
                found.append((kind, payload))
        return found


_KIND_FIELDS = {
    ActivityKind.PLAN_GENERATED: "plan_generated",
    ActivityKind.PLAN_APPROVED: "plan_approved",
    ActivityKind.USER_MESSAGED: "user_messaged",
    ActivityKind.AGENT_MESSAGED: "agent_messaged",
    ActivityKind.PROGRESS_UPDATED: "progress_updated",
    ActivityKind.SESSION_COMPLETED: "session_completed",
    ActivityKind.SESSION_FAILED: "session_failed",
}


# ── List responses ───────────────────────────────────────────────


class ListSessionsResponse(JulesModel):
    sessions: list[Session] = Field(default_factory=list)
    next_page_token: str | None = None


class ListActivitiesResponse(JulesModel):
    activities: list[Activity] = Field(default_factory=list)
    next_page_token: str | None = None


class ListSourcesResponse(JulesModel):
    sources: list[Source] = Field(default_factory=list)
    next_page_token: str | None = None


class Empty(JulesModel):
    """Response of custom methods and deletes."""


class ErrorStatus(JulesModel):
    code: int | None = None
    message: str = ""
    status: str | None = None


class ErrorBody(JulesModel):
    error: ErrorStatus

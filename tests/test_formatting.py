"""Tests for tool response formatting."""

from julesmcp.api.models import Activity, ActivityKind, Session, Source
from julesmcp.mcp.formatting import (
    format_activity,
    format_created_session,
    format_source_line,
)


def make_activity(**payload) -> Activity:
    return Activity.model_validate(
        {
            "id": "a1",
            "name": "sessions/1/activities/a1",
            "originator": "agent",
            "description": "Did a thing",
            "createTime": "2025-01-01T00:00:00Z",
            **payload,
        }
    )


class TestFormatActivity:
    def test_no_payload(self):
        assert format_activity(make_activity()) == "[2025-01-01T00:00:00Z] Did a thing (agent)"

    def test_agent_message(self):
        text = format_activity(make_activity(agentMessaged={"agentMessage": "Working on it"}))
        assert text.splitlines()[1] == "  Agent: Working on it"

    def test_session_failed(self):
        text = format_activity(make_activity(sessionFailed={"reason": "tests broke"}))
        assert text.splitlines()[1] == "  FAILED: tests broke"

    def test_every_variant_rendered_in_order(self):
        activity = make_activity(
            sessionFailed={"reason": "r"},
            planGenerated={"plan": {"id": "p1"}},
            userMessaged={"userMessage": "u"},
            progressUpdated={"title": "Step 2"},
            planApproved={"planId": "p1"},
            sessionCompleted={},
            agentMessaged={"agentMessage": "a"},
        )

        assert [kind for kind, _ in activity.payloads()] == list(ActivityKind)
        assert format_activity(activity).splitlines()[1:] == [
            "  Plan Generated: p1",
            "  Plan Approved: p1",
            "  User: u",
            "  Agent: a",
            "  Progress: Step 2",
            "  Session Completed",
            "  FAILED: r",
        ]


class TestFormatSession:
    def test_created_with_source(self):
        session = Session.model_validate(
            {
                "id": "1",
                "name": "sessions/1",
                "state": "PLANNING",
                "url": "https://jules.google.com/session/1",
                "sourceContext": {
                    "source": "sources/github-acme-widgets",
                    "githubRepoContext": {"startingBranch": "main"},
                },
            }
        )

        lines = format_created_session(session).splitlines()

        assert lines[0] == "Session Created!"
        assert lines[-1] == "Source: sources/github-acme-widgets (main)"

    def test_unknown_state_kept(self):
        session = Session.model_validate({"id": "1", "name": "sessions/1", "state": "SOMETHING_NEW"})
        assert "State: SOMETHING_NEW" in format_created_session(session)


def test_source_without_repo():
    source = Source(id="x", name="sources/x")
    assert format_source_line(source) == "- [x] sources/x (Repo: unknown)"

"""Tests for the CLI."""

import pytest
from typer.testing import CliRunner

import julesmcp.git_context as git_context
from julesmcp import __version__
from julesmcp.cli import app
from julesmcp.git_context import GitContext

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JULES_API_KEY", raising=False)


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_serve_without_api_key_exits():
    result = runner.invoke(app, ["serve"])
    assert result.exit_code == 1
    assert "JULES_API_KEY environment variable is required." in result.output


def test_check_reports_git_context(monkeypatch):
    monkeypatch.setenv("JULES_API_KEY", "secret")
    monkeypatch.setattr(
        git_context,
        "get_current_git_context",
        lambda cwd=None: GitContext(owner="acme", repo="widgets", branch="dev"),
    )

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0
    assert "sources/github-acme-widgets" in result.output
    assert "dev" in result.output


def test_check_without_repo(monkeypatch):
    monkeypatch.setattr(git_context, "get_current_git_context", lambda cwd=None: None)
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "missing" in result.output

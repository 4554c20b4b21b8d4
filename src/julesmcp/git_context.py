"""Infer the GitHub owner/repo/branch of the local working copy."""

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from julesmcp.resources import github_source_name

logger = logging.getLogger(__name__)

# https://github.com/owner/repo(.git), git@github.com:owner/repo(.git),
# ssh://git@github.com/owner/repo(.git)
GITHUB_REMOTE_RE = re.compile(
    r"(?:^|[@/])github\.com[:/](?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$"
)

GIT_TIMEOUT = 10


@dataclass(frozen=True)
class GitContext:
    """Repository coordinates for binding a session to the current branch."""

    owner: str
    repo: str
    branch: str

    @property
    def source(self) -> str:
        return github_source_name(self.owner, self.repo)


def parse_github_remote(url: str) -> tuple[str, str] | None:
    """Extract ``(owner, repo)`` from a GitHub remote URL, or None."""
    match = GITHUB_REMOTE_RE.search(url.strip())
    if not match:
        return None
    return match.group("owner"), match.group("repo")


def _git(args: list[str], cwd: Path | None) -> str:
    result = subprocess.run(
        ["git", *args],
        capture_output=True,
        text=True,
        check=True,
        timeout=GIT_TIMEOUT,
        cwd=cwd,
    )
    return result.stdout.strip()


def get_current_git_context(cwd: Path | None = None) -> GitContext | None:
    """Best-effort lookup of the ``origin`` remote and current branch.

    Returns None when git is missing, ``cwd`` is not a repository, there is no
    ``origin`` remote, or the remote is not hosted on GitHub.
    """
    try:
        remote_url = _git(["config", "--get", "remote.origin.url"], cwd)
        branch = _git(["rev-parse", "--abbrev-ref", "HEAD"], cwd)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Could not read git context: %s", e)
        return None

    parsed = parse_github_remote(remote_url)
    if parsed is None:
        logger.debug("Remote %r is not a GitHub URL", remote_url)
        return None

    owner, repo = parsed
    return GitContext(owner=owner, repo=repo, branch=branch)

# vcs.py
# Git working copy and GitHub pull requests.
#
# GitRepository shells out to the git executable in the project root.
# Pull requests go straight to the GitHub REST API; owner/repo come from the
# push URL of the configured remote.

import logging
import re
import subprocess
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_REMOTE = re.compile(r"github\.com[:/](.+?)/(.+?)(\.git)?$")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GitCommandError(Exception):
    """Raised when a git command exits non-zero."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        if self.stderr:
            return f"{super().__str__()}: {self.stderr.strip()}"
        return super().__str__()


class RemoteNotFoundError(Exception):
    """Raised when the working copy has no remote with the requested name."""


class RepositoryParseError(Exception):
    """Raised when a remote URL does not point at a GitHub repository."""


# ---------------------------------------------------------------------------
# Working copy
# ---------------------------------------------------------------------------


class GitRepository:
    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _run(self, *args: str) -> str:
        command = ["git", *args]
        logger.debug("Running %s in %s", " ".join(command), self.root)
        try:
            result = subprocess.run(
                command,
                cwd=self.root,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(f"'{' '.join(command)}' failed", stderr=exc.stderr) from exc
        return result.stdout.strip()

    def create_branch(self, name: str) -> None:
        """Create `name` from HEAD and switch to it."""
        self._run("checkout", "-b", name)

    def add_all(self) -> None:
        self._run("add", ".")

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def push(self, branch: str) -> bool:
        """Not wired up: the working copy has no push remote yet. Returns False."""
        logger.info("Skipping push of %s", branch)
        return False

    def push_url(self, remote: str = "origin") -> str:
        try:
            url = self._run("remote", "get-url", "--push", remote)
        except GitCommandError as exc:
            raise RemoteNotFoundError(f"No {remote} remote found") from exc
        if not url:
            raise RemoteNotFoundError(f"No {remote} remote found")
        return url


# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------


def parse_github_repo(url: str) -> tuple[str, str]:
    match = GITHUB_REMOTE.search(url)
    if not match:
        raise RepositoryParseError("Could not parse GitHub repo from remote")
    owner, repo = match.group(1), match.group(2)
    return owner, repo.removesuffix(".git")


def create_pull_request(
    repo: GitRepository,
    title: str,
    body: str,
    head: str,
    base: str,
    token: str | None,
    remote: str = "origin",
) -> dict:
    if not token:
        logger.warning("GITHUB_TOKEN not set, skipping PR creation")
        return {"success": False, "message": "GITHUB_TOKEN not set"}

    owner, name = parse_github_repo(repo.push_url(remote))

    response = httpx.post(
        f"{GITHUB_API_URL}/repos/{owner}/{name}/pulls",
        headers={
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28",
        },
        json={"title": title, "body": body, "head": head, "base": base},
        timeout=30,
    )
    response.raise_for_status()
    return {"success": True, "pr_url": response.json()["html_url"]}

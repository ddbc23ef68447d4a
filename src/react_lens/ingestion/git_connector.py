"""Fetch a public GitHub repository and scan it."""

from __future__ import annotations

import asyncio
import re
import tempfile
from pathlib import Path

from react_lens.analysis.scanner import scan
from react_lens.analysis.schemas import ScanResult
from react_lens.config import Settings

_GITHUB_URL_RE = re.compile(
    r"^https://github\.com/([\w.-]+)/([\w.-]+?)(?:\.git)?$",
    re.IGNORECASE,
)


class RepoFetchError(Exception):
    """Cloning the repository failed or timed out."""


def parse_github_url(repo_url: str) -> str:
    """Validate a GitHub repository URL and return its clone URL."""
    cleaned = repo_url.strip().rstrip("/")
    match = _GITHUB_URL_RE.match(cleaned)
    if not match:
        msg = (
            "Invalid GitHub repository URL. "
            "Expected format: https://github.com/org/repo"
        )
        raise ValueError(msg)
    owner, repo = match.group(1), match.group(2)
    return f"https://github.com/{owner}/{repo}.git"


async def clone_repo(clone_url: str, dest: Path, timeout: int) -> None:
    """Shallow-clone ``clone_url`` into ``dest`` within ``timeout`` seconds."""
    proc = await asyncio.create_subprocess_exec(
        "git",
        "clone",
        "--depth",
        "1",
        clone_url,
        str(dest),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        _, stderr = await asyncio.wait_for(
            proc.communicate(), timeout=timeout
        )
    except TimeoutError:
        proc.kill()
        await proc.wait()
        msg = f"git clone timed out after {timeout}s"
        raise RepoFetchError(msg) from None
    if proc.returncode != 0:
        msg = f"git clone failed: {stderr.decode(errors='replace').strip()}"
        raise RepoFetchError(msg)


async def scan_github_repo(
    repo_url: str, settings: Settings | None = None
) -> ScanResult:
    """Clone a GitHub repository into a temporary directory and scan it.

    The directory is removed afterwards, whatever the outcome.
    """
    cfg = settings or Settings()
    clone_url = parse_github_url(repo_url)
    with tempfile.TemporaryDirectory(prefix="react-lens-") as tmp:
        dest = Path(tmp) / "repo"
        await clone_repo(clone_url, dest, cfg.clone_timeout_seconds)
        return await asyncio.to_thread(
            scan,
            dest,
            None,
            True,
            cfg.skip_directories,
        )

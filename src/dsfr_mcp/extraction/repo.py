"""Upstream DSFR repository sync - shallow sparse checkout at a pinned tag."""

import asyncio
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

SPARSE_PATHS = ["src/dsfr/component", "src/dsfr/core", "src/dsfr/layout"]
GIT_TIMEOUT = 600


class RepoSyncError(RuntimeError):
	"""Raised when a git command fails during repo sync."""
	pass


async def _run_git(args: list[str], cwd: Path | None = None, timeout: int = GIT_TIMEOUT) -> tuple[str, str, int]:
	"""Run a git command and return (stdout, stderr, returncode)."""
	logger.info(f"> git {' '.join(args)}")
	proc = await asyncio.create_subprocess_exec(
		"git", *args,
		stdout=asyncio.subprocess.PIPE,
		stderr=asyncio.subprocess.PIPE,
		cwd=str(cwd) if cwd else None,
	)
	try:
		stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
	except asyncio.TimeoutError:
		proc.kill()
		await proc.wait()
		return ("", f"git {args[0]} timed out after {timeout}s", -1)
	return (
		stdout.decode().strip(),
		stderr.decode().strip(),
		proc.returncode or 0,
	)


async def _git(args: list[str], cwd: Path | None = None) -> str:
	stdout, stderr, rc = await _run_git(args, cwd)
	if rc != 0:
		raise RepoSyncError(f"git {args[0]} failed ({rc}): {stderr}")
	return stdout


async def sync_repo(repo_dir: Path, repo_url: str, tag: str) -> Path:
	"""
	Clone or update the DSFR repo at `tag`.

	An existing checkout is fetched and moved to the tag; anything else at
	repo_dir is replaced by a fresh sparse clone.

	Returns:
		The repository directory
	"""
	repo_dir = Path(repo_dir)
	logger.info(f"Using DSFR {tag}")

	if (repo_dir / ".git").exists():
		logger.info("Updating existing DSFR repo...")
		await _git(["fetch", "--depth=1", "origin", "tag", tag], cwd=repo_dir)
		await _git(["checkout", "FETCH_HEAD"], cwd=repo_dir)
		return repo_dir

	logger.info("Cloning DSFR repo (sparse)...")
	if repo_dir.exists():
		shutil.rmtree(repo_dir)
	repo_dir.parent.mkdir(parents=True, exist_ok=True)
	await _git([
		"clone", "--filter=blob:none", "--sparse", "--depth=1",
		"--branch", tag, repo_url, str(repo_dir),
	])
	await _git(["sparse-checkout", "set", *SPARSE_PATHS], cwd=repo_dir)
	return repo_dir

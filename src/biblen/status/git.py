"""Git client for subprocess-based git interaction."""

import subprocess

from .. import config
from ..telemetry import get_logger, metrics

logger = get_logger(__name__)


class GitClient:
    """Client for querying a git repository via subprocess commands.

    Every failure (missing binary, non-zero exit, timeout, undecodable
    output) is absorbed and reported as ``None``; callers never see an
    exception from git.
    """

    def __init__(
        self,
        cwd: str | None = None,
        executable: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize GitClient.

        Args:
            cwd: Repository directory. If None, uses the process cwd.
            executable: git binary name or path. If None, uses config.GIT_EXECUTABLE.
            timeout: Per-command limit in seconds. If None, uses config.GIT_TIMEOUT_SECONDS.
        """
        self._cwd = cwd
        self._executable = executable or config.GIT_EXECUTABLE
        self._timeout = timeout or config.GIT_TIMEOUT_SECONDS

    def run(self, *args: str) -> str | None:
        """Execute a git command.

        Args:
            *args: Command arguments (e.g., "rev-list", "--count", "A..B")

        Returns:
            Command stdout on success, None on failure.
        """
        cmd = [self._executable, *args]

        try:
            proc = subprocess.run(
                cmd,
                cwd=self._cwd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"git subprocess error: {' '.join(cmd)}: {e}")
            metrics.inc("git.errors", {"command": args[0] if args else ""})
            return None

        if proc.returncode != 0:
            stderr = proc.stderr.decode(errors="replace").strip()
            logger.debug(f"git command failed ({proc.returncode}): {' '.join(cmd)}: {stderr}")
            metrics.inc("git.errors", {"command": args[0] if args else ""})
            return None

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"git output is not UTF-8: {' '.join(cmd)}: {e}")
            metrics.inc("git.errors", {"command": args[0] if args else ""})
            return None

    def fetch(self) -> bool:
        """Fetch from the default remote, quietly.

        Returns:
            True on success, False on failure.
        """
        return self.run("fetch", "--quiet") is not None

    def count_commits(self, revision_range: str) -> int | None:
        """Count commits in a revision range.

        Args:
            revision_range: Range such as "origin/main..HEAD"

        Returns:
            Commit count, or None if git failed or printed something else.
        """
        output = self.run("rev-list", "--count", revision_range)
        if output is None:
            return None
        try:
            count = int(output.strip())
        except ValueError:
            logger.warning(f"Failed to parse rev-list count: {output!r}")
            return None
        if count < 0:
            return None
        return count

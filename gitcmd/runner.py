import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Optional, Protocol, Sequence

from . import config
from .errors import ExecutionError
from .history import record_invocation
from .settings import Settings

logger = logging.getLogger(__name__)


class Runner(Protocol):
    """Runs git with an argument list. The program name is supplied by the runner."""

    def run(self, args: Sequence[str]) -> None: ...


class SubprocessRunner:
    def __init__(
        self,
        git_binary: str = config.GIT_BINARY,
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
        history_file: Optional[Path] = None,
    ):
        self.git_binary = git_binary
        self.cwd = cwd
        self.env = dict(env or {})
        self.history_file = history_file

    def _child_env(self) -> Optional[Dict[str, str]]:
        if not self.env:
            return None
        merged = dict(os.environ)
        merged.update(self.env)
        return merged

    def _record(self, args: Sequence[str], returncode: int) -> None:
        if not self.history_file:
            return
        # A history write error never replaces the git result
        try:
            record_invocation(self.history_file, args, self.cwd, returncode)
        except OSError as exc:
            logger.warning("Could not write git history to %s: %s", self.history_file, exc)

    def run(self, args: Sequence[str]) -> None:
        cmd = [self.git_binary] + list(args)
        logger.debug("Running %s (cwd=%s)", cmd, self.cwd)
        try:
            result = subprocess.run(
                cmd, cwd=self.cwd, env=self._child_env(), capture_output=True, text=True
            )
        except FileNotFoundError as exc:
            self._record(args, 127)
            raise ExecutionError(cmd, 127, str(exc)) from exc

        self._record(args, result.returncode)
        if result.returncode != 0:
            logger.warning("git exited with %s: %s", result.returncode, " ".join(cmd))
            raise ExecutionError(cmd, result.returncode, result.stderr or "")


def build_runner(settings: Settings) -> SubprocessRunner:
    return SubprocessRunner(
        git_binary=settings.git_binary,
        cwd=settings.cwd,
        env=settings.env,
        history_file=settings.history_file,
    )

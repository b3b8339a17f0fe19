from typing import List, Sequence


class GitCommandError(Exception):
    """Base class for every error raised by gitcmd."""


class ValidationError(GitCommandError, ValueError):
    """A request was rejected before git was invoked."""

    def __init__(self, operation: str, reason: str):
        super().__init__(operation, reason)
        self.operation = operation
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.operation}: {self.reason}"


class ExecutionError(GitCommandError, RuntimeError):
    """git was invoked and did not succeed.

    ``command`` is the full command line, program name included.
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command: List[str] = list(command)
        super().__init__(self.command, returncode, stderr)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        return self.stderr.strip() or f"git command failed: {' '.join(self.command)}"

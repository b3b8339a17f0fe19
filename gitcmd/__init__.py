"""
gitcmd: build git command lines and run them.

Each operation validates its inputs, assembles the argument list for the git
binary and hands it to a runner. Output is never parsed; a failed run raises
``ExecutionError`` and a rejected request raises ``ValidationError``.
"""

from .commands import GitCommands  # noqa: F401
from .errors import ExecutionError, GitCommandError, ValidationError  # noqa: F401
from .runner import Runner, SubprocessRunner, build_runner  # noqa: F401
from .settings import Settings, load_settings  # noqa: F401

__all__ = [
    "GitCommands",
    "GitCommandError",
    "ValidationError",
    "ExecutionError",
    "Runner",
    "SubprocessRunner",
    "build_runner",
    "Settings",
    "load_settings",
]

from typing import List, Optional, Sequence

import pytest

from gitcmd.commands import GitCommands
from gitcmd.errors import ExecutionError


class RecordingRunner:
    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[List[str]] = []
        self.error = error

    def run(self, args: Sequence[str]) -> None:
        self.calls.append(list(args))
        if self.error:
            raise self.error


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def git(runner: RecordingRunner) -> GitCommands:
    return GitCommands(runner=runner)


@pytest.fixture
def failing_runner() -> RecordingRunner:
    return RecordingRunner(error=ExecutionError(["git", "status"], 128, "fatal: not a git repository"))

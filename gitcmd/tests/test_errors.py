import copy
import pickle

from gitcmd.errors import ExecutionError, ValidationError


def test_validation_error_survives_pickle_and_copy():
    err = ValidationError("merge", "no branch specified")
    for clone in (pickle.loads(pickle.dumps(err)), copy.copy(err)):
        assert isinstance(clone, ValidationError)
        assert clone.operation == "merge"
        assert clone.reason == "no branch specified"
        assert str(clone) == "merge: no branch specified"


def test_execution_error_survives_pickle_and_copy():
    err = ExecutionError(["git", "fetch", "origin", "--all"], 128, "fatal: 'origin' does not appear to be a git repository\n")
    for clone in (pickle.loads(pickle.dumps(err)), copy.copy(err)):
        assert isinstance(clone, ExecutionError)
        assert clone.command == ["git", "fetch", "origin", "--all"]
        assert clone.returncode == 128
        assert str(clone) == "fatal: 'origin' does not appear to be a git repository"


def test_execution_error_message_without_stderr():
    err = ExecutionError(["git", "status"], 1)
    assert str(err) == "git command failed: git status"

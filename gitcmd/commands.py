"""Argument builders for git operations and the runner-backed command facade.

Every ``*_args`` function validates its inputs and returns the argument list
that would be handed to git, without running anything. ``GitCommands`` wraps
each builder and passes the result to a runner exactly once.

Messages and templates are wrapped in single quotes verbatim; embedded single
quotes are not escaped.
"""

import logging
from typing import List, Optional

from .errors import ValidationError
from .runner import Runner, build_runner
from .settings import load_settings

logger = logging.getLogger(__name__)


def _require(operation: str, **params: str) -> None:
    for name, value in params.items():
        if not value:
            logger.debug("Rejected %s: no %s specified", operation, name)
            raise ValidationError(operation, f"no {name} specified")


def init_args(directory: str = "", template: str = "") -> List[str]:
    args = ["init"]
    if template:
        args.append(f"--template='{template}'")
    if directory:
        args.append(directory)
    return args


def clone_args(url: str, directory: str = "") -> List[str]:
    _require("clone", url=url)
    args = ["clone", url]
    if directory:
        args.append(directory)
    return args


def add_args(*files: str) -> List[str]:
    """All files are added when none are given."""
    args = ["add"]
    if not files:
        args.append(".")
    else:
        args.extend(files)
    return args


def remove_args(recursive: bool, *files: str) -> List[str]:
    """Without files, removal is only allowed recursively from the repository root."""
    args = ["rm"]
    if not files and not recursive:
        logger.debug("Rejected remove: no files and not recursive")
        raise ValidationError("remove", "called without specifying files or recursive")
    if not files:
        args.extend(["-r", "."])
    else:
        args.extend(files)
    return args


def commit_args(message: str = "") -> List[str]:
    args = ["commit"]
    if message:
        args.append(f"--message='{message}'")
    else:
        args.extend(["--allow-empty-message", "--message=''"])
    return args


def branch_args(name: str) -> List[str]:
    _require("branch", name=name)
    return ["branch", name]


def delete_branch_args(name: str) -> List[str]:
    _require("delete_branch", name=name)
    return ["branch", "-d", name]


def checkout_args(branch: str) -> List[str]:
    _require("checkout", branch=branch)
    return ["checkout", branch]


def tag_args(name: str, message: str = "") -> List[str]:
    """Annotated tag; ``-a`` is used when there is no message."""
    _require("tag", name=name)
    args = ["tag"]
    if message:
        args.append(f"-m='{message}'")
    else:
        args.append("-a")
    args.append(name)
    return args


def delete_tag_args(name: str) -> List[str]:
    _require("delete_tag", name=name)
    return ["tag", "-d", name]


def merge_args(branch: str, message: str = "", fastforward: bool = True) -> List[str]:
    _require("merge", branch=branch)
    args = ["merge", f"-m='{message}'"]
    if not fastforward:
        args.append("--no-ff")
    args.append(branch)
    return args


def remote_add_args(name: str, location: str) -> List[str]:
    _require("remote_add", name=name, location=location)
    return ["remote", "add", name, location]


def remote_remove_args(name: str) -> List[str]:
    _require("remote_remove", name=name)
    return ["remote", "rm", name]


def remote_set_url_args(name: str, location: str) -> List[str]:
    _require("remote_set_url", name=name, location=location)
    return ["remote", "set-url", name, location]


def fetch_args(remote: str, *branches: str) -> List[str]:
    """All branches of the remote are fetched when none are given."""
    _require("fetch", remote=remote)
    args = ["fetch", remote]
    if not branches:
        args.append("--all")
    else:
        args.extend(branches)
    return args


def pull_args(remote: str, *branches: str) -> List[str]:
    _require("pull", remote=remote)
    return ["pull", remote] + list(branches)


class GitCommands:
    """Runs git operations through an injected runner.

    When no runner is given, one is built from ``load_settings()``.
    """

    def __init__(self, runner: Optional[Runner] = None):
        self.runner = runner if runner is not None else build_runner(load_settings())

    def _run(self, args: List[str]) -> None:
        logger.debug("git %s", " ".join(args))
        self.runner.run(args)

    def init(self, directory: str = "", template: str = "") -> None:
        self._run(init_args(directory, template))

    def clone(self, url: str, directory: str = "") -> None:
        self._run(clone_args(url, directory))

    def add(self, *files: str) -> None:
        self._run(add_args(*files))

    def remove(self, recursive: bool, *files: str) -> None:
        self._run(remove_args(recursive, *files))

    def commit(self, message: str = "") -> None:
        self._run(commit_args(message))

    def branch(self, name: str) -> None:
        self._run(branch_args(name))

    def delete_branch(self, name: str) -> None:
        self._run(delete_branch_args(name))

    def checkout(self, branch: str) -> None:
        self._run(checkout_args(branch))

    def tag(self, name: str, message: str = "") -> None:
        self._run(tag_args(name, message))

    def delete_tag(self, name: str) -> None:
        self._run(delete_tag_args(name))

    def merge(self, branch: str, message: str = "", fastforward: bool = True) -> None:
        self._run(merge_args(branch, message, fastforward))

    def remote_add(self, name: str, location: str) -> None:
        self._run(remote_add_args(name, location))

    def remote_remove(self, name: str) -> None:
        self._run(remote_remove_args(name))

    def remote_set_url(self, name: str, location: str) -> None:
        self._run(remote_set_url_args(name, location))

    def fetch(self, remote: str, *branches: str) -> None:
        self._run(fetch_args(remote, *branches))

    def pull(self, remote: str, *branches: str) -> None:
        self._run(pull_args(remote, *branches))

"""Core binary wrapper interfaces.

This module defines the building blocks for turning a binary into a
pipeline plugin:
    - PluginConfig: Capabilities a configuration must provide to be run
    - ExecStyle: How the resolved binary is finally executed
    - RunnerState: Lifecycle states of a single run
    - expand_env: Expand $VAR / ${VAR} references in an argument
"""

import os
import re
from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class PluginConfig(Protocol):
    """Capabilities any wrapped-binary plugin configuration must provide.

    The runner only ever talks to a configuration through these methods,
    in this order: validate, setup, then binary / arguments / environment.
    """

    def validate(self) -> None:
        """Check the configuration before setup. Must not touch the filesystem.

        Raises:
            Exception: Any error marks the configuration invalid.
        """
        ...

    def setup(self) -> None:
        """Put every file the binary needs in place.

        Raises:
            Exception: Any error aborts the run.
        """
        ...

    def binary(self) -> str:
        """Return the absolute path of the binary that takes over.

        Environment variables like $HOME are not expanded here.
        """
        ...

    def arguments(self) -> list[str]:
        """Return the binary's arguments.

        Environment variable references are expanded by the runner right
        before execution, so they stay unexpanded in logs.
        """
        ...

    def environment(self) -> dict[str, str]:
        """Return extra environment variables for the binary."""
        ...


class ExecStyle(str, Enum):
    """How the runner hands control to the binary.

    Attributes:
        SYSCALL: Replace the current process with the binary. Output,
            logging and the exit code all belong to the binary from then on.
        SUBPROCESS: Run the binary as a child process. Output is buffered
            until it exits, not streamed.
    """

    SYSCALL = "syscall"
    SUBPROCESS = "subprocess"


class RunnerState(str, Enum):
    """Lifecycle states for a single run.

    State transitions:
        CREATED -> VALIDATED: validate() succeeds
        VALIDATED -> SET_UP: setup() succeeds
        SET_UP -> RESOLVED: binary, arguments and environment read
        RESOLVED -> EXECUTING: environment applied, arguments expanded
        EXECUTING -> SUCCEEDED: binary ran (or replaced this process)
        any -> FAILED: any error, never retried
    """

    CREATED = "created"
    VALIDATED = "validated"
    SET_UP = "set_up"
    RESOLVED = "resolved"
    EXECUTING = "executing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ${NAME}, an unclosed ${, $ plus one special character, or $NAME
_ENV_VAR_PATTERN = re.compile(
    r"\$(?:\{([^}]*)\}|(\{)|([*#$@!?\-0-9])|([A-Za-z0-9_]+))"
)


def expand_env(value: str) -> str:
    """Expand $VAR and ${VAR} references with environment variables.

    Unset variables expand to an empty string, the same as a shell would.
    A digit or shell special character after $ names a one-character
    variable, so "$1x" expands $1 and keeps the x. An unclosed "${" is
    dropped and the text after it is kept.

    Example:
        >>> os.environ["HOME"] = "/root"
        >>> expand_env("$HOME/.ssh/id_rsa")
        "/root/.ssh/id_rsa"
    """

    def replacer(match: re.Match[str]) -> str:
        braced, unclosed, special, name = match.groups()
        if unclosed is not None:
            return ""
        var_name = next(v for v in (braced, special, name) if v is not None)
        return os.environ.get(var_name, "")

    return _ENV_VAR_PATTERN.sub(replacer, value)

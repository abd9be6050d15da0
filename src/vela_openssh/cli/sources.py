"""Value source chains for plugin parameters.

Pipeline parameters reach the plugins as command-line flags, as one of
several (partly legacy) environment variables, or as files mounted under
/vela/parameters and /vela/secrets. A ValueSource resolves one parameter
across those in precedence order:

    flag > env vars (in listed order) > parameter file > secret file
"""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

PARAMETERS_DIR = Path("/vela/parameters")
SECRETS_DIR = Path("/vela/secrets")

LIST_SEPARATOR = ","


@dataclass(frozen=True)
class ValueSource:
    """Where to look for one parameter besides its command-line flag.

    Attributes:
        envvars: Environment variables to check, highest priority first.
        files: Files to read, highest priority first.
    """

    envvars: tuple[str, ...] = ()
    files: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def for_plugin(
        cls,
        plugin: str,
        name: str,
        *envvars: str,
        parameters_dir: Path = PARAMETERS_DIR,
        secrets_dir: Path = SECRETS_DIR,
    ) -> "ValueSource":
        """Build the standard chain for ``name`` of ``plugin``.

        Example:
            ValueSource.for_plugin("vela-scp", "target", "PARAMETER_TARGET", "TARGET")
            # env PARAMETER_TARGET, env TARGET,
            # /vela/parameters/vela-scp/target, /vela/secrets/vela-scp/target
        """
        return cls(
            envvars=tuple(envvars),
            files=(parameters_dir / plugin / name, secrets_dir / plugin / name),
        )

    def lookup(self, environ: Mapping[str, str] | None = None) -> str | None:
        """Return the first value found in the environment or files.

        The first environment variable that is set wins, even when empty.
        File contents are returned as read, trailing newline included.
        """
        env = os.environ if environ is None else environ
        for var in self.envvars:
            if var in env:
                return env[var]

        for path in self.files:
            if path.is_file():
                return path.read_text()

        return None


def resolve_string(
    flag_value: str | None,
    source: ValueSource,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve a single-valued parameter, empty string when unset."""
    if flag_value:
        return flag_value
    return source.lookup(environ) or ""


def resolve_list(
    flag_values: Sequence[str] | None,
    source: ValueSource,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Resolve a list parameter.

    Repeated flags are taken as-is. Values from the environment or files
    are comma separated.
    """
    if flag_values:
        return list(flag_values)

    value = source.lookup(environ)
    if not value:
        return []
    return [item.strip() for item in value.split(LIST_SEPARATOR) if item.strip()]

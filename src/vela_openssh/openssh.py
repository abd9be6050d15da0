"""Shared OpenSSH constants and helpers.

Both plugins wrap binaries from the same OpenSSH / sshpass installation, so
the search locations, default flags, secret staging and version metadata
live here.

Functions:
    - create_restricted_file: Stage a secret into an owner-only temp file
    - locate_binaries: Find required binaries in the fixed search locations

Classes:
    - VersionInfo: Version and build metadata reported by the plugins
"""

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import structlog

from vela_openssh.errors import PluginError, PluginErrorCode
from vela_openssh.filesystem import FileSystem

logger = structlog.get_logger()

SCP_BINARY = "scp"
SSH_BINARY = "ssh"
SSHPASS_BINARY = "sshpass"

MISSING_BINARY_CODES: dict[str, PluginErrorCode] = {
    SCP_BINARY: PluginErrorCode.MISSING_SCP,
    SSH_BINARY: PluginErrorCode.MISSING_SSH,
    SSHPASS_BINARY: PluginErrorCode.MISSING_SSHPASS,
}

# The plugin image controls where binaries are installed, so a fixed list is
# searched instead of $PATH. "." comes first to pick up local builds.
BIN_SEARCH_LOCATIONS: list[str] = [".", "/usr/local/bin", "/usr/bin", "/bin"]

# Pipelines can't answer host key prompts. Replaced entirely by user flags.
DEFAULT_SSH_FLAGS: list[str] = [
    "-o StrictHostKeyChecking=no",
    "-o UserKnownHostsFile=/dev/null",
]

# scp runs ssh underneath and needs the same host key behavior.
DEFAULT_SCP_FLAGS: list[str] = DEFAULT_SSH_FLAGS

DEFAULT_SSHPASS_FLAGS: list[str] = []

TEMP_FILE_DIRECTORY = "/tmp"
TEMP_IDENTITY_FILE_PREFIX = "vela-plugin-openssh-identity-file-"
TEMP_PASSWORD_PREFIX = "vela-plugin-openssh-password-file-"  # noqa: S105
TEMP_PASSPHRASE_PREFIX = "vela-plugin-openssh-passphrase-file-"  # noqa: S105

# Read-write only for the user who creates the file.
TEMP_FILE_PERMISSIONS = 0o600


def create_restricted_file(fs: FileSystem, prefix: str, contents: str) -> str:
    """Write ``contents`` into a new owner-only file in the temp directory.

    Args:
        fs: Filesystem handle to create the file on.
        prefix: Name prefix identifying what kind of secret is staged.
        contents: Raw secret, written verbatim as the whole file body.

    Returns:
        Path of the staged file.

    Raises:
        PluginError: STAGING_FAILED if the file can't be created, written or
            restricted. A file that was already created is removed first.
    """
    try:
        path, handle = fs.create_temp(TEMP_FILE_DIRECTORY, prefix)
    except OSError as e:
        raise PluginError(
            code=PluginErrorCode.STAGING_FAILED,
            message=f"couldn't create temporary file: {e}",
            cause=e,
        ) from e

    step = "inject temporary file contents"
    try:
        with handle:
            handle.write(contents.encode())
        step = "set file permissions"
        fs.chmod(path, TEMP_FILE_PERMISSIONS)
    except OSError as e:
        _discard(fs, path)
        raise PluginError(
            code=PluginErrorCode.STAGING_FAILED,
            message=f"couldn't {step}: {e}",
            cause=e,
        ) from e

    return path


def _discard(fs: FileSystem, path: str) -> None:
    try:
        fs.remove(path)
    except OSError as e:
        logger.warning("staged_file_cleanup_failed", path=path, error=str(e))


def locate_binaries(
    fs: FileSystem,
    names: Sequence[str],
    locations: Iterable[str] = BIN_SEARCH_LOCATIONS,
) -> dict[str, str]:
    """Find each binary in the first search location that contains it.

    Args:
        fs: Filesystem handle to search.
        names: Binary names that must all be found.
        locations: Directories to search, in priority order.

    Returns:
        Mapping of binary name to resolved path.

    Raises:
        PluginError: The binary-specific MISSING_* code for the first name
            (in ``names`` order) that wasn't found anywhere.
    """
    found: dict[str, str] = {}
    for location in locations:
        for name in names:
            candidate = f"{location}/{name}"
            if name not in found and fs.exists(candidate):
                found[name] = candidate

    for name in names:
        if name not in found:
            raise PluginError(
                code=MISSING_BINARY_CODES.get(name, PluginErrorCode.MISSING_BINARY),
                message=f"can't find {name} binary",
            )

    return found


@dataclass(frozen=True)
class VersionInfo:
    """Version and build metadata reported by the plugins.

    Attributes:
        plugin: Version of this package.
        openssh: Version of the bundled OpenSSH binaries.
        sshpass: Version of the bundled sshpass binary.
        git_commit: Commit the plugin was built from.
        dirty: Whether the build had uncommitted modifications.
    """

    plugin: str = "unknown"
    openssh: str = "unknown"
    sshpass: str = "unknown"
    git_commit: str = "unknown"
    dirty: bool = False

    @classmethod
    def detect(cls) -> "VersionInfo":
        """Build version info from package metadata and the image environment.

        The image build bakes OpenSSH / sshpass versions and the commit into
        VELA_OPENSSH_VERSION, VELA_SSHPASS_VERSION, VELA_OPENSSH_GIT_COMMIT
        and VELA_OPENSSH_DIRTY_BUILD.
        """
        try:
            from importlib.metadata import version

            plugin_version = version("vela-openssh")
        except Exception:
            plugin_version = "unknown"

        return cls(
            plugin=plugin_version,
            openssh=os.environ.get("VELA_OPENSSH_VERSION", "unknown"),
            sshpass=os.environ.get("VELA_SSHPASS_VERSION", "unknown"),
            git_commit=os.environ.get("VELA_OPENSSH_GIT_COMMIT", "unknown"),
            dirty=os.environ.get("VELA_OPENSSH_DIRTY_BUILD", "").lower()
            in ("1", "true", "yes"),
        )

    def summary(self) -> str:
        """Return the one-line version string shown by ``--version``."""
        return (
            f"Plugin: {self.plugin} - OpenSSH: {self.openssh} - "
            f"SSHPass: {self.sshpass}"
        )

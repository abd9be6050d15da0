"""scp plugin configuration.

Wraps the scp binary to copy files between local and remote filesystems.
"""

from typing import ClassVar

from pydantic import Field

from vela_openssh.errors import PluginError, PluginErrorCode
from vela_openssh.openssh import (
    DEFAULT_SCP_FLAGS,
    SCP_BINARY,
    SSH_BINARY,
    SSHPASS_BINARY,
)
from vela_openssh.plugins.base import OpenSSHConfig


class ScpConfig(OpenSSHConfig):
    """Configuration for the scp plugin.

    Attributes:
        source: Files to copy, local or remote. Required.
        target: Where the source files end up, local or remote. Required.
        scp_flags: Replaces the default scp flags when set.

    Example:
        config = ScpConfig(source=["a.txt"], target="user@host:~")
        config.validate()
        config.setup()
        config.arguments()
        # ["/usr/bin/scp", "-o StrictHostKeyChecking=no", ..., "a.txt", "user@host:~"]
    """

    plugin_name: ClassVar[str] = "vela-scp"
    primary_binary: ClassVar[str] = SCP_BINARY
    required_binaries: ClassVar[tuple[str, ...]] = (
        SCP_BINARY,
        SSH_BINARY,
        SSHPASS_BINARY,
    )
    environment_prefix: ClassVar[str] = "VELA_SCP_PLUGIN"

    source: list[str] = Field(default_factory=list)
    target: str = ""
    scp_flags: list[str] = Field(default_factory=list)

    def validate(self) -> None:
        """Check the required parameters and conflicting authentication.

        Paths and flags aren't inspected; scp reports those itself.

        Raises:
            PluginError: MISSING_SOURCE, MISSING_TARGET or AMBIGUOUS_AUTH.
        """
        if not self.source:
            raise PluginError(
                code=PluginErrorCode.MISSING_SOURCE,
                message="missing source parameter",
                plugin_name=self.plugin_name,
            )

        if not self.target:
            raise PluginError(
                code=PluginErrorCode.MISSING_TARGET,
                message="missing target parameter",
                plugin_name=self.plugin_name,
            )

        if self.ssh_password and self.ssh_passphrase:
            raise PluginError(
                code=PluginErrorCode.AMBIGUOUS_AUTH,
                message="can't use both password and passphrase for authentication",
                plugin_name=self.plugin_name,
            )

    def arguments(self) -> list[str]:
        """Return the full argument vector, starting with the binary."""
        args = self._leading_arguments()
        args.extend(self.scp_flags or DEFAULT_SCP_FLAGS)
        args.extend(self._identity_arguments())
        args.extend(self.source)
        args.append(self.target)
        return args

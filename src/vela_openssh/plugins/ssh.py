"""ssh plugin configuration.

Wraps the ssh binary to run commands on a remote system.
"""

from typing import ClassVar

from pydantic import Field

from vela_openssh.errors import PluginError, PluginErrorCode
from vela_openssh.openssh import DEFAULT_SSH_FLAGS, SSH_BINARY, SSHPASS_BINARY
from vela_openssh.plugins.base import OpenSSHConfig

COMMAND_SEPARATOR = " && "


class SshConfig(OpenSSHConfig):
    """Configuration for the ssh plugin.

    Attributes:
        destination: Machine to run the commands on. Required.
        command: Commands to run, in order. Required. They are joined with
            `&&` into one remote invocation, so a failing command stops
            the ones after it.
        ssh_flags: Replaces the default ssh flags when set.
    """

    plugin_name: ClassVar[str] = "vela-ssh"
    primary_binary: ClassVar[str] = SSH_BINARY
    required_binaries: ClassVar[tuple[str, ...]] = (SSH_BINARY, SSHPASS_BINARY)
    environment_prefix: ClassVar[str] = "VELA_SSH_PLUGIN"

    destination: str = ""
    command: list[str] = Field(default_factory=list)
    ssh_flags: list[str] = Field(default_factory=list)

    def validate(self) -> None:
        """Check the required parameters and conflicting authentication.

        Raises:
            PluginError: MISSING_DESTINATION, MISSING_COMMAND or AMBIGUOUS_AUTH.
        """
        if not self.destination:
            raise PluginError(
                code=PluginErrorCode.MISSING_DESTINATION,
                message="missing destination parameter",
                plugin_name=self.plugin_name,
            )

        if not self.command:
            raise PluginError(
                code=PluginErrorCode.MISSING_COMMAND,
                message="missing command parameter",
                plugin_name=self.plugin_name,
            )

        if self.ssh_password and self.ssh_passphrase:
            raise PluginError(
                code=PluginErrorCode.AMBIGUOUS_AUTH,
                message="can't use both password and passphrase for authentication",
                plugin_name=self.plugin_name,
            )

    def arguments(self) -> list[str]:
        args = self._leading_arguments()
        args.extend(self.ssh_flags or DEFAULT_SSH_FLAGS)
        args.extend(self._identity_arguments())
        args.append(self.destination)
        args.append(COMMAND_SEPARATOR.join(self.command))
        return args

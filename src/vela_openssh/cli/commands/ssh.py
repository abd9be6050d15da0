"""vela-ssh command.

Runs commands on a remote system with ssh.
"""

from typing import Annotated

import typer

from vela_openssh.cli.commands.common import (
    CIOption,
    ExecStyleOption,
    IdentityFileContentsOption,
    IdentityFilePathOption,
    PassphraseOption,
    PasswordOption,
    SSHPassFlagOption,
    VersionOption,
    run_plugin,
)
from vela_openssh.cli.sources import ValueSource, resolve_list, resolve_string
from vela_openssh.openssh import VersionInfo
from vela_openssh.plugins.ssh import SshConfig

PLUGIN = "vela-ssh"


def ssh_command(
    destination: Annotated[
        str | None,
        typer.Option(
            "--destination",
            help="Destination parameter for ssh (see manual 'man ssh')",
        ),
    ] = None,
    command: Annotated[
        list[str] | None,
        typer.Option(
            "--command",
            help="Command to execute on the remote system, repeatable",
        ),
    ] = None,
    identity_file_path: IdentityFilePathOption = None,
    identity_file_contents: IdentityFileContentsOption = None,
    ssh_flag: Annotated[
        list[str] | None,
        typer.Option(
            "--ssh-flag",
            help="Additional ssh flag, repeatable",
        ),
    ] = None,
    sshpass_password: PasswordOption = None,
    sshpass_passphrase: PassphraseOption = None,
    sshpass_flag: SSHPassFlagOption = None,
    exec_style: ExecStyleOption = None,
    ci: CIOption = None,
    version: VersionOption = False,
) -> None:
    """Vela plugin wrapping the ssh binary.

    Every option can also come from its PARAMETER_* environment variable or
    from /vela/parameters/vela-ssh/<option> and /vela/secrets/vela-ssh/<option>.
    """
    config = SshConfig(
        destination=resolve_string(
            destination,
            ValueSource.for_plugin(
                PLUGIN,
                "destination",
                "PARAMETER_DESTINATION",
                "DESTINATION",
                "PARAMETER_HOST",
            ),
        ),
        command=resolve_list(
            command,
            ValueSource.for_plugin(
                PLUGIN,
                "command",
                "PARAMETER_COMMAND",
                "COMMAND",
                "PARAMETER_SCRIPT",
                "SCRIPT",
            ),
        ),
        identity_file_path=resolve_list(
            identity_file_path,
            ValueSource.for_plugin(
                PLUGIN,
                "identity-file.path",
                "PARAMETER_IDENTITY_FILE_PATH",
                "IDENTITY_FILE_PATH",
                "PARAMETER_SSH_KEY_PATH",
                "SSH_KEY_PATH",
            ),
        ),
        identity_file_contents=resolve_string(
            identity_file_contents,
            ValueSource.for_plugin(
                PLUGIN,
                "identity-file.contents",
                "PARAMETER_IDENTITY_FILE_CONTENTS",
                "IDENTITY_FILE_CONTENTS",
                "PARAMETER_SSH_KEY",
                "SSH_KEY",
            ),
        ),
        ssh_flags=resolve_list(
            ssh_flag,
            ValueSource.for_plugin(
                PLUGIN, "ssh.flag", "PARAMETER_SSH_FLAG", "SSH_FLAG"
            ),
        ),
        ssh_password=resolve_string(
            sshpass_password,
            ValueSource.for_plugin(
                PLUGIN,
                "sshpass.password",
                "PARAMETER_SSHPASS_PASSWORD",
                "PARAMETER_PASSWORD",
                "SSHPASS_PASSWORD",
                "PASSWORD",
            ),
        ),
        ssh_passphrase=resolve_string(
            sshpass_passphrase,
            ValueSource.for_plugin(
                PLUGIN,
                "sshpass.passphrase",
                "PARAMETER_SSHPASS_PASSPHRASE",
                "SSHPASS_PASSPHRASE",
            ),
        ),
        sshpass_flags=resolve_list(
            sshpass_flag,
            ValueSource.for_plugin(
                PLUGIN, "sshpass.flag", "PARAMETER_SSHPASS_FLAG", "SSHPASS_FLAG"
            ),
        ),
        version=VersionInfo.detect(),
    )

    run_plugin(
        config,
        exec_style=resolve_string(
            exec_style,
            ValueSource.for_plugin(PLUGIN, "exec-style", "PARAMETER_EXEC_STYLE"),
        ),
        ci=resolve_string(ci, ValueSource(envvars=("PARAMETER_CI", "CI"))),
        banner="vela_ssh_plugin",
    )

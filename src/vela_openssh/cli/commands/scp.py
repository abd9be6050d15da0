"""vela-scp command.

Copies files between local and remote filesystems with scp.
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
from vela_openssh.plugins.scp import ScpConfig

PLUGIN = "vela-scp"


def scp_command(
    source: Annotated[
        list[str] | None,
        typer.Option(
            "--source",
            help="Source parameter for scp, repeatable (see manual 'man scp')",
        ),
    ] = None,
    target: Annotated[
        str | None,
        typer.Option(
            "--target",
            help="Target parameter for scp (see manual 'man scp')",
        ),
    ] = None,
    identity_file_path: IdentityFilePathOption = None,
    identity_file_contents: IdentityFileContentsOption = None,
    scp_flag: Annotated[
        list[str] | None,
        typer.Option(
            "--scp-flag",
            help="Additional scp flag, repeatable",
        ),
    ] = None,
    sshpass_password: PasswordOption = None,
    sshpass_passphrase: PassphraseOption = None,
    sshpass_flag: SSHPassFlagOption = None,
    exec_style: ExecStyleOption = None,
    ci: CIOption = None,
    version: VersionOption = False,
) -> None:
    """Vela plugin wrapping the scp binary.

    Every option can also come from its PARAMETER_* environment variable or
    from /vela/parameters/vela-scp/<option> and /vela/secrets/vela-scp/<option>.
    """
    config = ScpConfig(
        source=resolve_list(
            source,
            ValueSource.for_plugin(PLUGIN, "source", "PARAMETER_SOURCE", "SOURCE"),
        ),
        target=resolve_string(
            target,
            ValueSource.for_plugin(PLUGIN, "target", "PARAMETER_TARGET", "TARGET"),
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
        scp_flags=resolve_list(
            scp_flag,
            ValueSource.for_plugin(
                PLUGIN, "scp.flag", "PARAMETER_SCP_FLAG", "SCP_FLAG"
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
        banner="vela_scp_plugin",
    )

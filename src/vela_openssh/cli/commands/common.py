"""Options and startup shared by the plugin commands."""

from typing import Annotated

import structlog
import typer

from vela_openssh.binarywrapper import ExecStyle, Plugin
from vela_openssh.cli.log_setup import configure_logging
from vela_openssh.errors import PluginError
from vela_openssh.openssh import VersionInfo
from vela_openssh.plugins.base import OpenSSHConfig

logger = structlog.get_logger()

CODE_URL = "https://github.com/go-vela/vela-openssh"
DOCS_URL = "https://go-vela.github.io/docs/plugins/registry/pipeline"
REGISTRY_URL = "https://hub.docker.com/r/target"


def version_callback(value: bool) -> None:
    """Print plugin and bundled binary versions, then exit."""
    if value:
        typer.echo(VersionInfo.detect().summary())
        raise typer.Exit()


IdentityFilePathOption = Annotated[
    list[str] | None,
    typer.Option(
        "--identity-file-path",
        help="Path to an identity file, repeatable (see manual 'man ssh')",
    ),
]
IdentityFileContentsOption = Annotated[
    str | None,
    typer.Option(
        "--identity-file-contents",
        help="Contents of an identity file (not the path, the real deal)",
    ),
]
PasswordOption = Annotated[
    str | None,
    typer.Option(
        "--sshpass-password",
        help="Password for the destination (used with sshpass)",
    ),
]
PassphraseOption = Annotated[
    str | None,
    typer.Option(
        "--sshpass-passphrase",
        help="Passphrase for the identity file (used with sshpass)",
    ),
]
SSHPassFlagOption = Annotated[
    list[str] | None,
    typer.Option(
        "--sshpass-flag",
        help="Additional sshpass flag, repeatable",
    ),
]
ExecStyleOption = Annotated[
    str | None,
    typer.Option(
        "--exec-style",
        help="How to run the binary: syscall (replace this process) or subprocess",
    ),
]
CIOption = Annotated[
    str | None,
    typer.Option(
        "--ci",
        help="Set the CI environment (if $CI is set output tries to be friendlier)",
    ),
]
VersionOption = Annotated[
    bool,
    typer.Option(
        "--version",
        help="Show version information and exit",
        callback=version_callback,
        is_eager=True,
    ),
]


def run_plugin(
    config: OpenSSHConfig,
    exec_style: str,
    ci: str,
    banner: str,
) -> None:
    """Log startup information and run ``config`` through the binary wrapper.

    Args:
        config: Fully resolved plugin configuration.
        exec_style: ExecStyle value, syscall when empty.
        ci: Any non-empty value switches to CI-friendly log output.
        banner: Event name logged at startup.

    Raises:
        typer.Exit: With status 1 if the plugin fails.
    """
    configure_logging(ci=bool(ci))

    version = config.version
    if version.dirty:
        logger.warning("binary_built_from_modified_commit", commit=version.git_commit)

    short_name = config.plugin_name.removeprefix("vela-")
    logger.info(
        banner,
        code=CODE_URL,
        docs=f"{DOCS_URL}/{short_name}",
        registry=f"{REGISTRY_URL}/{config.plugin_name}",
        commit=version.git_commit,
        version_plugin=version.plugin,
        version_openssh=version.openssh,
        version_sshpass=version.sshpass,
    )

    plugin = Plugin(config, exec_style=exec_style or ExecStyle.SYSCALL)
    try:
        plugin.execute()
    except PluginError as e:
        logger.error(
            "plugin_failed",
            plugin=config.plugin_name,
            code=e.code.value,
            error=str(e),
        )
        raise typer.Exit(1) from e

"""Entry points for the plugin CLIs.

Usage:
    vela-scp --source <path> [--source <path> ...] --target <path> [options]
    vela-ssh --destination <host> --command <cmd> [--command <cmd> ...] [options]
"""

import typer

from vela_openssh.cli.commands import scp, ssh

scp_app = typer.Typer(
    name="vela-scp",
    help="Vela plugin wrapping the scp binary.",
    add_completion=False,
)
scp_app.command(name="vela-scp")(scp.scp_command)

ssh_app = typer.Typer(
    name="vela-ssh",
    help="Vela plugin wrapping the ssh binary.",
    add_completion=False,
)
ssh_app.command(name="vela-ssh")(ssh.ssh_command)


def scp_main() -> None:
    """Entry point for vela-scp."""
    scp_app()


def ssh_main() -> None:
    """Entry point for vela-ssh."""
    ssh_app()

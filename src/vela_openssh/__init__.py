"""Vela OpenSSH plugins.

Pipeline plugins wrapping the OpenSSH scp and ssh binaries, optionally
behind sshpass for password or passphrase authentication.

Usage:
    from vela_openssh import Plugin, ScpConfig

    Plugin(ScpConfig(source=["a.txt"], target="user@host:~")).execute()
"""

from vela_openssh.binarywrapper import ExecStyle, Plugin
from vela_openssh.errors import PluginError, PluginErrorCode
from vela_openssh.plugins import ScpConfig, SshConfig

__all__ = [
    "ExecStyle",
    "Plugin",
    "PluginError",
    "PluginErrorCode",
    "ScpConfig",
    "SshConfig",
]

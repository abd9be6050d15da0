"""OpenSSH plugin configurations.

    - base: Shared authentication settings and setup (OpenSSHConfig)
    - scp: File copy plugin (ScpConfig)
    - ssh: Remote command plugin (SshConfig)
"""

from vela_openssh.plugins.base import OpenSSHConfig
from vela_openssh.plugins.scp import ScpConfig
from vela_openssh.plugins.ssh import SshConfig

__all__ = [
    "OpenSSHConfig",
    "ScpConfig",
    "SshConfig",
]

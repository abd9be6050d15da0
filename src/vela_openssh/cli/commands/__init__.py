"""CLI commands for the OpenSSH plugins.

    - scp: the vela-scp command
    - ssh: the vela-ssh command
    - common: options and startup shared by both
"""

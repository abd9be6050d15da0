"""Command-line interfaces for the OpenSSH plugins.

    - vela-scp: copy files to/from remote systems
    - vela-ssh: run commands on a remote system
"""

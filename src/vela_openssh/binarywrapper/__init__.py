"""Binary wrapper.

Turns a binary into a pipeline plugin: a configuration is validated, set up,
asked for its binary / arguments / environment, and then executed.

Core Components:
    - base: Configuration protocol and enums (PluginConfig, ExecStyle, RunnerState)
    - runner: The lifecycle runner (Plugin)
"""

from vela_openssh.binarywrapper.base import (
    ExecStyle,
    PluginConfig,
    RunnerState,
    expand_env,
)
from vela_openssh.binarywrapper.runner import Plugin

__all__ = [
    "ExecStyle",
    "Plugin",
    "PluginConfig",
    "RunnerState",
    "expand_env",
]

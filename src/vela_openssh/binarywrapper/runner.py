"""Drive a plugin configuration from validation through execution.

Classes:
    - Plugin: Runs one PluginConfig with a chosen ExecStyle
"""

import os
import subprocess

import structlog

from vela_openssh.binarywrapper.base import (
    ExecStyle,
    PluginConfig,
    RunnerState,
    expand_env,
)
from vela_openssh.errors import PluginError, PluginErrorCode

logger = structlog.get_logger()


class Plugin:
    """Runs a wrapped binary described by a PluginConfig.

    Every failure is terminal: the error is raised to the caller and the
    runner ends in FAILED. There are no retries.

    Attributes:
        config: The configuration to run.
        exec_style: How the resolved binary is executed.

    Example:
        plugin = Plugin(ScpConfig(source=["a.txt"], target="host:~"))
        plugin.execute()  # with SYSCALL this only returns on failure
    """

    def __init__(
        self,
        config: PluginConfig | None,
        exec_style: ExecStyle | str = ExecStyle.SYSCALL,
    ) -> None:
        self.config = config
        self.exec_style = exec_style
        self._state = RunnerState.CREATED

    @property
    def state(self) -> RunnerState:
        """Return the current run state."""
        return self._state

    @property
    def name(self) -> str | None:
        return getattr(self.config, "plugin_name", None)

    def execute(self) -> None:
        """Validate, set up, resolve and execute the configured binary.

        Raises:
            PluginError: VALIDATION_FAILED or SETUP_FAILED wrapping the
                configuration's error, UNKNOWN_EXEC_STYLE, MISSING_BINARY,
                or EXEC_FAILED.
        """
        if self.config is None:
            self._state = RunnerState.FAILED
            raise PluginError(
                code=PluginErrorCode.EXEC_FAILED,
                message="no plugin configuration to execute",
            )

        config = self.config

        try:
            config.validate()
        except Exception as e:
            self._fail("plugin_validation_failed", e)
            raise PluginError(
                code=PluginErrorCode.VALIDATION_FAILED,
                message="plugin failed validation",
                plugin_name=self.name,
                cause=e,
            ) from e
        self._state = RunnerState.VALIDATED

        try:
            config.setup()
        except Exception as e:
            self._fail("plugin_setup_failed", e)
            raise PluginError(
                code=PluginErrorCode.SETUP_FAILED,
                message="plugin failed setup",
                plugin_name=self.name,
                cause=e,
            ) from e
        self._state = RunnerState.SET_UP

        binary = config.binary()
        arguments = config.arguments()
        environment = config.environment()
        self._state = RunnerState.RESOLVED

        # Logged before expansion so secrets referenced as $VARS don't leak.
        logger.info(
            "plugin_resolved",
            plugin=self.name,
            binary=binary,
            arguments=arguments,
        )

        try:
            style = ExecStyle(self.exec_style)
        except ValueError as e:
            self._state = RunnerState.FAILED
            raise PluginError(
                code=PluginErrorCode.UNKNOWN_EXEC_STYLE,
                message=(
                    f"unknown exec style {self.exec_style!r}, expected one of: "
                    + ", ".join(s.value for s in ExecStyle)
                ),
                plugin_name=self.name,
                cause=e,
            ) from e

        # The binary itself is always argv[0].
        if not arguments or arguments[0] != binary:
            arguments = [binary, *arguments]

        # Set in the process environment so expansion below sees them and
        # the binary inherits them.
        os.environ.update(environment)
        expanded = [expand_env(arg) for arg in arguments]

        self._state = RunnerState.EXECUTING
        try:
            if style == ExecStyle.SUBPROCESS:
                self._run_subprocess(binary, expanded)
            else:
                self._replace_process(binary, expanded)
        except PluginError:
            self._state = RunnerState.FAILED
            raise

        self._state = RunnerState.SUCCEEDED

    def _fail(self, event: str, error: Exception) -> None:
        self._state = RunnerState.FAILED
        logger.error(event, plugin=self.name, error=str(error))

    def _run_subprocess(self, binary: str, args: list[str]) -> None:
        try:
            result = subprocess.run(  # noqa: S603
                args,
                executable=binary,
                env=dict(os.environ),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise PluginError(
                code=PluginErrorCode.EXEC_FAILED,
                message=f"execution error: {e}",
                plugin_name=self.name,
                cause=e,
            ) from e

        if result.returncode != 0:
            if result.stdout:
                logger.info("binary_stdout", output=result.stdout)
            if result.stderr:
                logger.error("binary_stderr", output=result.stderr)
            raise PluginError(
                code=PluginErrorCode.EXEC_FAILED,
                message=f"execution error: {binary} exited with status "
                f"{result.returncode}",
                plugin_name=self.name,
            )

        if result.stdout:
            logger.info("binary_stdout", output=result.stdout)
        if result.stderr:
            logger.info("binary_stderr", output=result.stderr)

    def _replace_process(self, binary: str, args: list[str]) -> None:
        if os.name == "nt":
            # No process replacement here; run a child with inherited
            # (streamed) output instead.
            try:
                result = subprocess.run(  # noqa: S603
                    args, executable=binary, env=dict(os.environ), check=False
                )
            except FileNotFoundError as e:
                raise PluginError(
                    code=PluginErrorCode.MISSING_BINARY,
                    message=f"missing binary: {binary}",
                    plugin_name=self.name,
                    cause=e,
                ) from e
            except OSError as e:
                raise PluginError(
                    code=PluginErrorCode.EXEC_FAILED,
                    message=f"execution error: {e}",
                    plugin_name=self.name,
                    cause=e,
                ) from e
            if result.returncode != 0:
                raise PluginError(
                    code=PluginErrorCode.EXEC_FAILED,
                    message=f"execution error: {binary} exited with status "
                    f"{result.returncode}",
                    plugin_name=self.name,
                )
            return

        # On success nothing after this line runs.
        try:
            os.execve(binary, args, os.environ)  # noqa: S606
        except FileNotFoundError as e:
            raise PluginError(
                code=PluginErrorCode.MISSING_BINARY,
                message=f"missing binary: {binary}",
                plugin_name=self.name,
                cause=e,
            ) from e
        except OSError as e:
            raise PluginError(
                code=PluginErrorCode.EXEC_FAILED,
                message=f"execution error: {e}",
                plugin_name=self.name,
                cause=e,
            ) from e

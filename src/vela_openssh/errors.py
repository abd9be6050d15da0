"""Error types and error codes.

This module defines the single error hierarchy used by the OpenSSH plugins
and the binary wrapper that drives them.

Classes:
    - PluginErrorCode: Enum of error codes for categorizing plugin errors
    - PluginError: Base exception for all plugin-related errors
"""

from enum import Enum


class PluginErrorCode(str, Enum):
    """Error codes for plugin operations.

    The runner wraps lower-level codes in one of its coarser sentinels
    (VALIDATION_FAILED, SETUP_FAILED, EXEC_FAILED) and keeps the original
    error on ``PluginError.cause``.
    """

    # Configuration errors
    MISSING_SOURCE = "MISSING_SOURCE"
    MISSING_TARGET = "MISSING_TARGET"
    MISSING_DESTINATION = "MISSING_DESTINATION"
    MISSING_COMMAND = "MISSING_COMMAND"
    AMBIGUOUS_AUTH = "AMBIGUOUS_AUTH"

    # Environment errors
    MISSING_SCP = "MISSING_SCP"
    MISSING_SSH = "MISSING_SSH"
    MISSING_SSHPASS = "MISSING_SSHPASS"

    # I/O errors
    STAGING_FAILED = "STAGING_FAILED"

    # Runner errors
    VALIDATION_FAILED = "VALIDATION_FAILED"
    SETUP_FAILED = "SETUP_FAILED"
    UNKNOWN_EXEC_STYLE = "UNKNOWN_EXEC_STYLE"
    MISSING_BINARY = "MISSING_BINARY"
    EXEC_FAILED = "EXEC_FAILED"


class PluginError(Exception):
    """Base exception for plugin errors.

    Attributes:
        code: The error code categorizing this error.
        message: Human-readable error message.
        plugin_name: Name of the plugin that caused the error (if applicable).
        cause: The underlying exception that caused this error (if any).

    Example:
        raise PluginError(
            code=PluginErrorCode.SETUP_FAILED,
            message="plugin failed setup",
            plugin_name="vela-scp",
            cause=original_exception,
        )
    """

    def __init__(
        self,
        code: PluginErrorCode,
        message: str,
        plugin_name: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize the plugin error.

        Args:
            code: The error code for this error.
            message: Human-readable error message.
            plugin_name: Name of the plugin (optional).
            cause: The underlying exception (optional).
        """
        self.code = code
        self.message = message
        self.plugin_name = plugin_name
        self.cause = cause

        full_message = f"[{code.value}] {message}"
        if plugin_name:
            full_message = f"[{plugin_name}] {full_message}"

        super().__init__(full_message)

    def has_code(self, code: PluginErrorCode) -> bool:
        """Return True if this error or any wrapped cause carries ``code``."""
        error: BaseException | None = self
        while error is not None:
            if isinstance(error, PluginError) and error.code == code:
                return True
            error = error.cause if isinstance(error, PluginError) else None
        return False

"""Tests for the error module."""

from vela_openssh.errors import PluginError, PluginErrorCode


class TestPluginError:
    """Tests for PluginError."""

    def test_message_includes_code(self) -> None:
        """Verify the rendered message carries the code."""
        error = PluginError(
            code=PluginErrorCode.MISSING_SOURCE,
            message="missing source parameter",
        )

        assert str(error) == "[MISSING_SOURCE] missing source parameter"
        assert error.cause is None

    def test_message_includes_plugin_name(self) -> None:
        """Verify the plugin name prefixes the message when known."""
        error = PluginError(
            code=PluginErrorCode.SETUP_FAILED,
            message="plugin failed setup",
            plugin_name="vela-scp",
        )

        assert str(error) == "[vela-scp] [SETUP_FAILED] plugin failed setup"

    def test_has_code_follows_causes(self) -> None:
        """Verify a wrapped cause can still be identified."""
        inner = PluginError(code=PluginErrorCode.MISSING_SSH, message="no ssh")
        outer = PluginError(
            code=PluginErrorCode.SETUP_FAILED,
            message="plugin failed setup",
            cause=inner,
        )

        assert outer.has_code(PluginErrorCode.SETUP_FAILED)
        assert outer.has_code(PluginErrorCode.MISSING_SSH)
        assert not outer.has_code(PluginErrorCode.MISSING_SCP)

    def test_has_code_stops_at_foreign_cause(self) -> None:
        """Verify non-plugin causes end the search."""
        error = PluginError(
            code=PluginErrorCode.STAGING_FAILED,
            message="couldn't create temporary file",
            cause=OSError("disk full"),
        )

        assert error.has_code(PluginErrorCode.STAGING_FAILED)
        assert not error.has_code(PluginErrorCode.EXEC_FAILED)

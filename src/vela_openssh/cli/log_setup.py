"""structlog configuration for the plugin CLIs."""

import sys

import structlog


def configure_logging(ci: bool = False) -> None:
    """Configure structlog console output on stderr.

    Args:
        ci: Plain output with full timestamps for CI log viewers. Otherwise
            coloured output without timestamps for terminals.
    """
    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]

    if ci:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

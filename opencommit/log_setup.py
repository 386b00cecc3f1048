"""Logging setup for opencommit."""

import logging

from rich.logging import RichHandler

# Third-party loggers that are too chatty at DEBUG level
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "groq", "google_genai")


def setup_logging(is_verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        is_verbose: Enable debug logging for opencommit modules.
    """
    log_level = logging.DEBUG if is_verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicate logs if called multiple times
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(
        RichHandler(
            level=log_level,
            rich_tracebacks=True,
            show_time=is_verbose,
            show_path=is_verbose,
        )
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

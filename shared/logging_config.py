"""
Logging configuration.

Call configure_logging() once at app startup. Kivy's Logger is a regular
logging.Logger; when Kivy has already put handlers on the root logger they
are kept and only the level changes.
"""
import logging
import sys


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logger with structured format."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    # no-op when root already has handlers
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)
    # Suppress noisy third-party loggers
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

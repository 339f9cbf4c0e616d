import logging
import sys
from typing import IO, Optional, Union

import structlog


def configure_logging(level: Union[int, str] = "INFO", json: bool = False, stream: Optional[IO[str]] = None) -> None:
    """
    Routes visual_levenshtein's structlog events (and stdlib logging) to `stream`.

    The library itself never calls this; it is meant for applications that
    want the matrix/traceback debug events. Defaults to stderr.
    """
    if stream is None:
        stream = sys.stderr
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")

    logging.basicConfig(stream=stream, level=level, force=True)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

import logging
from typing import Any, Optional

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO", force: bool = False):
    """Configure structlog for the confreg package"""

    if structlog.is_configured() and not force:
        return

    # Leave an application's own structlog handler alone
    root_logger = logging.getLogger()
    if not force:
        for handler in root_logger.handlers:
            if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
                return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ConfregStructLogger:
    """
    Structured logger for the confreg package.

    ``bind`` returns a new logger carrying the extra values, so each component
    keeps its own bound copy.
    """

    def __init__(self, log_name: str = "confreg", logger: Optional[Any] = None):
        self.log_name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "ConfregStructLogger":
        """Return a logger with ``new_values`` bound to every message."""
        return ConfregStructLogger(self.log_name, self.logger.bind(**new_values))

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)


def get_confreg_logger(log_name: str = "confreg") -> ConfregStructLogger:
    """Return the package logger without touching the logging setup."""
    return ConfregStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for the confreg package.

    Args:
        config: Configuration object with logging settings

    Returns:
        ConfregStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if config.DEBUG else config.LOG_LEVEL

    setup_logging(json_logs=config.JSON_LOGS, log_level=log_level)

    return ConfregStructLogger("confreg")

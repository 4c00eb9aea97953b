# logging setup. modules get their logger with log.getLogger(__name__).
# until configure() is called, structlog's defaults apply; the command
# line tool calls it once at startup.

import logging
import sys

import structlog
from structlog.processors import TimeStamper, add_log_level, format_exc_info
from structlog.stdlib import (
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)


def getLogger(name=None):
    return structlog.get_logger(name)


# route structlog through the standard logging module, rendering to
# stderr. 'debug' lowers the level from WARNING to DEBUG.
def configure(debug=False, colors=None):
    level = logging.DEBUG if debug else logging.WARNING

    if colors is None:
        colors = sys.stderr.isatty()

    formatter = ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=colors),
        foreign_pre_chain=[
            TimeStamper(fmt="iso"),
            add_log_level,
            add_logger_name,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    logging.basicConfig(level=level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            filter_by_level,
            TimeStamper(fmt="iso"),
            add_log_level,
            add_logger_name,
            format_exc_info,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# keep library use quiet until configure() is called
if not structlog.is_configured():
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING)
    )

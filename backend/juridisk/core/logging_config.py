import logging
import sys
from opentelemetry import trace
from ..config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TraceIdFormatter(logging.Formatter):
    """
    Formatter that appends the active OpenTelemetry trace id to each record

    Records emitted outside a recording span are formatted unchanged, so the
    same handler works whether or not telemetry is enabled.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        span = trace.get_current_span()
        if span is None or not span.is_recording():
            return message
        span_context = span.get_span_context()
        if not span_context or not span_context.trace_id:
            return message
        trace_id = format(span_context.trace_id, "032x")[:16]
        return f"{message} [trace_id={trace_id}]"


def setup_logging():
    """Configure logging for the application"""
    log_level = settings.log_level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(TraceIdFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler]
    )

    # Set specific log levels for noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")

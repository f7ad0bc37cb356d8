"""Logging setup and tracing spans for the decision engine.

Spans go through the OpenTelemetry API. When no SDK is configured the API
hands out its own no-op tracer, so instrumented code runs unchanged.

Span Hierarchy:
    decision_report (root, one per engine invocation)
"""

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import StatusCode

from stackwise.config import EngineSettings

logger = logging.getLogger(__name__)

TRACER_NAME = "stackwise.decisions"

# Tracer instance - lazily initialized
_tracer: trace.Tracer | None = None


def setup_logging(settings: EngineSettings | None = None) -> None:
    """Configure Python logging for the CLI.

    Sets up the root logger with a single console handler and applies the
    configured level to the stackwise loggers. Library callers that manage
    their own logging should not call this.
    """
    settings = settings or EngineSettings.from_env()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Reports go to stdout, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("stackwise").setLevel(level)

    logger.debug(f"Logging configured: level={settings.log_level}")


def get_tracer() -> trace.Tracer:
    """Get the OpenTelemetry tracer for engine spans."""
    global _tracer

    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


@contextmanager
def report_span(
    project_name: str,
    component_count: int,
    **attributes: Any,
) -> Generator[trace.Span, None, None]:
    """Create a span for one decision report generation.

    Args:
        project_name: Project the report is for
        component_count: Number of nodes in the architecture graph
        **attributes: Additional span attributes

    Yields:
        The OpenTelemetry span

    Example:
        with report_span("Acme", 4) as span:
            decisions = select_decisions(graph, catalog, ctx)
            span.set_attribute("report.decision_count", len(decisions))
    """
    span_attributes: dict[str, Any] = {
        "report.project_name": project_name[:200],
        "report.component_count": component_count,
    }
    span_attributes.update(attributes)

    with get_tracer().start_as_current_span(
        name="decision_report",
        attributes=span_attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
            span.set_status(StatusCode.OK)
        except Exception as e:
            span.record_exception(e)
            span.set_status(StatusCode.ERROR, str(e))
            raise

"""Telemetry - logging and metrics entry point

Shared logger factory and metrics facade for the layout engine.

Log format: [module:node] msg
Metric examples: render.ok, render.fail, leaf.render, viewport.width
"""

import logging

from rich.logging import RichHandler

from termboxer import config

_LOG_FORMAT = "[%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(level: str | int = "INFO") -> None:
    """Configure root logging with a rich handler

    Only used by entry points; the library itself never touches logging
    configuration.
    """
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=[RichHandler(show_path=False, markup=False)],
    )


def format_node_log(module: str, name: str, msg: str) -> str:
    """Format a log message for a named node

    Args:
        module: Module or component name
        name: Node name (internal nodes may be unnamed)
        msg: Log message

    Returns:
        Message formatted as [module:name] msg
    """
    label = name if name else "<split>"
    return f"[{module}:{label}] {msg}"


class Metrics:
    """In-memory metrics facade

    Simple counters and gauges. Labels are folded into the key.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._counters: dict[str, int] = {}
        self._gauges: dict[str, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter

        Args:
            name: Metric name (e.g. "render.fail")
            labels: Optional labels (e.g. {"error": "ContentOverflowError"})
            value: Increment, default 1
        """
        if not self.enabled:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        """Set a gauge value"""
        if not self.enabled:
            return
        key = self._make_key(name, labels)
        self._gauges[key] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Read a counter (for tests)"""
        return self._counters.get(self._make_key(name, labels), 0)

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        """Read a gauge (for tests)"""
        return self._gauges.get(self._make_key(name, labels), 0.0)

    def reset(self) -> None:
        """Clear all metrics (for tests)"""
        self._counters.clear()
        self._gauges.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"


# Global metrics instance
metrics = Metrics(enabled=config.METRICS_ENABLED)

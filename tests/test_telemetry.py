"""Tests for telemetry"""

import logging

from termboxer.telemetry import Metrics, format_node_log, get_logger


class TestMetrics:
    """Metrics facade"""

    def test_counter(self):
        m = Metrics()
        m.inc("render.ok")
        m.inc("render.ok", value=2)
        assert m.get_counter("render.ok") == 3

    def test_labels_are_part_of_key(self):
        m = Metrics()
        m.inc("render.fail", {"error": "A"})
        m.inc("render.fail", {"error": "B"})
        assert m.get_counter("render.fail", {"error": "A"}) == 1
        assert m.get_counter("render.fail") == 0

    def test_gauge(self):
        m = Metrics()
        m.gauge("viewport.width", 80)
        assert m.get_gauge("viewport.width") == 80
        assert m.get_gauge("missing") == 0.0

    def test_disabled(self):
        m = Metrics(enabled=False)
        m.inc("render.ok")
        m.gauge("viewport.width", 80)
        assert m.get_counter("render.ok") == 0
        assert m.get_gauge("viewport.width") == 0.0

    def test_reset(self):
        m = Metrics()
        m.inc("x")
        m.gauge("y", 1)
        m.reset()
        assert m.get_counter("x") == 0
        assert m.get_gauge("y") == 0.0


class TestLogging:
    """Logger helpers"""

    def test_get_logger(self):
        logger = get_logger("termboxer.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "termboxer.test"

    def test_format_node_log(self):
        assert format_node_log("Engine", "body", "msg") == "[Engine:body] msg"

    def test_format_unnamed_node(self):
        assert format_node_log("Engine", "", "msg") == "[Engine:<split>] msg"

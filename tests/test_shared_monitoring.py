"""Tests for shared logging, health checks, and error models."""

import asyncio
import json
import logging

from packages.shared.errors import NotFoundError, ServiceUnavailableError, TransientError, create_error_response
from packages.shared.errors.middleware import status_for
from packages.shared.monitoring import DependencyStatus, HealthChecker, log_with_context
from packages.shared.monitoring.health import DependencyCheck
from packages.shared.monitoring.logging import StructuredFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("diy.test", logging.INFO, __file__, 1, message, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


class TestStructuredFormatter:
    def test_json_fields(self):
        out = json.loads(StructuredFormatter(service_name="delivery-option-service").format(
            _record("Offering pickup option: 🌱 Local Print Shop Pickup", request_id="r1", context={"shop": "demo"})
        ))
        assert out["service"] == "delivery-option-service"
        assert out["level"] == "INFO"
        assert out["request_id"] == "r1"
        assert out["context"] == {"shop": "demo"}
        assert out["message"].endswith("Local Print Shop Pickup")
        assert out["timestamp"].endswith("Z")

    def test_defaults_without_extra(self):
        out = json.loads(StructuredFormatter().format(_record("hello")))
        assert out["request_id"] is None
        assert out["context"] == {}


class TestHealthChecker:
    def test_worst_status_wins(self):
        checker = HealthChecker("delivery-option-service")

        async def healthy():
            return DependencyCheck(name="a", status=DependencyStatus.HEALTHY)

        async def degraded():
            return DependencyCheck(name="b", status=DependencyStatus.DEGRADED)

        checker.add_check("a", healthy)
        checker.add_check("b", degraded)
        result = asyncio.run(checker.readiness())
        assert result["status"] == "degraded"
        assert [d["name"] for d in result["dependencies"]] == ["a", "b"]
        assert all(d["latency_ms"] is not None for d in result["dependencies"])

    def test_failing_check_is_unhealthy(self):
        checker = HealthChecker("delivery-option-service")

        async def boom():
            raise RuntimeError("no route to host")

        checker.add_check("database", boom)
        result = asyncio.run(checker.readiness())
        assert result["status"] == "unhealthy"
        assert result["dependencies"][0]["message"] == "no route to host"

    def test_no_checks_is_healthy(self):
        result = asyncio.run(HealthChecker("svc").readiness())
        assert result["status"] == "healthy"
        assert result["dependencies"] == []


class TestErrors:
    def test_error_response(self):
        body = create_error_response("DIY_404", "Shop not found", "permanent", {"shop": "x"}, "req-1").model_dump()
        assert body["error"]["code"] == "DIY_404"
        assert body["error"]["request_id"] == "req-1"
        assert body["error"]["timestamp"].endswith("Z")

    def test_exception_categories(self):
        assert NotFoundError("missing").category == "permanent"
        exc = ServiceUnavailableError("down", retry_after=5)
        assert exc.category == "transient"
        assert exc.details == {"retry_after": 5}


class TestLogWithContext:
    def test_attaches_request_id_and_context(self, caplog):
        logger = logging.getLogger("diy.test.context")
        with caplog.at_level(logging.INFO, logger="diy.test.context"):
            log_with_context(logger, logging.INFO, "Store lookup", request_id="r2", shop="demo.myshopify.com")

        record = caplog.records[-1]
        assert record.request_id == "r2"
        assert record.context == {"shop": "demo.myshopify.com"}
        out = json.loads(StructuredFormatter().format(record))
        assert out["context"] == {"shop": "demo.myshopify.com"}


class TestStatusMapping:
    def test_subclass_uses_base_status(self):
        class ShopNotFound(NotFoundError):
            pass

        assert status_for(ShopNotFound("missing")) == 404
        assert status_for(ServiceUnavailableError("down", retry_after=5)) == 503

    def test_unmapped_is_500(self):
        assert status_for(TransientError("blip")) == 500

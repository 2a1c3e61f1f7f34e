"""Monitoring and observability utilities."""

from .health import HealthChecker, DependencyStatus, health_router
from .logging import configure_logging, log_with_context

__all__ = [
    "HealthChecker",
    "DependencyStatus",
    "health_router",
    "configure_logging",
    "log_with_context",
]

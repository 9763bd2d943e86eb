# tasklist/lib/monitoring.py
from fastapi import FastAPI
from prometheus_client.registry import CollectorRegistry as Registry
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator
from tasklist.core.logging import log

# Create a separate registry
registry = Registry()

expired_tasks_total = Counter(
    'tasklist_expired_tasks_total',
    'Tasks removed by the retention sweep',
    registry=registry
)

boundary_failures_total = Counter(
    'tasklist_boundary_failures_total',
    'Requests answered with a generic failure',
    ['operation'],
    registry=registry
)


def record_expired(n: int):
    """Adds n to the expired tasks counter."""
    if n:
        expired_tasks_total.inc(n)


def record_failure(operation: str):
    boundary_failures_total.labels(operation=operation).inc()


def register_monitoring(app: FastAPI):
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.
    """
    instrumentator = Instrumentator(
        excluded_handlers=["/metrics"],
        registry=registry
    ).instrument(app)

    instrumentator.expose(app, include_in_schema=False, should_gzip=True)

    log("MONITORING", "Prometheus instrumentation registered at /metrics.")

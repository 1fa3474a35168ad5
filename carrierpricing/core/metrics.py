"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

quotes_total = Counter(
    'quotes_total',
    'Total quotes calculated',
    ['kind', 'outcome'],
    registry=registry
)

carrier_catalog_carriers = Gauge(
    'carrier_catalog_carriers',
    'Number of carriers loaded into the carrier catalog (0 for the static catalog)',
    registry=registry
)


def record_quote(kind: str, outcome: str = "success") -> None:
    quotes_total.labels(kind=kind, outcome=outcome).inc()


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')

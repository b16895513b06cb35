from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

auth_logins_total = Counter('auth_logins_total', 'Login attempts', ['outcome'])


def metrics_endpoint():
    """Prometheus exposition of the process registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

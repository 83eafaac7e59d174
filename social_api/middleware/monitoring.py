"""Monitoring and metrics middleware using Prometheus."""
import functools
import logging
import time
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from social_api.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
http_requests_total = Counter(
    'social_api_http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration = Histogram(
    'social_api_http_request_duration_seconds',
    'Time spent processing HTTP requests',
    ['endpoint'],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0]
)

store_errors_total = Counter(
    'social_api_store_errors_total',
    'Total number of failed database statements',
    ['operation']
)

accounts_registered_total = Counter(
    'social_api_accounts_registered_total',
    'Total number of accounts registered'
)

messages_created_total = Counter(
    'social_api_messages_created_total',
    'Total number of messages created'
)


def register_metrics_middleware(app) -> None:
    """
    Register the Prometheus metrics endpoint.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS):
        return

    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    logger.info("Prometheus metrics enabled at /metrics")


def track_request(endpoint: str):
    """
    Decorator to track HTTP request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                response = f(*args, **kwargs)
                status_code = response[1] if isinstance(response, tuple) else 200

                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=status_code
                ).inc()

                http_request_duration.labels(endpoint=endpoint).observe(
                    time.time() - start_time
                )

                return response
            except Exception:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

        return wrapper
    return decorator


def track_store_error(operation: str) -> None:
    """
    Count a failed database statement.

    Args:
        operation: Repository operation name (e.g., 'create_account')
    """
    try:
        store_errors_total.labels(operation=operation).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track store error metrics: {e}")


def track_account_registered() -> None:
    """Count a successful registration."""
    try:
        accounts_registered_total.inc()
    except Exception as e:
        logger.debug(f"Failed to track registration metrics: {e}")


def track_message_created() -> None:
    """Count a successfully created message."""
    try:
        messages_created_total.inc()
    except Exception as e:
        logger.debug(f"Failed to track message metrics: {e}")

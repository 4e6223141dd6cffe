import logging

from prometheus_client import Counter, Info, generate_latest
from prometheus_client.core import CollectorRegistry

logger = logging.getLogger(__name__)

# Prometheus Registry
REGISTRY = CollectorRegistry()

user_registrations_total = Counter(
    'bookmark_manager_user_registrations_total',
    'Total users registered through the sign-up form',
    registry=REGISTRY
)

sign_in_attempts_total = Counter(
    'bookmark_manager_sign_in_attempts_total',
    'Sign-in attempts by outcome',
    ['status'],
    registry=REGISTRY
)

bookmarks_created_total = Counter(
    'bookmark_manager_bookmarks_created_total',
    'Total bookmarks created',
    registry=REGISTRY
)

system_info = Info(
    'bookmark_manager_info',
    'System information',
    registry=REGISTRY
)


class PrometheusMetricsCollector:
    """Application counters backed by a private Prometheus registry"""

    def __init__(self):
        system_info.info({
            'version': '0.1.0',
            'service': 'bookmark-manager'
        })

    def record_registration(self):
        user_registrations_total.inc()

    def record_sign_in(self, success: bool):
        sign_in_attempts_total.labels(status='success' if success else 'failure').inc()

    def record_bookmark_created(self):
        bookmarks_created_total.inc()

    def get_prometheus_metrics(self) -> bytes:
        """Get Prometheus metrics in text format"""
        return generate_latest(REGISTRY)


# Global instance
prometheus_collector = PrometheusMetricsCollector()

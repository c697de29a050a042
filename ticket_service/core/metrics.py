"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Purchase metrics
purchase_attempts = Counter(
    'ticket_purchase_attempts_total',
    'Total ticket purchase attempts',
    ['outcome']  # success, upstream_error, or a rejection kind
)

tickets_purchased = Counter(
    'tickets_purchased_total',
    'Tickets sold, by ticket type',
    ['type']  # adult, child, infant
)

purchase_amount = Histogram(
    'ticket_purchase_amount',
    'Total amount charged per successful purchase',
    buckets=[0, 10, 20, 50, 100, 200, 300, 400]
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_purchase_attempt(outcome: str):
    """Record purchase outcome. Outcome: success, upstream_error, or an error kind value"""
    purchase_attempts.labels(outcome=outcome.lower()).inc()


def record_purchase_success(summary):
    """Record ticket counts and charged amount for a completed PurchaseSummary."""
    tickets_purchased.labels(type="adult").inc(summary.total_adult_tickets)
    tickets_purchased.labels(type="child").inc(summary.total_child_tickets)
    tickets_purchased.labels(type="infant").inc(summary.total_infant_tickets)
    purchase_amount.observe(summary.total_amount)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "leadform_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30),
)
REQUEST_COUNTER = Counter(
    "leadform_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
SUBMISSION_COUNTER = Counter(
    "leadform_submissions_total",
    "Form submissions stored",
)
NOTIFICATION_COUNTER = Counter(
    "leadform_notifications_total",
    "Admin notification emails by outcome",
    labelnames=("outcome",),
)
LOGIN_COUNTER = Counter(
    "leadform_logins_total",
    "Admin login attempts by outcome",
    labelnames=("outcome",),
)


def configure_metrics(app: Flask, *, enabled: bool) -> None:
    if not enabled:
        return

    @app.before_request
    def _start_timer() -> None:
        g.metrics_start = time.perf_counter()

    @app.after_request
    def _record(response):
        endpoint = request.url_rule.rule if request.url_rule else "unmatched"
        start = getattr(g, "metrics_start", None)
        if start is not None:
            REQUEST_LATENCY.labels(endpoint=endpoint).observe(time.perf_counter() - start)
        REQUEST_COUNTER.labels(endpoint=endpoint, status=str(response.status_code)).inc()
        return response

    @app.get("/metrics")
    def metrics() -> Response:
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


__all__ = [
    "LOGIN_COUNTER",
    "NOTIFICATION_COUNTER",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "SUBMISSION_COUNTER",
    "configure_metrics",
]

"""Metrics endpoint for Prometheus scraping.

Exposes the signature flow counters in Prometheus exposition format.
"""

from fastapi import APIRouter, Response

from src.bootstrap.metrics import render_metrics

router = APIRouter(tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    """Get signature flow metrics in Prometheus format."""
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)

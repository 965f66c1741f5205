import time
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.customers.repositories.memory_repository import get_customer_repository

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check customer store
    try:
        start = time.monotonic()
        customers = get_customer_repository().count()
        services["store"] = {
            "status": "up",
            "customers": customers,
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["store"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_store_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )

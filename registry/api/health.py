from django.conf import settings
from django.db import connection
from django.utils import timezone
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for liveness probes and uptime monitors.

    Returns:
        200 OK: Service is healthy
        503 Service Unavailable: Database is unreachable
    """
    health_status = {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "timestamp": timezone.now().isoformat(),
        "environment": settings.ENVIRONMENT,
        "checks": {},
    }

    # Check database connection
    try:
        connection.ensure_connection()
        health_status["checks"]["database"] = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        health_status["checks"]["database"] = "error"
        health_status["status"] = "unhealthy"

    if health_status["status"] == "healthy":
        return Response(health_status, status=status.HTTP_200_OK)
    else:
        return Response(health_status, status=status.HTTP_503_SERVICE_UNAVAILABLE)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def readiness_check(request):
    """
    Readiness check - simple check for readiness probes.
    Just verifies the application is running.
    """
    return Response({"status": "ready"}, status=status.HTTP_200_OK)

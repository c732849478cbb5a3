"""
URL configuration for citizen registry service.
"""

from django.urls import path, include
from registry.api.health import health_check, readiness_check

urlpatterns = [
    path("api/health", health_check, name="health_check"),
    path("api/ready", readiness_check, name="readiness_check"),
    path("api/", include("registry.api.urls")),
]

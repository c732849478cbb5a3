from django.urls import path
from registry.api.views import (
    LoginView,
    CitizenListView,
    CitizenDetailView,
    StatisticsView,
)

urlpatterns = [
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("citizens", CitizenListView.as_view(), name="citizen-list"),
    path("citizens/<str:nin>", CitizenDetailView.as_view(), name="citizen-detail"),
    path("statistics", StatisticsView.as_view(), name="statistics"),
]

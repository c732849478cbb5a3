"""
Pytest configuration and shared fixtures for the test suite.
"""

import itertools
from datetime import date

import pytest
from django.contrib.auth.hashers import make_password
from rest_framework.test import APIClient
from registry.models import Citizen, StaffUser
from registry.services.auth_service import AuthService

_nin_sequence = itertools.count(10000000000)


def next_nin():
    return str(next(_nin_sequence))


@pytest.fixture
def sample_citizen_payload():
    """Sample registration payload as sent by the client."""
    return {
        "nin": "12345678901",
        "firstName": "Adaeze",
        "lastName": "Okafor",
        "email": "adaeze.okafor@example.com",
        "phone": "08012345678",
        "dateOfBirth": "1990-01-01",
        "stateOfOrigin": "Anambra",
        "lga": "Awka South",
        "address": "12 Zik Avenue, Awka",
        "occupation": "Civil Engineer",
        "gender": "Female",
        "maritalStatus": "Single",
    }


@pytest.fixture
def sample_citizen_record():
    """Sample citizen record in the service's snake_case form."""
    return {
        "nin": "12345678901",
        "first_name": "Adaeze",
        "last_name": "Okafor",
        "email": "adaeze.okafor@example.com",
        "phone": "08012345678",
        "date_of_birth": date(1990, 1, 1),
        "state_of_origin": "Anambra",
        "lga": "Awka South",
        "address": "12 Zik Avenue, Awka",
        "occupation": "Civil Engineer",
        "gender": "Female",
        "marital_status": "Single",
    }


@pytest.fixture
def create_citizen(db):
    """Factory fixture to create a test citizen directly in the store."""

    def _create_citizen(**kwargs):
        citizen_data = {
            "nin": next_nin(),
            "first_name": "Chinedu",
            "last_name": "Balogun",
            "date_of_birth": date(1985, 6, 15),
            **kwargs,
        }
        return Citizen.objects.create(**citizen_data)

    return _create_citizen


@pytest.fixture
def create_staff_user(db):
    """Factory fixture to create a staff account with a hashed password."""

    def _create_staff_user(username="officer1", password="s3cret-pass", **kwargs):
        return StaffUser.objects.create(
            username=username,
            password_hash=make_password(password),
            role=kwargs.get("role", StaffUser.Role.OFFICER),
            full_name=kwargs.get("full_name", "Registration Officer"),
            email=kwargs.get("email"),
        )

    return _create_staff_user


@pytest.fixture
def officer(create_staff_user):
    return create_staff_user()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(officer):
    """API client carrying a valid bearer token for an officer account."""
    client = APIClient()
    token, _ = AuthService().issue_token(officer)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client

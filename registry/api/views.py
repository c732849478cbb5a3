from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from registry.api.serializers import (
    CitizenRegistrationSerializer,
    CitizenSearchSerializer,
    CitizenSerializer,
    LoginSerializer,
    StaffUserSerializer,
    StatisticsSerializer,
)
from registry.exceptions import InvalidPageParameters
from registry.services.auth_service import AuthService
from registry.services.citizen_service import CitizenService
from registry.services.statistics_service import StatisticsService


class LoginView(APIView):
    """
    API endpoint to exchange staff credentials for a session token.

    POST /api/auth/login

    Request body:
    {
        "username": "admin",
        "password": "admin123"
    }

    Response:
    {
        "success": true,
        "message": "Login successful",
        "user": {"id": 1, "username": "admin", "role": "admin",
                 "fullName": "System Administrator", "email": "admin@nimc.gov.ng"},
        "token": "<signed token valid for 24 hours>"
    }
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [AnonRateThrottle]

    def post(self, request):
        """Authenticate and issue a token."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = AuthService().authenticate(
            serializer.validated_data["username"], serializer.validated_data["password"]
        )

        return Response(
            {
                "success": True,
                "message": "Login successful",
                "user": StaffUserSerializer(session.user).data,
                "token": session.token,
            },
            status=status.HTTP_200_OK,
        )


class CitizenListView(APIView):
    """
    API endpoint to search and register citizens.

    GET /api/citizens?page=1&limit=10&search=ade

    Response:
    {
        "citizens": [...],
        "pagination": {"currentPage": 1, "totalPages": 3, "totalItems": 25, "itemsPerPage": 10}
    }

    POST /api/citizens

    Request body:
    {
        "nin": "12345678901",
        "firstName": "Adaeze",
        "lastName": "Okafor",
        "dateOfBirth": "1990-01-01",
        "email": "adaeze@example.com",
        "phone": "08012345678",
        "stateOfOrigin": "Anambra",
        "lga": "Awka South",
        "address": "12 Zik Avenue",
        "occupation": "Engineer",
        "gender": "Female",
        "maritalStatus": "Single"
    }
    """

    def get(self, request):
        """Search citizens with pagination."""
        params = CitizenSearchSerializer(data=request.query_params)
        if not params.is_valid():
            raise InvalidPageParameters()

        citizens, page_info = CitizenService().search(
            params.validated_data["search"],
            page=params.validated_data["page"],
            page_size=params.validated_data["limit"],
        )

        return Response(
            {
                "citizens": CitizenSerializer(citizens, many=True).data,
                "pagination": {
                    "currentPage": page_info.current_page,
                    "totalPages": page_info.total_pages,
                    "totalItems": page_info.total_items,
                    "itemsPerPage": page_info.items_per_page,
                },
            },
            status=status.HTTP_200_OK,
        )

    def post(self, request):
        """Register a new citizen."""
        serializer = CitizenRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        citizen = CitizenService().register(serializer.validated_data)

        return Response(
            {
                "success": True,
                "message": "Citizen registered successfully",
                "citizen": CitizenSerializer(citizen).data,
            },
            status=status.HTTP_201_CREATED,
        )


class CitizenDetailView(APIView):
    """
    API endpoint to fetch one citizen by national identifier.

    GET /api/citizens/{nin}
    """

    def get(self, request, nin):
        """Get citizen by NIN."""
        citizen = CitizenService().get_by_identifier(nin)
        return Response({"citizen": CitizenSerializer(citizen).data}, status=status.HTTP_200_OK)


class StatisticsView(APIView):
    """
    API endpoint for registry statistics.

    GET /api/statistics

    Response:
    {
        "totalCitizens": 120,
        "todayRegistrations": 4,
        "stateDistribution": [{"state_of_origin": "Lagos", "count": 30}, ...],
        "genderDistribution": [{"gender": "Female", "count": 61}, ...]
    }
    """

    def get(self, request):
        """Get aggregate statistics."""
        summary = async_to_sync(StatisticsService().summary)()
        return Response(StatisticsSerializer(summary).data, status=status.HTTP_200_OK)

from rest_framework import serializers
from registry.models import Citizen, StaffUser


class LoginSerializer(serializers.Serializer):
    """Serializer for login credentials."""

    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class StaffUserSerializer(serializers.ModelSerializer):
    """Serializer for the user block of a login response."""

    fullName = serializers.CharField(source="full_name", read_only=True)

    class Meta:
        model = StaffUser
        fields = ["id", "username", "role", "fullName", "email"]
        read_only_fields = fields


class CitizenRegistrationSerializer(serializers.Serializer):
    """
    Serializer for citizen registration input.

    Field names follow the client's camelCase payload and map onto the model
    columns. Uniqueness is left to the store constraint and not checked
    here.
    """

    nin = serializers.CharField(min_length=11, max_length=11)
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    email = serializers.EmailField(
        max_length=150, required=False, allow_null=True, allow_blank=True
    )
    phone = serializers.CharField(max_length=15, required=False, allow_null=True, allow_blank=True)
    dateOfBirth = serializers.DateField(source="date_of_birth")
    stateOfOrigin = serializers.CharField(
        source="state_of_origin", max_length=100, required=False, allow_null=True, allow_blank=True
    )
    lga = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    address = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    occupation = serializers.CharField(
        max_length=100, required=False, allow_null=True, allow_blank=True
    )
    gender = serializers.ChoiceField(
        choices=Citizen.Gender.choices, required=False, allow_null=True
    )
    maritalStatus = serializers.CharField(
        source="marital_status", max_length=20, required=False, allow_null=True, allow_blank=True
    )

    def to_internal_value(self, data):
        """Store blank optional values as NULL."""
        values = super().to_internal_value(data)
        return {key: (None if value == "" else value) for key, value in values.items()}


class CitizenSerializer(serializers.ModelSerializer):
    """Serializer for Citizen model, rendered with the store's column names."""

    class Meta:
        model = Citizen
        fields = [
            "id",
            "nin",
            "first_name",
            "last_name",
            "email",
            "phone",
            "date_of_birth",
            "state_of_origin",
            "lga",
            "address",
            "occupation",
            "gender",
            "marital_status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CitizenSearchSerializer(serializers.Serializer):
    """Serializer for the citizen list query string."""

    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=10)
    search = serializers.CharField(required=False, default="", allow_blank=True, trim_whitespace=False)


class StatisticsSerializer(serializers.Serializer):
    """Serializer for the statistics summary."""

    totalCitizens = serializers.IntegerField(source="total_citizens")
    todayRegistrations = serializers.IntegerField(source="today_registrations")
    stateDistribution = serializers.ListField(source="state_distribution")
    genderDistribution = serializers.ListField(source="gender_distribution")

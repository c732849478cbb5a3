import logging
import math
from dataclasses import dataclass

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Q

from registry.exceptions import (
    DuplicateIdentifier,
    InvalidCitizenRecord,
    InvalidPageParameters,
    NotFound,
)
from registry.models import Citizen

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

NIN_LENGTH = 11

REQUIRED_FIELDS = ("nin", "first_name", "last_name", "date_of_birth")

# LIMIT/OFFSET are signed 64-bit integers in the store
MAX_ROW_OFFSET = 2**63 - 1

REGISTRATION_FIELDS = (
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
)


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class CitizenService:
    """Service class for citizen registration, lookup and search."""

    def register(self, record: dict) -> Citizen:
        """
        Register a new citizen.

        The insert is a single constrained INSERT; duplicates are detected from
        the store's uniqueness violation rather than a lookup beforehand, so
        two concurrent registrations of the same NIN cannot both succeed.

        Args:
            record: Citizen fields (snake_case); nin, names and date_of_birth required

        Returns:
            Citizen: The persisted record with id and timestamps

        Raises:
            DuplicateIdentifier: NIN or email already registered
            InvalidCitizenRecord: Missing or malformed required field, or any
                other constraint rejected by the store
        """
        data = {field: record.get(field) for field in REGISTRATION_FIELDS if field in record}
        if not data.get("email"):
            data["email"] = None

        missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
        if missing:
            raise InvalidCitizenRecord(f"{', '.join(missing)} required")
        if len(data["nin"]) != NIN_LENGTH:
            raise InvalidCitizenRecord(f"nin must be exactly {NIN_LENGTH} characters")

        gender = data.get("gender")
        if gender is not None and gender not in Citizen.Gender.values:
            raise InvalidCitizenRecord(f"gender must be one of {', '.join(Citizen.Gender.values)}")

        try:
            with transaction.atomic():
                citizen = Citizen.objects.create(**data)
        except IntegrityError as e:
            if not _is_unique_violation(e):
                logger.warning(f"Store rejected citizen {data.get('nin')}: {str(e)}")
                raise InvalidCitizenRecord() from e
            if _violated_column(e) == "email":
                logger.info(f"Rejected registration of {data.get('nin')}: email already exists")
                raise DuplicateIdentifier("Email already exists") from e
            logger.info(f"Rejected registration: NIN {data.get('nin')} already exists")
            raise DuplicateIdentifier() from e

        logger.info(f"Registered citizen {citizen.nin} (id={citizen.id})")
        return citizen

    def get_by_identifier(self, nin: str) -> Citizen:
        """
        Fetch a citizen by exact national identifier.

        Raises:
            NotFound: No citizen has this NIN
        """
        citizen = Citizen.objects.filter(nin=nin).first()
        if citizen is None:
            raise NotFound()
        return citizen

    def search(self, query: str = "", page: int = 1, page_size: int = 10) -> tuple:
        """
        Case-insensitive substring search over first name, last name or NIN.

        Results are ordered most recent first. An empty query matches every
        record.

        Args:
            query: Substring to look for in any of the three fields
            page: 1-indexed page number
            page_size: Number of records per page

        Returns:
            tuple: (list of Citizen, PageInfo)

        Raises:
            InvalidPageParameters: page or page_size below 1, or page_size
                above REGISTRY_MAX_PAGE_SIZE, or an offset past what the store
                can address
        """
        if page < 1 or page_size < 1:
            raise InvalidPageParameters()
        if page_size > settings.REGISTRY_MAX_PAGE_SIZE:
            raise InvalidPageParameters(
                f"limit must not exceed {settings.REGISTRY_MAX_PAGE_SIZE}"
            )
        if page * page_size > MAX_ROW_OFFSET:
            raise InvalidPageParameters("page is out of range")

        queryset = Citizen.objects.all()
        if query:
            queryset = queryset.filter(
                Q(first_name__icontains=query)
                | Q(last_name__icontains=query)
                | Q(nin__icontains=query)
            )

        total_items = queryset.count()
        offset = (page - 1) * page_size
        citizens = list(queryset.order_by("-created_at", "-id")[offset : offset + page_size])

        page_info = PageInfo(
            current_page=page,
            total_pages=math.ceil(total_items / page_size),
            total_items=total_items,
            items_per_page=page_size,
        )
        return citizens, page_info


def _is_unique_violation(error: IntegrityError) -> bool:
    cause = error.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    # SQLite reports constraint kinds only in the message
    return "unique" in str(error).lower()


def _violated_column(error: IntegrityError):
    cause = error.__cause__
    diag = getattr(cause, "diag", None)
    detail = " ".join(
        str(part)
        for part in (
            getattr(diag, "constraint_name", None),
            getattr(diag, "message_detail", None),
            error,
        )
        if part
    )
    return "email" if "email" in detail.lower() else "nin"

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from registry.exceptions import InvalidCredentials, InvalidToken, MissingToken
from registry.models import StaffUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Authenticated identity attached to a request after token verification."""

    user_id: int
    username: str
    role: str

    # DRF permission and throttle classes inspect these on request.user
    is_authenticated = True

    @property
    def pk(self):
        return self.user_id


@dataclass(frozen=True)
class Session:
    """Result of a successful login: the signed token and the user it was issued to."""

    token: str
    user: StaffUser
    expires_at: datetime


class AuthService:
    """Service class for staff authentication and session token handling."""

    def authenticate(self, username: str, password: str) -> Session:
        """
        Verify staff credentials and issue a session token.

        Args:
            username: Exact username of the staff account
            password: Plaintext password supplied by the client

        Returns:
            Session: Signed token, the authenticated user and the token expiry

        Raises:
            InvalidCredentials: Unknown username or wrong password
        """
        user = StaffUser.objects.filter(username=username).first()

        if user is None:
            # Hash anyway so an unknown username costs as much as a wrong password
            make_password(password)
            logger.info(f"Login rejected for unknown username {username!r}")
            raise InvalidCredentials()

        if not check_password(password, user.password_hash):
            logger.info(f"Login rejected for {username!r}: wrong password")
            raise InvalidCredentials()

        token, expires_at = self.issue_token(user)
        logger.info(f"Issued session token for {user.username} (role={user.role})")
        return Session(token=token, user=user, expires_at=expires_at)

    def issue_token(self, user: StaffUser, issued_at: datetime | None = None) -> tuple:
        """
        Mint a signed access token carrying the user's id, username and role.

        Args:
            user: Staff account the token identifies
            issued_at: Issuance time, defaults to now

        Returns:
            tuple: (encoded token, expiry datetime)
        """
        token = AccessToken()
        if issued_at is not None:
            token.set_iat(at_time=issued_at)
            token.set_exp(from_time=issued_at)

        token[settings.SIMPLE_JWT["USER_ID_CLAIM"]] = user.id
        token["username"] = user.username
        token["role"] = user.role

        expires_at = datetime.fromtimestamp(token["exp"], tz=timezone.utc)
        return str(token), expires_at

    def authorize(self, token: str) -> Principal:
        """
        Verify a session token's signature and expiry.

        Args:
            token: Encoded token taken from the Authorization header

        Returns:
            Principal: Identity carried by the token

        Raises:
            MissingToken: No token was presented
            InvalidToken: Bad signature, expired, malformed or missing claims
        """
        if not token:
            raise MissingToken()

        try:
            payload = AccessToken(token)
            return Principal(
                user_id=payload[settings.SIMPLE_JWT["USER_ID_CLAIM"]],
                username=payload["username"],
                role=payload["role"],
            )
        except (TokenError, KeyError) as e:
            logger.debug(f"Rejected session token: {str(e)}")
            raise InvalidToken() from e


def ensure_default_admin(using: str = "default") -> StaffUser:
    """
    Seed the default administrator account if it does not exist yet.

    An existing account with the configured username is returned untouched. A
    concurrent insert by another instance is resolved by the username
    uniqueness constraint inside ``get_or_create``. When the configured email
    already belongs to another account the administrator is created without
    one.
    """
    users = StaffUser.objects.db_manager(using)
    username = settings.DEFAULT_ADMIN_USERNAME

    email = settings.DEFAULT_ADMIN_EMAIL or None
    if email and users.filter(email=email).exclude(username=username).exists():
        logger.warning(f"Email {email!r} already in use, seeding {username!r} without one")
        email = None

    user, created = users.get_or_create(
        username=username,
        defaults={
            "password_hash": make_password(settings.DEFAULT_ADMIN_PASSWORD),
            "role": StaffUser.Role.ADMIN,
            "full_name": settings.DEFAULT_ADMIN_FULL_NAME,
            "email": email,
        },
    )
    if created:
        logger.info(f"Created default administrator account {user.username!r}")
    return user

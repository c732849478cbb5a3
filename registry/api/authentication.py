"""
Bearer token authentication for the registry API.

Requests without an ``Authorization`` header are left unauthenticated so the
permission check answers 401; a header that is present but carries a bad,
expired or malformed token is rejected with 403 by ``AuthService.authorize``.
"""

from rest_framework import authentication

from registry.exceptions import InvalidToken, MissingToken
from registry.services.auth_service import AuthService


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """Authenticate ``Authorization: Bearer <token>`` headers into a Principal."""

    keyword = "Bearer"

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()

        if not header:
            return None

        if len(header) == 1:
            if header[0].lower() == self.keyword.lower().encode():
                raise MissingToken()
            raise InvalidToken()

        if len(header) > 2 or header[0].lower() != self.keyword.lower().encode():
            raise InvalidToken()

        try:
            token = header[1].decode()
        except UnicodeError as e:
            raise InvalidToken() from e

        principal = AuthService().authorize(token)
        return principal, token

    def authenticate_header(self, request):
        return self.keyword

"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from pocketledger_auth.exceptions import InvalidTokenError, TokenExpiredError
from pocketledger_auth.schemas import TokenPayload

logger = logging.getLogger(__name__)


class JWTService:
    """Service for JWT access token creation and verification.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id)
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for ``user_id``.

        Parameters
        ----------
        user_id
            The user's unique identifier
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the token is past its expiry
        InvalidTokenError
            If the signature does not match or the payload is malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                issued_at=datetime.fromtimestamp(
                    payload.get("iat", payload["exp"]),
                    tz=timezone.utc,
                ),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e
        except (KeyError, ValueError, TypeError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e

    def verify(self, token: str) -> UUID:
        """Verify ``token`` and return the user id it was issued for."""
        return self.verify_token(token).user_id

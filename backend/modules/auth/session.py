"""
Session codec.

Issues and verifies the signed, expiring credential that carries a user's
identity and plan. Credentials are self-contained: there is no server-side
session store and no revocation list.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

import jwt  # PyJWT
from fastapi import Request

from shared.config import get_settings

logger = logging.getLogger(__name__)

# Claims added by the codec itself, stripped again on verification
REGISTERED_CLAIMS = ("exp", "iat")

BEARER_PREFIX = "Bearer "


class SessionCodec:
    """Signs and verifies session credentials with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=7),
    ) -> None:
        if not secret:
            raise RuntimeError(
                "Session signing secret missing. Set the SESSION_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def create_session(self, claims: Mapping[str, Any]) -> str:
        """
        Sign a credential embedding the claims with a fixed expiry.

        Args:
            claims: Any JSON-serializable mapping (usually id, name, email,
                role, plan)

        Returns:
            Encoded credential string
        """
        now = datetime.now(timezone.utc)
        payload = {key: value for key, value in claims.items() if key not in REGISTERED_CLAIMS}
        payload["iat"] = now
        payload["exp"] = now + self._ttl
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_session(self, token: Optional[str]) -> Optional[dict[str, Any]]:
        """
        Verify a credential and return its original claims.

        Returns None for any failure: malformed, expired, or signed with
        another key.
        """
        if not token or not isinstance(token, str):
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as e:
            logger.debug("Session verification failed: %s", e)
            return None

        return {key: value for key, value in payload.items() if key not in REGISTERED_CLAIMS}


async def extract_token(request: Request) -> Optional[str]:
    """
    Read the credential from the request.

    The Authorization header (Bearer scheme) wins; a `token` field in a JSON
    body is the only fallback.
    """
    header = request.headers.get("authorization")
    if header and header.startswith(BEARER_PREFIX):
        token = header[len(BEARER_PREFIX):].strip()
        if token:
            return token

    if "application/json" not in request.headers.get("content-type", ""):
        return None

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None

    if isinstance(body, dict) and isinstance(body.get("token"), str):
        return body["token"] or None
    return None


# Module-level instance getter
_codec_instance: Optional[SessionCodec] = None


def get_session_codec() -> SessionCodec:
    """Get the session codec singleton, configured from settings."""
    global _codec_instance
    if _codec_instance is None:
        settings = get_settings()
        _codec_instance = SessionCodec(
            secret=settings.session_secret,
            algorithm=settings.session_algorithm,
            ttl=timedelta(days=settings.session_ttl_days),
        )
    return _codec_instance


def reset_session_codec() -> None:
    """Reset the codec singleton (for testing)."""
    global _codec_instance
    _codec_instance = None

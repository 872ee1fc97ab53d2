"""
Bearer-token authentication and role checks.

Access tokens are compact JWTs signed with HMAC-SHA256: three
base64url segments (header, claims, signature).  The ``sub`` claim
holds the user id and ``exp`` the expiry as a UNIX timestamp.  The
secret comes from ``settings.secret_key``.

``get_current_user`` is the FastAPI dependency every event route
depends on.  Role checks are split into the pure predicate
``has_role`` and the dependency factory ``require_roles``.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Callable, Dict, Iterable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import Forbidden


logger = logging.getLogger(__name__)

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLE_SUPERADMIN = "superadmin"
ROLES = (ROLE_USER, ROLE_ADMIN, ROLE_SUPERADMIN)
ADMIN_ROLES = (ROLE_ADMIN, ROLE_SUPERADMIN)


def _b64_url_encode(data: bytes) -> str:
    """Base64url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode a base64url string, restoring the padding."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, object], expires_delta: Optional[int] = None) -> str:
    """Create a signed token carrying ``data`` plus an ``exp`` claim.

    Parameters
    ----------
    data : dict
        Claims to embed, normally ``{"sub": "<user id>"}``.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, object]]:
    """Verify a token's signature and expiry and return its claims.

    Returns ``None`` for malformed, tampered or expired tokens.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or int(exp) < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, object]:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Returns the token claims extended with ``user_id``, ``role`` and the
    raw ``token`` (forwarded to the audit service on deletes).  Raises
    HTTP 401 when the header is missing, the token does not verify, or
    the user it names no longer exists or is disabled.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    token = credentials.credentials
    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Invalid or expired token")

    from ticketing_api.app.services.user_service import UserService

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized("Invalid or expired token") from None
    user = UserService.get_user(user_id)
    if user is None:
        raise _unauthorized("User no longer exists")
    if user.disabled:
        raise _unauthorized("User account disabled")

    payload["user_id"] = user.id
    payload["role"] = user.role
    payload["token"] = token
    return payload


def has_role(role: Optional[str], allowed_roles: Iterable[str]) -> bool:
    """Return True when ``role`` is one of ``allowed_roles``."""
    return role is not None and role in set(allowed_roles)


def require_roles(*roles: str) -> Callable[[Dict[str, object]], Dict[str, object]]:
    """Dependency factory restricting a route to the given roles.

    Use as ``Depends(require_roles("admin", "superadmin"))``.  Callers
    without one of the roles get a 403.
    """

    def _role_dependency(current_user: Dict[str, object] = Depends(get_current_user)) -> Dict[str, object]:
        if not has_role(current_user.get("role"), roles):
            logger.info(
                "User %s with role %s denied; requires one of %s",
                current_user.get("user_id"),
                current_user.get("role"),
                roles,
            )
            raise Forbidden("Access denied. Admin only.")
        return current_user

    return _role_dependency

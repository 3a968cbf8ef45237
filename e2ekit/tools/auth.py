"""Session token helpers: decode JWTs, check expiry, read Playwright storage state."""
import base64
import binascii
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from pydantic import ValidationError

from e2ekit.models.auth import JwtPayload

logger = logging.getLogger(__name__)


def decode_jwt_payload(jwt: str) -> JwtPayload:
    """
    Decode the payload segment of a JWT. The signature is not verified.

    Raises:
        ValueError: if the token is malformed or lacks an exp claim
    """
    parts = jwt.split(".")
    if len(parts) < 2:
        raise ValueError("JWT must have at least two segments")

    segment = parts[1]
    segment += "=" * (-len(segment) % 4)
    try:
        raw = base64.urlsafe_b64decode(segment.encode("ascii"))
        return JwtPayload(**json.loads(raw.decode("utf-8")))
    except (binascii.Error, UnicodeError, json.JSONDecodeError, TypeError, ValidationError) as e:
        raise ValueError(f"Invalid JWT payload: {e}") from e


def is_jwt_expired(jwt: Optional[str], now: Optional[datetime] = None) -> bool:
    """
    Check whether a JWT is expired.

    Missing or undecodable tokens count as expired.
    """
    if not jwt:
        return True

    try:
        payload = decode_jwt_payload(jwt)
    except ValueError as e:
        logger.warning("Treating token as expired: %s", e)
        return True

    now = now or datetime.now(timezone.utc)
    is_expired = now > payload.expires_at

    logger.info(f"Logging in as: {payload.user_id} with roles: {', '.join(str(role) for role in payload.roles)}")
    logger.info(f"Token is {'' if is_expired else 'not '}expired")

    return is_expired


def _same_origin(a: str, b: str) -> bool:
    sa, sb = urlsplit(a), urlsplit(b)
    return (sa.scheme, sa.netloc) == (sb.scheme, sb.netloc)


def get_jwt_token_from_json(
    auth_file: Path,
    app_url: str,
    token_key: str = "TOKEN",
) -> Optional[str]:
    """
    Read a cached token from a Playwright storage_state file.

    Looks for a localStorage entry named token_key under the origin of
    app_url, then for a cookie of that name. Returns None if the file is
    missing or unreadable, or if no entry is found.
    """
    auth_file = Path(auth_file)
    if not auth_file.exists():
        return None

    try:
        state = json.loads(auth_file.read_text())
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to read storage state %s: %s", auth_file, e)
        return None

    for origin in state.get("origins", []):
        if not _same_origin(origin.get("origin", ""), app_url):
            continue
        for item in origin.get("localStorage", []):
            if item.get("name") == token_key:
                return item.get("value")

    host = urlsplit(app_url).hostname or ""
    for cookie in state.get("cookies", []):
        domain = cookie.get("domain", "").lstrip(".")
        if cookie.get("name") == token_key and (not host or host.endswith(domain)):
            return cookie.get("value")

    return None

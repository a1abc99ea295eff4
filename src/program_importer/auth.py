"""
Coach authentication for the program import endpoints.

Only coaches may import programs. A caller is resolved to
{"user_id": ..., "role": ...} from either:
- an API key (server-to-server imports from the coach dashboard backend),
  which always acts with the "admin" role
- a Clerk JWT whose "metadata" claim carries the coach role, e.g.
  {"sub": "user_abc", "metadata": {"role": "coach"}}

Subjects without a role in settings.COACH_ROLES get 403.
"""
import os
import jwt
from fastapi import HTTPException, Header
from typing import Dict, Optional
import logging

from program_importer.config import settings

logger = logging.getLogger(__name__)

API_KEY_ROLE = "admin"

_jwks_client = None


def get_jwks_client():
    """Get or create the JWKS client for Clerk JWT validation."""
    global _jwks_client
    clerk_domain = os.getenv("CLERK_DOMAIN", "")
    if _jwks_client is None and clerk_domain:
        _jwks_client = jwt.PyJWKClient(f"https://{clerk_domain}/.well-known/jwks.json")
    return _jwks_client


async def get_current_coach(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> Dict[str, str]:
    """
    Resolve the calling coach from an API key or a Clerk JWT.

    Usage:
        @router.post("/programs/import/parse")
        def parse(coach: dict = Depends(get_current_coach)):
            coach["user_id"], coach["role"]
    """
    if x_api_key:
        return validate_api_key(x_api_key)

    if authorization:
        return validate_coach_jwt(authorization)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str) -> Dict[str, str]:
    """
    Validate an API key.

    "sk_test_abc123" -> {"user_id": "admin", "role": "admin"}
    "sk_test_abc123:coach_42" -> {"user_id": "coach_42", "role": "admin"}
    """
    valid_keys = [k.strip() for k in os.getenv("API_KEYS", "").split(",") if k.strip()]

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    key_part, _, user_part = api_key.partition(":")

    if key_part not in valid_keys:
        logger.info("Rejected import request with unknown API key")
        raise HTTPException(status_code=401, detail="Invalid API key")

    return {"user_id": user_part or API_KEY_ROLE, "role": API_KEY_ROLE}


def coach_role_from_claims(payload: dict) -> Optional[str]:
    """Role from the token's "metadata" claim, lowercased. None when absent."""
    metadata = payload.get("metadata")
    if not isinstance(metadata, dict):
        return None
    role = metadata.get("role")
    if not isinstance(role, str) or not role.strip():
        return None
    return role.strip().lower()


def validate_coach_jwt(authorization: str) -> Dict[str, str]:
    """Validate a Clerk JWT and require a coach role."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    jwks_client = get_jwks_client()

    if not jwks_client:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing CLERK_DOMAIN)"
        )

    try:
        signing_key = jwks_client.get_signing_key_from_jwt(token)
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            options={"verify_aud": False}
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")

    role = coach_role_from_claims(payload)
    if role not in settings.COACH_ROLES:
        logger.info(f"Rejected import from {user_id}: role {role!r} is not a coach role")
        raise HTTPException(status_code=403, detail="Program import requires a coach account")

    return {"user_id": user_id, "role": role}

from datetime import datetime, timedelta, timezone
from jose import jwt
from .config import AUTH_SECRET, ACCESS_TTL_SECONDS, REFRESH_TTL_SECONDS, ALGO, ISSUER


def _encode(payload: dict, ttl: int) -> str:
    now = datetime.now(timezone.utc)
    body = {
        "iss": ISSUER,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl)).timestamp()),
        **payload
    }
    return jwt.encode(body, AUTH_SECRET, algorithm=ALGO)


def _claims(user) -> dict:
    return {"sub": str(user.id), "email": user.email, "role": user.role}


def issue_access(user) -> str:
    return _encode({**_claims(user), "scope": "access"}, ACCESS_TTL_SECONDS)


def issue_refresh(user) -> str:
    return _encode({**_claims(user), "scope": "refresh"}, REFRESH_TTL_SECONDS)


def decode_token(token: str) -> dict:
    return jwt.decode(token, AUTH_SECRET, algorithms=[ALGO], issuer=ISSUER)

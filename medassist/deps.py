from fastapi import Cookie, Depends, Header, HTTPException
from jose import JWTError
from sqlalchemy.orm import Session
from typing import Optional

from .config import COOKIE_NAME
from .db import get_db
from .jwt_utils import decode_token
from .models import User


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    return authorization.split(" ", 1)[1].strip() or None


def current_user(
    authorization: Optional[str] = Header(None),
    auth_token: Optional[str] = Cookie(None, alias=COOKIE_NAME),
    db: Session = Depends(get_db),
) -> User:
    token = bearer_token(authorization) or auth_token
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        claims = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Unauthorized")
    sub = str(claims.get("sub", ""))
    if claims.get("scope") != "access" or not sub.isdigit():
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = db.get(User, int(sub))
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def admin_user(user: User = Depends(current_user)) -> User:
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Forbidden")
    return user

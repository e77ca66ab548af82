import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional

from ..config import ACCESS_TTL_SECONDS, COOKIE_NAME, COOKIE_SECURE
from ..db import get_db
from ..deps import bearer_token, current_user
from ..jwt_utils import issue_access, issue_refresh, decode_token
from ..models import User, UserProfile
from ..passwords import hash_password, verify_password
from ..schemas import AuthResponse, LoginReq, RegisterReq, TokenPair, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_out(user: User) -> UserOut:
    return UserOut(id=user.id, email=user.email, full_name=user.full_name, role=user.role)


def _login_response(response: Response, user: User) -> AuthResponse:
    token = issue_access(user)
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=ACCESS_TTL_SECONDS,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="strict",
    )
    return AuthResponse(user=_user_out(user), token=token, refresh_token=issue_refresh(user))


@router.post("/register", response_model=AuthResponse)
def register(payload: RegisterReq, response: Response, db: Session = Depends(get_db)):
    email = payload.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=409, detail="User already exists")

    try:
        user = User(
            email=email,
            password_hash=hash_password(payload.password),
            full_name=payload.full_name,
            role="patient",
        )
        db.add(user)
        db.flush()
        db.add(UserProfile(
            user_id=user.id,
            full_name=payload.full_name,
            email=email,
            medical_conditions=[],
            current_medications=[],
            allergies=[],
            family_history=[],
        ))
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        db.rollback()
        raise HTTPException(status_code=409, detail="User already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration failed for %s", email)
        raise HTTPException(status_code=500, detail="Registration failed")

    logger.info("Registered user %s", user.id)
    return _login_response(response, user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginReq, response: Response, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == payload.email.lower()).first()
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _login_response(response, user)


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME)
    return {"ok": True}


@router.get("/me", response_model=UserOut)
def whoami(user: User = Depends(current_user)):
    return _user_out(user)


@router.post("/token/refresh", response_model=TokenPair)
def refresh_token(authorization: Optional[str] = Header(None), db: Session = Depends(get_db)):
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    try:
        claims = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    if claims.get("scope") != "refresh":
        raise HTTPException(status_code=401, detail="Refresh token required")

    sub = str(claims.get("sub", ""))
    user = db.get(User, int(sub)) if sub.isdigit() else None
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return TokenPair(access_token=issue_access(user), refresh_token=issue_refresh(user))

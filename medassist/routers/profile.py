import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..deps import current_user
from ..models import User, UserProfile
from ..schemas import ProfileOut, ProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


def load_profile(db: Session, user_id: int):
    return db.query(UserProfile).filter(UserProfile.user_id == user_id).first()


@router.get("")
def get_profile(user: User = Depends(current_user), db: Session = Depends(get_db)):
    profile = load_profile(db, user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return {"profile": ProfileOut.model_validate(profile)}


@router.put("")
def update_profile(payload: ProfileUpdate, user: User = Depends(current_user), db: Session = Depends(get_db)):
    profile = load_profile(db, user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")

    try:
        for field, value in payload.model_dump().items():
            setattr(profile, field, value)
        profile.updated_at = datetime.now(timezone.utc)
        db.commit()
        db.refresh(profile)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Profile update failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to update profile")

    return {"profile": ProfileOut.model_validate(profile)}

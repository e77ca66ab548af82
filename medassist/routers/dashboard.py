from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..deps import current_user
from ..models import DietPlan, HealthRoadmap, SymptomAssessment, User
from ..schemas import DashboardSummary
from .profile import load_profile

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _profile_complete(profile) -> bool:
    if profile is None:
        return False
    return all([profile.date_of_birth, profile.gender, profile.height, profile.weight])


@router.get("/summary", response_model=DashboardSummary)
def summary(user: User = Depends(current_user), db: Session = Depends(get_db)):
    latest = (
        db.query(SymptomAssessment)
        .filter(SymptomAssessment.user_id == user.id)
        .order_by(SymptomAssessment.created_at.desc(), SymptomAssessment.id.desc())
        .first()
    )
    return DashboardSummary(
        assessments=db.query(SymptomAssessment).filter(SymptomAssessment.user_id == user.id).count(),
        roadmaps=db.query(HealthRoadmap).filter(HealthRoadmap.user_id == user.id).count(),
        diet_plans=db.query(DietPlan).filter(DietPlan.user_id == user.id).count(),
        latest_urgency=latest.ai_assessment.get("urgency_level") if latest else None,
        profile_complete=_profile_complete(load_profile(db, user.id)),
    )

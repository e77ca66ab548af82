import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..artifacts import age_from_dob, roadmap_goals, roadmap_weekly_plan
from ..db import get_db
from ..deps import current_user
from ..llm import OpenAIService, get_llm
from ..models import HealthRoadmap, User
from ..schemas import RoadmapOut, RoadmapReq
from .profile import load_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health-roadmap", tags=["health-roadmap"])


@router.post("/generate")
def generate_roadmap(
    payload: RoadmapReq,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
    llm: OpenAIService = Depends(get_llm),
):
    try:
        profile = load_profile(db, user.id)
        data = llm.generate_health_roadmap({
            "age": age_from_dob(profile.date_of_birth) if profile else None,
            "gender": profile.gender if profile else None,
            "medical_conditions": profile.medical_conditions if profile else [],
            "current_medications": profile.current_medications if profile else [],
            "health_goals": payload.health_goals,
            "preferences": payload.preferences.model_dump() if payload.preferences else None,
        })

        goals = roadmap_goals(data)
        weekly_plan = roadmap_weekly_plan(data)
        recommendations = data.get("recommendations") or []

        roadmap = HealthRoadmap(
            user_id=user.id,
            goals=goals,
            weekly_plan=weekly_plan,
            recommendations=recommendations,
        )
        db.add(roadmap)
        db.commit()
        db.refresh(roadmap)
    except Exception:
        db.rollback()
        logger.exception("Health roadmap generation failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to generate health roadmap")

    return {
        "roadmapId": roadmap.id,
        "goals": goals,
        "weeklyPlan": weekly_plan,
        "recommendations": recommendations,
    }


@router.get("/generate")
def list_roadmaps(user: User = Depends(current_user), db: Session = Depends(get_db)):
    rows = (
        db.query(HealthRoadmap)
        .filter(HealthRoadmap.user_id == user.id)
        .order_by(HealthRoadmap.created_at.desc(), HealthRoadmap.id.desc())
        .all()
    )
    return {"roadmaps": [RoadmapOut.model_validate(r) for r in rows]}

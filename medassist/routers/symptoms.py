import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..artifacts import DISCLAIMER, age_from_dob, assessment_record
from ..db import get_db
from ..deps import current_user
from ..llm import OpenAIService, get_llm
from ..models import SymptomAssessment, User
from ..schemas import AssessmentOut, SymptomAnalyzeReq
from .profile import load_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/symptoms", tags=["symptoms"])


@router.post("/analyze")
def analyze_symptoms(
    payload: SymptomAnalyzeReq,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
    llm: OpenAIService = Depends(get_llm),
):
    try:
        profile = load_profile(db, user.id)
        analysis = llm.analyze_symptoms({
            "symptoms": payload.symptoms,
            "severity": payload.severity,
            "duration": payload.duration,
            "age": age_from_dob(profile.date_of_birth) if profile else None,
            "gender": profile.gender if profile else None,
            "medical_history": profile.medical_conditions if profile else [],
            "current_medications": profile.current_medications if profile else [],
        })

        assessment = SymptomAssessment(
            user_id=user.id,
            symptoms=payload.symptoms,
            severity=payload.severity,
            duration=payload.duration,
            additional_notes=payload.additional_notes,
            ai_assessment=assessment_record(analysis),
        )
        db.add(assessment)
        db.commit()
        db.refresh(assessment)
    except Exception:
        db.rollback()
        logger.exception("Symptom analysis failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to analyze symptoms")

    return {"assessmentId": assessment.id, "analysis": analysis, "disclaimer": DISCLAIMER}


@router.get("/assessments")
def list_assessments(
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    rows = (
        db.query(SymptomAssessment)
        .filter(SymptomAssessment.user_id == user.id)
        .order_by(SymptomAssessment.created_at.desc(), SymptomAssessment.id.desc())
        .limit(limit)
        .all()
    )
    return {"assessments": [AssessmentOut.model_validate(r) for r in rows]}

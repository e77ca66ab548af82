import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..artifacts import age_from_dob, grocery_list, weekly_meals
from ..db import get_db
from ..deps import current_user
from ..llm import OpenAIService, get_llm
from ..models import DietPlan, User
from ..schemas import DietPlanOut, DietPlanReq
from .profile import load_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/diet-plan", tags=["diet-plan"])


@router.post("/generate")
def generate_diet_plan(
    payload: DietPlanReq,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
    llm: OpenAIService = Depends(get_llm),
):
    prefs = payload.preferences
    try:
        profile = load_profile(db, user.id)
        data = llm.generate_diet_plan({
            **prefs.model_dump(),
            "age": age_from_dob(profile.date_of_birth) if profile else None,
            "gender": profile.gender if profile else None,
            "weight": profile.weight if profile else None,
            "height": profile.height if profile else None,
            "health_conditions": (profile.medical_conditions if profile else []) + prefs.health_conditions,
            "allergies": (profile.allergies if profile else []) + prefs.allergies,
        })

        meals = weekly_meals(data)
        groceries = grocery_list(data)
        summary = data.get("nutritionalSummary")

        plan = DietPlan(
            user_id=user.id,
            preferences=prefs.model_dump(by_alias=True),
            weekly_meals=meals,
            grocery_list=groceries,
            nutritional_summary=summary,
        )
        db.add(plan)
        db.commit()
        db.refresh(plan)
    except Exception:
        db.rollback()
        logger.exception("Diet plan generation failed for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to generate diet plan")

    return {
        "dietPlanId": plan.id,
        "weeklyMeals": meals,
        "groceryList": groceries,
        "nutritionalSummary": summary,
        "shoppingList": data.get("shoppingList"),
    }


@router.get("/generate")
def list_diet_plans(user: User = Depends(current_user), db: Session = Depends(get_db)):
    rows = (
        db.query(DietPlan)
        .filter(DietPlan.user_id == user.id)
        .order_by(DietPlan.created_at.desc(), DietPlan.id.desc())
        .all()
    )
    return {"dietPlans": [DietPlanOut.model_validate(r) for r in rows]}

"""Reshape raw LLM output into the rows we persist."""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

DISCLAIMER = (
    "This assessment is for informational purposes only and should not replace professional "
    "medical advice. Please consult with a healthcare provider for proper diagnosis and treatment."
)


def age_from_dob(dob: Optional[date], today: Optional[date] = None) -> Optional[int]:
    # year difference only, birthdays are not taken into account
    if dob is None:
        return None
    today = today or date.today()
    return today.year - dob.year


def assessment_record(analysis: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "possible_conditions": analysis.get("possibleConditions", []),
        "recommendations": analysis.get("recommendations", []),
        "urgency_level": analysis.get("urgencyLevel"),
        "detailed_analysis": analysis.get("detailedAnalysis"),
        "red_flags": analysis.get("redFlags", []),
        "follow_up_questions": analysis.get("followUpQuestions", []),
    }


def _goal_rows(goals: List[Dict[str, Any]], prefix: str) -> List[Dict[str, Any]]:
    return [
        {
            "id": f"{prefix}_{i}",
            "goal": goal.get("goal"),
            "target_date": goal.get("targetDate"),
            "completed": False,
            "progress_percentage": 0,
        }
        for i, goal in enumerate(goals, start=1)
    ]


def roadmap_goals(data: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "short_term": _goal_rows(data.get("shortTermGoals") or [], "st"),
        "long_term": _goal_rows(data.get("longTermGoals") or [], "lt"),
    }


def roadmap_weekly_plan(data: Dict[str, Any], now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Number every task and give it a due date ``week`` weeks from now."""
    now = now or datetime.now(timezone.utc)
    plan = []
    for week in data.get("weeklyPlan") or []:
        n = int(week.get("week") or 0)
        due = (now + timedelta(weeks=n)).isoformat()
        plan.append({
            "week": n,
            "focus": week.get("focus"),
            "tasks": [
                {"id": f"w{n}_t{i}", "task": task, "completed": False, "due_date": due}
                for i, task in enumerate(week.get("tasks") or [], start=1)
            ],
        })
    return plan


def _as_list(meal: Any) -> List[Any]:
    if meal is None:
        return []
    return meal if isinstance(meal, list) else [meal]


def weekly_meals(data: Dict[str, Any]) -> Dict[str, Dict[str, List[Any]]]:
    plan = data.get("weeklyPlan") or {}
    meals = {}
    for day in WEEKDAYS:
        entry = plan.get(day)
        if not entry:
            continue
        meals[day] = {
            "breakfast": _as_list(entry.get("breakfast")),
            "lunch": _as_list(entry.get("lunch")),
            "dinner": _as_list(entry.get("dinner")),
            "snacks": entry.get("snacks") or [],
        }
    return meals


def grocery_list(data: Dict[str, Any]) -> List[str]:
    groceries = []
    for items in (data.get("shoppingList") or {}).values():
        groceries.extend(_as_list(items))
    return groceries

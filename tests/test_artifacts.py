from datetime import date, datetime, timedelta, timezone

from medassist.artifacts import (
    age_from_dob,
    assessment_record,
    grocery_list,
    roadmap_goals,
    roadmap_weekly_plan,
    weekly_meals,
)


def test_age_is_year_difference():
    assert age_from_dob(date(1990, 12, 31), today=date(2024, 1, 1)) == 34
    assert age_from_dob(None) is None


def test_assessment_record_defaults():
    rec = assessment_record({"urgencyLevel": "medium"})
    assert rec["urgency_level"] == "medium"
    assert rec["possible_conditions"] == [] and rec["red_flags"] == []
    assert rec["detailed_analysis"] is None


def test_roadmap_goals_ids():
    goals = roadmap_goals({"shortTermGoals": [{"goal": "a"}, {"goal": "b", "targetDate": "soon"}]})
    assert [g["id"] for g in goals["short_term"]] == ["st_1", "st_2"]
    assert goals["short_term"][1]["target_date"] == "soon"
    assert goals["long_term"] == []


def test_weekly_plan_due_dates():
    now = datetime(2024, 3, 1, tzinfo=timezone.utc)
    plan = roadmap_weekly_plan({"weeklyPlan": [{"week": 3, "focus": "x", "tasks": ["a", "b"]}]}, now=now)
    tasks = plan[0]["tasks"]
    assert [t["id"] for t in tasks] == ["w3_t1", "w3_t2"]
    assert tasks[0]["due_date"] == (now + timedelta(weeks=3)).isoformat()
    assert tasks[0]["completed"] is False


def test_weekly_meals_wraps_and_skips():
    meals = weekly_meals({"weeklyPlan": {
        "sunday": {"breakfast": "toast", "lunch": ["a", "b"], "dinner": None, "snacks": None},
        "funday": {"breakfast": "x"},
    }})
    assert list(meals) == ["sunday"]
    assert meals["sunday"] == {"breakfast": ["toast"], "lunch": ["a", "b"], "dinner": [], "snacks": []}


def test_grocery_list_flattens():
    assert grocery_list({"shoppingList": {"a": ["x", "y"], "b": "z"}}) == ["x", "y", "z"]
    assert grocery_list({}) == []

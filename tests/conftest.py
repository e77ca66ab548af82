import os

# must be set before medassist modules read their config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEARCH_CACHE_ENABLED"] = "0"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTH_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from medassist.db import SessionLocal, engine
from medassist.llm import LLMError, get_llm
from medassist.main import app
from medassist.models import Base, HealthcareProvider, User
from medassist.jwt_utils import issue_access
from medassist.passwords import hash_password


class FakeLLM:
    """Stands in for OpenAIService; records requests and replays canned JSON."""

    def __init__(self):
        self.calls = []
        self.fail = False
        self.symptoms = {
            "possibleConditions": [{"condition": "Common cold", "probability": 60, "description": "Viral URI"}],
            "recommendations": ["Rest", "Hydrate"],
            "urgencyLevel": "low",
            "detailedAnalysis": "Likely viral.",
            "redFlags": ["Shortness of breath"],
            "followUpQuestions": ["Any fever?"],
        }
        self.roadmap = {
            "shortTermGoals": [{"goal": "Walk daily", "targetDate": "2 weeks"}],
            "longTermGoals": [{"goal": "Lose 5kg", "targetDate": "6 months"}, {"goal": "Run 5k", "targetDate": "1 year"}],
            "weeklyPlan": [
                {"week": 1, "focus": "Habits", "tasks": ["Walk 20 min", "Sleep by 11pm"]},
                {"week": 2, "focus": "Diet", "tasks": ["Cook at home"]},
            ],
            "recommendations": ["Track progress"],
        }
        self.diet = {
            "weeklyPlan": {
                "monday": {
                    "breakfast": {"name": "Oatmeal", "calories": 300},
                    "lunch": [{"name": "Salad", "calories": 400}],
                    "dinner": {"name": "Salmon", "calories": 500},
                },
                "tuesday": {
                    "breakfast": {"name": "Yogurt"},
                    "lunch": {"name": "Soup"},
                    "dinner": {"name": "Tofu"},
                    "snacks": [{"name": "Apple"}],
                },
            },
            "shoppingList": {"grains": ["Oats"], "proteins": ["Salmon", "Tofu"], "fruits": []},
            "nutritionalSummary": {"dailyAverageCalories": 1800},
        }

    def _reply(self, kind, req, data):
        self.calls.append((kind, req))
        if self.fail:
            raise LLMError("model unavailable")
        return data

    def analyze_symptoms(self, req):
        return self._reply("symptoms", req, self.symptoms)

    def generate_health_roadmap(self, req):
        return self._reply("roadmap", req, self.roadmap)

    def generate_diet_plan(self, req):
        return self._reply("diet", req, self.diet)


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def llm():
    fake = FakeLLM()
    app.dependency_overrides[get_llm] = lambda: fake
    return fake


@pytest.fixture
def client():
    return TestClient(app)


def register(client, email="pat@example.com", password="s3cretpass", full_name="Pat Doe"):
    resp = client.post("/api/auth/register", json={"email": email, "password": password, "fullName": full_name})
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def auth(client):
    token = register(client)["token"]
    # drop the cookie so tests exercise the bearer header explicitly
    client.cookies.clear()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_auth(db):
    admin = User(email="admin@example.com", password_hash=hash_password("adminpass"), full_name="Admin", role="admin")
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return {"Authorization": f"Bearer {issue_access(admin)}"}


def add_provider(db, **fields):
    defaults = dict(
        name="Dr. Test",
        specialty="Family Medicine",
        latitude=40.7128,
        longitude=-74.0060,
        accepted_insurance=[],
        languages=[],
    )
    defaults.update(fields)
    provider = HealthcareProvider(**defaults)
    db.add(provider)
    db.commit()
    db.refresh(provider)
    return provider

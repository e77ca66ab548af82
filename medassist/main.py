import logging

from fastapi import FastAPI
from sqlalchemy import text

from .config import LOG_LEVEL
from .db import engine
from .models import Base
from .routers import auth, dashboard, diet_plans, profile, providers, roadmaps, symptoms

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="MedAssist API", version="0.1.0")

# Create tables if not exist (alembic migrations mirror this schema)
Base.metadata.create_all(bind=engine)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/ready")
def ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ready": True}
    except Exception:
        logger.warning("database not reachable", exc_info=True)
        return {"ready": False}


app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(symptoms.router)
app.include_router(roadmaps.router)
app.include_router(diet_plans.router)
app.include_router(providers.router)
app.include_router(dashboard.router)

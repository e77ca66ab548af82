import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ..cache import SearchCache, get_cache, search_key
from ..config import DEFAULT_RADIUS_MILES
from ..db import get_db
from ..deps import admin_user, current_user
from ..geo import search
from .. import models, schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/providers", tags=["providers"])


@router.get("", response_model=List[schemas.ProviderOut])
def list_providers(db: Session = Depends(get_db), user: models.User = Depends(current_user)):
    rows = db.query(models.HealthcareProvider).order_by(models.HealthcareProvider.id.desc()).limit(50).all()
    return rows


@router.post("", response_model=schemas.ProviderOut, status_code=201)
def create_provider(
    payload: schemas.ProviderCreate,
    db: Session = Depends(get_db),
    user: models.User = Depends(admin_user),
    cache: Optional[SearchCache] = Depends(get_cache),
):
    obj = models.HealthcareProvider(**payload.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    if cache is not None:
        cache.invalidate()
    logger.info("Provider %s added to catalog", obj.id)
    return obj


def load_catalog(db: Session, specialty: Optional[str]) -> List[dict]:
    """Provider rows as plain dicts, optionally pre-filtered by specialty in SQL."""
    q = db.query(models.HealthcareProvider)
    # SQLite LIKE folds ASCII case only; non-ASCII terms are left to geo.search
    if specialty and specialty.lower() != "all" and specialty.isascii():
        q = q.filter(models.HealthcareProvider.specialty.ilike(f"%{specialty}%"))
    rows = q.order_by(models.HealthcareProvider.id).all()
    return [schemas.ProviderOut.model_validate(r).model_dump() for r in rows]


@router.get("/search", response_model=schemas.SearchResponse)
def search_providers(
    lat: float = Query(0.0),
    lng: float = Query(0.0),
    radius: float = Query(DEFAULT_RADIUS_MILES),
    specialty: Optional[str] = Query(None),
    insurance: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user: models.User = Depends(current_user),
    cache: Optional[SearchCache] = Depends(get_cache),
):
    query = schemas.ProviderSearchQuery(
        latitude=lat,
        longitude=lng,
        radius=radius,
        specialty=specialty or None,
        insurance=insurance or None,
    )

    key = search_key(lat, lng, radius, query.specialty, query.insurance)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached

    try:
        hits = search(load_catalog(db, query.specialty), query)
    except Exception:
        logger.exception("Provider search failed")
        raise HTTPException(status_code=500, detail="Failed to search providers")

    resp = {"count": len(hits), "providers": hits}
    if cache is not None:
        cache.set(key, resp)
    return resp

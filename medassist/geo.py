"""Proximity search over a provider catalog.

Everything here is a pure function of its inputs: the catalog is never
mutated and nothing touches the database or the network.
"""
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .schemas import ProviderSearchQuery

EARTH_RADIUS_MILES = 3959


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in miles between two lat/lon points (degrees)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def matches_specialty(provider: Mapping[str, Any], specialty: Optional[str]) -> bool:
    if not specialty or specialty.lower() == "all":
        return True
    return specialty.lower() in (provider.get("specialty") or "").lower()


def accepts_insurance(provider: Mapping[str, Any], insurance: Optional[str]) -> bool:
    if not insurance:
        return True
    return insurance in (provider.get("accepted_insurance") or ())


def _distance_to(provider: Mapping[str, Any], lat: float, lon: float) -> float:
    plat, plon = provider.get("latitude"), provider.get("longitude")
    if plat is None or plon is None:
        return math.nan
    # math.sin raises on inf, so non-finite input takes the NaN path
    if not all(math.isfinite(v) for v in (lat, lon, plat, plon)):
        return math.nan
    return haversine_miles(lat, lon, plat, plon)


def search(catalog: Sequence[Mapping[str, Any]], query: ProviderSearchQuery) -> List[Dict[str, Any]]:
    """Providers within ``query.radius`` miles, nearest first.

    Each hit is a copy of the provider mapping with a ``distance`` key.
    NaN distances (bad or missing coordinates) fail the radius check and
    are dropped. Equal distances keep catalog order.
    """
    if not query.radius > 0:
        return []

    hits = []
    for provider in catalog:
        if not matches_specialty(provider, query.specialty):
            continue
        if not accepts_insurance(provider, query.insurance):
            continue
        distance = _distance_to(provider, query.latitude, query.longitude)
        if distance <= query.radius:
            hits.append({**provider, "distance": distance})

    hits.sort(key=lambda hit: hit["distance"])
    return hits

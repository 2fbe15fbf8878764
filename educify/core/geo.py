"""
Great-circle distance (Haversine / spherical law of cosines form)

The SQL expression is evaluated by the store so filtering and ordering
happen in one query; haversine_km is the same formula in Python.
"""
import math

from sqlalchemy import func

EARTH_RADIUS_KM = 6371.0


def distance_km_expr(lat: float, lng: float, lat_col, lng_col):
    """SQL expression for the distance in km between (lat, lng) and a row's coordinates"""
    cosine = (
        func.cos(func.radians(lat)) * func.cos(func.radians(lat_col))
        * func.cos(func.radians(lng_col) - func.radians(lng))
        + func.sin(func.radians(lat)) * func.sin(func.radians(lat_col))
    )
    # rounding can push the cosine just past +-1 for identical or antipodal points
    return EARTH_RADIUS_KM * func.acos(func.greatest(-1.0, func.least(1.0, cosine)))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    cosine = (
        math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.cos(math.radians(lng2) - math.radians(lng1))
        + math.sin(math.radians(lat1)) * math.sin(math.radians(lat2))
    )
    return EARTH_RADIUS_KM * math.acos(max(-1.0, min(1.0, cosine)))

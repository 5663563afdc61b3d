"""
Core package: astronomy math for the altitude plot.

Main exports:
    normalize_degrees, to_radians, to_degrees, hours_to_degrees
    days_since_j2000, local_sidereal_time, hour_angle
    altitude_degrees, altitude_at_instant
    utc_midnight, instant_after_hours, altitude_curve
    Observer, SkyTarget
"""
from .astro_math import (
    J2000,
    normalize_degrees,
    to_radians,
    to_degrees,
    hours_to_degrees,
    dms_to_degrees,
    hms_to_degrees,
    days_since_j2000,
    local_sidereal_time,
    hour_angle,
    altitude_degrees,
    altitude_at_instant,
)
from .astro_time import utc_midnight, instant_after_hours, altitude_curve
from .types import Observer, SkyTarget

__all__ = [
    "J2000",
    "normalize_degrees",
    "to_radians",
    "to_degrees",
    "hours_to_degrees",
    "dms_to_degrees",
    "hms_to_degrees",
    "days_since_j2000",
    "local_sidereal_time",
    "hour_angle",
    "altitude_degrees",
    "altitude_at_instant",
    "utc_midnight",
    "instant_after_hours",
    "altitude_curve",
    "Observer",
    "SkyTarget",
]

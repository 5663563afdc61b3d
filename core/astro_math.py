"""
Astro Math

Angle helpers and the altitude chain used by the altitude plot:
- Degree normalisation and degree/radian/hour conversions
- Days since J2000
- Local Sidereal Time, hour angle
- RA/Dec -> altitude for an observer

Formulas follow http://www.stargazing.net/kepler/altaz.html
"""

import math
from datetime import datetime, timedelta, timezone

import numpy as np


# Reference epoch for day counts
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
ONE_DAY = timedelta(days=1)


def as_utc(instant: datetime) -> datetime:
    """Read a datetime as UTC (naive datetimes are assumed to be UTC)"""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def normalize_degrees(degrees: float) -> float:
    """
    Reduce an angle into [0, 360)

    Args:
        degrees: Any real angle (may be far outside one period)

    Returns:
        Equivalent angle in [0, 360). NaN for non-finite input.
    """
    d = degrees % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if d == 360.0 else d


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def hours_to_degrees(hours: float) -> float:
    """Hours (e.g. RA) to degrees, 24h = 360°"""
    return hours * 15.0


def dms_to_degrees(degrees: float = 0.0, minutes: float = 0.0,
                   seconds: float = 0.0) -> float:
    """
    Sexagesimal degrees to decimal degrees

    The sign of the first non-zero component applies to the whole angle,
    so dms_to_degrees(-36, 28) == -36.4667 and dms_to_degrees(0, -30) == -0.5.
    """
    sign = 1.0
    for part in (degrees, minutes, seconds):
        if part != 0:
            sign = -1.0 if part < 0 else 1.0
            break
    return sign * (abs(degrees) + abs(minutes) / 60.0 + abs(seconds) / 3600.0)


def hms_to_degrees(hours: float = 0.0, minutes: float = 0.0,
                   seconds: float = 0.0) -> float:
    """Sexagesimal right ascension (h, m, s) to degrees"""
    return hours_to_degrees(hours + minutes / 60.0 + seconds / 3600.0)


def days_since_j2000(instant: datetime) -> float:
    """
    Days elapsed since J2000 (2000-01-01T12:00:00 UTC)

    Args:
        instant: datetime (naive = UTC)

    Returns:
        Signed, fractional number of days
    """
    return (as_utc(instant) - J2000) / ONE_DAY


def local_sidereal_time(instant: datetime, longitude_deg: float) -> float:
    """
    Local Sidereal Time in degrees

    The time of day enters twice, once through the fractional day count and
    once through the hour/minute terms. Reference values depend on it.

    Args:
        instant: datetime (naive = UTC)
        longitude_deg: Observer longitude (positive East)

    Returns:
        LST in degrees [0, 360)
    """
    utc = as_utc(instant)
    days = days_since_j2000(utc)

    degrees = (100.46
               + 0.985647 * days
               + longitude_deg
               + 15.0 * utc.hour
               + 0.25 * utc.minute)
    return normalize_degrees(degrees)


def hour_angle(lst_deg: float, ra_deg: float) -> float:
    """Hour angle in degrees [0, 360)"""
    return normalize_degrees(lst_deg - ra_deg)


def altitude_degrees(lat_deg: float, dec_deg: float, ha_deg: float) -> float:
    """
    Altitude of an object above the horizon

    Args:
        lat_deg: Observer latitude in degrees
        dec_deg: Declination in degrees
        ha_deg: Hour angle in degrees

    Returns:
        Altitude in degrees [-90, 90]. sin(alt) is clamped to [-1, 1];
        non-finite input gives NaN.
    """
    lat = to_radians(lat_deg)
    dec = to_radians(dec_deg)
    ha = to_radians(ha_deg)

    # infinite angles give NaN instead of raising
    with np.errstate(invalid="ignore"):
        sin_alt = (np.sin(lat) * np.sin(dec)
                   + np.cos(lat) * np.cos(dec) * np.cos(ha))
    alt = np.arcsin(np.clip(sin_alt, -1.0, 1.0))
    return float(to_degrees(alt))


def altitude_at_instant(instant: datetime, lat_deg: float, lon_deg: float,
                        ra_deg: float, dec_deg: float) -> float:
    """
    Altitude of an object for an observer at a given instant

    Args:
        instant: datetime (naive = UTC)
        lat_deg, lon_deg: Observer location (longitude positive East)
        ra_deg, dec_deg: Object coordinates in degrees

    Returns:
        Altitude in degrees
    """
    lst = local_sidereal_time(instant, lon_deg)
    ha = hour_angle(lst, ra_deg)
    return altitude_degrees(lat_deg, dec_deg, ha)

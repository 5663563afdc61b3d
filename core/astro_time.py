from __future__ import annotations
import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .astro_math import altitude_at_instant, as_utc
from .types import Observer, SkyTarget

# Time utilities for plotting altitude against hours.
# Everything is UTC; no local timezone is applied.

MS_PER_HOUR = 1000 * 60 * 60
MS_PER_DAY = MS_PER_HOUR * 24


def utc_midnight(now: Optional[datetime] = None) -> datetime:
    """00:00 UTC of the day containing `now` (default: the system clock)."""
    if now is None:
        now = datetime.now(timezone.utc)
    now = as_utc(now)
    return now.replace(hour=0, minute=0, second=0, microsecond=0)

def instant_after_hours(origin: datetime, hours: float) -> Optional[datetime]:
    """origin + hours (fractional). None when hours is not finite."""
    if not math.isfinite(hours):
        return None
    return as_utc(origin) + timedelta(milliseconds=hours * MS_PER_HOUR)

def altitude_curve(observer: Observer, target: SkyTarget,
                   origin: datetime) -> Callable[[float], Optional[float]]:
    """
    Altitude of `target` seen by `observer`, as a function of hours
    from `origin`. Returns None where the instant cannot be built.
    """
    def altitude(hours: float) -> Optional[float]:
        try:
            instant = instant_after_hours(origin, hours)
        except OverflowError:
            return None
        if instant is None:
            return None
        return altitude_at_instant(instant, observer.lat_deg, observer.lon_deg,
                                   target.ra_deg, target.dec_deg)

    return altitude

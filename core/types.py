from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Observer:
    lat_deg: float
    lon_deg: float   # positive East
    name: str = ""

@dataclass(frozen=True, slots=True)
class SkyTarget:
    # J2000-ish equatorial coordinates, fixed for the session
    ra_deg: float
    dec_deg: float
    name: str = ""
    catalog_id: str = ""

    @property
    def label(self) -> str:
        if self.name and self.catalog_id:
            return f"{self.name} ({self.catalog_id})"
        return self.name or self.catalog_id

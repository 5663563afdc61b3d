"""
Built-in targets and observer sites

Coordinates are J2000, given in sexagesimal as usually published
and converted once at import time.
"""

from .astro_math import dms_to_degrees, hms_to_degrees
from .types import Observer, SkyTarget


PARIS = Observer(lat_deg=48.8566, lon_deg=2.3522, name="Paris")
PARMA = Observer(lat_deg=44.801, lon_deg=10.328, name="Parma")
BIRMINGHAM = Observer(lat_deg=52.5, lon_deg=dms_to_degrees(-1, 55), name="Birmingham")

OBSERVERS = {site.name: site for site in (PARIS, PARMA, BIRMINGHAM)}


# Format: (catalog_id, name, (ra_h, ra_m, ra_s), (dec_d, dec_m, dec_s))
_TARGET_DATA = [
    ("M13", "The great cluster in Hercules", (16, 41.7, 0), (36, 28, 0)),
    ("M31", "Andromeda Galaxy", (0, 42, 44.3), (41, 16, 9)),
    ("M42", "Orion Nebula", (5, 35, 17.3), (-5, 23, 28)),
    ("M45", "Pleiades", (3, 47, 24), (24, 7, 0)),
    ("M57", "Ring Nebula", (18, 53, 35.1), (33, 1, 45)),
    ("M27", "Dumbbell Nebula", (19, 59, 36.3), (22, 43, 16)),
]

TARGETS = [
    SkyTarget(ra_deg=hms_to_degrees(*ra), dec_deg=dms_to_degrees(*dec),
              name=name, catalog_id=cid)
    for cid, name, ra, dec in _TARGET_DATA
]

TARGETS_BY_ID = {t.catalog_id: t for t in TARGETS}

M13 = TARGETS_BY_ID["M13"]

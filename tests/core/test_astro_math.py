import math
import unittest
from datetime import datetime, timedelta, timezone

from core.astro_math import (
    altitude_at_instant,
    altitude_degrees,
    days_since_j2000,
    dms_to_degrees,
    hms_to_degrees,
    hour_angle,
    hours_to_degrees,
    local_sidereal_time,
    normalize_degrees,
    to_degrees,
    to_radians,
)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# -----------------------------------------------------------------------------
#           AngleTests
# -----------------------------------------------------------------------------
class AngleTests(unittest.TestCase):
    def test_normalize_in_range_unchanged(self):
        for d in (0, 1, 202.12, 359, 359.999999):
            self.assertEqual(normalize_degrees(d), d)
        self.assertEqual(normalize_degrees(360), 0)

    def test_normalize_negative(self):
        cases = [(-1, 359), (-202.12, 157.88), (-359, 1), (-359.9, 0.1), (-360, 0)]
        for d, expected in cases:
            self.assertAlmostEqual(normalize_degrees(d), expected, places=3)

    def test_normalize_above_360(self):
        cases = [(360.1, 0.1), (361, 1), (500, 140), (720, 0), (721, 1), (721.1, 1.1)]
        for d, expected in cases:
            self.assertAlmostEqual(normalize_degrees(d), expected, places=3)

    def test_normalize_far_outside_one_period(self):
        self.assertAlmostEqual(normalize_degrees(7841.358137), 281.358137, places=6)
        self.assertAlmostEqual(normalize_degrees(-3601), 359.0, places=9)

    def test_normalize_range_and_periodicity(self):
        for d in (-1e-20, -1e-13, -123456.789, -0.5, 0.0, 12.5, 359.9999, 98765.4321):
            r = normalize_degrees(d)
            self.assertGreaterEqual(r, 0.0)
            self.assertLess(r, 360.0)
            self.assertEqual(normalize_degrees(r), r)

        for d in (-123456.789, -0.5, 0.0, 12.5, 200.25, 98765.4321):
            r = normalize_degrees(d)
            for k in (-3, 1, 5):
                self.assertAlmostEqual(normalize_degrees(d + 360 * k), r, places=6)

    def test_normalize_non_finite(self):
        self.assertTrue(math.isnan(normalize_degrees(math.nan)))
        self.assertTrue(math.isnan(normalize_degrees(math.inf)))

    def test_to_degrees(self):
        cases = [(0, 0), (1, 57.2958), (2, 114.5916), (3, 171.8873), (6, 343.7746), (math.pi, 180)]
        for r, expected in cases:
            self.assertAlmostEqual(to_degrees(r), expected, places=3)

    def test_to_radians(self):
        cases = [(0, 0), (1, 0.0174533), (5, 0.0872665), (6, 0.1047198), (360, 2 * math.pi)]
        for d, expected in cases:
            self.assertAlmostEqual(to_radians(d), expected, places=6)

    def test_radians_degrees_inverse(self):
        for d in (-720.5, -1.0, 0.0, 42.42, 359.99, 1e6):
            self.assertAlmostEqual(to_degrees(to_radians(d)), d, places=6)

    def test_hours_to_degrees(self):
        self.assertEqual(hours_to_degrees(24), 360)
        self.assertEqual(hours_to_degrees(1), 15)
        self.assertAlmostEqual(hours_to_degrees(16 + 41.7 / 60), 250.425)

    def test_sexagesimal(self):
        self.assertAlmostEqual(dms_to_degrees(36, 28), 36 + 28 / 60)
        self.assertAlmostEqual(dms_to_degrees(-5, 23, 28), -(5 + 23 / 60 + 28 / 3600))
        self.assertAlmostEqual(dms_to_degrees(0, -30), -0.5)
        self.assertAlmostEqual(dms_to_degrees(-1, 55), -1.9166666666666667)
        self.assertAlmostEqual(hms_to_degrees(16, 41.7), 250.425)
        self.assertAlmostEqual(hms_to_degrees(12), 180.0)


# -----------------------------------------------------------------------------
#           TimeTests
# -----------------------------------------------------------------------------
class DaysSinceJ2000Tests(unittest.TestCase):
    def test_epoch(self):
        self.assertEqual(days_since_j2000(utc(2000, 1, 1, 12, 0, 0)), 0)
        self.assertEqual(days_since_j2000(utc(2000, 1, 2, 12, 0, 0)), 1)

    def test_fractional(self):
        days = days_since_j2000(utc(2008, 4, 4, 15, 30, 0))
        self.assertGreater(days, 3016.1458333)
        self.assertLess(days, 3016.1458334)

    def test_before_epoch(self):
        days = days_since_j2000(utc(1998, 8, 10, 23, 10, 0))
        self.assertLess(days, -508.5347)
        self.assertGreater(days, -508.5348)

    def test_naive_is_utc(self):
        self.assertEqual(days_since_j2000(datetime(2000, 1, 2, 12)),
                         days_since_j2000(utc(2000, 1, 2, 12)))

    def test_aware_other_zone(self):
        cest = timezone(timedelta(hours=2))
        self.assertEqual(days_since_j2000(datetime(2000, 1, 2, 14, tzinfo=cest)), 1)

    def test_millisecond_resolution(self):
        d0 = days_since_j2000(utc(2000, 1, 1, 12, 0, 0))
        d1 = days_since_j2000(utc(2000, 1, 1, 12, 0, 0, 1000))
        self.assertAlmostEqual(d1 - d0, 0.001 / 86400.0, places=15)


class SiderealTimeTests(unittest.TestCase):
    def test_birmingham_1998(self):
        # 2310 UT, 10th August 1998, Birmingham UK (1 deg 55 min West)
        lst = local_sidereal_time(utc(1998, 8, 10, 23, 10, 0), -1.9166666666666667)
        self.assertGreater(lst, 304.8076)
        self.assertLess(lst, 304.8077)

    def test_in_range(self):
        for hour in range(0, 24, 5):
            lst = local_sidereal_time(utc(2024, 6, 1, hour, 17), 170.0)
            self.assertGreaterEqual(lst, 0.0)
            self.assertLess(lst, 360.0)

    def test_hour_angle(self):
        self.assertAlmostEqual(hour_angle(304.80762, 250.425), 54.38262, places=5)
        self.assertAlmostEqual(hour_angle(10.0, 20.0), 350.0)
        self.assertEqual(hour_angle(20.0, 20.0), 0.0)


# -----------------------------------------------------------------------------
#           AltitudeTests
# -----------------------------------------------------------------------------
class AltitudeTests(unittest.TestCase):
    def test_reference_altitude(self):
        alt = altitude_degrees(lat_deg=52.5, dec_deg=36.466667, ha_deg=54.382617)
        self.assertLess(abs(alt - 49.169122), 0.001)

    def test_zenith_and_horizon(self):
        self.assertAlmostEqual(altitude_degrees(45.0, 45.0, 0.0), 90.0, places=6)
        self.assertAlmostEqual(altitude_degrees(0.0, 0.0, 90.0), 0.0, places=6)
        self.assertAlmostEqual(altitude_degrees(0.0, 0.0, 270.0), 0.0, places=6)

    def test_clamped_at_pole(self):
        # sin(alt) can exceed 1 by rounding here
        alt = altitude_degrees(89.99999999, 89.99999999, 0.0)
        self.assertFalse(math.isnan(alt))
        self.assertAlmostEqual(alt, 90.0, places=5)

    def test_non_finite_propagates(self):
        self.assertTrue(math.isnan(altitude_degrees(math.nan, 10.0, 10.0)))
        self.assertTrue(math.isnan(altitude_degrees(52.5, math.inf, 10.0)))

    def test_altitude_at_instant_composes(self):
        instant = utc(1998, 8, 10, 23, 10, 0)
        lst = local_sidereal_time(instant, -1.9166666666666667)
        expected = altitude_degrees(52.5, 36.466667, hour_angle(lst, 250.425))
        alt = altitude_at_instant(instant, 52.5, -1.9166666666666667, 250.425, 36.466667)
        self.assertEqual(alt, expected)
        self.assertLess(abs(alt - 49.169), 0.01)

    def test_altitude_at_instant_2021(self):
        # Often quoted as ~0 deg, which the LST formula cannot give: the same
        # formula that reproduces the Birmingham 1998 LST yields 281.358 deg
        # here, so RA 0 / Dec 0 sits ~79 deg east of the meridian at ~6.886 deg
        alt = altitude_at_instant(utc(2021, 1, 1, 12, 0, 0), 52.5, 0.0, 0.0, 0.0)
        self.assertGreater(alt, 6.87)
        self.assertLess(alt, 6.90)


if __name__ == "__main__":
    unittest.main()

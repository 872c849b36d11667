"""
Tests for pyWGS84.projections

Worked examples from Snyder (1987) and the Ordnance Survey guide to
coordinate systems, plus forward/inverse round trips.
"""

import numpy as np
import pytest

from pyWGS84.projections import (
    AlbersEqualAreaConic,
    LambertConformalConic2SP,
    TransverseMercator,
    WebMercator,
    albers_cone,
    krueger_coefficients,
    lambert_cone,
    wrap_longitude,
)
from pyWGS84.spatial import Ellipsoid

WGS84 = Ellipsoid.from_name('WGS84')
GRS80 = Ellipsoid.from_name('GRS80')
CLARKE1866 = Ellipsoid.from_name('CLARKE1866')


class TestWrapLongitude:
    """Test longitude wrapping"""

    @pytest.mark.parametrize("dlon, expected", [
        (0.0, 0.0),
        (190.0, -170.0),
        (-190.0, 170.0),
        (180.0, -180.0),
        (540.0, -180.0),
    ])
    def test_wrap(self, dlon, expected):
        assert wrap_longitude(dlon) == pytest.approx(expected)


class TestTransverseMercator:
    """Test Transverse Mercator projection"""

    def test_rectifying_radius(self):
        """A is close to the mean of the semi-axes"""
        A, alpha, beta, delta = krueger_coefficients(WGS84.n)
        np.testing.assert_almost_equal(WGS84.a * A, 6367449.1458, decimal=3)
        assert len(alpha) == len(beta) == len(delta) == 6

    def test_sphere_coefficients(self):
        A, alpha, beta, delta = krueger_coefficients(0.0)
        assert A == 1.0
        assert all(c == 0.0 for c in alpha + beta + delta)

    def test_utm_origin(self):
        """UTM zone 32 origin maps to the central meridian on the equator"""
        utm32 = TransverseMercator(9.0, 0.0, 0.9996, 500000.0, 0.0)

        lon, lat = utm32.to_lonlat(500000.0, 0.0, WGS84)
        np.testing.assert_almost_equal(lon, 9.0, decimal=12)
        np.testing.assert_almost_equal(lat, 0.0, decimal=12)

        east, north = utm32.from_lonlat(9.0, 0.0, WGS84)
        np.testing.assert_almost_equal(east, 500000.0, decimal=6)
        np.testing.assert_almost_equal(north, 0.0, decimal=6)

    def test_ordnance_survey_example(self):
        """National Grid worked example on the Airy 1830 ellipsoid"""
        grid = TransverseMercator(-2.0, 49.0, 0.9996012717,
                                  400000.0, -100000.0)
        airy = Ellipsoid.from_name('AIRY1830')

        east, north = grid.from_lonlat(1.717921583, 52.657570306, airy)

        np.testing.assert_almost_equal(east, 651409.903, decimal=2)
        np.testing.assert_almost_equal(north, 313177.270, decimal=2)

    def test_central_meridian_symmetry(self):
        """Points mirrored about the central meridian mirror in easting"""
        tm = TransverseMercator(9.0, 0.0, 0.9996, 500000.0, 0.0)
        e1, n1 = tm.from_lonlat(7.0, 45.0, WGS84)
        e2, n2 = tm.from_lonlat(11.0, 45.0, WGS84)

        np.testing.assert_almost_equal(e1 - 500000.0, 500000.0 - e2, decimal=6)
        np.testing.assert_almost_equal(n1, n2, decimal=6)

    def test_roundtrip(self):
        """Round trip within +/-4 degrees of the central meridian"""
        tm = TransverseMercator(9.0, 0.0, 0.9996, 500000.0, 0.0)
        lon, lat = np.meshgrid(np.linspace(5.0, 13.0, 9),
                               np.linspace(-80.0, 80.0, 17))
        lon, lat = lon.ravel(), lat.ravel()

        east, north = tm.from_lonlat(lon, lat, WGS84)
        lon1, lat1 = tm.to_lonlat(east, north, WGS84)

        # 1e-8 degrees is about 1 mm
        np.testing.assert_allclose(lon1, lon, rtol=0, atol=1e-8)
        np.testing.assert_allclose(lat1, lat, rtol=0, atol=1e-8)

    def test_latitude_of_origin(self):
        """The natural origin maps to the false easting/northing"""
        tm = TransverseMercator(-2.0, 49.0, 0.9996012717, 400000.0, -100000.0)
        east, north = tm.from_lonlat(-2.0, 49.0, WGS84)

        np.testing.assert_almost_equal(east, 400000.0, decimal=6)
        np.testing.assert_almost_equal(north, -100000.0, decimal=6)

    def test_pole(self):
        tm = TransverseMercator(0.0, 0.0, 1.0, 0.0, 0.0)
        east, north = tm.from_lonlat(0.0, 90.0, WGS84)
        A, _, _, _ = krueger_coefficients(WGS84.n)

        # quarter meridian
        np.testing.assert_almost_equal(east, 0.0, decimal=6)
        np.testing.assert_almost_equal(north, WGS84.a * A * np.pi / 2.0,
                                       decimal=3)


class TestLambertConformalConic:
    """Test Lambert Conformal Conic projection"""

    def test_snyder_example(self):
        """Snyder (1987) p. 296, Clarke 1866 ellipsoid"""
        lcc = LambertConformalConic2SP(-96.0, 23.0, 33.0, 45.0, 0.0, 0.0)

        east, north = lcc.from_lonlat(-75.0, 35.0, CLARKE1866)

        np.testing.assert_allclose(east, 1894410.9, rtol=0, atol=1.0)
        np.testing.assert_allclose(north, 1564649.5, rtol=0, atol=1.0)

    def test_snyder_inverse(self):
        lcc = LambertConformalConic2SP(-96.0, 23.0, 33.0, 45.0, 0.0, 0.0)

        lon, lat = lcc.to_lonlat(1894410.9, 1564649.5, CLARKE1866)

        np.testing.assert_allclose(lon, -75.0, rtol=0, atol=1e-5)
        np.testing.assert_allclose(lat, 35.0, rtol=0, atol=1e-5)

    def test_cone_constant(self):
        """Snyder (1987) p. 296, n = 0.6304878"""
        n, _, _ = lambert_cone(CLARKE1866.a, CLARKE1866.e, CLARKE1866.e2,
                               33.0, 45.0, 23.0)
        np.testing.assert_allclose(n, 0.6304878, rtol=0, atol=1e-7)

    def test_cone_constants_cached(self):
        """Repeated calls reuse the constants of the same ellipsoid"""
        lcc = LambertConformalConic2SP(3.0, 46.5, 49.0, 44.0,
                                       700000.0, 6600000.0)
        lcc.from_lonlat(3.0, 46.5, GRS80)
        hits = lambert_cone.cache_info().hits
        east, north = lcc.from_lonlat(5.0, 45.0, GRS80)
        lcc.to_lonlat(east, north, GRS80)

        assert lambert_cone.cache_info().hits == hits + 2

    def test_false_origin(self):
        """The false origin maps to the false easting/northing"""
        lcc = LambertConformalConic2SP(3.0, 46.5, 49.0, 44.0,
                                       700000.0, 6600000.0)
        east, north = lcc.from_lonlat(3.0, 46.5, GRS80)

        np.testing.assert_almost_equal(east, 700000.0, decimal=6)
        np.testing.assert_almost_equal(north, 6600000.0, decimal=6)

    @pytest.mark.parametrize("sp1, sp2, lat0", [
        (49.0, 44.0, 46.5),
        (-33.0, -45.0, -23.0),
        (45.0, 45.0, 45.0),
    ])
    def test_roundtrip(self, sp1, sp2, lat0):
        lcc = LambertConformalConic2SP(3.0, lat0, sp1, sp2, 700000.0, 6600000.0)
        sign = np.sign(lat0)
        lon = np.array([-5.0, 0.0, 3.0, 8.0, 12.0])
        lat = sign * np.array([20.0, 35.0, 46.5, 60.0, 75.0])

        east, north = lcc.from_lonlat(lon, lat, GRS80)
        lon1, lat1 = lcc.to_lonlat(east, north, GRS80)

        np.testing.assert_allclose(lon1, lon, rtol=0, atol=1e-9)
        np.testing.assert_allclose(lat1, lat, rtol=0, atol=1e-9)

    def test_symmetric_parallels(self):
        with pytest.raises(ValueError, match="symmetric"):
            LambertConformalConic2SP(0.0, 0.0, 30.0, -30.0, 0.0, 0.0)


class TestAlbersEqualAreaConic:
    """Test Albers Equal-Area Conic projection"""

    def test_snyder_example(self):
        """Snyder (1987) p. 292, Clarke 1866 ellipsoid"""
        aea = AlbersEqualAreaConic(29.5, 45.5, 23.0, -96.0, 0.0, 0.0)

        east, north = aea.from_lonlat(-75.0, 35.0, CLARKE1866)

        np.testing.assert_allclose(east, 1885472.7, rtol=0, atol=1.0)
        np.testing.assert_allclose(north, 1535925.0, rtol=0, atol=1.0)

    def test_snyder_inverse(self):
        aea = AlbersEqualAreaConic(29.5, 45.5, 23.0, -96.0, 0.0, 0.0)

        lon, lat = aea.to_lonlat(1885472.7, 1535925.0, CLARKE1866)

        np.testing.assert_allclose(lon, -75.0, rtol=0, atol=1e-5)
        np.testing.assert_allclose(lat, 35.0, rtol=0, atol=1e-5)

    @pytest.mark.parametrize("sp1, sp2, lat0", [
        (34.0, 40.5, 0.0),
        (-20.0, -40.0, -30.0),
        (40.0, 40.0, 40.0),
    ])
    def test_roundtrip(self, sp1, sp2, lat0):
        aea = AlbersEqualAreaConic(sp1, sp2, lat0, -120.0, 0.0, -4000000.0)
        sign = -1.0 if sp1 < 0 else 1.0
        lon = np.array([-130.0, -124.0, -120.0, -114.0, -105.0])
        lat = sign * np.array([10.0, 32.5, 37.0, 42.0, 70.0])

        east, north = aea.from_lonlat(lon, lat, GRS80)
        lon1, lat1 = aea.to_lonlat(east, north, GRS80)

        np.testing.assert_allclose(lon1, lon, rtol=0, atol=1e-9)
        np.testing.assert_allclose(lat1, lat, rtol=0, atol=1e-9)

    def test_cone_constant(self):
        """On the sphere n is the mean sine of the standard parallels"""
        n, C, _ = albers_cone(6371000.0, 0.0, 0.0, 29.5, 45.5, 23.0)
        expected = (np.sin(np.radians(29.5)) + np.sin(np.radians(45.5))) / 2.0
        np.testing.assert_allclose(n, expected, rtol=0, atol=1e-12)
        np.testing.assert_allclose(
            C, np.cos(np.radians(29.5))**2 + 2.0 * n * np.sin(np.radians(29.5)),
            rtol=0, atol=1e-12)

    def test_cone_constants_cached(self):
        aea = AlbersEqualAreaConic(34.0, 40.5, 0.0, -120.0, 0.0, -4000000.0)
        aea.from_lonlat(-120.0, 37.0, GRS80)
        hits = albers_cone.cache_info().hits
        east, north = aea.from_lonlat(-118.0, 36.0, GRS80)
        aea.to_lonlat(east, north, GRS80)

        assert albers_cone.cache_info().hits == hits + 2

    def test_sphere(self):
        """Spherical Albers round trip"""
        sphere = Ellipsoid(6371000.0, float('inf'))
        aea = AlbersEqualAreaConic(29.5, 45.5, 23.0, -96.0, 0.0, 0.0)

        east, north = aea.from_lonlat(-75.0, 35.0, sphere)
        lon, lat = aea.to_lonlat(east, north, sphere)

        np.testing.assert_allclose(lon, -75.0, rtol=0, atol=1e-9)
        np.testing.assert_allclose(lat, 35.0, rtol=0, atol=1e-9)

    def test_symmetric_parallels(self):
        with pytest.raises(ValueError, match="symmetric"):
            AlbersEqualAreaConic(20.0, -20.0, 0.0, 0.0, 0.0, 0.0)


class TestWebMercator:
    """Test spherical Web Mercator"""

    def test_formula(self):
        east, north = WebMercator().from_lonlat(9.0, 48.0, WGS84)

        a = 6378137.0
        np.testing.assert_almost_equal(east, a * np.radians(9.0), decimal=6)
        np.testing.assert_almost_equal(
            north, a * np.log(np.tan(np.pi / 4.0 + np.radians(48.0) / 2.0)),
            decimal=6)

    def test_origin(self):
        east, north = WebMercator().from_lonlat(0.0, 0.0, WGS84)
        assert east == 0.0
        np.testing.assert_almost_equal(north, 0.0, decimal=6)

    def test_roundtrip(self):
        lon = np.array([-179.0, -45.0, 0.0, 9.0, 120.0])
        lat = np.array([-85.0, -30.0, 0.0, 48.0, 85.0])

        east, north = WebMercator().from_lonlat(lon, lat, WGS84)
        lon1, lat1 = WebMercator().to_lonlat(east, north, WGS84)

        np.testing.assert_allclose(lon1, lon, rtol=0, atol=1e-10)
        np.testing.assert_allclose(lat1, lat, rtol=0, atol=1e-10)

#!/usr/bin/env python
u"""
test_coordinates.py
Verify forward and backwards coordinate conversions against PROJ
"""
import pytest
import numpy as np

import pyWGS84

# Skip all tests in this module if pyproj is not installed
pyproj = pytest.importorskip("pyproj", reason="pyproj not installed")

# random points within a region
def random_points(west, south, east, north, N=1000, seed=0):
    rng = np.random.default_rng(seed)
    lon = west + (east - west)*rng.random(N)
    lat = south + (north - south)*rng.random(N)
    return lon, lat

# PURPOSE: verify Transverse Mercator against PROJ UTM
def test_utm():
    lon, lat = random_points(5.0, 0.0, 13.0, 84.0)
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input(4326),
        pyproj.CRS.from_user_input("+proj=utm +zone=32 +datum=WGS84"),
        always_xy=True)
    e1, n1 = transformer.transform(lon, lat)
    # convert with pyWGS84
    e2, n2, _ = pyWGS84.lonlat().to(pyWGS84.utm(32, True))(lon, lat, 0.0)
    # within a millimeter
    np.testing.assert_allclose(e2, e1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(n2, n1, rtol=0, atol=1e-3)

# PURPOSE: verify Lambert Conformal Conic against PROJ
def test_lambert_conformal_conic():
    lon, lat = random_points(-5.0, 41.0, 10.0, 51.5)
    proj = ("+proj=lcc +lat_0=46.5 +lon_0=3 +lat_1=49 +lat_2=44 "
        "+x_0=700000 +y_0=6600000 +ellps=GRS80 +units=m +no_defs")
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input("+proj=longlat +ellps=GRS80 +no_defs"),
        pyproj.CRS.from_user_input(proj), always_xy=True)
    e1, n1 = transformer.transform(lon, lat)
    # convert with the projection directly
    lcc = pyWGS84.LambertConformalConic2SP(3.0, 46.5, 49.0, 44.0,
        700000.0, 6600000.0)
    e2, n2 = lcc.from_lonlat(lon, lat, pyWGS84.Ellipsoid.from_name('GRS80'))
    np.testing.assert_allclose(e2, e1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(n2, n1, rtol=0, atol=1e-3)
    # inverse conversion
    lon2, lat2 = lcc.to_lonlat(e1, n1, pyWGS84.Ellipsoid.from_name('GRS80'))
    np.testing.assert_allclose(lon2, lon, rtol=0, atol=1e-9)
    np.testing.assert_allclose(lat2, lat, rtol=0, atol=1e-9)

# PURPOSE: verify Albers Equal-Area Conic against PROJ
def test_albers_equal_area():
    lon, lat = random_points(-124.45, 32.53, -114.12, 42.01)
    proj = ("+proj=aea +lat_1=34 +lat_2=40.5 +lat_0=0 +lon_0=-120 "
        "+x_0=0 +y_0=-4000000 +ellps=GRS80 +units=m +no_defs")
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input("+proj=longlat +ellps=GRS80 +no_defs"),
        pyproj.CRS.from_user_input(proj), always_xy=True)
    e1, n1 = transformer.transform(lon, lat)
    aea = pyWGS84.AlbersEqualAreaConic(34.0, 40.5, 0.0, -120.0,
        0.0, -4000000.0)
    e2, n2 = aea.from_lonlat(lon, lat, pyWGS84.Ellipsoid.from_name('GRS80'))
    np.testing.assert_allclose(e2, e1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(n2, n1, rtol=0, atol=1e-3)
    # inverse conversion
    lon2, lat2 = aea.to_lonlat(e1, n1, pyWGS84.Ellipsoid.from_name('GRS80'))
    np.testing.assert_allclose(lon2, lon, rtol=0, atol=1e-9)
    np.testing.assert_allclose(lat2, lat, rtol=0, atol=1e-9)

# PURPOSE: verify Web Mercator against EPSG:3857
def test_web_mercator():
    lon, lat = random_points(-179.0, -85.0, 179.0, 85.0)
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input(4326),
        pyproj.CRS.from_user_input(3857), always_xy=True)
    e1, n1 = transformer.transform(lon, lat)
    e2, n2, _ = pyWGS84.lonlat().to(pyWGS84.web_mercator())(lon, lat, 0.0)
    np.testing.assert_allclose(e2, e1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(n2, n1, rtol=0, atol=1e-3)

# PURPOSE: verify geodetic to cartesian conversions against PROJ
def test_geocentric():
    lon, lat = random_points(-180.0, -90.0, 180.0, 90.0)
    h = np.linspace(-1000.0, 10000.0, len(lon))
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input(4979),
        pyproj.CRS.from_user_input(4978), always_xy=True)
    x1, y1, z1 = transformer.transform(lon, lat, h)
    x2, y2, z2 = pyWGS84.to_cartesian(lon, lat, h)
    np.testing.assert_allclose(x2, x1, rtol=0, atol=1e-4)
    np.testing.assert_allclose(y2, y1, rtol=0, atol=1e-4)
    np.testing.assert_allclose(z2, z1, rtol=0, atol=1e-4)
    # inverse conversion
    ln, lt, ht = pyWGS84.to_geodetic(x1, y1, z1)
    ln1, lt1, ht1 = transformer.transform(x1, y1, z1, direction='INVERSE')
    np.testing.assert_allclose(lt, lt1, rtol=0, atol=1e-9)
    np.testing.assert_allclose(ht, ht1, rtol=0, atol=1e-4)

# PURPOSE: verify Helmert transformation against PROJ
@pytest.mark.parametrize("exact", [False, True])
def test_helmert(exact):
    params = (446.448, -125.157, 542.06, 0.1502, 0.247, 0.8421, -20.4894)
    pipeline = ("+proj=helmert +x={0} +y={1} +z={2} +rx={3} +ry={4} "
        "+rz={5} +s={6} +convention=position_vector").format(*params)
    if exact:
        pipeline += " +exact"
    transformer = pyproj.Transformer.from_pipeline(pipeline)
    # geocentric points over Great Britain
    lon, lat = random_points(-6.0, 50.0, 2.0, 58.0, N=100)
    x, y, z = pyWGS84.to_cartesian(lon, lat, 0.0, 'AIRY1830')
    x1, y1, z1 = transformer.transform(x, y, z)
    helmert = pyWGS84.Helmert.from_towgs84(*params, exact=exact)
    x2, y2, z2 = helmert.forward(x, y, z)
    np.testing.assert_allclose(x2, x1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(y2, y1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(z2, z1, rtol=0, atol=1e-3)

# PURPOSE: verify the National Grid projection (EPSG:27700 without datum)
def test_national_grid():
    lon, lat = random_points(-6.0, 50.0, 1.5, 58.5)
    proj = ("+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 "
        "+x_0=400000 +y_0=-100000 +ellps=airy +units=m +no_defs")
    transformer = pyproj.Transformer.from_crs(
        pyproj.CRS.from_user_input("+proj=longlat +ellps=airy +no_defs"),
        pyproj.CRS.from_user_input(proj), always_xy=True)
    e1, n1 = transformer.transform(lon, lat)
    grid = pyWGS84.osgb36_national_grid().projection
    e2, n2 = grid.from_lonlat(lon, lat, pyWGS84.Ellipsoid.from_name('AIRY1830'))
    np.testing.assert_allclose(e2, e1, rtol=0, atol=1e-3)
    np.testing.assert_allclose(n2, n1, rtol=0, atol=1e-3)

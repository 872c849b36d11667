"""
pyWGS84.systems - Named datums and coordinate reference systems

Datum parameters follow the PROJ ``towgs84`` definitions (position
vector convention), areas follow the EPSG areas of use.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from .area import BoundingBox
from .crs import (
    GeocentricReferenceSystem,
    GeographicReferenceSystem,
    ProjectedReferenceSystem,
)
from .datum import Datum, Helmert
from .projections import AlbersEqualAreaConic, TransverseMercator
from .spatial import WGS84 as _WGS84_ELLIPSOID, Ellipsoid

__all__ = [
    # Datums
    'dhdn2001',
    'etrs89',
    'nad83',
    'osgb36',
    'rgf93',
    'wgs84',
    # Coordinate reference systems
    'dhdn2001_gk',
    'etrs89_utm',
    'lonlat',
    'nad83_alabama_east',
    'nad83_alabama_west',
    'nad83_california_albers',
    'osgb36_national_grid',
    'rgf93_cc',
    'rgf93_france_lambert',
    'utm',
    'web_mercator',
    'xyz',
]

_GRS80 = Ellipsoid.from_name('GRS80')


# =============================================================================
# Datums
# =============================================================================

def wgs84() -> Datum:
    """World Geodetic System 1984"""
    return Datum(_WGS84_ELLIPSOID, name='WGS84')


def nad83() -> Datum:
    """North American Datum 1983, https://epsg.io/4269"""
    return Datum(_GRS80, area=BoundingBox(-180.0, 14.92, -47.74, 86.46),
                 name='NAD83')


def etrs89() -> Datum:
    """European Terrestrial Reference System 1989, https://epsg.io/4258"""
    return Datum(_GRS80, area=BoundingBox(-16.1, 32.88, 40.18, 84.73),
                 name='ETRS89')


def osgb36() -> Datum:
    """Ordnance Survey of Great Britain 1936, https://epsg.io/4277"""
    return Datum(
        'AIRY1830',
        Helmert.from_towgs84(446.448, -125.157, 542.06,
                             0.1502, 0.247, 0.8421, -20.4894),
        area=BoundingBox(-9.0, 49.75, 2.01, 61.01),
        name='OSGB36',
    )


def dhdn2001() -> Datum:
    """Deutsches Hauptdreiecksnetz, https://epsg.io/4314"""
    return Datum(
        'BESSEL1841',
        Helmert.from_towgs84(598.1, 73.7, 418.2, 0.202, 0.045, -2.455, 6.7),
        area=BoundingBox(5.86, 47.27, 15.04, 55.09),
        name='DHDN2001',
    )


def rgf93() -> Datum:
    """Réseau Géodésique Français 1993, https://epsg.io/4171"""
    return Datum(_GRS80, area=BoundingBox(-9.86, 41.15, 10.38, 51.56),
                 name='RGF93')


# =============================================================================
# Coordinate Reference Systems
# =============================================================================

def xyz() -> GeocentricReferenceSystem:
    """WGS84 geocentric, https://epsg.io/4978"""
    return wgs84().xyz()


def lonlat() -> GeographicReferenceSystem:
    """WGS84 geographic, https://epsg.io/4326"""
    return wgs84().lonlat()


def web_mercator() -> ProjectedReferenceSystem:
    """WGS84 Web Mercator, https://epsg.io/3857"""
    return wgs84().web_mercator()


def _utm_band(zone: float, south: float, north: float) -> BoundingBox:
    return BoundingBox(zone * 6 - 186, south, zone * 6 - 180, north)


def utm(zone: float, northern: bool) -> ProjectedReferenceSystem:
    """
    WGS84 UTM zone

    Similar to https://epsg.io/32632 (northern) or
    https://epsg.io/32732 (southern). The area is the 6 degree zone
    band, 0 to 84 degrees north or 80 degrees south to 0.
    """
    false_northing = 0.0 if northern else 10000000.0
    area = _utm_band(zone, 0.0, 84.0) if northern else _utm_band(zone, -80.0, 0.0)
    return ProjectedReferenceSystem(
        wgs84(),
        TransverseMercator(zone * 6 - 183, 0.0, 0.9996, 500000.0, false_northing),
        area,
    )


def etrs89_utm(zone: float) -> ProjectedReferenceSystem:
    """ETRS89 UTM zone, similar to https://epsg.io/25832"""
    return ProjectedReferenceSystem(
        etrs89(),
        TransverseMercator(zone * 6 - 183, 0.0, 0.9996, 500000.0, 0.0),
        _utm_band(zone, 0.0, 84.0),
    )


def osgb36_national_grid() -> ProjectedReferenceSystem:
    """British National Grid, https://epsg.io/27700"""
    return osgb36().transverse_mercator(-2.0, 49.0, 0.9996012717,
                                        400000.0, -100000.0)


def dhdn2001_gk(zone: float) -> ProjectedReferenceSystem:
    """Gauss-Krüger zone, similar to https://epsg.io/31467"""
    return ProjectedReferenceSystem(
        dhdn2001(),
        TransverseMercator(zone * 3, 0.0, 1.0, zone * 1000000 + 500000, 0.0),
        BoundingBox(zone * 3 - 1.5, 0.0, zone * 3 + 1.5, 84.0),
    )


def rgf93_cc(lat: float) -> ProjectedReferenceSystem:
    """French conic conformal zone, similar to https://epsg.io/3950"""
    return rgf93().lambert_conformal_conic_2sp(
        3.0, lat, lat - 0.75, lat + 0.75,
        1700000.0, 2200000.0 + (lat - 43.0) * 1000000.0)


def rgf93_france_lambert() -> ProjectedReferenceSystem:
    """Lambert-93, https://epsg.io/2154"""
    return rgf93().lambert_conformal_conic_2sp(3.0, 46.5, 49.0, 44.0,
                                               700000.0, 6600000.0)


def nad83_alabama_east() -> ProjectedReferenceSystem:
    """Alabama East state plane, https://epsg.io/6355"""
    return ProjectedReferenceSystem(
        nad83(),
        TransverseMercator(-85.83333333333333, 30.5, 0.99996, 200000.0, 0.0),
        BoundingBox(-86.79, 30.99, -84.89, 35.0),
    )


def nad83_alabama_west() -> ProjectedReferenceSystem:
    """Alabama West state plane, https://epsg.io/6356"""
    return ProjectedReferenceSystem(
        nad83(),
        TransverseMercator(-87.5, 30.0, 0.999933333, 600000.0, 0.0),
        BoundingBox(-88.48, 30.14, -86.3, 35.02),
    )


def nad83_california_albers() -> ProjectedReferenceSystem:
    """California Albers, https://epsg.io/6414"""
    return ProjectedReferenceSystem(
        nad83(),
        AlbersEqualAreaConic(34.0, 40.5, 0.0, -120.0, 0.0, -4000000.0),
        BoundingBox(-124.45, 32.53, -114.12, 42.01),
    )

"""
pyWGS84 - Coordinate transformations between geodetic reference frames

Converts coordinates between geocentric, geographic and projected
coordinate reference systems, each tied to a datum, by way of the
WGS84 geocentric frame.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    import pyWGS84

    # WGS84 longitude/latitude to Web Mercator
    func = pyWGS84.lonlat().to(pyWGS84.web_mercator())
    east, north, h = func(9.0, 48.0, 0.0)

    # UTM to longitude/latitude, with area checks
    result = pyWGS84.utm(32, True).safe_to(pyWGS84.lonlat())(500000.0, 0.0, 0.0)
    lon, lat, h, err = result
"""

from . import area
from . import crs
from . import datum
from . import projections
from . import settings
from . import spatial
from . import systems
from .area import (
    Area,
    AreaFunc,
    BoundingBox,
)
from .crs import (
    CoordinateReferenceSystem,
    GeocentricReferenceSystem,
    GeographicReferenceSystem,
    ProjectedReferenceSystem,
)
from .datum import (
    Datum,
    Helmert,
)
from .projections import (
    AlbersEqualAreaConic,
    LambertConformalConic2SP,
    Projection,
    TransverseMercator,
    WebMercator,
)
from .settings import (
    bounds_warnings_disabled,
    bounds_warnings_enabled,
    disable_bounds_warnings,
    enable_bounds_warnings,
    get_geodetic_method,
    get_max_iterations,
    get_settings,
    is_bounds_warnings_enabled,
    set_geodetic_method,
    set_max_iterations,
    show_settings,
)
from .spatial import (
    Ellipsoid,
    to_cartesian,
    to_geodetic,
)
from .systems import (
    dhdn2001,
    dhdn2001_gk,
    etrs89,
    etrs89_utm,
    lonlat,
    nad83,
    nad83_alabama_east,
    nad83_alabama_west,
    nad83_california_albers,
    osgb36,
    osgb36_national_grid,
    rgf93,
    rgf93_cc,
    rgf93_france_lambert,
    utm,
    web_mercator,
    wgs84,
    xyz,
)
from .transform import (
    MissingCRSError,
    OutOfBoundsError,
    SafeResult,
    TransformError,
    TransformWarning,
    safe_transform,
    transform,
)

__version__ = '0.1.0'
__all__ = [
    'area',
    'crs',
    'datum',
    'projections',
    'settings',
    'spatial',
    'systems',
    # Ellipsoid geometry
    'Ellipsoid',
    'to_cartesian',
    'to_geodetic',
    # Datums and areas
    'Area',
    'AreaFunc',
    'BoundingBox',
    'Datum',
    'Helmert',
    # Projections
    'AlbersEqualAreaConic',
    'LambertConformalConic2SP',
    'Projection',
    'TransverseMercator',
    'WebMercator',
    # Coordinate reference systems
    'CoordinateReferenceSystem',
    'GeocentricReferenceSystem',
    'GeographicReferenceSystem',
    'ProjectedReferenceSystem',
    # Transformations
    'MissingCRSError',
    'OutOfBoundsError',
    'SafeResult',
    'TransformError',
    'TransformWarning',
    'safe_transform',
    'transform',
    # Named systems
    'dhdn2001',
    'dhdn2001_gk',
    'etrs89',
    'etrs89_utm',
    'lonlat',
    'nad83',
    'nad83_alabama_east',
    'nad83_alabama_west',
    'nad83_california_albers',
    'osgb36',
    'osgb36_national_grid',
    'rgf93',
    'rgf93_cc',
    'rgf93_france_lambert',
    'utm',
    'web_mercator',
    'wgs84',
    'xyz',
    # Settings
    'bounds_warnings_disabled',
    'bounds_warnings_enabled',
    'disable_bounds_warnings',
    'enable_bounds_warnings',
    'get_geodetic_method',
    'get_max_iterations',
    'get_settings',
    'is_bounds_warnings_enabled',
    'set_geodetic_method',
    'set_max_iterations',
    'show_settings',
]

"""
pyWGS84.crs - Coordinate reference systems

Geocentric, geographic and projected systems share one contract:
convert to and from WGS84 geocentric coordinates, and report whether a
geographic position is inside their area of validity.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .area import Area
from .datum import Datum
from .projections import Projection, WebMercator
from .spatial import to_cartesian, to_geodetic
from .transform import (
    SafeTransformFunc,
    TransformFunc,
    safe_transform,
    transform,
)

__all__ = [
    'CoordinateReferenceSystem',
    'GeocentricReferenceSystem',
    'GeographicReferenceSystem',
    'ProjectedReferenceSystem',
]


class CoordinateReferenceSystem(ABC):
    """Common interface of all coordinate reference systems"""

    datum: Datum

    @abstractmethod
    def contains(self, lon, lat):
        """Check whether a WGS84 longitude/latitude is inside the system"""

    @abstractmethod
    def to_wgs84(self, a, b, c):
        """Convert coordinates of this system to WGS84 geocentric"""

    @abstractmethod
    def from_wgs84(self, x0, y0, z0):
        """Convert WGS84 geocentric coordinates to this system"""

    def to(self, other: Optional[CoordinateReferenceSystem]) -> TransformFunc:
        """Transformation to another coordinate reference system"""
        return transform(self, other)

    def safe_to(self, other: Optional[CoordinateReferenceSystem]) -> SafeTransformFunc:
        """Transformation to another coordinate reference system with errors"""
        return safe_transform(self, other)


@dataclass(frozen=True)
class GeocentricReferenceSystem(CoordinateReferenceSystem):
    """
    Geocentric coordinate reference system (x, y, z in meters)

    Similar to https://epsg.io/4978 for the WGS84 datum.
    """

    datum: Datum

    def contains(self, lon, lat):
        return self.datum.contains(lon, lat)

    def to_wgs84(self, x, y, z):
        return self.datum.forward(x, y, z)

    def from_wgs84(self, x0, y0, z0):
        return self.datum.inverse(x0, y0, z0)


@dataclass(frozen=True)
class GeographicReferenceSystem(CoordinateReferenceSystem):
    """
    Geographic coordinate reference system

    Coordinates are longitude and latitude (degrees) and ellipsoidal
    height (meters). Similar to https://epsg.io/4326 for WGS84.
    """

    datum: Datum

    def contains(self, lon, lat):
        return self.datum.contains(lon, lat)

    def to_wgs84(self, lon, lat, h):
        x, y, z = to_cartesian(lon, lat, h, self.datum.ellipsoid)
        return self.datum.forward(x, y, z)

    def from_wgs84(self, x0, y0, z0):
        x, y, z = self.datum.inverse(x0, y0, z0)
        return to_geodetic(x, y, z, self.datum.ellipsoid)


@dataclass(frozen=True)
class ProjectedReferenceSystem(CoordinateReferenceSystem):
    """
    Projected coordinate reference system

    Coordinates are easting and northing (meters) and ellipsoidal
    height (meters).

    Parameters
    ----------
    datum : Datum
        Geodetic datum
    projection : Projection, optional
        Map projection, spherical Web Mercator if None
    area : Area, optional
        Area of validity, checked in addition to the datum's area
    """

    datum: Datum
    projection: Optional[Projection] = None
    area: Optional[Area] = None

    @property
    def effective_projection(self) -> Projection:
        if self.projection is None:
            return WebMercator()
        return self.projection

    def contains(self, lon, lat):
        inside = self.datum.contains(lon, lat)
        if self.area is not None:
            inside = np.logical_and(inside, self.area.contains(lon, lat))
        return inside

    def to_wgs84(self, east, north, h):
        lon, lat = self.effective_projection.to_lonlat(east, north, self.datum)
        x, y, z = to_cartesian(lon, lat, h, self.datum.ellipsoid)
        return self.datum.forward(x, y, z)

    def from_wgs84(self, x0, y0, z0):
        x, y, z = self.datum.inverse(x0, y0, z0)
        lon, lat, h = to_geodetic(x, y, z, self.datum.ellipsoid)
        east, north = self.effective_projection.from_lonlat(lon, lat, self.datum)
        return east, north, h

"""
pyWGS84.datum - Geodetic datums

A datum ties a reference ellipsoid to the WGS84 geocentric frame
through a 7-parameter similarity (Helmert) transformation.

Classes:
    Helmert: Position vector similarity transformation
    Datum: Ellipsoid, shift to WGS84 and area of validity

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from .spatial import Ellipsoid, _resolve

if TYPE_CHECKING:
    from .area import Area
    from .crs import (
        GeocentricReferenceSystem,
        GeographicReferenceSystem,
        ProjectedReferenceSystem,
    )

__all__ = [
    'Datum',
    'Helmert',
]

# arcseconds to radians
ASEC2RAD = np.pi / 648000.0


@dataclass(frozen=True)
class Helmert:
    """
    7-parameter similarity transformation to WGS84

    Uses the position vector convention, the same as the PROJ
    ``towgs84`` parameters:

        X_wgs84 = T + (1 + ds) * R * X

    Parameters
    ----------
    tx, ty, tz : float
        Translations (meters)
    rx, ry, rz : float
        Rotations (arcseconds)
    ds : float
        Scale difference (parts per million)
    exact : bool, default False
        Use the orthonormal rotation matrix instead of the
        small-angle approximation

    Notes
    -----
    The small-angle rotation matrix is

        [[1, -rz, ry], [rz, 1, -rx], [-ry, rx, 1]]

    The exact matrix is the rotation with rotation vector
    (rx, ry, rz), which agrees with it to first order. In both cases
    ``inverse`` applies the exact inverse of the forward matrix, so a
    round trip reproduces the input to floating point precision.
    """

    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    ds: float = 0.0
    exact: bool = False

    @classmethod
    def from_towgs84(cls, *params: float, exact: bool = False) -> Helmert:
        """Create from 3 or 7 PROJ ``towgs84`` style parameters"""
        if len(params) not in (3, 7):
            raise ValueError(
                f"Expected 3 or 7 parameters, got {len(params)}"
            )
        return cls(*[float(p) for p in params], exact=exact)

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.tx, self.ty, self.tz])

    @cached_property
    def matrix(self) -> np.ndarray:
        """Forward rotation and scale matrix"""
        rotation = np.array([self.rx, self.ry, self.rz]) * ASEC2RAD
        if self.exact:
            try:
                from scipy.spatial.transform import Rotation
            except ImportError:
                raise ImportError("scipy is required for exact rotations")
            R = Rotation.from_rotvec(rotation).as_matrix()
        else:
            rx, ry, rz = rotation
            R = np.array([
                [1.0, -rz, ry],
                [rz, 1.0, -rx],
                [-ry, rx, 1.0],
            ])
        return (1.0 + self.ds * 1e-6) * R

    @cached_property
    def inverse_matrix(self) -> np.ndarray:
        """Exact inverse of the forward matrix"""
        return np.linalg.inv(self.matrix)

    def forward(self, x, y, z):
        """Apply the transformation"""
        return _apply(self.matrix, x, y, z, self.translation, 0.0)

    def inverse(self, x0, y0, z0):
        """Apply the inverse transformation"""
        return _apply(self.inverse_matrix, x0, y0, z0,
                      0.0, self.translation)


def _apply(m, x, y, z, t_after, t_before):
    """m @ (p - t_before) + t_after for broadcastable coordinates"""
    t_before = np.broadcast_to(t_before, (3,))
    t_after = np.broadcast_to(t_after, (3,))
    x = np.asarray(x, dtype=np.float64) - t_before[0]
    y = np.asarray(y, dtype=np.float64) - t_before[1]
    z = np.asarray(z, dtype=np.float64) - t_before[2]
    x1 = t_after[0] + m[0, 0] * x + m[0, 1] * y + m[0, 2] * z
    y1 = t_after[1] + m[1, 0] * x + m[1, 1] * y + m[1, 2] * z
    z1 = t_after[2] + m[2, 0] * x + m[2, 1] * y + m[2, 2] * z
    return x1, y1, z1


@dataclass(frozen=True)
class Datum:
    """
    Geodetic datum

    Parameters
    ----------
    ellipsoid : Ellipsoid or str
        Reference ellipsoid or its name
    shift : Helmert, optional
        Transformation to WGS84, identity if None
    area : Area, optional
        Area of validity, unrestricted if None
    name : str, optional
        Datum name

    Examples
    --------
    >>> d = Datum('AIRY1830', Helmert.from_towgs84(
    ...     446.448, -125.157, 542.06, 0.1502, 0.247, 0.8421, -20.4894))
    >>> x0, y0, z0 = d.forward(3909833.018, -147097.138, 5020322.478)
    """

    ellipsoid: Union[Ellipsoid, str]
    shift: Optional[Helmert] = None
    area: Optional[Area] = None
    name: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'ellipsoid', _resolve(self.ellipsoid))

    # ellipsoid accessors
    @property
    def a(self) -> float:
        """Semi-major axis (meters)"""
        return self.ellipsoid.a

    @property
    def inverse_flattening(self) -> float:
        return self.ellipsoid.inverse_flattening

    @property
    def f(self) -> float:
        return self.ellipsoid.f

    @property
    def b(self) -> float:
        return self.ellipsoid.b

    @property
    def e2(self) -> float:
        return self.ellipsoid.e2

    @property
    def e(self) -> float:
        return self.ellipsoid.e

    @property
    def ep2(self) -> float:
        return self.ellipsoid.ep2

    @property
    def n(self) -> float:
        return self.ellipsoid.n

    def forward(self, x, y, z):
        """
        Convert geocentric coordinates of this datum to WGS84

        Parameters
        ----------
        x, y, z : np.ndarray
            Geocentric coordinates in this datum (meters)

        Returns
        -------
        x0, y0, z0 : np.ndarray
            WGS84 geocentric coordinates (meters)
        """
        if self.shift is None:
            return (np.asarray(x, dtype=np.float64),
                    np.asarray(y, dtype=np.float64),
                    np.asarray(z, dtype=np.float64))
        return self.shift.forward(x, y, z)

    def inverse(self, x0, y0, z0):
        """Convert WGS84 geocentric coordinates to this datum"""
        if self.shift is None:
            return (np.asarray(x0, dtype=np.float64),
                    np.asarray(y0, dtype=np.float64),
                    np.asarray(z0, dtype=np.float64))
        return self.shift.inverse(x0, y0, z0)

    def contains(self, lon, lat):
        """Check the datum's area of validity"""
        if self.area is None:
            return True
        return self.area.contains(lon, lat)

    # coordinate reference systems over this datum
    def xyz(self) -> GeocentricReferenceSystem:
        """Geocentric coordinate reference system"""
        from .crs import GeocentricReferenceSystem
        return GeocentricReferenceSystem(self)

    def lonlat(self) -> GeographicReferenceSystem:
        """Geographic coordinate reference system"""
        from .crs import GeographicReferenceSystem
        return GeographicReferenceSystem(self)

    def web_mercator(self) -> ProjectedReferenceSystem:
        """Spherical Web Mercator coordinate reference system"""
        from .crs import ProjectedReferenceSystem
        from .projections import WebMercator
        return ProjectedReferenceSystem(self, WebMercator())

    def transverse_mercator(
        self,
        central_meridian: float,
        latitude_of_origin: float,
        scale_factor: float,
        false_easting: float,
        false_northing: float,
    ) -> ProjectedReferenceSystem:
        """Transverse Mercator coordinate reference system"""
        from .crs import ProjectedReferenceSystem
        from .projections import TransverseMercator
        return ProjectedReferenceSystem(self, TransverseMercator(
            central_meridian, latitude_of_origin, scale_factor,
            false_easting, false_northing))

    def lambert_conformal_conic_2sp(
        self,
        central_meridian: float,
        latitude_of_origin: float,
        standard_parallel_1: float,
        standard_parallel_2: float,
        false_easting: float,
        false_northing: float,
    ) -> ProjectedReferenceSystem:
        """Lambert Conformal Conic (2SP) coordinate reference system"""
        from .crs import ProjectedReferenceSystem
        from .projections import LambertConformalConic2SP
        return ProjectedReferenceSystem(self, LambertConformalConic2SP(
            central_meridian, latitude_of_origin, standard_parallel_1,
            standard_parallel_2, false_easting, false_northing))

    def albers_equal_area_conic(
        self,
        standard_parallel_1: float,
        standard_parallel_2: float,
        latitude_of_origin: float,
        central_meridian: float,
        false_easting: float,
        false_northing: float,
    ) -> ProjectedReferenceSystem:
        """Albers Equal-Area Conic coordinate reference system"""
        from .crs import ProjectedReferenceSystem
        from .projections import AlbersEqualAreaConic
        return ProjectedReferenceSystem(self, AlbersEqualAreaConic(
            standard_parallel_1, standard_parallel_2, latitude_of_origin,
            central_meridian, false_easting, false_northing))

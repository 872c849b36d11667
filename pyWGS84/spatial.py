"""
pyWGS84.spatial - Ellipsoid geometry

Converts between geographic (longitude, latitude, height) and
cartesian (geocentric, ECEF) coordinates on a reference ellipsoid.

Functions:
    to_cartesian: Convert geographic to cartesian (ECEF) coordinates
    to_geodetic: Convert cartesian (ECEF) to geographic coordinates
    Ellipsoid: Ellipsoid parameters

References:
    B. Hofmann-Wellenhof and H. Moritz, "Physical Geodesy", 2005.
    B. R. Bowring, "Transformation from spatial to geographical
        coordinates", Survey Review, 23(181), 1976.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

import numpy as np

from . import settings

__all__ = [
    'Ellipsoid',
    'WGS84_A',
    'WGS84_INVERSE_FLATTENING',
    'to_cartesian',
    'to_geodetic',
]

WGS84_A = 6378137.0
WGS84_INVERSE_FLATTENING = 298.257223563


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid

    Parameters
    ----------
    a : float
        Semi-major axis (meters)
    inverse_flattening : float
        Inverse flattening 1/f, ``math.inf`` for a sphere
    name : str, optional
        Ellipsoid name

    Attributes
    ----------
    f : float
        Flattening
    b : float
        Semi-minor axis (meters)
    e2 : float
        First eccentricity squared
    ep2 : float
        Second eccentricity squared
    n : float
        Third flattening

    Examples
    --------
    >>> e = Ellipsoid.from_name('WGS84')
    >>> e.a
    6378137.0
    >>> e.f
    0.0033528106647474805
    """

    # Ellipsoid parameters (a: semi-major axis, 1/f: inverse flattening)
    _ellipsoids: ClassVar[dict] = {
        'WGS84': (6378137.0, 298.257223563),
        'GRS80': (6378137.0, 298.257222101),
        'WGS72': (6378135.0, 298.26),
        'AIRY1830': (6377563.396, 299.3249646),
        'BESSEL1841': (6377397.155, 299.1528128),
        'INTL1924': (6378388.0, 297.0),
        'CLARKE1866': (6378206.4, 294.9786982),
    }

    a: float
    inverse_flattening: float
    name: str = ''

    def __post_init__(self):
        if not self.a > 0:
            raise ValueError(f"Semi-major axis must be positive, got {self.a}")
        if not self.inverse_flattening > 1:
            raise ValueError(
                "Inverse flattening must be greater than 1, "
                f"got {self.inverse_flattening}"
            )

    @classmethod
    def from_name(cls, name: str) -> Ellipsoid:
        """Look up a named ellipsoid"""
        key = name.upper()
        if key not in cls._ellipsoids:
            raise ValueError(
                f"Unknown ellipsoid: {name}. "
                f"Supported: {list(cls._ellipsoids.keys())}"
            )
        a, fi = cls._ellipsoids[key]
        return cls(a, fi, key)

    @property
    def f(self) -> float:
        """Flattening"""
        return 1.0 / self.inverse_flattening

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self.a * (1.0 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self.f * (2.0 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.e2)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self.e2 / (1.0 - self.e2)

    @property
    def n(self) -> float:
        """Third flattening"""
        return self.f / (2.0 - self.f)


WGS84 = Ellipsoid(WGS84_A, WGS84_INVERSE_FLATTENING, 'WGS84')


def _resolve(ellipsoid: Union[str, Ellipsoid]) -> Ellipsoid:
    if isinstance(ellipsoid, str):
        return Ellipsoid.from_name(ellipsoid)
    return ellipsoid


def to_cartesian(
    lon: np.ndarray,
    lat: np.ndarray,
    h: np.ndarray | None = None,
    ellipsoid: Union[str, Ellipsoid] = 'WGS84',
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert geographic coordinates to cartesian (ECEF)

    Parameters
    ----------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray, optional
        Height above ellipsoid (meters), default is 0
    ellipsoid : str or Ellipsoid, default 'WGS84'
        Reference ellipsoid, or any object with ``a`` and ``e2``

    Returns
    -------
    x : np.ndarray
        X coordinate (meters)
    y : np.ndarray
        Y coordinate (meters)
    z : np.ndarray
        Z coordinate (meters)

    Examples
    --------
    >>> x, y, z = to_cartesian(0.0, 0.0, 0.0)
    >>> float(x)
    6378137.0
    """
    lon = np.asarray(lon, dtype=np.float64)
    lat = np.asarray(lat, dtype=np.float64)

    if h is None:
        h = np.zeros_like(lat)
    else:
        h = np.asarray(h, dtype=np.float64)

    d = _resolve(ellipsoid)

    # Convert to radians
    lon_rad = np.radians(lon)
    lat_rad = np.radians(lat)

    # Trigonometric functions
    cos_lon = np.cos(lon_rad)
    sin_lon = np.sin(lon_rad)
    cos_lat = np.cos(lat_rad)
    sin_lat = np.sin(lat_rad)

    # Radius of curvature in the prime vertical
    N = d.a / np.sqrt(1.0 - d.e2 * sin_lat**2)

    # Cartesian coordinates
    x = (N + h) * cos_lat * cos_lon
    y = (N + h) * cos_lat * sin_lon
    z = (N * (1.0 - d.e2) + h) * sin_lat

    return x, y, z


def to_geodetic(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    ellipsoid: Union[str, Ellipsoid] = 'WGS84',
    method: Optional[str] = None,
    max_iterations: Optional[int] = None,
    tolerance: float = 1e-14,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert cartesian (ECEF) coordinates to geographic

    Parameters
    ----------
    x : np.ndarray
        X coordinate (meters)
    y : np.ndarray
        Y coordinate (meters)
    z : np.ndarray
        Z coordinate (meters)
    ellipsoid : str or Ellipsoid, default 'WGS84'
        Reference ellipsoid
    method : str, optional
        Conversion method ('bowring', 'iterative'),
        default from ``settings.get_geodetic_method()``
    max_iterations : int, optional
        Maximum number of latitude evaluations,
        default from ``settings.get_max_iterations()``
    tolerance : float, default 1e-14
        Convergence tolerance for latitude (radians)

    Returns
    -------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray
        Height above ellipsoid (meters)

    Notes
    -----
    Both methods reach sub-millimeter accuracy within 5 iterations for
    heights within +/-10 km of the ellipsoid; Bowring's method typically
    needs 2. The iteration count is always capped, so non-finite input
    returns non-finite output rather than looping.

    On the polar axis the longitude is 0; at the center of the
    ellipsoid the latitude is 0 as well.

    Examples
    --------
    >>> lon, lat, h = to_geodetic(6378137.0, 0.0, 0.0)
    >>> float(lon), float(lat), float(h)
    (0.0, 0.0, 0.0)
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    d = _resolve(ellipsoid)
    if method is None:
        method = settings.get_geodetic_method()
    if max_iterations is None:
        max_iterations = settings.get_max_iterations()
    max_iterations = max(int(max_iterations), 1)

    # Longitude (atan2(0, 0) is 0 on the polar axis)
    lon = np.arctan2(y, x)

    # Distance from Z-axis
    p = np.hypot(x, y)

    if method == 'bowring':
        # Bowring's method iterating on the parametric latitude
        b = d.b
        beta = np.arctan2(d.a * z, b * p)
        lat = np.arctan2(z + d.ep2 * b * np.sin(beta)**3,
                         p - d.e2 * d.a * np.cos(beta)**3)

        for _ in range(max_iterations - 1):
            beta = np.arctan2(b * np.sin(lat), d.a * np.cos(lat))
            lat_new = np.arctan2(z + d.ep2 * b * np.sin(beta)**3,
                                 p - d.e2 * d.a * np.cos(beta)**3)
            converged = np.all(np.abs(lat_new - lat) < tolerance)
            lat = lat_new
            if converged:
                break

    elif method == 'iterative':
        # Simple fixed-point iteration on the prime vertical radius
        lat = np.arctan2(z, p * (1.0 - d.e2))

        for _ in range(max_iterations - 1):
            sin_lat = np.sin(lat)
            N = d.a / np.sqrt(1.0 - d.e2 * sin_lat**2)
            lat_new = np.arctan2(z + d.e2 * N * sin_lat, p)
            converged = np.all(np.abs(lat_new - lat) < tolerance)
            lat = lat_new
            if converged:
                break

    else:
        raise ValueError(f"Unknown method: {method}")

    # Polar axis and center
    lat = np.where(p == 0.0, np.sign(z) * np.pi / 2.0, lat)

    # Height without division by cos(lat)
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    h = p * cos_lat + z * sin_lat - d.a * np.sqrt(1.0 - d.e2 * sin_lat**2)

    return np.degrees(lon), np.degrees(lat), h

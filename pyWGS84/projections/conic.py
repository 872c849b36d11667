"""
pyWGS84.projections.conic - Conic projections with two standard parallels

Lambert Conformal Conic (2SP) and Albers Equal-Area Conic on the
ellipsoid.

References:
    J. P. Snyder, "Map Projections - A Working Manual", USGS
        Professional Paper 1395, 1987, pp. 101-110 and 107-109.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from .base import Projection, wrap_longitude

__all__ = [
    'AlbersEqualAreaConic',
    'LambertConformalConic2SP',
    'albers_cone',
    'lambert_cone',
]

# iteration cap for the inverse latitude
_MAX_ITERATIONS = 15
_TOLERANCE = 1e-14


def _m(phi, e2):
    """Snyder (14-15)"""
    sin_phi = np.sin(phi)
    return np.cos(phi) / np.sqrt(1.0 - e2 * sin_phi**2)


def _t(phi, e):
    """Snyder (15-9)"""
    e_sin = e * np.sin(phi)
    return (np.tan(np.pi / 4.0 - phi / 2.0) /
            ((1.0 - e_sin) / (1.0 + e_sin))**(e / 2.0))


def _q(phi, e, e2):
    """Snyder (3-12), authalic function"""
    sin_phi = np.sin(phi)
    if e == 0.0:
        return 2.0 * sin_phi
    e_sin = e * sin_phi
    return (1.0 - e2) * (sin_phi / (1.0 - e_sin**2) -
                         np.log((1.0 - e_sin) / (1.0 + e_sin)) / (2.0 * e))


def _check_parallels(standard_parallel_1, standard_parallel_2):
    if math.isclose(standard_parallel_1, -standard_parallel_2, abs_tol=1e-10):
        raise ValueError(
            "Standard parallels must not be symmetric about the equator"
        )


def _polar(dx, dy, n):
    """Radius and angle from planar offsets, signed by the cone constant"""
    sign = math.copysign(1.0, n)
    rho = sign * np.hypot(dx, dy)
    theta = np.arctan2(sign * dx, sign * dy)
    return rho, theta


@lru_cache(maxsize=32)
def lambert_cone(a, e, e2, standard_parallel_1, standard_parallel_2,
                 latitude_of_origin):
    """
    Lambert Conformal Conic constants for an ellipsoid

    Parameters
    ----------
    a : float
        Semi-major axis (meters)
    e, e2 : float
        First eccentricity and its square
    standard_parallel_1, standard_parallel_2 : float
        Standard parallels (degrees)
    latitude_of_origin : float
        Latitude of false origin (degrees)

    Returns
    -------
    n : float
        Cone constant
    aF : float
        Semi-major axis times Snyder's F (15-10)
    rho0 : float
        Radius of the latitude of origin
    """
    phi1 = np.radians(standard_parallel_1)
    phi2 = np.radians(standard_parallel_2)
    phi0 = np.radians(latitude_of_origin)
    m1, m2 = _m(phi1, e2), _m(phi2, e2)
    t1, t2 = _t(phi1, e), _t(phi2, e)
    if math.isclose(standard_parallel_1, standard_parallel_2, abs_tol=1e-10):
        n = np.sin(phi1)
    else:
        n = (np.log(m1) - np.log(m2)) / (np.log(t1) - np.log(t2))
    aF = a * m1 / (n * t1**n)
    rho0 = aF * _t(phi0, e)**n
    return float(n), float(aF), float(rho0)


@lru_cache(maxsize=32)
def albers_cone(a, e, e2, standard_parallel_1, standard_parallel_2,
                latitude_of_origin):
    """Albers constants n, C and rho0 for an ellipsoid, Snyder (14-14)"""
    phi1 = np.radians(standard_parallel_1)
    phi2 = np.radians(standard_parallel_2)
    phi0 = np.radians(latitude_of_origin)
    m1, m2 = _m(phi1, e2), _m(phi2, e2)
    q1, q2 = _q(phi1, e, e2), _q(phi2, e, e2)
    if math.isclose(standard_parallel_1, standard_parallel_2, abs_tol=1e-10):
        n = np.sin(phi1)
    else:
        n = (m1**2 - m2**2) / (q2 - q1)
    C = m1**2 + n * q1
    rho0 = a * np.sqrt(C - n * _q(phi0, e, e2)) / n
    return float(n), float(C), float(rho0)


@dataclass(frozen=True)
class LambertConformalConic2SP(Projection):
    """
    Lambert Conformal Conic projection with two standard parallels

    Parameters
    ----------
    central_meridian : float
        Longitude of false origin (degrees)
    latitude_of_origin : float
        Latitude of false origin (degrees)
    standard_parallel_1 : float
        First standard parallel (degrees)
    standard_parallel_2 : float
        Second standard parallel (degrees)
    false_easting : float
        Easting at the false origin (meters)
    false_northing : float
        Northing at the false origin (meters)

    Notes
    -----
    Coinciding parallels reduce to the one standard parallel case,
    with the cone constant sin(phi1).
    """

    central_meridian: float
    latitude_of_origin: float
    standard_parallel_1: float
    standard_parallel_2: float
    false_easting: float
    false_northing: float

    def __post_init__(self):
        _check_parallels(self.standard_parallel_1, self.standard_parallel_2)

    def _cone(self, datum):
        """Cone constant n, a*F and rho0"""
        return lambert_cone(float(datum.a), float(datum.e), float(datum.e2),
                            self.standard_parallel_1, self.standard_parallel_2,
                            self.latitude_of_origin)

    def from_lonlat(self, lon, lat, datum):
        n, aF, rho0 = self._cone(datum)
        lam = np.radians(wrap_longitude(np.asarray(lon, dtype=np.float64) -
                                        self.central_meridian))
        phi = np.radians(np.asarray(lat, dtype=np.float64))

        rho = aF * _t(phi, datum.e)**n
        theta = n * lam
        east = self.false_easting + rho * np.sin(theta)
        north = self.false_northing + rho0 - rho * np.cos(theta)
        return east, north

    def to_lonlat(self, east, north, datum):
        n, aF, rho0 = self._cone(datum)
        e = datum.e
        dx = np.asarray(east, dtype=np.float64) - self.false_easting
        dy = rho0 - (np.asarray(north, dtype=np.float64) - self.false_northing)
        rho, theta = _polar(dx, dy, n)

        t = (rho / aF)**(1.0 / n)
        phi = np.pi / 2.0 - 2.0 * np.arctan(t)
        for _ in range(_MAX_ITERATIONS):
            e_sin = e * np.sin(phi)
            phi_new = np.pi / 2.0 - 2.0 * np.arctan(
                t * ((1.0 - e_sin) / (1.0 + e_sin))**(e / 2.0))
            converged = np.all(np.abs(phi_new - phi) < _TOLERANCE)
            phi = phi_new
            if converged:
                break

        lon = self.central_meridian + np.degrees(theta / n)
        return lon, np.degrees(phi)


@dataclass(frozen=True)
class AlbersEqualAreaConic(Projection):
    """
    Albers Equal-Area Conic projection

    Parameters
    ----------
    standard_parallel_1 : float
        First standard parallel (degrees)
    standard_parallel_2 : float
        Second standard parallel (degrees)
    latitude_of_origin : float
        Latitude of false origin (degrees)
    central_meridian : float
        Longitude of false origin (degrees)
    false_easting : float
        Easting at the false origin (meters)
    false_northing : float
        Northing at the false origin (meters)
    """

    standard_parallel_1: float
    standard_parallel_2: float
    latitude_of_origin: float
    central_meridian: float
    false_easting: float
    false_northing: float

    def __post_init__(self):
        _check_parallels(self.standard_parallel_1, self.standard_parallel_2)

    def _cone(self, datum):
        """Cone constant n, C and rho0"""
        return albers_cone(float(datum.a), float(datum.e), float(datum.e2),
                           self.standard_parallel_1, self.standard_parallel_2,
                           self.latitude_of_origin)

    def from_lonlat(self, lon, lat, datum):
        n, C, rho0 = self._cone(datum)
        lam = np.radians(wrap_longitude(np.asarray(lon, dtype=np.float64) -
                                        self.central_meridian))
        phi = np.radians(np.asarray(lat, dtype=np.float64))

        rho = datum.a * np.sqrt(C - n * _q(phi, datum.e, datum.e2)) / n
        theta = n * lam
        east = self.false_easting + rho * np.sin(theta)
        north = self.false_northing + rho0 - rho * np.cos(theta)
        return east, north

    def to_lonlat(self, east, north, datum):
        n, C, rho0 = self._cone(datum)
        e, e2 = datum.e, datum.e2
        dx = np.asarray(east, dtype=np.float64) - self.false_easting
        dy = rho0 - (np.asarray(north, dtype=np.float64) - self.false_northing)
        rho, theta = _polar(dx, dy, n)
        q = (C - (rho * n / datum.a)**2) / n

        # authalic latitude, then the series for geodetic latitude
        qp = _q(np.pi / 2.0, e, e2)
        beta = np.arcsin(np.clip(q / qp, -1.0, 1.0))
        e4 = e2 * e2
        e6 = e4 * e2
        phi = (beta +
               (e2 / 3.0 + 31.0 * e4 / 180.0 + 517.0 * e6 / 5040.0) * np.sin(2.0 * beta) +
               (23.0 * e4 / 360.0 + 251.0 * e6 / 3780.0) * np.sin(4.0 * beta) +
               (761.0 * e6 / 45360.0) * np.sin(6.0 * beta))

        # Newton refinement of q(phi) = q, Snyder (3-16)
        if e > 0.0:
            with np.errstate(divide='ignore', invalid='ignore'):
                for _ in range(_MAX_ITERATIONS):
                    sin_phi = np.sin(phi)
                    cos_phi = np.cos(phi)
                    e_sin = e * sin_phi
                    one_es2 = 1.0 - e_sin**2
                    step = (one_es2**2 / (2.0 * cos_phi) *
                            (q / (1.0 - e2) - sin_phi / one_es2 +
                             np.log((1.0 - e_sin) / (1.0 + e_sin)) / (2.0 * e)))
                    step = np.where(np.abs(cos_phi) > 1e-10, step, 0.0)
                    phi = phi + step
                    if np.all(np.abs(step) < _TOLERANCE):
                        break

        lon = self.central_meridian + np.degrees(theta / n)
        return lon, np.degrees(phi)

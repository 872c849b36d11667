"""
pyWGS84.projections.web_mercator - Spherical (Web) Mercator

The Mercator projection of a sphere with the datum's semi-major axis,
as used by web map tiles (EPSG:3857). Flattening is ignored.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .base import Projection

__all__ = [
    'WebMercator',
]


@dataclass(frozen=True)
class WebMercator(Projection):
    """
    Spherical Mercator on a sphere of radius ``datum.a``

        east = a * lon
        north = a * ln(tan(pi/4 + lat/2))
    """

    def from_lonlat(self, lon, lat, datum):
        a = datum.a
        lam = np.radians(np.asarray(lon, dtype=np.float64))
        phi = np.radians(np.asarray(lat, dtype=np.float64))
        east = a * lam
        north = a * np.log(np.tan(np.pi / 4.0 + phi / 2.0))
        return east, north

    def to_lonlat(self, east, north, datum):
        a = datum.a
        lam = np.asarray(east, dtype=np.float64) / a
        phi = np.pi / 2.0 - 2.0 * np.arctan(
            np.exp(-np.asarray(north, dtype=np.float64) / a))
        return np.degrees(lam), np.degrees(phi)

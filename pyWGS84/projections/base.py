"""
pyWGS84.projections.base - Map projection interface

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

__all__ = [
    'Projection',
    'wrap_longitude',
]


class Projection(ABC):
    """
    Mapping between geographic and planar coordinates

    Implementations are immutable parameter sets. The ellipsoid is
    supplied per call through ``datum``, which may be a Datum or an
    Ellipsoid (anything with ``a``, ``e``, ``e2`` and ``n``).
    """

    @abstractmethod
    def to_lonlat(self, east, north, datum):
        """
        Convert projected coordinates to geographic

        Parameters
        ----------
        east : np.ndarray
            Easting (meters)
        north : np.ndarray
            Northing (meters)
        datum : Datum or Ellipsoid
            Ellipsoid the projection is applied to

        Returns
        -------
        lon : np.ndarray
            Longitude (degrees)
        lat : np.ndarray
            Latitude (degrees)
        """

    @abstractmethod
    def from_lonlat(self, lon, lat, datum):
        """
        Convert geographic coordinates to projected

        Parameters
        ----------
        lon : np.ndarray
            Longitude (degrees)
        lat : np.ndarray
            Latitude (degrees)
        datum : Datum or Ellipsoid
            Ellipsoid the projection is applied to

        Returns
        -------
        east : np.ndarray
            Easting (meters)
        north : np.ndarray
            Northing (meters)
        """


def wrap_longitude(dlon):
    """Wrap a longitude difference to [-180, 180) degrees"""
    return np.mod(np.asarray(dlon, dtype=np.float64) + 180.0, 360.0) - 180.0

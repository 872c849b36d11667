"""
pyWGS84.area - Areas of validity

An area answers whether a geographic position lies within the region
where a datum or coordinate reference system is considered accurate.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import numpy as np

__all__ = [
    'Area',
    'AreaFunc',
    'BoundingBox',
]


class Area(ABC):
    """Domain of validity of a datum or coordinate reference system"""

    @abstractmethod
    def contains(self, lon, lat):
        """
        Check whether geographic positions lie within the area

        Parameters
        ----------
        lon : float or np.ndarray
            Longitude (degrees)
        lat : float or np.ndarray
            Latitude (degrees)

        Returns
        -------
        bool or np.ndarray
            True where the position is inside
        """


@dataclass(frozen=True)
class AreaFunc(Area):
    """Adapts a plain ``func(lon, lat) -> bool`` to the Area interface"""

    func: Callable

    def contains(self, lon, lat):
        return self.func(lon, lat)


@dataclass(frozen=True)
class BoundingBox(Area):
    """
    Longitude/latitude rectangle, edges inclusive

    Parameters
    ----------
    west : float
        Minimum longitude (degrees)
    south : float
        Minimum latitude (degrees)
    east : float
        Maximum longitude (degrees)
    north : float
        Maximum latitude (degrees)
    """

    west: float
    south: float
    east: float
    north: float

    def __post_init__(self):
        if self.west > self.east:
            raise ValueError(
                f"west ({self.west}) must not exceed east ({self.east})"
            )
        if self.south > self.north:
            raise ValueError(
                f"south ({self.south}) must not exceed north ({self.north})"
            )

    def contains(self, lon, lat):
        lon = np.asarray(lon, dtype=np.float64)
        lat = np.asarray(lat, dtype=np.float64)
        return ((lon >= self.west) & (lon <= self.east) &
                (lat >= self.south) & (lat <= self.north))

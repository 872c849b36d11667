"""
pyWGS84.transform - Transformations between coordinate reference systems

Every coordinate reference system converts to and from WGS84 geocentric
coordinates, so any two systems compose through that frame.

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional

import numpy as np

from . import settings
from .spatial import WGS84, to_geodetic

if TYPE_CHECKING:
    from .crs import CoordinateReferenceSystem

__all__ = [
    'MissingCRSError',
    'OutOfBoundsError',
    'SafeResult',
    'TransformError',
    'TransformWarning',
    'safe_transform',
    'transform',
]


class TransformError(ValueError):
    """Base class for transformation errors"""


class MissingCRSError(TransformError):
    """A coordinate reference system was not specified"""

    def __init__(self, message: str = "coordinate reference system not specified"):
        super().__init__(message)


class OutOfBoundsError(TransformError):
    """A coordinate is outside an area of validity"""

    def __init__(self, message: str = "coordinate is out of bounds"):
        super().__init__(message)


class TransformWarning(UserWarning):
    """Emitted by safe transforms when bounds warnings are enabled"""


class SafeResult(NamedTuple):
    """
    Transformed coordinates and an advisory error

    The coordinates are always computed, ``error`` tells the caller
    whether they can be trusted.
    """

    a: Any
    b: Any
    c: Any
    error: Optional[TransformError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the carried error, if any"""
        if self.error is not None:
            raise self.error


TransformFunc = Callable[[Any, Any, Any], tuple]
SafeTransformFunc = Callable[[Any, Any, Any], SafeResult]


def transform(
    from_crs: Optional[CoordinateReferenceSystem] = None,
    to_crs: Optional[CoordinateReferenceSystem] = None,
) -> TransformFunc:
    """
    Build a transformation between coordinate reference systems

    Parameters
    ----------
    from_crs : CoordinateReferenceSystem, optional
        Source system, input is WGS84 geocentric if None
    to_crs : CoordinateReferenceSystem, optional
        Target system, output is WGS84 geocentric if None

    Returns
    -------
    callable
        ``func(a, b, c) -> (a2, b2, c2)``

    Examples
    --------
    >>> func = transform(lonlat(), web_mercator())
    >>> east, north, h = func(9.0, 48.0, 0.0)
    """
    def func(a, b, c):
        if from_crs is not None:
            a, b, c = from_crs.to_wgs84(a, b, c)
        if to_crs is not None:
            a, b, c = to_crs.from_wgs84(a, b, c)
        return a, b, c

    return func


def _contains(crs, lon, lat):
    if crs is None:
        return True
    return crs.contains(lon, lat)


def safe_transform(
    from_crs: Optional[CoordinateReferenceSystem] = None,
    to_crs: Optional[CoordinateReferenceSystem] = None,
) -> SafeTransformFunc:
    """
    Build a transformation that reports advisory errors

    Parameters
    ----------
    from_crs : CoordinateReferenceSystem
        Source system, a MissingCRSError is reported if None
    to_crs : CoordinateReferenceSystem
        Target system, a MissingCRSError is reported if None

    Returns
    -------
    callable
        ``func(a, b, c) -> SafeResult(a2, b2, c2, error)``

    Notes
    -----
    Containment is evaluated on the intermediate WGS84 geocentric point,
    converted to longitude and latitude with the WGS84 ellipsoid
    regardless of the datums involved. For array input the error is
    reported if any point is outside.

    When both apply, a missing system is reported instead of an out of
    bounds coordinate.
    """
    def func(a, b, c):
        error = None
        if from_crs is not None:
            a, b, c = from_crs.to_wgs84(a, b, c)

        lon, lat, _ = to_geodetic(a, b, c, ellipsoid=WGS84)
        inside = np.logical_and(_contains(from_crs, lon, lat),
                                _contains(to_crs, lon, lat))
        if not np.all(inside):
            error = OutOfBoundsError()

        if to_crs is not None:
            a, b, c = to_crs.from_wgs84(a, b, c)

        if from_crs is None or to_crs is None:
            error = MissingCRSError()

        if error is not None and settings.is_bounds_warnings_enabled():
            warnings.warn(str(error), TransformWarning, stacklevel=2)

        return SafeResult(a, b, c, error)

    return func

"""
pyWGS84.projections - Map projections

Provides forward and inverse mappings between geographic and planar
coordinates:
- Transverse Mercator (Krüger series)
- Lambert Conformal Conic with two standard parallels
- Albers Equal-Area Conic
- Spherical Web Mercator

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

from .base import (
    Projection,
    wrap_longitude,
)
from .conic import (
    AlbersEqualAreaConic,
    LambertConformalConic2SP,
    albers_cone,
    lambert_cone,
)
from .transverse_mercator import (
    TransverseMercator,
    krueger_coefficients,
)
from .web_mercator import (
    WebMercator,
)

__all__ = [
    'AlbersEqualAreaConic',
    'LambertConformalConic2SP',
    'Projection',
    'TransverseMercator',
    'WebMercator',
    'albers_cone',
    'krueger_coefficients',
    'lambert_cone',
    'wrap_longitude',
]

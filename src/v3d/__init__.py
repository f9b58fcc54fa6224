# -*- coding: utf-8 -*-
"""**v3d**: exact and floating point 3D computational geometry"""

import logging

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("v3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from v3d.arith import EPSILON, FLOATING, RATIONAL, Floating, Rational  # noqa: E402
from v3d.collinear import (LineSegmentsCollinear, Overlap,  # noqa: E402
                           PointsAndSegments, classify, merge)
from v3d.distance import distance, distance_squared  # noqa: E402
from v3d.envelope import Envelope  # noqa: E402
from v3d.geometry import DegenerateGeometryError, Geometry  # noqa: E402
from v3d.line import Line  # noqa: E402
from v3d.plane import Plane  # noqa: E402
from v3d.point import Point  # noqa: E402
from v3d.precision import (DEFAULT_POLICY, PrecisionPolicy,  # noqa: E402
                           Rounding)
from v3d.ray import Ray  # noqa: E402
from v3d.rectangle import Rectangle  # noqa: E402
from v3d.segment import LineSegment  # noqa: E402
from v3d.tetrahedron import Tetrahedron  # noqa: E402
from v3d.triangle import Triangle  # noqa: E402
from v3d.vector import Offset, Vector  # noqa: E402

__all__ = [
    'DEFAULT_POLICY',
    'DegenerateGeometryError',
    'EPSILON',
    'Envelope',
    'FLOATING',
    'Floating',
    'Geometry',
    'Line',
    'LineSegment',
    'LineSegmentsCollinear',
    'Offset',
    'Overlap',
    'Plane',
    'Point',
    'PointsAndSegments',
    'PrecisionPolicy',
    'RATIONAL',
    'Rational',
    'Ray',
    'Rectangle',
    'Rounding',
    'Tetrahedron',
    'Triangle',
    'Vector',
    'classify',
    'distance',
    'distance_squared',
    'merge',
]

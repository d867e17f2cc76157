#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Query/command functions for front ends.

All functions are pure: the curve is immutable and a parameter
change requires a new curve from create_curve.
Invalid input raises ECExplorerValueError or ECExplorerTypeError
before any computation.
"""

from typing import Tuple

from ecexplorer.curve_group import CurveGroup, mult
from ecexplorer.exceptions import ECExplorerValueError
from ecexplorer.point import AffinePoint, Point
from ecexplorer.subgroups import SubgroupCatalog
from ecexplorer.utils import Integer, int_from_integer


def create_curve(p: Integer, a: Integer, b: Integer) -> CurveGroup:
    return CurveGroup(p, a, b)


def point_from_coordinates(ec: CurveGroup, x: Integer, y: Integer) -> AffinePoint:
    """Return the affine point from user provided coordinates.

    Coordinates may be given in [0, p-1] or in the centered
    (-p, p) range used for display: they are reduced mod p.
    The point is not checked to be on the curve.
    """

    coords = []
    for coord in (int_from_integer(x), int_from_integer(y)):
        if not -ec.p < coord < ec.p:
            raise ECExplorerValueError(f"coordinate not in (-p, p): {coord}")
        coords.append(coord % ec.p)
    return AffinePoint(*coords)


def is_point_on_curve(ec: CurveGroup, Q: Point) -> bool:
    return ec.is_on_curve(Q)


def add_points(ec: CurveGroup, Q: Point, R: Point) -> Point:
    return ec.add(Q, R)


def multiply_point(ec: CurveGroup, Q: Point, k: Integer) -> Point:
    "Return k*Q, with k >= 0."
    return mult(k, Q, ec)


def enumerate_group(ec: CurveGroup) -> Tuple[Point, ...]:
    "Return all group points, INF being the first one."
    return ec.points


def group_order(ec: CurveGroup) -> int:
    return ec.order


def build_subgroup_catalog(ec: CurveGroup) -> SubgroupCatalog:
    return SubgroupCatalog.build(ec)

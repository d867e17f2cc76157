#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup,
for didactical (and fun) reason only.
"""

from typing import TYPE_CHECKING, List

from ecexplorer.exceptions import ECExplorerRuntimeError, ECExplorerValueError
from ecexplorer.number_theory import legendre_symbol
from ecexplorer.point import INF, AffinePoint, Point

if TYPE_CHECKING:  # pragma: no cover
    from ecexplorer.curve_group import CurveGroup


def find_all_points(p: int, a: int, b: int) -> List[Point]:
    """Return all the points of y^2 = x^3 + a*x + b over Fp.

    Very unsophisticated walk-through approach over all (x, y) pairs,
    i.e. O(p^2): for didactical sake only.

    INF is the first point; affine points follow sorted by x,
    then by y, so that for y != 0 both (x, y) and (x, p-y) are included.
    """

    points: List[Point] = [INF]
    for x in range(p):
        rhs = ((x * x + a) * x + b) % p
        for y in range(p):
            if y * y % p == rhs:
                points.append(AffinePoint(x, y))

    return points


def count_points(ec: "CurveGroup") -> int:
    """Return the group order without enumerating the group points.

    For each x there are 1 + (rhs|p) points, (rhs|p) being the
    Legendre symbol of x^3 + a*x + b: O(p log p) instead of O(p^2).
    """

    order = 1  # INF
    for x in range(ec.p):
        rhs = ((x * x + ec.a) * x + ec.b) % ec.p
        order += 1 + legendre_symbol(rhs, ec.p)
    return order


def find_subgroup_points(ec: "CurveGroup", G: Point) -> List[Point]:
    """Return the points of the cyclic subgroup generated by G.

    Points are [INF, G, 2G, ..., (n-1)G], n being the subgroup order.
    Very unsophisticated walk-through approach:
    each new multiple is obtained adding G to the previous one.

    Every addition result is resolved to its canonical group point,
    as found in ec.points.
    """

    G = ec.canonical(G)

    points: List[Point] = [INF]
    Q = ec.add_aff(INF, G)
    while Q != INF:
        try:
            Q = ec.canonical(Q)
        except ECExplorerValueError as e:
            err_msg = f"group not closed under addition: {Q}"
            raise ECExplorerRuntimeError(err_msg) from e
        points.append(Q)
        Q = ec.add_aff(Q, G)

    return points

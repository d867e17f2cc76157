#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

CurveGroup is the finite group of the points of a low-cardinality
elliptic curve over Fp: it does not have to be cyclic,
and all its points are enumerated at construction time.
"""

import logging
from typing import Dict, Tuple

from ecexplorer.curve_group_f import find_all_points
from ecexplorer.exceptions import ECExplorerTypeError, ECExplorerValueError
from ecexplorer.number_theory import mod_inv
from ecexplorer.point import INF, AffinePoint, Infinity, Point, is_point
from ecexplorer.utils import Integer, int_from_integer, is_odd_prime

logger = logging.getLogger(__name__)

# brute-force enumeration is O(p^2): larger p are rejected, not hung on
P_MAX = 2048


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being an odd prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.

    Instances are immutable: a parameter change requires a new CurveGroup.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is an odd prime, small enough to be enumerated
        if not is_odd_prime(p):
            raise ECExplorerValueError(f"p is not an odd prime: {p}")
        if p > P_MAX:
            err_msg = f"p is too big to enumerate all group points: {p}"
            err_msg += f" > {P_MAX}"
            raise ECExplorerValueError(err_msg)

        # 2) a and b are reduced into [0, p-1]
        a %= p
        b %= p

        # 3) check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ECExplorerValueError("zero discriminant")

        self._p = p
        self._a = a
        self._b = b

        logger.debug("enumerating the points of %r", self)
        self._points: Tuple[Point, ...] = tuple(find_all_points(p, a, b))
        self._index: Dict[Point, int] = {Q: i for i, Q in enumerate(self._points)}
        logger.debug("%r has %d points", self, len(self._points))

    @property
    def p(self) -> int:
        return self._p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def points(self) -> Tuple[Point, ...]:
        """Return all group points.

        INF is the first point, followed by the affine points
        sorted by x-coordinate, then by y-coordinate.
        """
        return self._points

    @property
    def order(self) -> int:
        "Return the group order, i.e. the number of its points (INF included)."
        return len(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return (self._p, self._a, self._b) == (other.p, other.a, other.b)

    def __hash__(self) -> int:
        return hash((self._p, self._a, self._b))

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {self._p}"
        result += f"\n a   = {self._a}"
        result += f"\n b   = {self._b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self._p}, {self._a}, {self._b})"

    def index(self, Q: Point) -> int:
        """Return the position of the point in the enumerated group.

        Lookup is by structural equality:
        an ECExplorerValueError is raised if the point is not in the group.
        """
        try:
            return self._index[Q]
        except KeyError:
            raise ECExplorerValueError(f"point not in the group: {Q}") from None
        except TypeError:
            raise ECExplorerTypeError(f"not a point: {Q!r}") from None

    def canonical(self, Q: Point) -> Point:
        "Return the group point structurally equal to Q."
        return self._points[self.index(Q)]

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        if isinstance(Q, AffinePoint):
            return AffinePoint(Q.x, (self._p - Q.y) % self._p)
        raise ECExplorerTypeError(f"not a point: {Q!r}")

    # methods using _a, _b, p

    def _y2(self, x: int) -> int:
        return ((x * x + self._a) * x + self._b) % self._p

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        INF is on the curve by convention;
        affine coordinates must be in [0, p-1].
        """
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, AffinePoint):
            raise ECExplorerTypeError(f"not a point: {Q!r}")
        if not (0 <= Q.x < self._p and 0 <= Q.y < self._p):
            return False
        return self._y2(Q.x) == Q.y * Q.y % self._p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECExplorerValueError(f"point not on curve: {Q}")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if isinstance(R, Infinity):
            return Q
        if isinstance(Q, Infinity):
            return R

        # opposite points, including the doubling of a y=0 point:
        # this must be checked before any slope is computed,
        # as the slope denominator would be zero
        if Q.x == R.x and (Q.y + R.y) % self._p == 0:
            return INF

        if Q == R:
            return self.double_aff(Q)

        lam = (R.y - Q.y) * mod_inv(R.x - Q.x, self._p)
        x = lam * lam - Q.x - R.x
        y = lam * (Q.x - x) - Q.y
        return AffinePoint(x % self._p, y % self._p)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if isinstance(Q, Infinity):
            return INF
        # vertical tangent
        if Q.y % self._p == 0:
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self._p)
        x = lam * lam - Q.x - Q.x
        y = lam * (Q.x - x) - Q.y
        return AffinePoint(x % self._p, y % self._p)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It needs O(log m) group operations.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise ECExplorerValueError(f"negative m: {m}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INF, Q]
    # if least significant bit of m is 1, then add Q to R[0]
    R[0] = R[m & 1]
    # remove the bit just accounted for
    m >>= 1
    while m > 0:
        # the doubling part of 'double & add'
        Q = ec.double_aff(Q)
        R[1] = ec.add_aff(R[0], Q)
        # if least significant bit of m is 1, then add Q to R[0]
        R[0] = R[m & 1]
        m >>= 1
    return R[0]


def mult(m: Integer, Q: Point, ec: CurveGroup) -> Point:
    """Return the scalar multiplication m*Q.

    The input point must be on the curve,
    the m coefficient must be a non-negative integer.
    """

    if not is_point(Q):
        raise ECExplorerTypeError(f"not a point: {Q!r}")
    ec.require_on_curve(Q)
    return mult_aff(int_from_integer(m), Q, ec)

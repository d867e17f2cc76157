#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Text rendering of curve points, groups, and subgroups.

Pure view functions: with centered=True coordinates greater than p//2
are shown as negative values, i.e. in the symmetric range around zero.
"""

from typing import List

from ecexplorer.curve_group import CurveGroup
from ecexplorer.point import Infinity, Point
from ecexplorer.subgroups import Subgroup, SubgroupCatalog


def centered(v: int, p: int) -> int:
    return v - p if v > p // 2 else v


def str_from_point(Q: Point, p: int, centered_coords: bool = False) -> str:
    if isinstance(Q, Infinity):
        return "INF"
    if centered_coords:
        return f"({centered(Q.x, p)}, {centered(Q.y, p)})"
    return f"({Q.x}, {Q.y})"


def curve_text(p: int, a: int, b: int) -> str:
    return f"y^2 = x^3 + {a}*x + {b} (mod {p})"


def group_text(ec: CurveGroup, centered_coords: bool = False) -> str:
    lines = [f"Points of {curve_text(ec.p, ec.a, ec.b)}:"]
    lines += [str_from_point(Q, ec.p, centered_coords) for Q in ec.points]
    lines.append(f"Group order: {ec.order}")
    return "\n".join(lines)


def subgroup_text(subgroup: Subgroup, p: int, centered_coords: bool = False) -> str:
    lines = [f"Subgroup order: {subgroup.order}"]
    lines += [
        f"{i}) {str_from_point(Q, p, centered_coords)}"
        for i, Q in enumerate(subgroup.members, 1)
    ]
    return "\n".join(lines)


def catalog_text(catalog: SubgroupCatalog, centered_coords: bool = False) -> str:
    lines: List[str] = [
        f"Cyclic subgroups of {curve_text(catalog.p, catalog.a, catalog.b)}",
        f"Group order: {catalog.group_order}",
    ]
    for i, subgroup in enumerate(catalog, 1):
        lines.append("")
        lines.append(f"Subgroup {i}:")
        lines.append(subgroup_text(subgroup, catalog.p, centered_coords))
    return "\n".join(lines)

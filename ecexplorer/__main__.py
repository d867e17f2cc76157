#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecexplorer developers
#
# This file is part of ecexplorer. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecexplorer including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line entry point: python -m ecexplorer."""

import argparse
import logging
import sys
from typing import List, Optional

from ecexplorer import __version__
from ecexplorer.api import (
    add_points,
    build_subgroup_catalog,
    create_curve,
    is_point_on_curve,
    multiply_point,
    point_from_coordinates,
)
from ecexplorer.display import catalog_text, group_text, str_from_point


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecexplorer",
        description="Explore the point group of y^2 = x^3 + a*x + b over Fp",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    curve = argparse.ArgumentParser(add_help=False)
    curve.add_argument("p", help="Field prime (odd, at most 2048)")
    curve.add_argument("a", help="Curve coefficient a")
    curve.add_argument("b", help="Curve coefficient b")
    curve.add_argument(
        "--centered", action="store_true", help="Show coordinates in (-p/2, p/2]"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("group", parents=[curve], help="List all group points")

    check = sub.add_parser("check", parents=[curve], help="Check a point is on curve")
    check.add_argument("x")
    check.add_argument("y")

    add = sub.add_parser("add", parents=[curve], help="Add two points")
    add.add_argument("x1")
    add.add_argument("y1")
    add.add_argument("x2")
    add.add_argument("y2")

    mul = sub.add_parser("mult", parents=[curve], help="Compute k*(x, y)")
    mul.add_argument("x")
    mul.add_argument("y")
    mul.add_argument("k")

    subgroups = sub.add_parser("subgroups", parents=[curve], help="List subgroups")
    subgroups.add_argument("--json", action="store_true", help="Output json")

    return parser


def run(args: argparse.Namespace) -> str:
    ec = create_curve(args.p, args.a, args.b)

    if args.command == "group":
        return group_text(ec, args.centered)

    if args.command == "check":
        Q = point_from_coordinates(ec, args.x, args.y)
        point = str_from_point(Q, ec.p, args.centered)
        if is_point_on_curve(ec, Q):
            return f"Point {point} is on the curve."
        return f"Point {point} is not on the curve."

    if args.command == "add":
        Q1 = point_from_coordinates(ec, args.x1, args.y1)
        Q2 = point_from_coordinates(ec, args.x2, args.y2)
        R = add_points(ec, Q1, Q2)
        return f"Sum: {str_from_point(R, ec.p, args.centered)}"

    if args.command == "mult":
        Q = point_from_coordinates(ec, args.x, args.y)
        R = multiply_point(ec, Q, args.k)
        return f"Point {args.k}P: {str_from_point(R, ec.p, args.centered)}"

    catalog = build_subgroup_catalog(ec)
    if args.json:
        return catalog.to_json(indent=2)
    return catalog_text(catalog, args.centered)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        print(run(args))
    except (ValueError, TypeError, RuntimeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

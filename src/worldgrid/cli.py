"""worldgrid command-line interface."""

from __future__ import annotations

import argparse
import json
import logging

from .io import load_json, save_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="worldgrid CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log build progress")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a grid and save it as JSON")
    build.add_argument("--level", type=int, required=True)
    build.add_argument("--out", dest="output_path", required=True)
    build.add_argument("--metrics", action="store_true", help="Also compute surface metrics")
    build.add_argument("--radius", type=float, default=6.371e6)
    build.add_argument("--seed", type=int, default=42)
    build.add_argument("--axial-tilt", type=float, default=0.0, help="Radians")

    validate = sub.add_parser("validate", help="Validate a saved grid")
    validate.add_argument("--in", dest="input_path", required=True)
    validate.add_argument("--strict", action="store_true")

    info = sub.add_parser("info", help="Print sizes and invariant checks for a level")
    info.add_argument("--level", type=int, required=True)

    relief = sub.add_parser("relief", help="Count mountainous cells of a saved grid")
    relief.add_argument("--in", dest="input_path", required=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "build":
        _cmd_build(args)

    elif args.command == "validate":
        grid = load_json(args.input_path)
        errors = grid.validate(strict=args.strict)
        if errors:
            for error in errors:
                print(error)
            raise SystemExit(1)
        print("OK")

    elif args.command == "info":
        from .builders import build_grid
        from .diagnostics import diagnostics_report

        report = diagnostics_report(build_grid(args.level))
        print(json.dumps(report, indent=2))

    elif args.command == "relief":
        from .relief import mountainous_cells

        grid = load_json(args.input_path)
        cells = mountainous_cells(grid)
        print(f"{len(cells)} of {len(grid.cells)} cells are mountainous")


def _cmd_build(args) -> None:
    from .builders import build_grid

    grid = build_grid(args.level)
    if args.metrics:
        from .metrics import compute_metrics
        from .noise import ElevationConfig, ElevationSampler
        from .projection import AxisProjection

        compute_metrics(
            grid,
            args.radius,
            AxisProjection(args.axial_tilt),
            ElevationSampler(ElevationConfig(seed=args.seed)),
        )
    save_json(grid, args.output_path)
    print(f"Saved {args.output_path}")


if __name__ == "__main__":
    main()

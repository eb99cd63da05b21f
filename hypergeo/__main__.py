import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from hypergeo import (
    ArcDescriptor,
    HyperbolicDrawer,
    HyperbolicError,
    TikzSurface,
    generate_tikz_document,
)
from hypergeo.disk import Primitive

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _describe(primitive: Primitive) -> str:
    if isinstance(primitive, ArcDescriptor):
        cx, cy = primitive.center
        return (
            f"arc center=({cx:.6f}, {cy:.6f}) radius={primitive.radius:.6f} "
            f"start={primitive.start_angle:.6f} end={primitive.end_angle:.6f}"
        )
    (x1, y1), (x2, y2) = primitive.start, primitive.end
    return f"line ({x1:.6f}, {y1:.6f}) -> ({x2:.6f}, {y2:.6f})"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw figures in the Poincaré disk model")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--size",
        type=float,
        default=600.0,
        help="Canvas width in screen units (default: 600)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the drawing to the given path",
    )
    parser.add_argument("--title", help="Caption printed above the TikZ picture")

    shapes = parser.add_subparsers(dest="shape", required=True)

    triangle = shapes.add_parser("triangle", help="triangle from 2-3 known measurements")
    for name in ("A", "a", "B", "b", "C", "c"):
        kind = "angle (degrees)" if name.isupper() else "side length"
        triangle.add_argument(f"-{name}", type=float, default=0.0, help=f"{kind}, 0 for unknown")
    triangle.add_argument("--rotation", type=float, default=0.0)

    polygon = shapes.add_parser("polygon", help="regular polygon")
    polygon.add_argument("n", type=int)
    polygon.add_argument("angle", type=float, help="interior angle in degrees")
    polygon.add_argument("--rotation", type=float, default=0.0)

    rect = shapes.add_parser("rectangle", help="quadrilateral with two radial sides")
    rect.add_argument("A", type=float, help="angle in degrees")
    rect.add_argument("a", type=float)
    rect.add_argument("b", type=float)
    rect.add_argument("-B", type=float, default=0.0)
    rect.add_argument("--rotation", type=float, default=0.0)

    line = shapes.add_parser("line", help="geodesic between two boundary angles")
    line.add_argument("a1", type=float)
    line.add_argument("a2", type=float)

    oricycle = shapes.add_parser("oricycle", help="circles tangent to the boundary")
    oricycle.add_argument("n", type=int)
    oricycle.add_argument("direction", type=float)

    perp = shapes.add_parser("perpendiculars", help="pencil of perpendicular geodesics")
    perp.add_argument("n", type=int)
    perp.add_argument("angle", type=float)

    par = shapes.add_parser("parallels", help="pencil of parallel geodesics")
    par.add_argument("k", type=int)
    par.add_argument("angle", type=float)

    circle = shapes.add_parser("circle", help="circle around the disk center")
    circle.add_argument("--r", type=float, default=0.0, help="Poincaré radius")
    circle.add_argument("--rg", type=float, default=0.0, help="gyrovector radius")

    circles = shapes.add_parser("circles", help="series of concentric circles")
    circles.add_argument("n", type=int)
    circles.add_argument("r1", type=float)
    circles.add_argument("r2", type=float)

    shapes.add_parser("pattern", help="decorative composite pattern")

    rosette = shapes.add_parser("rosette", help="perpendicular pencils every few degrees")
    rosette.add_argument("--n", type=int, default=21)
    rosette.add_argument("--step", type=float, default=30.0)

    return parser


def _dispatch(drawer: HyperbolicDrawer, args: argparse.Namespace) -> List[Primitive]:
    handlers: Dict[str, Callable[[], List[Primitive]]] = {
        "triangle": lambda: drawer.handle_triangle_drawing(
            args.A, args.a, args.B, args.b, args.C, args.c, args.rotation
        ),
        "polygon": lambda: drawer.create_polygon(args.n, args.angle, args.rotation),
        "rectangle": lambda: drawer.create_rectangle(args.A, args.B, args.a, args.b, args.rotation),
        "line": lambda: drawer.create_hyperbolic_line(args.a1, args.a2),
        "oricycle": lambda: drawer.create_oricycle(args.n, args.direction),
        "perpendiculars": lambda: drawer.create_perpendiculars(args.n, args.angle),
        "parallels": lambda: drawer.create_parallels(args.k, args.angle),
        "circle": lambda: drawer.handle_circle_drawing(args.r, args.rg),
        "circles": lambda: drawer.handle_circle_series_drawing(args.n, args.r1, args.r2),
        "pattern": drawer.draw_complex_pattern,
        "rosette": lambda: drawer.create_perpendicular_rosette(args.n, args.step),
    }
    return handlers[args.shape]()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    _configure_logging(args.log_level)

    surface = TikzSurface()
    drawer = HyperbolicDrawer.for_canvas(surface, args.size)
    drawer.set_empty_poincare_disk()

    logger.info("Drawing %s on a %.0f unit canvas", args.shape, args.size)
    try:
        primitives = _dispatch(drawer, args)
    except HyperbolicError as exc:
        logger.error("Cannot draw %s: %s", args.shape, exc)
        raise SystemExit(1) from exc

    print(f"Shape: {args.shape}")
    print(f"Disk: center=({drawer.frame.x:.3f}, {drawer.frame.y:.3f}) radius={drawer.frame.radius:.3f}")
    print(f"Primitives ({len(primitives)}):")
    for primitive in primitives:
        print(f"  {_describe(primitive)}")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(generate_tikz_document(surface, title=args.title), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])

# primkit/__main__.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from primkit.errors import InvalidParameterError
from primkit.export import save_obj
from primkit.geometry.primitives import generate, parameter_names
from primkit.gpu.textures import save_checker_png
from primkit.settings import CheckerSettings
from primkit.types import PrimitiveKind

_CHECKER = CheckerSettings()


def _parse_params(pairs: List[str]) -> Dict[str, float | int]:
    params: Dict[str, float | int] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"expected name=value, got '{pair}'")
        try:
            params[name] = int(raw)
        except ValueError:
            try:
                params[name] = float(raw)
            except ValueError:
                raise argparse.ArgumentTypeError(
                    f"value for '{name}' is not a number: '{raw}'"
                ) from None
    return params


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="primkit",
        description="Generate a parametric primitive and report its streams.",
        epilog="parameters:\n"
        + "\n".join(
            f"  {kind}: {', '.join(parameter_names(kind))}" for kind in PrimitiveKind
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("kind", choices=[k.value for k in PrimitiveKind])
    p.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="override a shape parameter (repeatable)",
    )
    p.add_argument("--obj", metavar="PATH", help="write the mesh as Wavefront OBJ")
    p.add_argument("--checker", metavar="PATH", help="write a checker texture PNG")
    p.add_argument("--checker-size", type=int, default=_CHECKER.size)
    p.add_argument("--checker-tiles", type=int, default=_CHECKER.tiles)
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
    )

    try:
        params = _parse_params(args.param)
        mesh = generate(args.kind, params)
        if args.checker:
            save_checker_png(
                args.checker,
                CheckerSettings(size=args.checker_size, tiles=args.checker_tiles),
            )
    except (argparse.ArgumentTypeError, InvalidParameterError) as e:
        parser.error(str(e))

    lo, hi = mesh.aabb()
    print(f"[{args.kind}] {mesh.vertex_count} vertices ({mesh.triangle_count} triangles)")
    print(f"  > Bounds X:   {lo[0]:.3f} to {hi[0]:.3f}")
    print(f"  > Bounds Y:   {lo[1]:.3f} to {hi[1]:.3f}")
    print(f"  > Bounds Z:   {lo[2]:.3f} to {hi[2]:.3f}")

    if args.obj:
        print(f"  > Wrote {save_obj(args.obj, mesh, name=args.kind)}")
    if args.checker:
        print(f"  > Wrote {args.checker}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

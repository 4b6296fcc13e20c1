#!/usr/bin/env python3

"""CLI to generate an evergreen tree and save, export or dump it."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from evergreen.config import THEME_NAMES, InvalidParameter, TreeParameters, random_parameters
from evergreen.export import write_scene_json, write_script
from evergreen.generator import generate
from evergreen.render import save_scene
from evergreen.schema import InputSchema

logger = logging.getLogger(__name__)


def describe(parameters: TreeParameters) -> list[str]:
    """Human-readable parameter summary, one line per control."""
    return [
        f"Tree height:     {parameters.height:.0f}",
        f"Layers:          {parameters.layer_count:.0f}",
        f"Trunk width:     {parameters.trunk_width:.1f}",
        f"Trunk height:    {parameters.trunk_height:.1f}",
        f"Randomness:      {parameters.randomness:.2f}",
        f"Theme:           {parameters.theme}",
        f"Ornaments:       {'on' if parameters.show_ornaments else 'off'}",
        f"Star:            {'on' if parameters.show_star else 'off'}",
        f"Snow:            {'on' if parameters.show_snow else 'off'}",
        f"Seed:            {parameters.seed}",
    ]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Procedurally generate an evergreen tree.")
    ap.add_argument("--height", type=float, default=None, help="Foliage height (default 10)")
    ap.add_argument("--layers", type=int, default=None, help="Number of foliage layers (>= 2)")
    ap.add_argument("--trunk-width", type=float, default=None, help="Trunk width")
    ap.add_argument("--trunk-height", type=float, default=None, help="Trunk height")
    ap.add_argument("--randomness", type=float, default=None, help="Natural-look amount, 0-0.5")
    ap.add_argument(
        "--theme",
        type=str,
        default=None,
        help=f"Color theme ({', '.join(THEME_NAMES)}); unknown names use Classic",
    )
    ap.add_argument("--ornaments", action="store_true", default=None, help="Add ornaments")
    ap.add_argument("--no-star", dest="star", action="store_false", default=None, help="Omit the star")
    ap.add_argument("--snow", action="store_true", default=None, help="Add snow")
    ap.add_argument("--seed", type=int, default=None, help="Geometry seed")
    ap.add_argument(
        "--random",
        action="store_true",
        help="Randomize every parameter (--seed then seeds the sampler)",
    )
    ap.add_argument("--params", type=Path, default=None, help="JSON file with tree parameters")
    ap.add_argument("-o", "--output", type=Path, default=None, help="Save image (.png, .jpg, .pdf)")
    ap.add_argument("--export-script", type=Path, default=None, help="Write a reproduction script")
    ap.add_argument("--json", type=Path, default=None, help="Write the scene as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return ap


def resolve_parameters(args: argparse.Namespace) -> TreeParameters:
    """Combine --random / --params with individual flag overrides."""
    if args.random:
        base = random_parameters(args.seed)
    elif args.params is not None:
        schema = InputSchema.model_validate_json(args.params.read_text(encoding="utf-8"))
        base = schema.to_parameters()
    else:
        base = TreeParameters()

    overrides = {
        "height": args.height,
        "layer_count": args.layers,
        "trunk_width": args.trunk_width,
        "trunk_height": args.trunk_height,
        "randomness": args.randomness,
        "theme": args.theme,
        "show_ornaments": args.ornaments,
        "show_star": args.star,
        "show_snow": args.snow,
    }
    if not args.random:
        overrides["seed"] = args.seed
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(base, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, generate the tree and write the requested outputs."""
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        parameters = resolve_parameters(args)
        scene = generate(parameters)
    except (InvalidParameter, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    logger.info("Generated %d shapes for seed %d", len(scene.shapes), parameters.seed)

    for line in describe(parameters):
        print(line)
    print(f"Shapes:          {len(scene.shapes)}")

    if args.output is not None:
        save_scene(scene, str(args.output), parameters.color_theme)
        print(f"Saved image to {args.output}")
    if args.export_script is not None:
        write_script(args.export_script, parameters)
        print(f"Exported script to {args.export_script}")
    if args.json is not None:
        write_scene_json(args.json, scene)
        print(f"Wrote scene JSON to {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

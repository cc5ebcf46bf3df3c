"""
svg-path-command — rewrite SVG path data in readable form.

Usage:
  svg-path-command input.svg                        # prints converted SVG
  svg-path-command input.svg -o clean.svg           # saves converted SVG
  svg-path-command folder/ -o output_folder/        # batch process folder
  svg-path-command --path "m10 10h5v5z" --split-chains --convert-lines
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from pathcommand.config import settings
from pathcommand.converter import convert_path_commands
from pathcommand.engine.config import PathOptions
from pathcommand.errors import PathCommandError
from pathcommand.svg.document import convert_svg_document

logger = logging.getLogger(__name__)

# (flag, PathOptions field, help)
FLAGS = [
    ("--split-chains", "split_chains", "One command per parameter group"),
    ("--convert-lines", "convert_lines", "Rewrite H/V as L"),
    ("--convert-smooth", "convert_smooth", "Rewrite S/T as C/Q"),
    ("--quadratic-to-cubic", "convert_quadratic_to_cubic", "Elevate Q/T to C"),
    ("--arc-to-cubic", "convert_arc_to_cubic", "Approximate A with C"),
    ("--line-breaks", "add_line_breaks", "Put every command on its own line"),
    ("--correct-floats", "correct_floating_point", "Round away float noise like 10.999999999"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SVG path data normalizer")
    parser.add_argument("input", nargs="?", help="SVG file or folder of SVGs")
    parser.add_argument("-p", "--path", help="Convert a literal path data string instead of a file")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument(
        "--absolute",
        dest="convert_absolute",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Convert relative commands to absolute (default: on)",
    )
    for flag, dest, help_text in FLAGS:
        parser.add_argument(flag, dest=dest, action="store_true", default=None, help=help_text)
    parser.add_argument("-a", "--all", action="store_true", help="Enable every conversion")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> PathOptions:
    """Configured defaults, then --all, then individual flags."""
    flags = {k: v for k, v in settings.default_options.items() if k in PathOptions.flag_names()}
    if args.all:
        flags.update(
            split_chains=True,
            convert_lines=True,
            convert_smooth=True,
            convert_quadratic_to_cubic=True,
            convert_arc_to_cubic=True,
        )
    for name in ["convert_absolute", *(dest for _, dest, _ in FLAGS)]:
        value = getattr(args, name)
        if value is not None:
            flags[name] = value
    return PathOptions(**flags, diagnostics=lambda message: print(f"  ! {message}", file=sys.stderr))


def process_file(input_path: str, output_path: str | None, options: PathOptions) -> bool:
    """Convert a single SVG file."""
    with open(input_path, "r", encoding="utf-8") as f:
        raw = f.read()

    try:
        converted = convert_svg_document(raw, options)
    except PathCommandError as e:
        print(f"  ERROR: {e}")
        return False

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(converted)
        print(f"  → Saved: {output_path}")
    else:
        print(converted)

    return True


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.pathcommand_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    options = options_from_args(args)

    if args.path is not None:
        try:
            result = convert_path_commands(args.path, options)
        except PathCommandError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        print(result)
        return 0

    if not args.input:
        parser.error("an SVG file, a folder or --path is required")

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = [f for f in os.listdir(args.input) if f.lower().endswith(".svg")]
        if not svg_files:
            print("No .svg files found in folder.")
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_converted"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in sorted(svg_files):
            print(f"[{fname}]")
            if process_file(os.path.join(args.input, fname), os.path.join(out_dir, fname), options):
                success += 1

        print(f"Done: {success}/{len(svg_files)} processed → {out_dir}")
        return 0 if success == len(svg_files) else 1

    # Single file
    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1

    return 0 if process_file(args.input, args.output, options) else 1


if __name__ == "__main__":
    sys.exit(main())

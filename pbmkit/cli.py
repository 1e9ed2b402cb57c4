from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .codec import load, save
from .convert import to_bitmap, to_greymap
from .errors import NetpbmError
from .image import P4, Bitmap, Greymap, Image, Pixmap, ScaledImage
from .settings import CodecSettings

LOG_LEVEL_ENV_VAR = "PBMKIT_LOG_LEVEL"
TARGETS = ("pbm", "pgm", "ppm")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pbmkit", description="Read, transform and write Netpbm images.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    parser.add_argument("--clamp", action="store_true", help="Clamp samples above the max value instead of failing")
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Print format, size and max value")
    info.add_argument("path")

    convert = sub.add_parser("convert", help="Convert to a lower color depth")
    convert.add_argument("path")
    convert.add_argument("output")
    convert.add_argument("--to", choices=TARGETS, required=True, help="Target format")
    convert.add_argument("--binary", action="store_true", help="Write bitmaps as P4")

    transform = sub.add_parser("transform", help="Apply geometric and tonal transforms")
    transform.add_argument("path")
    transform.add_argument("output")
    transform.add_argument("--invert", action="store_true")
    transform.add_argument("--flip", action="store_true", help="Mirror left to right")
    transform.add_argument("--flop", action="store_true", help="Mirror top to bottom")
    transform.add_argument("--rotate", type=int, default=0, choices=(0, 90, 180, 270), help="Clockwise degrees")
    transform.add_argument("--max-value", type=int, help="Rescale samples to a new max value")

    import_cmd = sub.add_parser("import", help="Convert any Pillow-readable image to Netpbm")
    import_cmd.add_argument("path")
    import_cmd.add_argument("output")

    export = sub.add_parser("export", help="Convert a Netpbm image to any Pillow-writable format")
    export.add_argument("path")
    export.add_argument("output")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist, so apply the level separately
    logging.getLogger().setLevel(level)


def show_info(image: Image) -> int:
    line = f"{image.magic_number} {image.width}x{image.height}"
    if isinstance(image, ScaledImage):
        line += f" max={image.max_value}"
    print(line)
    return 0


def convert_image(image: Image, target: str, binary: bool) -> Image:
    if target == "pbm":
        if not isinstance(image, Bitmap):
            image = to_bitmap(image)
        if binary:
            image.set_magic_number(P4)
        return image
    if target == "pgm":
        if isinstance(image, Pixmap):
            return to_greymap(image)
        if isinstance(image, Greymap):
            return image
    if target == "ppm" and isinstance(image, Pixmap):
        return image
    raise NetpbmError(f"Cannot convert {type(image).__name__} to {target}")


def transform_image(image: Image, args: argparse.Namespace) -> Image:
    if args.invert:
        image.invert()
    if args.flip:
        image.flip()
    if args.flop:
        image.flop()
    for _ in range(args.rotate // 90):
        image.rotate90cw()
    if args.max_value is not None:
        if not isinstance(image, ScaledImage):
            raise NetpbmError("Bitmaps have no max value")
        image.set_max_value(args.max_value)
    return image


def run(args: argparse.Namespace) -> int:
    settings = CodecSettings(overflow="clamp" if args.clamp else "error")
    if args.command == "import":
        from .pillow import open_image

        save(open_image(args.path), args.output, settings)
        return 0
    image = load(args.path, settings)
    if args.command == "info":
        return show_info(image)
    if args.command == "export":
        from .pillow import export_image

        export_image(image, args.output)
        return 0
    if args.command == "convert":
        image = convert_image(image, args.to, args.binary)
    else:
        image = transform_image(image, args)
    save(image, args.output, settings)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        configure_logging(args.verbose)
        return run(args)
    except (NetpbmError, OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

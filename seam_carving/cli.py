"""
Command-line front end: load an image, carve N vertical seams, save it.

Any value not given on the command line is asked for interactively:

    $ seam-carve
    Enter the input image filename (e.g., image.png or full path): bagel.jpg
    Original image size: 640x480
    Enter the number of seams to remove: 100
    Resized image size: 540x480
    Enter the output image filename (...): out/bagel.png
    Seam carving completed. Saved as out/bagel.png
"""

import argparse
import logging
import sys

from .carving import carve
from .errors import SeamCarvingError
from .io import load_image, save_image

DEFAULT_OUTPUT = 'resized.png'


def _prompt(message: str) -> str:
    return input(message).strip()


def _parse_seam_count(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise SeamCarvingError(f"Invalid number of seams: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam-carve',
        description="Reduce image width by removing low-energy vertical seams"
    )
    parser.add_argument(
        'input',
        nargs='?',
        help='Input image path (prompted for if omitted)'
    )
    parser.add_argument(
        '-n', '--seams',
        type=str,
        default=None,
        help='Number of seams to remove (prompted for if omitted)'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help=f"Output image path (prompted for if omitted, default '{DEFAULT_OUTPUT}')"
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log every removed seam'
    )
    return parser


def run(args) -> int:
    input_path = args.input
    if input_path is None:
        input_path = _prompt("Enter the input image filename (e.g., image.png or full path): ")

    image = load_image(input_path)
    _, H, W = image.shape
    print(f"Original image size: {W}x{H}")

    seams = args.seams
    if seams is None:
        seams = _prompt("Enter the number of seams to remove: ")
    n_seams = _parse_seam_count(seams)

    resized = carve(image, n_seams)
    _, H, W = resized.shape
    print(f"Resized image size: {W}x{H}")

    output_path = args.output
    if output_path is None:
        output_path = _prompt("Enter the output image filename (e.g., resized.png or full path, "
                              f"press Enter for '{DEFAULT_OUTPUT}'): ")
    if not output_path:
        output_path = DEFAULT_OUTPUT

    save_image(resized, output_path)
    print(f"Seam carving completed. Saved as {output_path}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        return run(args)
    except (SeamCarvingError, OSError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: unexpected end of input", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

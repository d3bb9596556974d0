"""
Generate a maze of any size in ASCII or block format.

    genmaze WIDTH HEIGHT [a|b|ds|dr|r ...] [--seed N] [--image PATH] [--gif PATH]

The maze is printed one row at a time as it is generated.
"""
import argparse
import sys
from dataclasses import dataclass
from typing import Optional

import numpy as np

from maze_generator import EllerMazeGenerator
from render import render_row

# Seed used when randomness is turned off with the "r" option
FIXED_SEED = 1

OPTIONS = {
    "a": "ASCII style maze (default).",
    "b": "BLOCK style maze.",
    "ds": "Turn set debug on.",
    "dr": "Turn row debug on.",
    "r": "Turn off random generation.",
}


class UsageParser(argparse.ArgumentParser):
    """Argument parser that reports bad usage with exit status 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


@dataclass(frozen=True)
class MazeOptions:
    width: int
    height: int
    style: str = "ascii"
    debug: Optional[str] = None
    seed: Optional[int] = None
    image: Optional[str] = None
    gif: Optional[str] = None


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("maze width and height must be greater than 0")
    return number


def build_parser():
    epilog = "options:\n" + "\n".join(f"  {name:<3} {text}" for name, text in OPTIONS.items())
    parser = UsageParser(
        prog="genmaze",
        description="Generate a perfect maze with Eller's algorithm",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("width", type=positive_int, help="Maze width in cells")
    parser.add_argument("height", type=positive_int, help="Maze height in cells")
    parser.add_argument("options", nargs="*", default=[], metavar="OPTION",
                        help="Any of: " + ", ".join(OPTIONS))
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--image", type=str, default=None, help="Save a PNG of the finished maze")
    parser.add_argument("--gif", type=str, default=None,
                        help="Save an animated GIF of the maze being generated")
    return parser


def parse_options(argv=None):
    """Turn command line arguments into MazeOptions, exiting with 1 on bad usage"""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    unknown = [token for token in args.options if token not in OPTIONS]
    if unknown:
        parser.error(f"unknown option: {unknown[0]!r}")

    style = "ascii"
    seed = None
    for token in args.options:
        if token == "a":
            style = "ascii"
        elif token == "b":
            style = "block"
        elif token == "r":
            seed = FIXED_SEED

    if "ds" in args.options:
        debug = "sets"
    elif "dr" in args.options:
        debug = "raw"
    else:
        debug = None

    if args.seed is not None:
        seed = args.seed

    return MazeOptions(width=args.width, height=args.height, style=style, debug=debug,
                       seed=seed, image=args.image, gif=args.gif)


def run(options, out=None):
    """Generate the maze row by row, writing each rendered row to `out`"""
    if out is None:
        out = sys.stdout

    generator = EllerMazeGenerator(options.width, seed=options.seed)
    keep_rows = options.image is not None or options.gif is not None
    cells = np.zeros((options.height, options.width), dtype=np.uint8) if keep_rows else None
    frames = []

    for i, is_first, is_last in generator.rows(options.height):
        out.write(render_row(generator, options.style, is_first, is_last, debug=options.debug))
        if keep_rows:
            cells[i] = generator.row
            if options.gif is not None:
                frames.append(cells[:i + 1].copy())
    out.flush()

    if keep_rows:
        from vis import save_maze_image, save_generation_gif
        if options.image is not None:
            save_maze_image(cells, options.image,
                            title=f"{options.width}x{options.height} maze")
            print(f"Saved maze image to {options.image}", file=sys.stderr)
        if options.gif is not None:
            save_generation_gif(frames, options.gif)
            print(f"Created generation GIF: {options.gif}", file=sys.stderr)


def main(argv=None):
    options = parse_options(argv)
    run(options)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line entry point: ``python -m flappy`` or ``flappy``.
"""

import argparse
import logging

from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_VARIANT, RENDER_FPS, VARIANTS


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Flap through the pipes.")
    parser.add_argument("--variant", choices=VARIANTS, default=DEFAULT_VARIANT)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--fps", type=int, default=RENDER_FPS)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle placement")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    # Imported late so --help works without opening a window
    from .flappy_client import FlappyClient

    client = FlappyClient(width=args.width, height=args.height,
                          variant=args.variant, fps=args.fps, seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        client.running = False


if __name__ == "__main__":
    main()

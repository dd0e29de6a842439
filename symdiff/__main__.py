"""Command-line entry point: ``python -m symdiff``."""
import argparse
import logging

from .config import Config
from .repl import run_repl


def build_parser():
    parser = argparse.ArgumentParser(
        prog="symdiff",
        description="Differentiate expressions in x and print stack code",
    )
    parser.add_argument("--at", dest="x", type=float, default=None,
                        help="value of x used in stack code (default 0)")
    parser.add_argument("--value", action="store_true",
                        help="also print the derivative's value at x")
    parser.add_argument("--show-original", action="store_true",
                        help="also print the parsed expression and its code")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level (default WARNING)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = Config()
    if args.x is not None:
        config.x = args.x
    if args.log_level is not None:
        config.log_level = args.log_level
    config.show_value = args.value
    config.show_original = args.show_original

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_repl(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

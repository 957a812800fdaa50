"""Smallest application: prints a greeting every frame."""

from __future__ import annotations

import argparse

from .app import App
from .schedule import Schedule


def print_hello_world() -> None:
    print("Hello World")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hello_world", description="Print a greeting every frame.")
    parser.add_argument("--frames", type=int, default=None, help="number of frames to run (default: forever)")
    args = parser.parse_args(argv)
    App().add_system(Schedule.UPDATE, print_hello_world).run(args.frames)
    return 0
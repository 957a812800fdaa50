"""Example application spawning positioned entities and moving them each frame."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from . import log
from .app import App
from .commands import Commands
from .component import Component, Entity
from .log import Logger, LogLevel
from .query import Query
from .schedule import Schedule


@dataclass
class Position(Component):
    x: int = 0
    y: int = 0

    def to_string(self) -> str:
        return f"Position {{{self.x}, {self.y}}}"


def startup(commands: Commands) -> None:
    log.debug("Startup")
    commands.spawn(Position())
    commands.spawn(Position(5, 5))


def print_positions(query: Query[Entity, Position]) -> None:
    log.debug("There are ", query.count(), " entities that fit the query")
    for entity, position in query:
        log.debug(entity, " has position ", position)
        position.x += 1
        position.y += 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="basic_ecs", description="Spawn entities and move them each frame.")
    parser.add_argument("--frames", type=int, default=None, help="number of frames to run (default: forever)")
    args = parser.parse_args(argv)
    Logger.get_instance().set_log_level(LogLevel.DEBUG)
    (
        App()
        .add_system(Schedule.STARTUP, startup)
        .add_system(Schedule.UPDATE, print_positions)
        .run(args.frames)
    )
    return 0
# archecs

archecs is a small entity component system (ECS). It stores entities in
archetype tables: every distinct set of component types gets its own
`Table`, and each component type gets its own `Column` in that table. On top
of that it has queries, commands for spawning from inside systems, an
application loop with startup and update schedules, and a levelled logger.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Concepts

- `archecs.component.Component` is the base class for your data types.
  Override `to_string` to control how a component is printed (`str()` uses it).
- `archecs.component.Entity` is the handle of a spawned entity. It prints as
  `Entity(<id>)`; ids count up from 0 in spawn order.
- `archecs.world.World` owns the entities and their tables.
  `World.spawn(*components)` creates an entity and returns its `Entity`.
  The properties `entity_count` and `tables_count` report how many entities
  and archetype tables exist. `World.get_component(component_type, index)`
  returns an entity's component (or its `Entity` when asked for `Entity`);
  a bad index raises `IndexError`, a missing component `KeyError`.
- `archecs.archetype.ArchetypeComponents` is the set of component types of an
  entity. Order does not matter: `ArchetypeComponents(Position(), Velocity())`
  equals `ArchetypeComponents(Velocity(), Position())`.
- `archecs.query.Query` walks over every entity of a world and yields a tuple
  of the requested components. Write it as `Query[Entity, Position](world)` or
  `Query(world, Entity, Position)`. `count()` returns the number of tuples.
  Every entity in the world is visited, so an entity lacking a requested
  component makes iteration raise `KeyError`.
- `archecs.commands.Commands` lets a system spawn entities; `spawn` adds the
  entity to the world straight away and returns it.
- `archecs.app.App` collects systems under schedule labels
  (`Schedule.STARTUP`, `Schedule.UPDATE` from `archecs.schedule`) and runs
  them. Startup systems run once, then update systems run every frame.

## Example

```python
from dataclasses import dataclass

from archecs.app import App
from archecs.commands import Commands
from archecs.component import Component, Entity
from archecs.query import Query
from archecs.schedule import Schedule


@dataclass
class Position(Component):
    x: int = 0
    y: int = 0

    def to_string(self):
        return f"Position {{{self.x}, {self.y}}}"


def startup(commands: Commands):
    commands.spawn(Position())
    commands.spawn(Position(5, 5))


def move(query: Query[Entity, Position]):
    for entity, position in query:
        position.x += 1
        position.y += 1


app = App().add_system(Schedule.STARTUP, startup).add_system(Schedule.UPDATE, move)
app.run(frames=3)
print(app.world.get_component(Position, 1))  # Position {8, 8}
```

Each parameter of a system must be annotated with `Commands` or a `Query`
type; the app builds one on its world for every call. Any other annotation,
a missing annotation or `*args`/`**kwargs` raises `TypeError` when the system
is added. Without `frames`, `App.run` loops forever; a negative `frames`
raises `ValueError`. A custom `ScheduleRunner(startup_labels, labels)` can be
passed to `App` to run other `ScheduleLabel`s.

## Logging

`archecs.log` writes timestamped lines to standard output, each with its
severity, e.g. `2024-01-01T12:00:00.123456Z DEBUG startup Startup`. The
functions `trace`, `debug`, `info`, `warning`, `error` and `fatal` write one
line from their arguments, prefixed with the name of the calling function.
Lines below the logger's level are dropped; the default level is
`LogLevel.INFO`. Change it with
`Logger.get_instance().set_log_level(LogLevel.DEBUG)`. A `Logger(stream,
log_level)` of your own can write elsewhere; `Logger.log(severity, *values)`
writes a line, and `Logger.line(severity)` gives a `LogLine` to build one up
with `write(...)`, usable as a context manager.

## Bundled programs

```
archecs-hello-world [--frames N]
```

prints `Hello World` on every frame.

```
archecs-basic-ecs [--frames N]
```

spawns two entities with a position at startup; on every frame it logs, at
debug level, how many entities match and each entity's position, then moves
each entity by one step.

Without `--frames` both run until interrupted with Ctrl+C.

## What it does not do

There is no way to remove entities or to add or remove components of an
existing entity, queries cannot filter by component, and systems can take
only `Commands` and `Query` parameters. Nothing is saved to disk.
"""The application: registers systems and runs them on a world."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from .commands import Commands
from .query import Query
from .schedule import ScheduleLabel, ScheduleRunner
from .world import World

_Factory = Callable[[World], Any]

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


def _resolve(name: str, hint: Any, namespace: dict[str, Any]) -> Any:
    if hint is None:
        raise TypeError(f"system parameter {name!r} has no type annotation")
    if isinstance(hint, str):
        if hint in namespace:
            return namespace[hint]
        raise TypeError(f"cannot resolve annotation {hint!r} of system parameter {name!r}")
    return hint


def _factory_for(name: str, hint: Any) -> _Factory:
    if isinstance(hint, type):
        if issubclass(hint, Commands):
            return hint
        if issubclass(hint, Query):
            return hint
    raise TypeError(f"unsupported system parameter type for {name!r}: {hint!r}")


def _factories(system: Callable[..., Any]) -> tuple[list[_Factory], dict[str, _Factory]]:
    """Return the factories for a system's positional and keyword-only parameters."""
    func = getattr(system, "__func__", system)
    code = getattr(func, "__code__", None)
    if code is None:
        raise TypeError(f"system {system!r} is not a function")
    if code.co_flags & (_CO_VARARGS | _CO_VARKEYWORDS):
        raise TypeError("system parameters cannot be variadic")

    positional = list(code.co_varnames[: code.co_argcount])
    keyword_only = list(
        code.co_varnames[code.co_argcount : code.co_argcount + code.co_kwonlyargcount]
    )
    if func is not system and getattr(system, "__self__", None) is not None:
        positional = positional[1:]

    annotations = getattr(func, "__annotations__", None) or {}
    namespace = getattr(func, "__globals__", {})

    def factory(name: str) -> _Factory:
        return _factory_for(name, _resolve(name, annotations.get(name), namespace))

    return (
        [factory(name) for name in positional],
        {name: factory(name) for name in keyword_only},
    )


class App:
    """Entry point: add systems to schedules, then run them.

    A system's parameters are filled in from their annotations: ``Commands``
    gives a command buffer on the app's world and ``Query[...]`` a query over it.
    """

    def __init__(self, schedule_runner: ScheduleRunner | None = None) -> None:
        self._systems: defaultdict[ScheduleLabel, list[Callable[[World], None]]] = defaultdict(list)
        self._schedule_runner = schedule_runner if schedule_runner is not None else ScheduleRunner()
        self._world = World()

    @property
    def world(self) -> World:
        return self._world

    def add_system(self, schedule: ScheduleLabel, system: Callable[..., Any]) -> App:
        """Register ``system`` to run at ``schedule``; return the app for chaining."""
        positional, keyword_only = _factories(system)

        def run_system(world: World) -> None:
            args = [factory(world) for factory in positional]
            kwargs = {name: factory(world) for name, factory in keyword_only.items()}
            system(*args, **kwargs)

        self._systems[schedule].append(run_system)
        return self

    def run(self, frames: int | None = None) -> None:
        """Run all registered systems; forever unless ``frames`` is given."""

        def run_schedule(schedule: ScheduleLabel) -> None:
            for system in self._systems.get(schedule, ()):
                system(self._world)

        self._schedule_runner.run(run_schedule, frames)
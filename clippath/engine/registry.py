"""Command registry — every path command is a standalone handler registered via decorator.

Usage:
    @command(letter="L", operands=("x-coordinate", "y-coordinate"))
    def line_to(state: CursorState, args: Operands, relative: bool, config: FlattenConfig) -> list[Point]:
        target = state.resolve(args[0], args[1], relative)
        state.move_to(target)
        return [target]

One handler serves both cases of a letter; ``relative`` is True for the
lowercase form. Adding a command = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from clippath.engine.config import FlattenConfig
    from clippath.engine.context import CursorState
    from clippath.utils.geometry import Point

logger = logging.getLogger(__name__)

Operands = tuple[float, ...]
CommandFn = Callable[["CursorState", Operands, bool, "FlattenConfig"], "list[Point]"]


@dataclass
class CommandSpec:
    letter: str
    fn: CommandFn
    # Operand names in reading order; len() is the command's fixed arity
    operands: tuple[str, ...] = ()
    # Letter that further operand groups execute as (M → L); None repeats itself
    repeat_as: str | None = None
    description: str = ""

    @property
    def arity(self) -> int:
        return len(self.operands)


class CommandRegistry:
    """Dispatch table keyed by absolute (uppercase) command letter."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        key = spec.letter.upper()
        if key in self._commands:
            raise ValueError(f"Duplicate command letter: {key}")
        self._commands[key] = spec
        logger.debug("Registered command %s (arity %d)", key, spec.arity)

    def get(self, letter: str) -> CommandSpec | None:
        """Look up the handler for either case of a letter."""
        return self._commands.get(letter.upper())

    def letters(self) -> list[str]:
        return sorted(self._commands)

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(
    *,
    letter: str,
    operands: tuple[str, ...] = (),
    repeat_as: str | None = None,
    description: str = "",
):
    """Decorator to register a command handler."""

    def decorator(fn: CommandFn):
        spec = CommandSpec(
            letter=letter.upper(),
            fn=fn,
            operands=operands,
            repeat_as=repeat_as,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator

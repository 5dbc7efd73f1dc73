"""Path interpreter — token stream → absolute points in path space.

Each command token opens a group that consumes its fixed arity of numbers
and then repeats while the next token is still a number. Repeated groups of
M/m execute as L/l of the same case.
"""

from __future__ import annotations

import logging

import clippath.engine.commands  # noqa: F401  (registers the command handlers)
from clippath.engine.config import FlattenConfig
from clippath.engine.context import CursorState
from clippath.engine.errors import InterpretError
from clippath.engine.registry import CommandRegistry, CommandSpec, get_registry
from clippath.engine.tokenizer import Token
from clippath.utils.geometry import Point

logger = logging.getLogger(__name__)


class PathInterpreter:
    """Owns the cursor state for one pass over a token sequence."""

    def __init__(
        self,
        tokens: list[Token],
        config: FlattenConfig | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        self.tokens = tokens
        self.config = config or FlattenConfig()
        self.registry = registry or get_registry()
        self.state = CursorState()
        self.points: list[Point] = []
        self._pos = 0

    def run(self) -> list[Point]:
        while self._pos < len(self.tokens):
            token = self.tokens[self._pos]
            if not token.is_command:
                raise InterpretError(None, "command", self._pos, token.describe())
            self._pos += 1
            self._run_group(str(token.value), self._pos - 1)

        if not self.points:
            raise InterpretError(None, "a command that produces points", self._pos)

        logger.debug("Interpreted %d tokens into %d points", len(self.tokens), len(self.points))
        return self.points

    def _run_group(self, letter: str, command_index: int) -> None:
        spec = self._lookup(letter, command_index)
        relative = letter.islower()

        while True:
            args = self._read_operands(spec, letter)
            self.points.extend(spec.fn(self.state, args, relative, self.config))
            self.state.last_command = letter

            if spec.arity == 0 or not self._next_is_number():
                return
            if spec.repeat_as is not None:
                letter = spec.repeat_as.lower() if relative else spec.repeat_as.upper()
                spec = self._lookup(letter, command_index)

    def _lookup(self, letter: str, command_index: int) -> CommandSpec:
        spec = self.registry.get(letter)
        if spec is None:
            raise InterpretError(None, "a supported command letter", command_index, f'command "{letter}"')
        return spec

    def _read_operands(self, spec: CommandSpec, letter: str) -> tuple[float, ...]:
        args: list[float] = []
        for name in spec.operands:
            if not self._next_is_number():
                found = self.tokens[self._pos].describe() if self._pos < len(self.tokens) else None
                raise InterpretError(letter, name, self._pos, found)
            args.append(float(self.tokens[self._pos].value))
            self._pos += 1
        return tuple(args)

    def _next_is_number(self) -> bool:
        return self._pos < len(self.tokens) and self.tokens[self._pos].is_number


def interpret(tokens: list[Token], config: FlattenConfig | None = None) -> list[Point]:
    """Expand a token sequence into absolute path-space points."""
    return PathInterpreter(tokens, config).run()

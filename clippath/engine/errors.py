"""Conversion error taxonomy.

Each stage raises its own exception type carrying structured fields.
The English message is only built in ``__str__``, so callers can either
inspect the fields or surface the text verbatim.
"""

from __future__ import annotations


class PathConversionError(ValueError):
    """Base class for every failure raised by the conversion engine."""

    kind = "conversion"

    def __init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


class TokenizeError(PathConversionError):
    """Unrecognised character or malformed numeric literal."""

    kind = "tokenize"

    def __init__(self, text: str, index: int, reason: str = "character") -> None:
        self.text = text
        self.index = index
        # "character" or "number"
        self.reason = reason
        super().__init__()

    @property
    def message(self) -> str:
        if self.reason == "number":
            return f'Invalid number format "{self.text}" at position {self.index}'
        return f'Unexpected character "{self.text}" at position {self.index}'


class InterpretError(PathConversionError):
    """Token stream does not form a valid sequence of path commands."""

    kind = "interpret"

    def __init__(
        self,
        command: str | None,
        expected: str,
        token_index: int,
        found: str | None = None,
    ) -> None:
        self.command = command
        self.expected = expected
        self.token_index = token_index
        self.found = found
        super().__init__()

    @property
    def message(self) -> str:
        found = self.found or "end of path"
        if self.command is None:
            return f"Expected {self.expected} at token {self.token_index}, got {found}"
        return (
            f"Expected {self.expected} for {self.command} command "
            f"at token {self.token_index}, got {found}"
        )


class PolygonError(PathConversionError):
    """Too few points after flattening to describe a polygon."""

    kind = "polygon"

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__()

    @property
    def message(self) -> str:
        return (
            "Path must contain at least 3 points to create a polygon "
            f"(insufficient points: got {self.point_count})"
        )


class ValidationError(PathConversionError):
    """Input rejected by the shallow pass-through check."""

    kind = "validation"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__()

    @property
    def message(self) -> str:
        return self.reason

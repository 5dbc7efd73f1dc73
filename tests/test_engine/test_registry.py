"""Tests for the command registry."""

import pytest

from clippath.engine.commands import move_to
from clippath.engine.registry import CommandRegistry, CommandSpec, get_registry


def test_all_commands_registered():
    reg = get_registry()
    assert reg.count == 10
    assert reg.letters() == ["A", "C", "H", "L", "M", "Q", "S", "T", "V", "Z"]


@pytest.mark.parametrize(
    "letter, arity",
    [("M", 2), ("l", 2), ("H", 1), ("v", 1), ("C", 6), ("s", 4), ("Q", 4), ("t", 2), ("A", 7), ("z", 0)],
)
def test_arity(letter, arity):
    assert get_registry().get(letter).arity == arity


def test_lookup_is_case_insensitive():
    reg = get_registry()
    assert reg.get("m") is reg.get("M")


def test_moveto_repeats_as_lineto():
    assert get_registry().get("M").repeat_as == "L"
    assert get_registry().get("L").repeat_as is None


def test_register_and_get():
    reg = CommandRegistry()
    spec = CommandSpec(letter="M", fn=move_to, operands=("x", "y"))
    reg.register(spec)
    assert reg.get("M") is spec
    assert reg.get("L") is None
    assert reg.count == 1


def test_duplicate_letter():
    reg = CommandRegistry()
    reg.register(CommandSpec(letter="M", fn=move_to))
    with pytest.raises(ValueError):
        reg.register(CommandSpec(letter="m", fn=move_to))

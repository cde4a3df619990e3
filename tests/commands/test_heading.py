"""Tests for Heading rotations."""

from __future__ import annotations

import pytest

from bot_box.core.commands.types import Heading


class TestRotation:
    def test_left_cycle(self) -> None:
        assert Heading.NORTH.left() is Heading.WEST
        assert Heading.WEST.left() is Heading.SOUTH
        assert Heading.SOUTH.left() is Heading.EAST
        assert Heading.EAST.left() is Heading.NORTH

    def test_right_cycle(self) -> None:
        assert Heading.NORTH.right() is Heading.EAST
        assert Heading.EAST.right() is Heading.SOUTH
        assert Heading.SOUTH.right() is Heading.WEST
        assert Heading.WEST.right() is Heading.NORTH

    def test_flip_pairs(self) -> None:
        assert Heading.NORTH.flip() is Heading.SOUTH
        assert Heading.SOUTH.flip() is Heading.NORTH
        assert Heading.EAST.flip() is Heading.WEST
        assert Heading.WEST.flip() is Heading.EAST

    @pytest.mark.parametrize("heading", list(Heading))
    def test_four_lefts_is_identity(self, heading: Heading) -> None:
        assert heading.left().left().left().left() is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_flip_is_involution(self, heading: Heading) -> None:
        assert heading.flip().flip() is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_left_and_right_are_inverses(self, heading: Heading) -> None:
        assert heading.left().right() is heading
        assert heading.right().left() is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_flip_equals_two_rights(self, heading: Heading) -> None:
        assert heading.flip() is heading.right().right()


def test_steps() -> None:
    assert Heading.NORTH.step == (0, 1)
    assert Heading.SOUTH.step == (0, -1)
    assert Heading.EAST.step == (1, 0)
    assert Heading.WEST.step == (-1, 0)


def test_str_is_token() -> None:
    assert [str(h) for h in Heading] == ["NORTH", "EAST", "SOUTH", "WEST"]

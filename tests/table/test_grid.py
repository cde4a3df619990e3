"""Tests for bot_box.core.table.grid."""

from __future__ import annotations

import dataclasses

import pytest

from bot_box.core.table.grid import Grid


class TestGridConstruction:
    @pytest.mark.parametrize(("length", "width"), [(0, 5), (5, 0), (-1, 5), (5, -3)])
    def test_non_positive_dimensions_rejected(self, length: int, width: int) -> None:
        with pytest.raises(ValueError):
            Grid(length, width)

    def test_non_integer_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            Grid(5.0, 5)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="integer"):
            Grid(True, 5)  # type: ignore[arg-type]

    def test_one_by_one_is_valid(self) -> None:
        grid = Grid(1, 1)
        assert grid.contains(0, 0)
        assert not grid.contains(1, 0)

    def test_is_immutable(self) -> None:
        grid = Grid(5, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.length = 6  # type: ignore[misc]

    def test_obstacles_normalised_to_frozenset(self) -> None:
        grid = Grid.with_obstacles(5, 5, [(1, 1), (2, 3), (1, 1)])
        assert grid.obstacles == frozenset({(1, 1), (2, 3)})

    def test_out_of_bounds_obstacle_accepted(self) -> None:
        grid = Grid.with_obstacles(5, 5, [(10, 10)])
        assert grid.has_obstacle(10, 10)
        assert not grid.contains(10, 10)


class TestGridQueries:
    def test_contains_bounds(self) -> None:
        grid = Grid(5, 3)
        assert grid.contains(0, 0)
        assert grid.contains(4, 2)
        assert not grid.contains(5, 0)
        assert not grid.contains(0, 3)
        assert not grid.contains(-1, 0)
        assert not grid.contains(0, -1)

    def test_has_obstacle_is_exact_match(self) -> None:
        grid = Grid.with_obstacles(5, 5, [(2, 3)])
        assert grid.has_obstacle(2, 3)
        assert not grid.has_obstacle(2, 2)
        assert not grid.has_obstacle(3, 2)

    def test_is_open(self) -> None:
        grid = Grid.with_obstacles(5, 5, [(2, 3)])
        assert grid.is_open(2, 2)
        assert not grid.is_open(2, 3)
        assert not grid.is_open(5, 5)

"""Tests for Location, adjacency and the qi metric."""

import pytest

from leiserchess.core.errors import InvalidLocation
from leiserchess.core.types import (
    A1,
    A8,
    D4,
    D5,
    E4,
    E5,
    H1,
    H8,
    Location,
    all_locations,
    parse_location,
)


class TestAdjacency:
    def test_never_adjacent_to_self(self) -> None:
        for loc in all_locations():
            assert not loc.is_adjacent(loc)

    def test_interior_square_has_eight_neighbours(self) -> None:
        for file in range(1, 7):
            for rank in range(1, 7):
                loc = Location(file, rank)
                neighbours = [o for o in all_locations() if loc.is_adjacent(o)]
                assert len(neighbours) == 8
                assert all(
                    max(abs(o.file - file), abs(o.rank - rank)) == 1 for o in neighbours
                )

    def test_corner_has_three_neighbours(self) -> None:
        assert sum(1 for o in all_locations() if A1.is_adjacent(o)) == 3

    def test_distance_two_not_adjacent(self) -> None:
        assert not D4.is_adjacent(Location(5, 3))
        assert not D4.is_adjacent(Location(3, 5))

    def test_symmetric(self) -> None:
        assert D4.is_adjacent(E5)
        assert E5.is_adjacent(D4)


class TestQi:
    def test_corners_are_maximal(self) -> None:
        values = {loc.qi for loc in all_locations()}
        for corner in (A1, A8, H1, H8):
            assert corner.qi == 98 == max(values)

    def test_centre_is_minimal(self) -> None:
        values = {loc.qi for loc in all_locations()}
        for centre in (D4, D5, E4, E5):
            assert centre.qi == 2 == min(values)

    def test_formula(self) -> None:
        loc = Location(1, 5)
        assert loc.qi == (2 * 1 - 7) ** 2 + (2 * 5 - 7) ** 2

    def test_always_positive_odd_offsets(self) -> None:
        # Both offsets are odd, so qi is always 2 mod 8.
        assert all(loc.qi % 8 == 2 for loc in all_locations())


class TestNames:
    def test_name(self) -> None:
        assert A1.name == "a1"
        assert H8.name == "h8"
        assert E4.name == "e4"
        assert str(D5) == "d5"

    def test_parse(self) -> None:
        assert parse_location("a1") == A1
        assert parse_location("e4") == Location(4, 3)

    def test_every_square_round_trips(self) -> None:
        for loc in all_locations():
            assert parse_location(loc.name) == loc

    @pytest.mark.parametrize("name", ["", "a", "a9", "i1", "A1", "a10", "11"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(InvalidLocation):
            parse_location(name)

    def test_off_board_name_raises(self) -> None:
        with pytest.raises(InvalidLocation):
            _ = Location(8, 0).name

    def test_off_board_str(self) -> None:
        assert str(Location(8, -1)) == "(8, -1)"
        assert f"{Location(9, 9)}" == "(9, 9)"

    def test_index(self) -> None:
        assert A1.index == 0
        assert H1.index == 7
        assert H8.index == 63

    def test_is_on_board(self) -> None:
        assert H8.is_on_board
        assert not Location(-1, 0).is_on_board
        assert not Location(0, 8).is_on_board

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            A1.file = 3  # type: ignore[misc]

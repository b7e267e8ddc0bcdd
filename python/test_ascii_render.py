"""
Tests for ASCII rendering and the interactive demo's key handling.
"""

import re

from rich.panel import Panel

from ascii_render import render_grid, render_history
from grid import Grid
from interactive_demo import InteractiveDemo
from rover import Rover
from search_types import CardinalDirection, Coord, Found, NotFound

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text: str) -> list[str]:
    """Strip colour codes and split into lines."""
    return ANSI.sub("", text).split("\n")


class TestRenderGrid:
    """Tests for render_grid."""

    def test_empty_grid(self) -> None:
        """An open grid is all dots."""
        assert plain(render_grid(Grid(3, 2))) == ["...", "..."]

    def test_top_line_is_highest_y(self) -> None:
        """North is up the screen."""
        grid = Grid(3, 2, frozenset({Coord(0, 1)}))
        assert plain(render_grid(grid)) == ["#..", "..."]

    def test_rover_glyphs(self) -> None:
        """The rover shows its heading."""
        grid = Grid(2, 1)
        for direction, glyph in zip(CardinalDirection, "^>v<"):
            lines = plain(render_grid(grid, rover=Rover(Coord(1, 0), direction)))
            assert lines == ["." + glyph]

    def test_layers(self) -> None:
        """Path beats explored, the target beats the path, the rover beats everything."""
        grid = Grid(4, 1, frozenset({Coord(3, 0)}))
        lines = plain(
            render_grid(
                grid,
                rover=Rover(Coord(0, 0), CardinalDirection.E),
                path=[Coord(0, 0), Coord(1, 0), Coord(2, 0)],
                explored=[Coord(1, 0), Coord(2, 0)],
                target=Coord(2, 0),
            )
        )
        assert lines == [">*X#"]

    def test_out_of_bounds_obstacle_skipped(self) -> None:
        """Obstacles off the grid are not drawn."""
        grid = Grid(2, 2, frozenset({Coord(5, 5)}))
        assert plain(render_grid(grid)) == ["..", ".."]


class TestRenderHistory:
    """Tests for render_history."""

    def test_found(self) -> None:
        """Found histories are joined with arrows."""
        assert render_history(Found((0, 1, 2))) == "0 -> 1 -> 2"

    def test_not_found(self) -> None:
        """Not found lists what was explored."""
        assert render_history(NotFound((2,))) == "not found (explored: 2)"

    def test_coords(self) -> None:
        """Coordinates print as (x, y)."""
        assert render_history(Found((Coord(0, 0), Coord(1, 0)))) == "(0, 0) -> (1, 0)"


class TestInteractiveDemo:
    """Tests for the interactive demo's state handling (no terminal needed)."""

    def make_demo(self) -> InteractiveDemo:
        grid = Grid(5, 3, frozenset(Coord(x, 1) for x in range(5)))
        return InteractiveDemo(grid, Rover(Coord(0, 0), CardinalDirection.N), Coord(2, 2))

    def test_rotate_keys(self) -> None:
        """D turns clockwise and A anticlockwise."""
        demo = self.make_demo()
        assert demo.handle_key("d")
        assert demo.rover.direction == CardinalDirection.E
        assert demo.handle_key("A")
        assert demo.rover.direction == CardinalDirection.N

    def test_blocked_forward(self) -> None:
        """Driving into a mountain reports a block."""
        demo = self.make_demo()
        demo.handle_key("w")
        assert demo.rover.position == Coord(0, 0)
        assert "Blocked" in demo.status_message

    def test_autopilot_and_reset(self) -> None:
        """G drives to the target, R puts the rover back."""
        demo = self.make_demo()
        demo.handle_key("g")
        assert demo.rover.position == Coord(2, 2)
        assert demo.path[-1] == Coord(2, 2)

        demo.handle_key("r")
        assert demo.rover == Rover(Coord(0, 0), CardinalDirection.N)
        assert demo.path == ()

    def test_quit_and_unknown(self) -> None:
        """Q stops the loop, other keys are reported."""
        demo = self.make_demo()
        assert demo.handle_key("z")
        assert "Unknown key" in demo.status_message
        assert not demo.handle_key("q")

    def test_display(self) -> None:
        """The display is a rich panel."""
        assert isinstance(self.make_demo().generate_display(), Panel)

"""Tests for rover_parser module."""

import pytest

from graph import Graph
from rover_parser import format_commands, parse_commands, parse_graph, parse_grid
from search_types import AntiClockwise, Clockwise, Coord, Edge, Forward, InvalidGraphError


class TestParseGrid:
    """Tests for the grid parser."""

    def test_dimensions(self) -> None:
        """Width comes from row length, height from row count."""
        grid = parse_grid("....|....|....")
        assert grid.width == 4
        assert grid.height == 3
        assert grid.obstacles == frozenset()

    def test_first_row_is_top(self) -> None:
        """The first row written is the highest y."""
        grid = parse_grid("#..|...|..#")
        assert grid.obstacles == frozenset({Coord(0, 2), Coord(2, 0)})

    def test_full_band(self) -> None:
        """A full row of mountains."""
        grid = parse_grid(".....|#####|.....")
        assert grid.obstacles == frozenset(Coord(x, 1) for x in range(5))

    def test_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert parse_grid("\n  ..|.#  \n") == parse_grid("..|.#")

    def test_inconsistent_rows(self) -> None:
        """Rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="Inconsistent row lengths"):
            parse_grid("...|..|...")

    def test_invalid_character(self) -> None:
        """Only '.' and '#' are allowed."""
        with pytest.raises(ValueError, match="Invalid character 'x'"):
            parse_grid("..|.x")


class TestParseGraph:
    """Tests for the graph parser."""

    def test_vertices_and_edges(self) -> None:
        """Integer tokens are vertices, a>b tokens are edges."""
        graph = parse_graph("0 1 2 0>1 1>2")
        assert graph == Graph((0, 1, 2), (Edge(0, 1), Edge(1, 2)))

    def test_token_order_free(self) -> None:
        """Edges may appear before their vertices."""
        graph = parse_graph("0>1 0 1")
        assert graph.neighbours(0) == [1]

    def test_undeclared_vertex(self) -> None:
        """Edges must refer to declared vertices."""
        with pytest.raises(InvalidGraphError):
            parse_graph("0 1 0>1 1>2")

    def test_invalid_token(self) -> None:
        """Anything else is a parse error."""
        with pytest.raises(ValueError, match="Invalid graph token"):
            parse_graph("0 1 0-1")

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII digits form vertex identifiers."""
        with pytest.raises(ValueError, match="Invalid graph token"):
            parse_graph("0 \u00b2")
        with pytest.raises(ValueError, match="Invalid graph token"):
            parse_graph("\u0663 0 0>\u0663")


class TestParseCommands:
    """Tests for the command parser and formatter."""

    def test_spaced(self) -> None:
        """Space separated commands."""
        assert parse_commands("F3 R F L F2") == [
            Forward(3),
            Clockwise(),
            Forward(1),
            AntiClockwise(),
            Forward(2),
        ]

    def test_compact_and_lowercase(self) -> None:
        """Spaces are optional and case does not matter."""
        assert parse_commands("f12rl") == [Forward(12), Clockwise(), AntiClockwise()]

    def test_empty(self) -> None:
        """No text, no commands."""
        assert parse_commands("") == []

    def test_invalid(self) -> None:
        """Unknown letters are rejected."""
        with pytest.raises(ValueError, match="Invalid command"):
            parse_commands("F2 X")

    def test_zero_forward(self) -> None:
        """F0 is not a valid move."""
        with pytest.raises(ValueError):
            parse_commands("F0")

    def test_non_ascii_step_count(self) -> None:
        """Step counts must be ASCII digits."""
        with pytest.raises(ValueError, match="Invalid command"):
            parse_commands("F\u0663")

    def test_format(self) -> None:
        """Formatting writes explicit step counts."""
        assert format_commands([Forward(1), Clockwise(), AntiClockwise(), Forward(4)]) == "F1 R L F4"

    def test_format_unknown_command(self) -> None:
        """Formatting something that is not a command is an error."""
        with pytest.raises(ValueError, match="Unknown command"):
            format_commands([Forward(1), "jump"])  # type: ignore[list-item]

    def test_format_parses_back(self) -> None:
        """Formatted text parses to the same commands."""
        commands = [Clockwise(), Forward(7), AntiClockwise()]
        assert parse_commands(format_commands(commands)) == commands

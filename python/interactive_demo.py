"""
Interactive demo for roverpath.
Display a grid and drive the rover with keyboard commands, or let the
autopilot take it to the target.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from autopilot import Journey, drive
from grid import Grid
from rover import Rover, apply
from rover_parser import format_commands, parse_grid
from search_types import AntiClockwise, CardinalDirection, Clockwise, Command, Coord, Forward

KEY_COMMANDS: dict[str, Command] = {
    "w": Forward(1),
    "a": AntiClockwise(),
    "d": Clockwise(),
}


class InteractiveDemo:
    """Interactive demo for manual driving and autopilot."""

    def __init__(self, grid: Grid, rover: Rover, target: Coord) -> None:
        self.grid = grid
        self.rover = rover
        self.original_rover = rover  # Starting state for reset
        self.target = target
        self.path: tuple[Coord, ...] = ()
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        status = Text()
        status.append("Rover: ", style="bold")
        status.append(f"{self.rover.position} facing {self.rover.direction.value}\n")
        status.append("Target: ", style="bold")
        status.append(f"{self.target}\n\n")

        grid_text = render_grid(self.grid, rover=self.rover, path=self.path, target=self.target)
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W - Forward one step\n")
        status.append("  A - Rotate anticlockwise\n")
        status.append("  D - Rotate clockwise\n")
        status.append("  G - Drive to target\n")
        status.append("  R - Reset rover\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Rover Interactive Demo", border_style="green", width=80)

    def execute(self, command: Command) -> None:
        """Apply a single command to the rover."""
        before = self.rover
        self.rover = apply(self.rover, command, self.grid)
        self.path = ()
        if isinstance(command, Forward) and self.rover.position == before.position:
            self.status_message = f"✗ Blocked moving {self.rover.direction.value}"
        else:
            self.status_message = f"✓ {format_commands([command])}"

    def autopilot(self) -> None:
        """Drive the rover to the target along the planned route."""
        journey = drive(self.grid, self.rover, self.target)
        if not isinstance(journey, Journey):
            self.status_message = f"✗ No route to {self.target}"
            return

        self.rover = journey.final
        self.path = journey.path
        self.status_message = f"✓ Arrived via {format_commands(list(journey.commands)) or 'no moves'}"

    def reset(self) -> None:
        self.rover = self.original_rover
        self.path = ()
        self.status_message = "Rover reset to starting position"

    def handle_key(self, key: str) -> bool:
        """Handle one key press. Returns False when the demo should stop."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        if key in KEY_COMMANDS:
            self.execute(KEY_COMMANDS[key])
        elif key == "g":
            self.autopilot()
        elif key == "r":
            self.reset()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive demo until Q is pressed."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    ridge=".........|....#....|....#....|....#....|.........",
    maze="..........|.########.|.#......#.|.#.####.#.|.#.#..#.#.|...#..#...|.####.###.|..........",
    band=".....|#####|.....",
)


def main(grid: Grid) -> None:
    """Run the interactive demo from the bottom-left corner to the top-right corner."""
    rover = Rover(Coord(0, 0), CardinalDirection.N)
    target = Coord(grid.width - 1, grid.height - 1)
    InteractiveDemo(grid, rover, target).run()


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    main(parse_grid(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else "ridge"]))

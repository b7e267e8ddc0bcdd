"""
Demonstration scripts for the roverpath system.
"""

import logging

from ascii_render import render_grid, render_history
from autopilot import Journey, auto_pilot, drive
from rover import Rover, run_commands
from rover_parser import format_commands, parse_commands, parse_graph, parse_grid
from search_types import CardinalDirection, Coord, DriveRules, NotFound, TurnStrategy
from traversal import bfs, dfs


def traversal_demo() -> None:
    """Show BFS and DFS visitation order on a small branching graph."""
    graph = parse_graph("0 1 2 3 4 5 0>1 0>2 1>3 1>4 2>5 4>5")

    print("Graph traversal: 0>1 0>2 1>3 1>4 2>5 4>5")
    print("-" * 40)
    for name, search in (("BFS", bfs), ("DFS", dfs)):
        for start, target in ((0, 5), (0, 4), (5, 0)):
            result = search(graph, start, target)
            print(f"{name} {start} -> {target}: {render_history(result)}")
    print()


def movement_demo() -> None:
    """Drive a rover by hand, including wrapping and an obstacle stop."""
    grid = parse_grid(".....|..#..|.....|.....")
    rover = Rover(Coord(0, 0), CardinalDirection.N)
    commands = parse_commands("F2 R F4 R F3")

    print(f"Manual driving: {format_commands(commands)}")
    print("-" * 40)
    states = run_commands(rover, commands, grid)
    for state, command in zip(states, [None, *commands]):
        label = format_commands([command]) if command is not None else "start"
        print(f"{label:>5}: {state.position} facing {state.direction.value}")
    print(render_grid(grid, rover=states[-1]))
    print()


def autopilot_demo() -> None:
    """Find routes around a mountain range, including an unreachable target."""
    grid = parse_grid(".....|#####|.....")
    rover = Rover(Coord(0, 0), CardinalDirection.E)
    target = Coord(2, 2)

    print("Autopilot around a full mountain range (wraps vertically)")
    print("-" * 40)
    found = auto_pilot(grid, rover, target)
    if isinstance(found, NotFound):
        print("No route")
    else:
        print("Path: " + " -> ".join(str(c) for c in found.path))
        print(render_grid(grid, rover=rover, path=found.path, explored=found.history, target=target))
    print()

    walled = parse_grid("......|.####.|.#..#.|.#..#.|.####.|......")
    inside = Coord(2, 2)
    result = auto_pilot(walled, rover, inside)
    print(f"Walled-off target {inside}: {'unreachable' if isinstance(result, NotFound) else 'reachable'}")
    if isinstance(result, NotFound):
        print(render_grid(walled, rover=rover, explored=result.explored, target=inside))
    print()


def journey_demo() -> None:
    """Output every instruction and move needed to reach a target."""
    grid = parse_grid("........|..##....|..#..#..|.....#..|........")
    rover = Rover(Coord(0, 0), CardinalDirection.N)
    target = Coord(6, 3)

    for rules in (DriveRules(), DriveRules(turn_strategy=TurnStrategy.CLOCKWISE_ONLY, merge_forward=False)):
        journey = drive(grid, rover, target, rules)
        print(f"Journey with {rules}")
        print("-" * 40)
        if not isinstance(journey, Journey):
            print("No route")
            continue
        print(f"Commands: {format_commands(list(journey.commands))}")
        for command, state in zip(journey.commands, journey.states[1:]):
            print(f"  {format_commands([command]):>3} -> {state.position} facing {state.direction.value}")
        print(render_grid(grid, rover=journey.final, path=journey.path, target=target))
        print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    traversal_demo()
    movement_demo()
    autopilot_demo()
    journey_demo()

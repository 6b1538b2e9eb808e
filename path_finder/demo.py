"""Simple command line demo for the path finder logic."""

import sys

from .game import LevelLoader, PathFinderGame


def main(argv=None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    level_loader = LevelLoader()
    level_name = argv[0] if argv else "level_01"
    level = level_loader.load(level_name)

    game = PathFinderGame([level])
    load = game.start()

    print("=== Path Finder Demo ===")
    print(f"Level: {level.name} ({load.grid.rows}x{load.grid.cols}, {len(load.grid.walls)} walls)")
    if not load.solution.reachable:
        print("Goal is unreachable, no hint available.")
        return
    print(f"Optimal path: {load.solution.steps} steps, {load.solution.expanded} nodes expanded")
    print("  " + " -> ".join(f"({row},{col})" for row, col in load.optimal_path))

    # Trace the optimal path as a player would.
    path = load.optimal_path
    game.on_pointer_down(path[0])
    for cell in path[1:]:
        game.on_pointer_move(cell)
    game.on_pointer_up()
    state = game.get_state()
    print(f"Replay status: {state.status.value}, {state.steps}/{state.optimal_steps} steps")


if __name__ == "__main__":
    main()

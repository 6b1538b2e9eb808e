"""Interactive viewer for the path finder puzzle."""

from path_finder.ui.main import run


if __name__ == "__main__":
    run()

"""Interactive window and command line launcher for the path finder."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..game import DEFAULT_LEVEL_ROOT, GameState, LevelLoader, PathFinderGame, summarise_levels
from ..tracker import TrackerStatus
from . import layout
from .toolkit import PathFinderUI, ensure_pygame

LEVEL_ENV_VAR = "PATH_FINDER_LEVEL_ROOT"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIDirectories:
    """Bundle with resolved directories required by the UI."""

    level_root: Path


def _read_directory(env_var: str, fallback: Path) -> Path:
    value = os.environ.get(env_var)
    if value:
        return Path(value).expanduser()
    return fallback


def resolve_directories(check_exists: bool = True) -> UIDirectories:
    """Resolve UI directories using environment variables.

    Parameters
    ----------
    check_exists:
        When *True*, raise :class:`FileNotFoundError` if a resolved directory
        does not exist on disk.
    """

    level_root = _read_directory(LEVEL_ENV_VAR, DEFAULT_LEVEL_ROOT)
    if check_exists and not level_root.exists():
        raise FileNotFoundError(f"Level directory does not exist: {level_root}")
    return UIDirectories(level_root=level_root)


def hud_text(state: GameState) -> str:
    optimal = "-" if state.optimal_steps is None else str(state.optimal_steps)
    text = f"Level {state.level}  Steps {state.steps}  Optimal {optimal}"
    if state.status is TrackerStatus.WON:
        text += "  Solved!"
        if state.has_next_level:
            text += " [N] next level"
    return text


class PathFinderApp:
    """Pygame window hosting a :class:`PathFinderUI`."""

    def __init__(
        self,
        game: PathFinderGame,
        screen_size: Tuple[int, int] = layout.WINDOW_SIZE,
    ) -> None:
        pygame = ensure_pygame()
        pygame.init()
        pygame.display.set_caption("Path Finder")
        self.game = game
        self.screen = pygame.display.set_mode(
            (screen_size[0], screen_size[1] + layout.HUD_HEIGHT), pygame.RESIZABLE
        )
        self.ui = PathFinderUI(game, size=screen_size)
        self.hud_font = pygame.font.Font(pygame.font.get_default_font(), 20)
        self.clock = pygame.time.Clock()
        self.state = game.get_state()
        game.add_listener(self._on_state_change)

    def _on_state_change(self, state: GameState) -> None:
        self.state = state

    def handle_event(self, event) -> None:
        pygame = ensure_pygame()
        if event.type == pygame.QUIT:
            raise SystemExit
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            raise SystemExit
        if event.type == pygame.VIDEORESIZE:
            width, height = event.size
            self.ui.surface = pygame.Surface((width, max(1, height - layout.HUD_HEIGHT)))
            self.ui.refit((width, max(1, height - layout.HUD_HEIGHT)))
            return
        self.ui.process_events([event])

    def draw(self) -> None:
        pygame = ensure_pygame()
        self.screen.fill(layout.BACKGROUND_COLOR)
        self.screen.blit(self.ui.render(), (0, 0))
        label = self.hud_font.render(hud_text(self.state), True, layout.TEXT_COLOR)
        rect = label.get_rect()
        rect.midleft = (layout.BOARD_PADDING, self.ui.size[1] + layout.HUD_HEIGHT // 2)
        self.screen.blit(label, rect)
        pygame.display.flip()

    def run(self) -> None:
        pygame = ensure_pygame()
        while True:
            for event in pygame.event.get():
                try:
                    self.handle_event(event)
                except SystemExit:
                    pygame.quit()
                    return
            self.draw()
            self.clock.tick(60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Path Finder launcher")
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print the resolved level directory and exit without launching the UI.",
    )
    parser.add_argument(
        "--list-levels",
        action="store_true",
        help="List the available levels with their optimal path length and exit.",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=1,
        help="Level number to start on (1-based).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    directories = resolve_directories()
    loader = LevelLoader(directories.level_root)

    if args.info:
        print(
            "Path Finder UI bootstrap\n"
            f"  levels: {directories.level_root}\n"
            f"Set {LEVEL_ENV_VAR} to point to a custom level directory if needed."
        )
        return 0

    levels = loader.load_all()
    if args.list_levels:
        print("Available levels:")
        for entry in summarise_levels(levels):
            optimal = entry["optimal_steps"]
            optimal_text = "unreachable" if optimal is None else f"{optimal} steps"
            print(
                f"  {entry['index']:>2}. {entry['name'] or '(unnamed)'} "
                f"{entry['dimensions']}, {entry['walls']} walls, optimal {optimal_text}"
            )
        return 0

    if not levels:
        logger.error("No levels found in %s", directories.level_root)
        return 1

    game = PathFinderGame(levels)
    game.set_level(args.level - 1)
    game.start()
    PathFinderApp(game).run()
    return 0


def run(argv: Optional[List[str]] = None) -> None:
    """Entry point helper for console scripts."""

    raise SystemExit(main(argv))


if __name__ == "__main__":  # pragma: no cover - manual invocation entry point
    run()

"""Headless interaction tests for the pygame based UI wrapper.

Geometry is fixed (32 pixel cells anchored at the surface origin) so pixel
positions map to known cells.
"""

from __future__ import annotations

from path_finder.game import PathFinderGame
from path_finder.grid import LevelDescriptor
from path_finder.tracker import TrackerStatus
from path_finder.ui import PathFinderUI
from path_finder.ui import layout
from path_finder.ui.layout import GridGeometry


CELL = 32


def make_ui(pygame, descriptor=None) -> PathFinderUI:
    descriptor = descriptor or LevelDescriptor(
        rows=3, cols=3, start=(0, 0), goal=(2, 2), walls=((1, 1),)
    )
    game = PathFinderGame([descriptor])
    game.start()
    return PathFinderUI(
        game,
        size=(3 * CELL, 3 * CELL),
        geometry=GridGeometry(origin=(0, 0), cell_size=CELL),
        surface=pygame.Surface((3 * CELL, 3 * CELL)),
    )


def centre(cell):
    return (cell[1] * CELL + CELL // 2, cell[0] * CELL + CELL // 2)


def test_drag_across_the_board_wins(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)

    events = [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=centre((0, 0)))]
    for cell in [(0, 1), (0, 2), (1, 2), (2, 2)]:
        events.append(pygame.event.Event(pygame.MOUSEMOTION, pos=centre(cell)))
    events.append(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=centre((2, 2))))
    ui.process_events(events)

    state = ui.game.get_state()
    assert state.status is TrackerStatus.WON
    assert state.steps == 4
    assert state.optimal_steps == 4


def test_motion_without_button_does_not_draw(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)

    ui.process_events([pygame.event.Event(pygame.MOUSEMOTION, pos=centre((0, 1)))])

    assert ui.game.player_path == ()


def test_jumps_and_walls_are_ignored(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)

    assert ui.on_pointer_down(*centre((0, 0)))
    assert not ui.on_pointer_move(*centre((2, 2)))
    assert ui.on_pointer_move(*centre((0, 1)))
    assert not ui.on_pointer_move(*centre((1, 1)))
    assert not ui.on_pointer_move(-5, -5)
    assert ui.game.player_path == ((0, 0), (0, 1))


def test_keyboard_commands(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)
    ui.on_pointer_down(*centre((0, 0)))
    ui.on_pointer_move(*centre((1, 0)))

    ui.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h)])
    assert ui.game.show_hint

    ui.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c)])
    assert ui.game.status is TrackerStatus.IDLE

    ui.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r)])
    assert not ui.game.show_hint


def test_render_draws_cell_kinds(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)

    surface = ui.render()

    assert surface.get_size() == (3 * CELL, 3 * CELL)
    assert tuple(surface.get_at(centre((1, 1))))[:3] == layout.WALL_COLOR
    assert tuple(surface.get_at((CELL + 4, 4)))[:3] == layout.EMPTY_CELL_COLOR


def test_render_with_hint_and_path(pygame_module):
    pygame = pygame_module
    ui = make_ui(pygame)
    ui.game.toggle_hint()
    ui.on_pointer_down(*centre((0, 0)))
    ui.on_pointer_move(*centre((0, 1)))

    surface = ui.render()

    assert tuple(surface.get_at(centre((0, 1))))[:3] == layout.PLAYER_PATH_COLOR


def test_next_level_key_after_win(pygame_module):
    pygame = pygame_module
    first = LevelDescriptor(rows=1, cols=2, start=(0, 0), goal=(0, 1))
    second = LevelDescriptor(rows=2, cols=2, start=(0, 0), goal=(1, 1))
    game = PathFinderGame([first, second])
    game.start()
    ui = PathFinderUI(game, size=(200, 200), surface=pygame.Surface((200, 200)))

    ui.on_pointer_down(*ui.geometry.cell_to_center((0, 0)))
    ui.on_pointer_move(*ui.geometry.cell_to_center((0, 1)))
    ui.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n)])

    assert game.get_state().level == 2
    assert ui.geometry.cell_size == 40
    assert ui.geometry.origin == (60, 60)

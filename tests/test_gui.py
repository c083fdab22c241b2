import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

pygame = pytest.importorskip("pygame")

import gui  # noqa: E402
from board import Board  # noqa: E402
from pieces import PIECE_COLORS  # noqa: E402
from shape import Shape  # noqa: E402


@pytest.fixture
def screen():
    pygame.font.init()
    surface = pygame.Surface((gui.WINDOW_WIDTH, gui.WINDOW_HEIGHT))
    yield surface
    pygame.font.quit()


def _cell_center(r: int, c: int):
    return (c * gui.CELL_SIZE + 6, gui.TOP_BAR_HEIGHT + r * gui.CELL_SIZE + gui.CELL_SIZE // 2)


def test_pieces_in_lists_roster_ids_only() -> None:
    solution = Shape.from_rows(["QQM#", "DFF."], id="#")
    assert gui.pieces_in(solution) == ["F", "Q"]


def test_draw_solution_grid_colours_visible_pieces(screen) -> None:
    board = Board.for_date(6, 15)
    board.fill([(0, 0), (0, 1)], "Q")
    board.fill([(1, 0)], "F")
    font = pygame.font.Font(None, 24)

    gui.draw_top_bar(screen, font, font, 0, 1, 6, 15)
    gui.draw_solution_grid(screen, font, board.snapshot(), 6, 15, visible_pieces={"Q"})

    assert tuple(screen.get_at(_cell_center(0, 0)))[:3] == PIECE_COLORS["Q"]
    # F is placed but hidden until it is revealed.
    assert tuple(screen.get_at(_cell_center(1, 0)))[:3] == gui.BG
    assert tuple(screen.get_at(_cell_center(0, 6)))[:3] == gui.ILLEGAL

# gui.py
# pygame window for browsing solved boards

from __future__ import annotations

import calendar
from typing import Dict, List, Sequence

import pygame

from board import BOARD_LAYOUT
from pieces import PIECE_COLORS
from shape import BLOCKED, DAY_MARK, EMPTY, MONTH_MARK, Shape

CELL_SIZE = 64
TOP_BAR_HEIGHT = 120

BOARD_ROWS = len(BOARD_LAYOUT)
BOARD_COLS = len(BOARD_LAYOUT[0])

WINDOW_WIDTH = BOARD_COLS * CELL_SIZE
WINDOW_HEIGHT = BOARD_ROWS * CELL_SIZE + TOP_BAR_HEIGHT

# Colors – dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
ILLEGAL = (45, 45, 49)

DATE_BORDER = (220, 90, 90)

# Seconds between pieces appearing when a solution is shown
PIECE_DELAY = 0.15


def _month_short_name(month: int) -> str:
    return calendar.month_abbr[month].title()


def pieces_in(solution: Shape) -> List[str]:
    return sorted({s for row in solution.cells for s in row} & set(PIECE_COLORS))


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    current_idx: int,
    total_solutions: int,
    month: int,
    day: int,
):
    pygame.draw.rect(screen, BG, (0, 0, WINDOW_WIDTH, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Calendar Tiler", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    date_surf = label_font.render(f"{_month_short_name(month)} {day}", True, TEXT_MAIN)
    date_x = card_rect.right - date_surf.get_width() - 20
    screen.blit(date_surf, (date_x, card_rect.y + 12))

    if total_solutions:
        sol_text = f"Solution {current_idx + 1} of {total_solutions}"
    else:
        sol_text = "No solutions"
    sol_surf = label_font.render(sol_text, True, TEXT_SECONDARY)
    screen.blit(sol_surf, (card_rect.x + 20, card_rect.y + 48))


def _blit_centered(screen: pygame.Surface, text_surf: pygame.Surface, x: int, y: int) -> None:
    screen.blit(
        text_surf,
        (
            x + (CELL_SIZE - text_surf.get_width()) // 2,
            y + (CELL_SIZE - text_surf.get_height()) // 2,
        ),
    )


def draw_solution_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    solution: Shape,
    month: int,
    day: int,
    visible_pieces: set[str] | None = None,
):
    """
    Draws the board.
    visible_pieces: set of piece letters to draw. If None, draw all.
    """
    labels: Dict[str, str] = {
        MONTH_MARK: _month_short_name(month).upper(),
        DAY_MARK: str(day),
    }

    for r, c in solution.coords():
        symbol = solution.symbol_at(r, c)
        x = c * CELL_SIZE
        y = TOP_BAR_HEIGHT + r * CELL_SIZE
        rect = pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)

        if symbol == BLOCKED:
            pygame.draw.rect(screen, ILLEGAL, rect, border_radius=12)
            continue

        if symbol in labels:
            pygame.draw.rect(screen, BG, rect, border_radius=12)
            pygame.draw.rect(screen, DATE_BORDER, rect, width=2, border_radius=12)
            _blit_centered(screen, cell_font.render(labels[symbol], True, TEXT_MAIN), x, y)
            continue

        shown = visible_pieces is None or symbol in visible_pieces
        if symbol != EMPTY and shown:
            pygame.draw.rect(screen, PIECE_COLORS.get(symbol, GRID), rect, border_radius=12)
            _blit_centered(screen, cell_font.render(symbol, True, (255, 255, 255)), x, y)
        else:
            # Empty playable cell
            pygame.draw.rect(screen, BG, rect, border_radius=12)
            pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)


def run_viewer(solutions: Sequence[Shape], month: int, day: int) -> None:
    """Blocking window; LEFT/RIGHT steps through solutions, ESC closes."""
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Calendar Tiler")

    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 24)
    cell_font = pygame.font.SysFont("SF Pro Text", 24, bold=True)

    clock = pygame.time.Clock()
    current_idx = 0
    visible_pieces: set[str] = set()
    pieces_sequence: List[str] = pieces_in(solutions[0]) if solutions else []
    piece_timer = 0.0

    running = True
    while running:
        dt = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                step = {pygame.K_RIGHT: 1, pygame.K_LEFT: -1}.get(event.key, 0)
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif step and 0 <= current_idx + step < len(solutions):
                    current_idx += step
                    visible_pieces = set()
                    pieces_sequence = pieces_in(solutions[current_idx])
                    piece_timer = 0.0

        # Reveal the next piece of the current solution
        if len(visible_pieces) < len(pieces_sequence):
            piece_timer += dt
            if piece_timer >= PIECE_DELAY:
                piece_timer = 0.0
                visible_pieces.add(pieces_sequence[len(visible_pieces)])

        screen.fill(BG)
        draw_top_bar(screen, title_font, label_font, current_idx, len(solutions), month, day)
        if solutions:
            draw_solution_grid(screen, cell_font, solutions[current_idx], month, day, visible_pieces)
        pygame.display.flip()

    pygame.quit()

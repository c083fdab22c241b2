import io

import pytest

from pieces import PIECE_COLORS
from render import BLOCK, block_map, color_enabled, render_cell, render_solution, styled_terminal
from shape import Shape

SOLVED = Shape.from_rows(
    [
        "FFFQQM#",
        "FTTQQQ#",
        "DTTQBB.",
    ],
    id="#",
)


class FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_markers_are_zero_padded() -> None:
    assert render_cell("M", 6, 15, {}) == "06"
    assert render_cell("D", 6, 5, {}) == "05"


def test_blocked_cells_render_blank() -> None:
    assert render_cell("#", 1, 1, {}) == "  "


def test_plain_rendering_doubles_piece_ids() -> None:
    text = render_solution(SOLVED, 6, 15)
    assert text.splitlines() == [
        "FFFFFFQQQQ06  ",
        "FFTTTTQQQQQQ  ",
        "15TTTTQQBBBB..",
    ]


def test_coloured_rendering_uses_terminal_colours() -> None:
    term = styled_terminal()
    blocks = block_map(PIECE_COLORS, term)
    assert set(blocks) == set(PIECE_COLORS)
    assert blocks["Q"] == term.color_rgb(*PIECE_COLORS["Q"])(BLOCK)
    assert all(BLOCK in block for block in blocks.values())

    first_row = render_solution(SOLVED, 6, 15, blocks).splitlines()[0]
    assert first_row.startswith(blocks["F"] * 3 + blocks["Q"] * 2 + "06")


@pytest.mark.parametrize(
    "mode, stream, expected",
    [
        ("always", io.StringIO(), True),
        ("never", FakeTty(), False),
        ("auto", io.StringIO(), False),
        ("auto", FakeTty(), True),
    ],
)
def test_color_modes(monkeypatch: pytest.MonkeyPatch, mode: str, stream: io.StringIO, expected: bool) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert color_enabled(mode, stream) is expected


def test_no_color_environment_disables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled("auto", FakeTty()) is False
    assert color_enabled("always", FakeTty()) is True

import pygame
import pytest

from sevencolors.gamestate import GameState
from sevencolors.gui import (
    BUTTON_BLUE,
    BUTTON_GREEN,
    BUTTON_RED,
    KNOB,
    draw_button,
    draw_cursor,
    draw_game_controls,
    draw_grid,
    draw_hint,
    draw_hovered_cell,
    draw_menu,
    draw_rounded_rect,
    draw_slider,
    draw_text,
    draw_turn_info,
    wrap_agent_name,
)
from sevencolors.session import (
    AGENT_NAMES,
    CELL_SIZE,
    COLORS,
    GRID_MAX,
    GRID_MIN,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    SLIDER_WIDTH,
    SLIDER_X,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameSession,
)


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 24)


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def _session(size, cells):
    return GameSession(state=GameState(size, list(cells)))


PLAYABLE = [3, 1, 1, 4, 1, 1, 2, 4, 3]
FINISHED = [1, 1, 1, 1, 1, 1, 2, 1, 1]


@pytest.mark.parametrize("name", AGENT_NAMES)
def test_wrap_agent_name_keeps_prefix(name):
    lines = wrap_agent_name(name, 15)
    assert "".join(lines) == name[:45]
    assert 1 <= len(lines) <= 3
    assert all(len(line) <= 15 for line in lines)


def test_wrap_agent_name_short():
    assert wrap_agent_name("abc", 10) == ["abc"]


def test_wrap_agent_name_rejects_bad_width():
    with pytest.raises(ValueError):
        wrap_agent_name("abc", 0)


def test_draw_text_is_centred(surface, font):
    rect = draw_text(surface, font, "Tour", (255, 255, 255), 400, 300)
    assert rect.center == (400, 300)
    assert rect.width > 0


def test_draw_rounded_rect_fills_centre_not_corner(surface):
    draw_rounded_rect(surface, pygame.Rect(100, 100, 80, 60), (0, 200, 0), 10)
    assert _rgb(surface, (140, 130)) == (0, 200, 0)
    assert _rgb(surface, (100, 100)) == (0, 0, 0)


def test_draw_button_without_hover(surface, font):
    base = pygame.Rect(300, 150, 200, 60)
    drawn = draw_button(surface, font, base, "", BUTTON_BLUE)
    assert drawn == base
    assert _rgb(surface, (base.centerx, base.centery)) == BUTTON_BLUE


def test_draw_slider_knob_ends(surface):
    low = draw_slider(surface, GRID_MIN)
    assert low.centerx == SLIDER_X
    high = draw_slider(surface, GRID_MAX)
    assert high.centerx == SLIDER_X + SLIDER_WIDTH
    assert _rgb(surface, high.center) == KNOB


def test_draw_cursor_inactive_draws_nothing(surface, font):
    assert draw_cursor(surface, font, 50, False) is None
    assert _rgb(surface, (40, 300)) == (0, 0, 0)


def test_draw_cursor_zones(surface):
    cursor_y = draw_cursor(surface, None, 0, True)
    assert _rgb(surface, (35, GRID_OFFSET_Y + 5)) == COLORS[1]
    assert _rgb(surface, (35, WINDOW_HEIGHT - GRID_OFFSET_Y - 5)) == COLORS[2]
    assert GRID_OFFSET_Y < cursor_y < WINDOW_HEIGHT - GRID_OFFSET_Y


def test_draw_cursor_moves_with_position(surface):
    top = draw_cursor(surface, None, -100, True)
    bottom = draw_cursor(surface, None, 100, True)
    assert top < bottom


def test_draw_menu_buttons(surface, font):
    buttons = draw_menu(surface, font, 8)
    assert set(buttons) == {"start", "opponent", "quit"}
    assert _rgb(surface, (310, 175)) == BUTTON_GREEN
    assert _rgb(surface, (310, 265)) == BUTTON_BLUE
    assert _rgb(surface, (310, 355)) == BUTTON_RED


@pytest.mark.parametrize("rotated", [False, True])
def test_draw_grid_cell_colours(surface, font, rotated):
    session = _session(3, PLAYABLE)
    session.swap_choice = rotated
    session.swap_sides = rotated
    draw_grid(surface, font, session)
    for row in range(3):
        for column in range(3):
            draw_row, draw_column = (2 - row, 2 - column) if rotated else (row, column)
            point = (
                GRID_OFFSET_X + draw_column * CELL_SIZE + 6,
                GRID_OFFSET_Y + draw_row * CELL_SIZE + 6,
            )
            assert _rgb(surface, point) == COLORS[session.state.get(row, column)]


def test_draw_hovered_cell_off_board(surface):
    session = _session(3, PLAYABLE)
    assert draw_hovered_cell(surface, session, 10, 10) is None


def test_draw_hovered_cell_matches_network(surface):
    session = _session(3, PLAYABLE)
    mouse = (GRID_OFFSET_X + CELL_SIZE + 5, GRID_OFFSET_Y + 5)
    cells = draw_hovered_cell(surface, session, *mouse)
    assert sorted(cells) == sorted(session.hover_network(*mouse))
    assert (0, 1) in cells


def test_draw_turn_info_above_grid(surface, font):
    rect = draw_turn_info(surface, font, 2)
    assert rect.bottom <= GRID_OFFSET_Y
    white = [
        (x, y)
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
        if _rgb(surface, (x, y)) == (255, 255, 255)
    ]
    assert len(white) > 0


def test_draw_hint_finished_game(surface):
    session = _session(3, FINISHED)
    assert draw_hint(surface, session) == []
    assert _rgb(surface, (GRID_OFFSET_X + 30, GRID_OFFSET_Y + 30)) == (0, 0, 0)


def test_draw_hint_paints_advised_cells(surface):
    session = _session(3, PLAYABLE)
    cells = draw_hint(surface, session)
    assert sorted(cells) == sorted(session.hint_cells())
    colours = {session.state.get(row, column) for row, column in cells}
    assert len(colours) == 1
    expected = COLORS[colours.pop()]
    for row, column in cells:
        point = (GRID_OFFSET_X + column * CELL_SIZE + 30, GRID_OFFSET_Y + row * CELL_SIZE + 30)
        assert _rgb(surface, point) == expected


def test_draw_game_controls_replay_after_resign(surface, font):
    session = _session(3, PLAYABLE)
    assert "replay" not in draw_game_controls(surface, font, session)
    session.resign()
    assert "replay" in draw_game_controls(surface, font, session)


def test_draw_game_controls_evaluation_colour(surface, font):
    session = _session(3, PLAYABLE)
    draw_game_controls(surface, font, session)
    assert _rgb(surface, (75, 75)) == BUTTON_RED
    session.cursor_active = True
    draw_game_controls(surface, font, session)
    assert _rgb(surface, (75, 75)) == BUTTON_GREEN
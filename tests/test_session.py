import pytest

from sevencolors.board import get_total_moves
from sevencolors.gamestate import GameState
from sevencolors.session import (
    AGENTS,
    CELL_SIZE,
    CURSOR_LIMIT,
    GRID_MAX,
    GRID_MIN,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    SLIDER_WIDTH,
    SLIDER_X,
    GameSession,
    in_rect,
    screen_to_cell,
    slider_grid_size,
)
from sevencolors.agents import greedy


def _click(row, column):
    return GRID_OFFSET_X + column * CELL_SIZE + 5, GRID_OFFSET_Y + row * CELL_SIZE + 5


def _board():
    return GameState(3, [3, 4, 1, 5, 3, 4, 2, 5, 3])


def test_in_rect_edges_included():
    rect = (300, 150, 200, 60)
    assert in_rect(300, 150, rect)
    assert in_rect(500, 210, rect)
    assert not in_rect(501, 150, rect)
    assert not in_rect(300, 149, rect)


def test_slider_bounds_and_clamping():
    assert slider_grid_size(SLIDER_X) == GRID_MIN
    assert slider_grid_size(SLIDER_X + SLIDER_WIDTH) == GRID_MAX
    assert slider_grid_size(0) == GRID_MIN
    assert slider_grid_size(10_000) == GRID_MAX


def test_slider_is_monotonic():
    sizes = [slider_grid_size(x) for x in range(SLIDER_X, SLIDER_X + SLIDER_WIDTH + 1)]
    assert sizes == sorted(sizes)


def test_screen_to_cell_plain_and_rotated():
    x, y = _click(3, 2)
    assert screen_to_cell(x, y, 4, False) == (3, 2)
    assert screen_to_cell(x, y, 4, True) == (0, 1)
    assert screen_to_cell(GRID_OFFSET_X, GRID_OFFSET_Y, 4, False) == (0, 0)


def test_screen_to_cell_outside():
    x, y = _click(4, 0)
    assert screen_to_cell(x, y, 4, False) is None
    assert screen_to_cell(GRID_OFFSET_X + 4 * CELL_SIZE, GRID_OFFSET_Y, 4, False) is None


def test_restart_builds_fresh_board():
    session = GameSession(state=_board())
    session.winner = 2
    session.current_player = 2
    session.restart(5)
    assert session.state.size == 5
    assert session.state.get(0, 4) == 1
    assert session.state.get(4, 0) == 2
    assert (session.winner, session.current_player) == (0, 1)


def test_click_captures_colour_and_passes_turn():
    session = GameSession(state=_board())
    assert session.handle_grid_click(*_click(0, 1))
    assert session.state.get(0, 1) == 1
    assert session.state.get(1, 2) == 1
    assert session.current_player == 2
    assert session.winner == 0


def test_click_on_unreachable_cell_does_nothing():
    session = GameSession(state=_board())
    before = list(session.state.cells)
    assert not session.handle_grid_click(*_click(2, 2))
    assert not session.handle_grid_click(0, 0)
    assert session.state.cells == before
    assert session.current_player == 1


def test_agent_answers_the_move():
    session = GameSession(state=_board())
    session.agent = AGENTS.index(greedy)
    session.handle_grid_click(*_click(0, 1))
    assert session.current_player == 1
    assert session.state.get(1, 0) == 2
    assert session.state.get(2, 1) == 2


def test_rotation_toggles_after_move():
    session = GameSession(state=_board())
    session.swap_choice = True
    session.handle_grid_click(*_click(0, 1))
    assert session.swap_sides is True


def test_winning_move_sets_winner():
    session = GameSession(state=GameState(3, [3, 3, 1, 3, 3, 3, 2, 4, 4]))
    session.handle_grid_click(*_click(0, 1))
    assert session.winner == 1


def test_resign_gives_game_to_other_player():
    session = GameSession(state=_board())
    assert session.resign() == 2
    session.current_player = 2
    assert session.resign() == 1


def test_hover_network_is_region_under_mouse():
    session = GameSession(state=GameState(3, [3, 3, 1, 4, 3, 4, 2, 5, 5]))
    assert set(session.hover_network(*_click(0, 0))) == {(0, 0), (0, 1), (1, 1)}
    assert session.hover_network(*_click(2, 2)) is not None
    assert set(session.hover_network(*_click(2, 2))) == {(2, 1), (2, 2)}
    assert session.hover_network(0, 0) is None


def test_hint_cells_form_one_playable_colour():
    session = GameSession(state=_board())
    cells = session.hint_cells()
    assert cells
    colours = {session.state.get(x, y) for x, y in cells}
    assert len(colours) == 1
    totals = get_total_moves(session.state, 1)
    assert set(cells) == set(totals[colours.pop() - 3])


def test_update_cursor_inactive_keeps_position():
    session = GameSession(state=GameState(3, [1, 1, 1, 1, 1, 1, 2, 1, 1]))
    session.cursor_position = 7
    session.update_cursor()
    assert session.cursor_position == 7


@pytest.mark.parametrize("cells, expected", [
    ([1, 1, 1, 1, 1, 1, 2, 1, 1], CURSOR_LIMIT),
    ([2, 2, 1, 2, 2, 2, 2, 2, 2], -CURSOR_LIMIT),
])
def test_update_cursor_clips_decided_games(cells, expected):
    session = GameSession(state=GameState(3, cells))
    session.cursor_active = True
    session.update_cursor()
    assert session.cursor_position == expected
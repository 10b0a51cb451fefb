import pytest

from sevencolors.gamestate import Color, GameState, new_game


def test_empty_board_is_empty():
    state = GameState.empty(4)
    assert state.size == 4
    assert len(state.cells) == 16
    assert all(cell == Color.EMPTY for cell in state.cells)


def test_empty_negative_size_raises():
    with pytest.raises(ValueError):
        GameState.empty(-1)


def test_mismatched_cells_raise():
    with pytest.raises(ValueError):
        GameState(3, [0] * 8)


def test_set_get_round_trip():
    state = GameState.empty(5)
    for x in range(5):
        for y in range(5):
            state.set(x, y, Color.RED + (x + y) % 7)
    for x in range(5):
        for y in range(5):
            assert state.get(x, y) == Color.RED + (x + y) % 7


def test_row_major_layout():
    state = GameState.empty(3)
    state.set(1, 2, Color.CYAN)
    assert state.cells[1 * 3 + 2] == Color.CYAN


@pytest.mark.parametrize("x, y", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_raises(x, y):
    state = GameState.empty(3)
    with pytest.raises(IndexError):
        state.get(x, y)
    with pytest.raises(IndexError):
        state.set(x, y, Color.RED)


def test_fill_random_uses_playable_colors():
    state = GameState.empty(10)
    state.fill_random()
    assert len(state.cells) == 100
    assert all(Color.RED <= cell <= Color.WHITE for cell in state.cells)


def test_copy_is_independent():
    state = new_game(4)
    clone = state.copy()
    assert clone == state
    clone.set(1, 1, Color.PLAYER_1)
    assert state.get(1, 1) != Color.PLAYER_1 or clone.cells is not state.cells
    assert state.cells != clone.cells or state.get(1, 1) == Color.PLAYER_1


def test_copy_does_not_share_cells():
    state = GameState.empty(2)
    clone = state.copy()
    clone.set(0, 0, Color.BLUE)
    assert state.get(0, 0) == Color.EMPTY


@pytest.mark.parametrize("size", [3, 5, 8])
def test_new_game_corners(size):
    state = new_game(size)
    assert state.get(0, size - 1) == Color.PLAYER_1
    assert state.get(size - 1, 0) == Color.PLAYER_2
    others = [
        state.get(x, y)
        for x in range(size)
        for y in range(size)
        if (x, y) not in {(0, size - 1), (size - 1, 0)}
    ]
    assert all(Color.RED <= cell <= Color.WHITE for cell in others)
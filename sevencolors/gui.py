"""Graphical interface: menu, board and controls drawn with pygame."""

from __future__ import annotations

import enum

import pygame

from .cellqueue import Cell
from .session import (
    AGENT_NAMES,
    CELL_PADDING,
    CELL_SIZE,
    COLORS,
    CURSOR_LIMIT,
    DEFAULT_GRID_SIZE,
    GRID_MAX,
    GRID_MIN,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    PLAYER1_COLOR,
    PLAYER2_COLOR,
    SLIDER_HEIGHT,
    SLIDER_KNOB_RADIUS,
    SLIDER_WIDTH,
    SLIDER_X,
    SLIDER_Y,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameSession,
    in_rect,
    screen_to_cell,
    slider_grid_size,
)

RGB = tuple[int, int, int]

BACKGROUND: RGB = (59, 57, 74)
BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)
LIGHT_GRAY: RGB = (200, 200, 200)
KNOB: RGB = (100, 100, 255)
BUTTON_GREEN: RGB = (0, 200, 0)
BUTTON_BLUE: RGB = (0, 0, 200)
BUTTON_RED: RGB = (200, 0, 0)
BUTTON_YELLOW: RGB = (200, 200, 0)
BUTTON_CYAN: RGB = (0, 200, 200)

BUTTON_RADIUS = 10
HOVER_GROWTH = 10
HOVER_ALPHA = 50
HINT_ALPHA = 100
FRAME_DELAY_MS = 30
LABEL_WIDTH = 15

START_BUTTON = pygame.Rect(300, 150, 200, 60)
OPPONENT_BUTTON = pygame.Rect(300, 240, 200, 60)
QUIT_BUTTON = pygame.Rect(300, 330, 200, 60)

_CONTROLS_X = GRID_OFFSET_X - 180
EVALUATION_BUTTON = pygame.Rect(_CONTROLS_X, GRID_OFFSET_Y, 150, 50)
MENU_BUTTON = pygame.Rect(_CONTROLS_X, GRID_OFFSET_Y + 70, 150, 50)
HINT_BUTTON = pygame.Rect(_CONTROLS_X, GRID_OFFSET_Y + 140, 150, 50)
ROTATION_BUTTON = pygame.Rect(_CONTROLS_X, GRID_OFFSET_Y + 210, 150, 50)
RESIGN_BUTTON = pygame.Rect(_CONTROLS_X, WINDOW_HEIGHT - GRID_OFFSET_Y - 50, 150, 50)
REPLAY_BUTTON = pygame.Rect(WINDOW_WIDTH // 2 - 150, WINDOW_HEIGHT // 2 - 30, 400, 60)

SELECTABLE_AGENTS = 8
AGENT_BUTTONS = tuple(
    pygame.Rect(100 + (i % 3) * 250, 100 + (i // 3) * 140, 200, 100)
    for i in range(SELECTABLE_AGENTS)
)

CURSOR_X = 30
CURSOR_WIDTH = 20


class Screen(enum.Enum):
    """Which page of the interface is shown."""

    MENU = enum.auto()
    GAME = enum.auto()
    SELECT_OPPONENT = enum.auto()


def _mouse_pos() -> tuple[int, int]:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return pygame.mouse.get_pos()
    return (-1, -1)


def _rotated(session: GameSession) -> bool:
    return session.swap_choice and session.swap_sides


def _screen_origin(session: GameSession, row: int, column: int) -> tuple[int, int]:
    draw_x, draw_y = column, row
    if _rotated(session):
        size = session.state.size
        draw_x, draw_y = size - 1 - column, size - 1 - row
    return GRID_OFFSET_X + draw_x * CELL_SIZE, GRID_OFFSET_Y + draw_y * CELL_SIZE


def wrap_agent_name(name: str, width: int) -> list[str]:
    """Cut a name into at most three lines of ``width`` characters."""
    if width <= 0:
        raise ValueError(f"line width must be positive, got {width}")
    lines = [name[:width]]
    for start in (width, 2 * width):
        if len(name) > start:
            lines.append(name[start:start + width])
    return lines


def draw_text(
    surface: pygame.Surface, font: pygame.font.Font, text: str, color: RGB, x: int, y: int
) -> pygame.Rect:
    """Draw ``text`` centred on ``(x, y)`` and return the area it covers."""
    image = font.render(text, True, color)
    rect = image.get_rect(center=(x, y))
    surface.blit(image, rect)
    return rect


def draw_rounded_rect(
    surface: pygame.Surface, rect: pygame.Rect, color: RGB, radius: int
) -> pygame.Rect:
    """Fill ``rect`` with rounded corners of the given radius."""
    return pygame.draw.rect(surface, color, pygame.Rect(rect), border_radius=radius)


def draw_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    label: str,
    color: RGB,
) -> pygame.Rect:
    """Draw a button, slightly enlarged under the mouse; return the area drawn."""
    rect = pygame.Rect(rect)
    mouse_x, mouse_y = _mouse_pos()
    if in_rect(mouse_x, mouse_y, tuple(rect)):
        rect = rect.inflate(HOVER_GROWTH, HOVER_GROWTH)
    draw_rounded_rect(surface, rect, color, BUTTON_RADIUS)
    if label:
        draw_text(surface, font, label, BLACK, rect.centerx, rect.centery)
    return rect


def draw_cursor(
    surface: pygame.Surface, font: pygame.font.Font | None, position: int, active: bool
) -> int | None:
    """Draw the evaluation gauge; return the height of its marker, or ``None`` when off."""
    if not active:
        return None
    span = WINDOW_HEIGHT - GRID_OFFSET_Y * 2
    norm = (position + CURSOR_LIMIT) / (2 * CURSOR_LIMIT)
    cursor_y = GRID_OFFSET_Y + int(norm * span)

    surface.fill(COLORS[1], (CURSOR_X, GRID_OFFSET_Y, CURSOR_WIDTH, cursor_y - GRID_OFFSET_Y))
    surface.fill(
        COLORS[2],
        (CURSOR_X, cursor_y, CURSOR_WIDTH, WINDOW_HEIGHT - cursor_y - GRID_OFFSET_Y),
    )
    surface.fill(WHITE, (CURSOR_X, cursor_y - 1, CURSOR_WIDTH, 2))
    zero_y = GRID_OFFSET_Y + span // 2
    surface.fill(LIGHT_GRAY, (CURSOR_X - 10, zero_y - 1, CURSOR_WIDTH + 20, 2))

    if font is not None:
        centre_x = CURSOR_X + CURSOR_WIDTH // 2
        draw_text(surface, font, "100", WHITE, centre_x, GRID_OFFSET_Y - 10)
        draw_text(surface, font, "-100", WHITE, centre_x, WINDOW_HEIGHT - GRID_OFFSET_Y + 10)
    return cursor_y


def draw_slider(surface: pygame.Surface, value: int) -> pygame.Rect:
    """Draw the grid-size slider with its knob at ``value``; return the knob."""
    surface.fill(LIGHT_GRAY, (SLIDER_X, SLIDER_Y, SLIDER_WIDTH, SLIDER_HEIGHT))
    norm = (value - GRID_MIN) / (GRID_MAX - GRID_MIN)
    knob_x = SLIDER_X + int(norm * SLIDER_WIDTH)
    knob = pygame.Rect(
        knob_x - SLIDER_KNOB_RADIUS,
        SLIDER_Y - SLIDER_KNOB_RADIUS + SLIDER_HEIGHT // 2,
        SLIDER_KNOB_RADIUS * 2,
        SLIDER_KNOB_RADIUS * 2,
    )
    surface.fill(KNOB, knob)
    return knob


def draw_menu(
    surface: pygame.Surface, font: pygame.font.Font, grid_size: int
) -> dict[str, pygame.Rect]:
    """Draw the main menu; return the areas of its buttons."""
    buttons = {
        "start": draw_button(surface, font, START_BUTTON, "Démarrer", BUTTON_GREEN),
        "opponent": draw_button(surface, font, OPPONENT_BUTTON, "Adversaire", BUTTON_BLUE),
        "quit": draw_button(surface, font, QUIT_BUTTON, "Quitter", BUTTON_RED),
    }
    centre_x = WINDOW_WIDTH // 2
    draw_text(surface, font, "Taille de la grille :", WHITE, centre_x, SLIDER_Y - 30)
    draw_slider(surface, grid_size)
    draw_text(surface, font, f"{grid_size} x {grid_size}", WHITE, centre_x, SLIDER_Y + 50)
    return buttons


def draw_grid(surface: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    """Draw every board cell, marking the players' cells with their number."""
    state = session.state
    if state is None:
        return
    inner = CELL_SIZE - CELL_PADDING
    for row in range(state.size):
        for column in range(state.size):
            value = state.get(row, column)
            left, top = _screen_origin(session, row, column)
            cell = pygame.Rect(left + CELL_PADDING // 2, top + CELL_PADDING // 2, inner, inner)
            surface.fill(COLORS[value], cell)
            if value == PLAYER1_COLOR:
                draw_text(surface, font, "1", BLACK, cell.centerx, cell.centery)
            elif value == PLAYER2_COLOR:
                draw_text(surface, font, "2", BLACK, cell.centerx, cell.centery)


def draw_hovered_cell(
    surface: pygame.Surface, session: GameSession, mouse_x: int, mouse_y: int
) -> list[Cell] | None:
    """Shade the region under the mouse; return its cells, or ``None`` off the board."""
    cells = session.hover_network(mouse_x, mouse_y)
    if cells is None:
        return None
    row, column = cells[0]
    color = COLORS[session.state.get(row, column)]
    overlay = pygame.Surface((CELL_SIZE - 3, CELL_SIZE - 3), pygame.SRCALPHA)
    overlay.fill((*color, HOVER_ALPHA))
    for row, column in cells:
        left, top = _screen_origin(session, row, column)
        surface.blit(overlay, (left + 2, top + 2))
    return cells


def draw_turn_info(
    surface: pygame.Surface, font: pygame.font.Font, player: int
) -> pygame.Rect:
    """Write whose turn it is above the board."""
    centre_x = (WINDOW_WIDTH + GRID_OFFSET_X // 2) // 2
    return draw_text(surface, font, f"Tour du joueur {player}", WHITE, centre_x, GRID_OFFSET_Y - 20)


def _paint_hint(surface: pygame.Surface, session: GameSession, cells: list[Cell]) -> None:
    if not cells:
        return
    frame_color = COLORS[session.current_player]
    cell_color = COLORS[session.state.get(*cells[0])]
    frame = pygame.Surface((CELL_SIZE + 4, CELL_SIZE + 4), pygame.SRCALPHA)
    frame.fill((*frame_color, HINT_ALPHA))
    for row, column in cells:
        left, top = _screen_origin(session, row, column)
        surface.blit(frame, (left - 2, top - 2))
        surface.fill(cell_color, (left + 2, top + 2, CELL_SIZE - 3, CELL_SIZE - 3))


def draw_hint(surface: pygame.Surface, session: GameSession) -> list[Cell]:
    """Outline the cells the deep search advises capturing; return them."""
    cells = session.hint_cells()
    _paint_hint(surface, session, cells)
    return cells


def draw_game_controls(
    surface: pygame.Surface, font: pygame.font.Font, session: GameSession
) -> dict[str, pygame.Rect]:
    """Draw the side buttons, and the replay button once the game is decided."""
    buttons = {
        "evaluation": draw_button(
            surface,
            font,
            EVALUATION_BUTTON,
            "Évaluation",
            BUTTON_GREEN if session.cursor_active else BUTTON_RED,
        ),
        "menu": draw_button(surface, font, MENU_BUTTON, "Retour Menu", BUTTON_YELLOW),
        "resign": draw_button(surface, font, RESIGN_BUTTON, "Abandonner", BUTTON_RED),
        "hint": draw_button(
            surface, font, HINT_BUTTON, "Hint", BUTTON_RED if session.hint else BUTTON_CYAN
        ),
        "rotation": draw_button(
            surface,
            font,
            ROTATION_BUTTON,
            "Rotation",
            BUTTON_GREEN if session.swap_choice else BUTTON_RED,
        ),
    }
    if session.winner != 0:
        if session.winner != 3:
            label = f"Le joueur {session.winner} a gagné ! Rejouer ?"
        else:
            label = "Partie nulle ! Rejouer ?"
        buttons["replay"] = draw_button(surface, font, REPLAY_BUTTON, label, BUTTON_GREEN)
    return buttons


def _draw_agent_label(
    surface: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, name: str
) -> None:
    images = [font.render(line, True, WHITE) for line in wrap_agent_name(name, LABEL_WIDTH)]
    total_height = sum(image.get_height() for image in images)
    top = rect.centery - total_height // 2
    for image in images:
        surface.blit(image, image.get_rect(midtop=(rect.centerx, top)))
        top += image.get_height()


def _handle_menu_click(session: GameSession, x: int, y: int) -> Screen | None:
    if SLIDER_Y <= y <= SLIDER_Y + SLIDER_HEIGHT:
        size = slider_grid_size(x)
        if size != session.grid_size:
            print(f"Changement de taille de grille : {session.grid_size} -> {size}")
            session.restart(size)
    if in_rect(x, y, tuple(START_BUTTON)):
        return Screen.GAME
    if in_rect(x, y, tuple(OPPONENT_BUTTON)):
        return Screen.SELECT_OPPONENT
    if in_rect(x, y, tuple(QUIT_BUTTON)):
        return None
    return Screen.MENU


def _handle_game_click(session: GameSession, x: int, y: int) -> Screen:
    screen = Screen.GAME
    if session.winner != 0 and in_rect(x, y, tuple(REPLAY_BUTTON)):
        session.restart(session.grid_size)
        print("Partie redémarrée.")
    if in_rect(x, y, tuple(EVALUATION_BUTTON)):
        session.cursor_active = not session.cursor_active
        session.update_cursor()
    if in_rect(x, y, tuple(MENU_BUTTON)):
        screen = Screen.MENU
        print("Retour au menu principal.")
    if in_rect(x, y, tuple(HINT_BUTTON)):
        session.hint = True
    if in_rect(x, y, tuple(ROTATION_BUTTON)):
        session.swap_choice = not session.swap_choice
    if in_rect(x, y, tuple(RESIGN_BUTTON)):
        session.resign()
    extent = session.state.size * CELL_SIZE
    if GRID_OFFSET_X <= x < GRID_OFFSET_X + extent and GRID_OFFSET_Y <= y < GRID_OFFSET_Y + extent:
        session.handle_grid_click(x, y)
    return screen


def visual_main() -> int:
    """Open the game window and run it until the player quits."""
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("7 Colors")
        font = pygame.font.SysFont("arial", 24)
        name_font = pygame.font.SysFont("verdana", 20)
        session = GameSession(DEFAULT_GRID_SIZE)
        screen: Screen | None = Screen.MENU
        hint_key: tuple | None = None
        hint_cells: list[Cell] = []

        while screen is not None:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    screen = None
                    break
                if event.type != pygame.MOUSEBUTTONDOWN:
                    continue
                x, y = event.pos
                if screen is Screen.MENU:
                    screen = _handle_menu_click(session, x, y)
                elif screen is Screen.SELECT_OPPONENT:
                    for index, rect in enumerate(AGENT_BUTTONS):
                        if in_rect(x, y, tuple(rect)):
                            print(f"Agent : {AGENT_NAMES[index]}")
                            session.agent = index
                            screen = Screen.MENU
                else:
                    screen = _handle_game_click(session, x, y)
                if screen is None:
                    break
            if screen is None:
                break

            window.fill(BACKGROUND)
            if screen is Screen.MENU:
                draw_menu(window, font, session.grid_size)
            elif screen is Screen.GAME:
                draw_turn_info(window, font, session.current_player)
                draw_grid(window, font, session)
                if session.hint:
                    key = (tuple(session.state.cells), session.current_player)
                    if key != hint_key:
                        hint_cells = session.hint_cells()
                        hint_key = key
                    _paint_hint(window, session, hint_cells)
                mouse_x, mouse_y = pygame.mouse.get_pos()
                draw_hovered_cell(window, session, mouse_x, mouse_y)
                draw_cursor(window, font, session.cursor_position, session.cursor_active)
                draw_game_controls(window, font, session)
            else:
                for index, rect in enumerate(AGENT_BUTTONS):
                    draw_button(window, font, rect, "", BUTTON_CYAN)
                    _draw_agent_label(window, name_font, rect, AGENT_NAMES[index])
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0
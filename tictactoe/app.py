"""The game window: event handling, drawing and the main loop."""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

import pygame

from tictactoe.layout import (
    CLEAR_COLOR,
    COLOR_BOARD,
    COLOR_MESSAGE,
    FONT_SIZE_CELL,
    FONT_SIZE_MESSAGE,
    MARK_COLORS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
    board_rect,
    cell_at,
    cell_rect,
    iter_coordinates,
)
from tictactoe.session import GameState, Session

FRAMES_PER_SECOND = 60


def handle_event(
    session: Session,
    event: pygame.event.Event,
    window_width: float = WINDOW_WIDTH,
    window_height: float = WINDOW_HEIGHT,
) -> bool:
    """Apply one input event to the session; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.MOUSEMOTION:
        session.hover(cell_at(*event.pos, window_width, window_height))
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if session.state is GameState.PLAYING:
            coordinate = cell_at(*event.pos, window_width, window_height)
            if coordinate is not None:
                session.click_cell(coordinate)
        else:
            session.click_anywhere()
    return True


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


def _draw_overlay(surface: pygame.Surface, lines: Sequence[str], fonts: Mapping[str, pygame.font.Font]) -> None:
    message, restart = lines
    message_image = fonts["message"].render(message, True, COLOR_MESSAGE)
    restart_font = fonts["restart"]
    restart_image = restart_font.render(restart, True, COLOR_MESSAGE)
    gap = restart_font.get_linesize()
    total = message_image.get_height() + gap + restart_image.get_height()
    width, height = surface.get_size()
    top = (height - total) // 2
    surface.blit(message_image, message_image.get_rect(midtop=(width // 2, top)))
    top += message_image.get_height() + gap
    surface.blit(restart_image, restart_image.get_rect(midtop=(width // 2, top)))


def draw(surface: pygame.Surface, session: Session, fonts: Mapping[str, pygame.font.Font]) -> None:
    """Render the board and, after a game, the result messages.

    ``fonts`` maps "cell", "message" and "restart" to loaded fonts.
    """
    width, height = surface.get_size()
    surface.fill(CLEAR_COLOR)
    pygame.draw.rect(surface, COLOR_BOARD, _to_pygame(board_rect(width, height)))
    for coordinate in iter_coordinates():
        rect = _to_pygame(cell_rect(coordinate, width, height))
        pygame.draw.rect(surface, session.cell_color(coordinate), rect)
        player = session.board.get(coordinate)
        if not player.is_none():
            image = fonts["cell"].render(str(player), True, MARK_COLORS[player])
            surface.blit(image, image.get_rect(center=rect.center))
    lines = session.game_over_lines()
    if lines:
        _draw_overlay(surface, lines, fonts)


def _load_fonts() -> dict[str, pygame.font.Font]:
    return {
        "cell": pygame.font.Font(None, int(FONT_SIZE_CELL)),
        "message": pygame.font.Font(None, int(FONT_SIZE_MESSAGE)),
        "restart": pygame.font.Font(None, int(FONT_SIZE_MESSAGE / 2)),
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play noughts and crosses.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("tictactoe")
        fonts = _load_fonts()
        session = Session()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(session, event, *screen.get_size()):
                    running = False
            draw(screen, session, fonts)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0
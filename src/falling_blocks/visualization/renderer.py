from __future__ import annotations

from typing import List, Tuple

import pygame

from falling_blocks.game import FallingBlockGame, GameGrid, GameStatus


EMPTY_CELL = (51, 51, 51)
BACKGROUND = (51, 51, 51)
TEXT_COLOR = (255, 255, 255)


class Renderer:
    """Draws the board, the next-piece preview and the status text.

    The window is two boards wide: the playfield on the left and a side
    panel of the same size on the right.
    """

    def __init__(self, cell_size: int = 40, font_size: int = 24) -> None:
        self.cell_size = cell_size
        self.font_size = font_size
        self._font = None

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        board_w = game.config.width * self.cell_size
        board_h = game.config.height * self.cell_size
        return board_w * 2, board_h

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, self.font_size)
        return self._font

    def _grid_surface(self, grid: GameGrid) -> pygame.Surface:
        c = self.cell_size
        inset = max(1, c // 10)
        surf = pygame.Surface((grid.width * c, grid.height * c))
        surf.fill(BACKGROUND)
        for y in range(grid.height):
            for x in range(grid.width):
                if grid.filled[y, x]:
                    color = tuple(int(v) for v in grid.colors[y, x])
                    rect = pygame.Rect(x * c + inset, y * c + inset, c - 2 * inset, c - 2 * inset)
                else:
                    color = EMPTY_CELL
                    rect = pygame.Rect(x * c, y * c, c, c)
                pygame.draw.rect(surf, color, rect)
        return surf

    def _blit_lines(self, screen: pygame.Surface, lines: List[str], center_x: int, top: int) -> None:
        for i, txt in enumerate(lines):
            img = self.font.render(txt, True, TEXT_COLOR)
            rect = img.get_rect(center=(center_x, top + i * (self.font_size + 26)))
            screen.blit(img, rect)

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        board_w = game.config.width * self.cell_size
        board_h = game.config.height * self.cell_size
        screen.fill(BACKGROUND)

        status = game.status
        if status is GameStatus.RUNNING:
            screen.blit(self._grid_surface(game.get_grid()), (0, 0))
        elif status is GameStatus.PAUSED:
            self._blit_lines(screen, ["GAME PAUSED"], board_w // 2, board_h // 2)
        else:
            self._blit_lines(
                screen,
                ["GAME OVER", f"YOUR SCORE: {game.lines_cleared}", "", "Press [ENTER] to restart ..."],
                board_w // 2,
                board_h // 2 - 50,
            )

        # Side panel
        pygame.draw.line(screen, TEXT_COLOR, (board_w, 0), (board_w, board_h))
        x_text = board_w + 50
        screen.blit(self.font.render("Next Shape:", True, TEXT_COLOR), (x_text, 40))
        screen.blit(self._grid_surface(game.get_preview()), (x_text, 80))
        screen.blit(self.font.render(f"Lines Cleared: {game.lines_cleared}", True, TEXT_COLOR), (x_text, board_h - 100))
        screen.blit(self.font.render(f"Shapes Encountered: {game.pieces_spawned}", True, TEXT_COLOR), (x_text, board_h - 50))

        pygame.display.flip()

"""
Text and image rendering of a grid.

Images are BGR numpy arrays drawn with OpenCV, ready for cv2.imwrite.
"""

from typing import Optional

import cv2
import numpy as np

from .grid import BOX_SIZE, GRID_SIZE, Coordinate, Digit, Grid, Hints

CELL_SIZE = 60
FONT = cv2.FONT_HERSHEY_SIMPLEX

BACKGROUND = (255, 255, 255)
FIXED_FILL = (230, 230, 230)
SAME_DIGIT_FILL = (230, 204, 204)
CONFLICT_FILL = (204, 204, 230)
SELECTED_FILL = (204, 230, 204)
DIGIT_COLOR = (0, 0, 0)
HINT_COLOR = (230, 25, 25)
LINE_COLOR = (0, 0, 0)


def format_board(grid: Grid) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(grid.to_array()):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)


def format_hints(grid: Grid) -> str:
    """One line per empty cell listing its candidates, e.g. '(3,0): 1 4 7'."""
    lines = []
    for coord in grid.coords():
        content = grid.get(coord).content
        if isinstance(content, Hints):
            digits = " ".join(str(d) for d in content.digits) or "-"
            lines.append(f"{coord}: {digits}")
    return "\n".join(lines)


def _fill_cell(canvas: np.ndarray, coord: Coordinate, cell_size: int, color) -> None:
    x1, y1 = coord.x * cell_size, coord.y * cell_size
    cv2.rectangle(canvas, (x1, y1), (x1 + cell_size - 1, y1 + cell_size - 1), color, -1)


def _put_centered(canvas: np.ndarray, text: str, cx: int, cy: int, scale: float,
                  color, thickness: int) -> None:
    size, _ = cv2.getTextSize(text, FONT, scale, thickness)
    org = (cx - size[0] // 2, cy + size[1] // 2)
    cv2.putText(canvas, text, org, FONT, scale, color, thickness, cv2.LINE_AA)


def render_grid(grid: Grid, cell_size: int = CELL_SIZE, selected: Optional[Coordinate] = None,
                conflicting: Optional[Coordinate] = None) -> np.ndarray:
    """
    Draw the grid as a BGR image.

    Shading order (later wins): fixed cells, cells sharing the selected
    cell's digit, the conflicting cell, the selected cell.

    Args:
        grid (Grid): grid to draw
        cell_size (int): side of one cell in pixels
        selected (Coordinate): cell under the cursor, if any
        conflicting (Coordinate): cell that refused the last entry, if any

    Returns:
        np.ndarray of shape (9 * cell_size, 9 * cell_size, 3)
    """
    side = cell_size * GRID_SIZE
    canvas = np.full((side, side, 3), BACKGROUND, dtype=np.uint8)

    for coord in grid.coords():
        if grid.is_fixed(coord):
            _fill_cell(canvas, coord, cell_size, FIXED_FILL)

    if selected is not None:
        digit = grid.digit_at(selected)
        if digit is not None:
            for coord in grid.filled_coords():
                if grid.digit_at(coord) == digit:
                    _fill_cell(canvas, coord, cell_size, SAME_DIGIT_FILL)

    if conflicting is not None:
        _fill_cell(canvas, conflicting, cell_size, CONFLICT_FILL)
    if selected is not None:
        _fill_cell(canvas, selected, cell_size, SELECTED_FILL)

    digit_scale = cell_size / 40.0
    hint_scale = cell_size / 140.0
    third = cell_size / 3.0
    for coord in grid.coords():
        content = grid.get(coord).content
        x0, y0 = coord.x * cell_size, coord.y * cell_size
        if isinstance(content, Digit):
            _put_centered(canvas, str(content.value), x0 + cell_size // 2, y0 + cell_size // 2,
                          digit_scale, DIGIT_COLOR, 2)
        elif isinstance(content, Hints):
            for d in content.digits:
                row, col = divmod(d - 1, 3)
                cx = int(x0 + (col + 0.5) * third)
                cy = int(y0 + (row + 0.5) * third)
                _put_centered(canvas, str(d), cx, cy, hint_scale, HINT_COLOR, 1)

    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        pos = min(i * cell_size, side - 1)
        cv2.line(canvas, (0, pos), (side, pos), LINE_COLOR, thickness)
        cv2.line(canvas, (pos, 0), (pos, side), LINE_COLOR, thickness)

    return canvas

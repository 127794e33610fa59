from typing import List, Optional, Tuple

from wcwidth import wcwidth

from ..errors import ConfigurationError

CELL_WIDTH = 8.0
LINE_HEIGHT = 20.0
PADDING_X = 24.0
PADDING_Y = 12.0
MIN_NODE_WIDTH = 250.0
MAX_NODE_WIDTH = 600.0


def _char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def wrap_text(text: str, max_columns: Optional[int] = None) -> List[List[str]]:
    """Split ``text`` into display lines, breaking anywhere once a line is full."""
    if max_columns is not None and max_columns < 1:
        raise ConfigurationError("max_columns must be at least 1 when provided.")

    lines: List[List[str]] = []
    current: List[str] = []
    line_width = 0

    for char in text:
        if char == "\n":
            lines.append(current)
            current = []
            line_width = 0
            continue
        width = _char_width(char)
        if max_columns and current and line_width + width > max_columns:
            lines.append(current)
            current = []
            line_width = 0
        current.append(char)
        line_width += width

    lines.append(current)
    return lines


def text_extent(text: str, max_columns: Optional[int] = None) -> Tuple[int, int]:
    lines = wrap_text(text, max_columns)
    columns = max(sum(_char_width(char) for char in line) for line in lines)
    return columns, len(lines)


def estimate_node_size(
    text: str,
    *,
    cell_width: float = CELL_WIDTH,
    line_height: float = LINE_HEIGHT,
    padding_x: float = PADDING_X,
    padding_y: float = PADDING_Y,
    min_width: float = MIN_NODE_WIDTH,
    max_width: float = MAX_NODE_WIDTH,
) -> Tuple[float, float]:
    """Approximate the box a renderer would measure for ``text``.

    Useful for feeding ``update_node_size`` when no real renderer is around.
    """
    if cell_width <= 0 or line_height <= 0:
        raise ConfigurationError("cell_width and line_height must be positive.")
    if padding_x < 0 or padding_y < 0:
        raise ConfigurationError("padding must not be negative.")
    if max_width < min_width:
        raise ConfigurationError("max_width must be greater than or equal to min_width.")

    max_columns = max(int((max_width - padding_x) // cell_width), 1)
    columns, line_count = text_extent(text, max_columns)

    width = min(max(columns * cell_width + padding_x, min_width), max_width)
    height = line_count * line_height + padding_y
    return width, height

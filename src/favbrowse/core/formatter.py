"""Fixed-width cell formatting for the details table."""

from favbrowse.core.models import Alignment

ELLIPSIS = "..."
MIN_CELL_WIDTH = len(ELLIPSIS) + 1


def format_cell(content: str, width: int, align: Alignment = Alignment.LEFT) -> str:
    """
    Truncate or pad a string to exactly ``width`` characters.

    Content longer than the width keeps its first ``width - 3`` characters
    followed by "...". Shorter content is padded with spaces, on the right
    for left alignment and on the left for right alignment.

    Raises:
        ValueError: If width is below MIN_CELL_WIDTH
    """
    if width < MIN_CELL_WIDTH:
        raise ValueError(f"Cell width must be at least {MIN_CELL_WIDTH}, got {width}")

    if len(content) > width:
        return content[: width - len(ELLIPSIS)] + ELLIPSIS

    if align is Alignment.RIGHT:
        return content.rjust(width)
    return content.ljust(width)

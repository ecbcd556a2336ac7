"""Column alignment utilities."""

from typing import List

from lab_cli.constants import COLUMN_DELIMITER, COLUMN_GLUE


def format_columns(rows: List[str], delimiter: str = COLUMN_DELIMITER, glue: str = COLUMN_GLUE) -> str:
    """
    Align delimited rows into columns.

    Args:
        rows: Rows such as "#1|title", one cell per delimited field
        delimiter: Field separator within a row
        glue: Text placed between columns

    Returns:
        Rows joined by newlines, each cell left-aligned to its column's widest cell
    """
    table = [row.split(delimiter) for row in rows]

    widths: List[int] = []
    for cells in table:
        for index, cell in enumerate(cells):
            if index == len(widths):
                widths.append(0)
            widths[index] = max(widths[index], len(cell))

    lines = []
    for cells in table:
        padded = [cell.ljust(widths[index]) for index, cell in enumerate(cells)]
        lines.append(glue.join(padded).rstrip())
    return "\n".join(lines)

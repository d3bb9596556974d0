from maze_generator import Cell

# Whitespace on the left hand side of the ASCII maze
MARGIN = 5

DEBUG_MODES = (None, "sets", "raw")


def render_block(row, is_last_row=False):
    """
    Draw one row of a block maze, where walls and cells share columns.

        XXXXXXXXXXXXXXXXX
        X               X
        X XXX XXX XXXXX X
        X   X X X X     X
        XXX X X X X XXX X
        X   X   X X   X X
        XXXXXXXXXXXXXXXXX

    Needs nothing but the current row.
    """
    top = "".join("X " if cell & Cell.UP else "XX" for cell in row) + "X\n"
    middle = "".join("  " if cell & Cell.LEFT else "X " for cell in row) + "X\n"
    if not is_last_row:
        return top + middle
    bottom = "XX" * len(row) + "X\n"
    return top + middle + bottom


def render_ascii(row, previous_row, is_first_row, is_last_row, labels=None, debug=None):
    """
    Draw one row of a traditional ASCII maze with a left margin.

             ________________________
            |                       |
            |  ___    __    ______  |
            |     |  |  |  |        |
            |___  |  |  |  |  ___   |
            |     |     |  |     |  |
            |_____|_____|__|_____|__|

    The joint after each cell on the top line depends on whether the cell
    above had a passage to the right, so the previous row is needed too.
    `debug` may be "sets" (show set labels) or "raw" (show cell bitmasks).
    Values are right aligned in two characters; set labels run up to twice
    the width, so from width 50 a three digit label widens its cell and the
    walls after it shift right. Debug output is for narrow mazes.
    """
    if debug not in DEBUG_MODES:
        raise ValueError(f"Unknown debug mode: {debug}")
    if debug == "sets" and labels is None:
        raise ValueError("Set labels are required to show sets")

    margin = " " * MARGIN

    # Top line
    top = [margin, " " if is_first_row else "|"]
    for cell, above in zip(row, previous_row):
        top.append("  " if cell & Cell.UP else "__")
        if above & Cell.RIGHT and not cell & Cell.RIGHT:
            top.append(" ")
        elif not is_first_row and not above & Cell.RIGHT:
            top.append("|")
        else:
            top.append("_")

    # Middle line
    middle = [margin, "|"]
    for i, cell in enumerate(row):
        if debug == "sets":
            middle.append(f"{int(labels[i]):2d}")
        elif debug == "raw":
            middle.append(f"{int(cell):2d}")
        else:
            middle.append("  ")
        middle.append(" " if cell & Cell.RIGHT else "|")

    lines = ["".join(top), "".join(middle)]

    if is_last_row:
        bottom = [margin]
        for cell in row:
            bottom.append("_" if cell & Cell.LEFT else "|")
            bottom.append("__")
        bottom.append("|")
        lines.append("".join(bottom))

    return "\n".join(lines) + "\n"


def render_row(generator, style, is_first_row, is_last_row, debug=None):
    """Render the row a generator has just produced in the given style"""
    if style == "block":
        return render_block(generator.row, is_last_row)
    elif style == "ascii":
        return render_ascii(generator.row, generator.previous_row, is_first_row,
                            is_last_row, labels=generator.labels, debug=debug)
    else:
        raise ValueError(f"Unknown output style: {style}")

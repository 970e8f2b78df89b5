from sysdesign.graph.types import Position

GRID_COLUMNS = 4
COLUMN_WIDTH = 200
ROW_HEIGHT = 150
ORIGIN_X = 100
ORIGIN_Y = 100

# Manually added nodes land here; the user drags them into place
MANUAL_NODE_POSITION = (200, 200)


def grid_position(index: int) -> Position:
    """Position of the index-th new node of a batch on a 4-column grid."""
    return Position(
        x=(index % GRID_COLUMNS) * COLUMN_WIDTH + ORIGIN_X,
        y=(index // GRID_COLUMNS) * ROW_HEIGHT + ORIGIN_Y,
    )


def manual_position() -> Position:
    x, y = MANUAL_NODE_POSITION
    return Position(x=x, y=y)

GRID_SIZE = 3
# Separator line thickness as a percentage of the board side.
LINES_WIDTH_PERCENTAGE = 2.0
THIRD = 100.0 / 3.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Tic Tac Toe"
UPDATE_RATE = 1 / 60

# Colours are RGBA tuples as accepted by arcade draw calls.
BG_COLOR = (102, 3, 51, 38)
BG_LINES = (255, 255, 255, 191)
CELL_BORDER_COLOR = (0, 0, 0, 255)
CELL_BORDER_WIDTH = 1.0

# Logical cursor icon names; the window maps them onto system cursors.
CURSOR_DEFAULT = "default"
CURSOR_POINTER = "pointer"

TILE_TEXTURE = "brick_texture.png"
# Tile tint and how fast the hover pulse cycles (radians per second of hover time).
TILE_COLOR = (179, 88, 66)
TILE_PULSE_SPEED = 4.0
TILE_PULSE_DEPTH = 0.35

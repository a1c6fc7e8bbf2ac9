"""Physical constants and front-end configuration."""

# Speed of light in vacuum, exact by definition of the metre (m/s)
SPEED_OF_LIGHT = 299792458

# Display
DEFAULT_PRECISION = 6
DEFAULT_DISTANCE_UNIT = "m"

# GUI window
WIDTH = 520
HEIGHT = 240
FPS = 30
PANEL_MARGIN = 10
ROW_HEIGHT = 30

# Colors
BLACK = (0, 0, 0)

# =========================
# Config
# =========================
CANVAS_WIDTH = 800      # pixels
CANVAS_HEIGHT = 600     # pixels
GRID_SPACING = 100      # world units between grid lines at scale 1

ZOOM_MIN = 0.1
ZOOM_MAX = 10.0
ZOOM_DEFAULT = 1.0
WHEEL_ZOOM_FACTOR = 1.1

# Colours and widths
GRID_COLOR = "#eee"
AXIS_COLOR = "#bbb"
WINDOW_COLOR = "#0078d7"
SEGMENT_COLOR = "black"
CLIPPED_COLOR = "red"
GRID_WIDTH = 1
AXIS_WIDTH = 2
WINDOW_WIDTH = 2
SEGMENT_WIDTH = 1
CLIPPED_WIDTH = 2

# Sample shown in the input box on start
DEFAULT_INPUT = """5
-150 50 250 80
-200 -200 200 200
120 -180 40 220
250 150 300 250
-80 -60 60 40
-100 -100 150 120
"""

"""
Cohen-Sutherland line clipping against an axis-aligned window.

Segments are 4-tuples (x1, y1, x2, y2), windows are 4-tuples
(xmin, ymin, xmax, ymax). A rejected segment is returned as None.
"""

import enum
import logging
import math

logger = logging.getLogger(__name__)


# -----------------------------
# Region codes
# -----------------------------
class Outcode(enum.IntFlag):
    INSIDE = 0  # 0000
    LEFT = 1    # 0001
    RIGHT = 2   # 0010
    BOTTOM = 4  # 0100
    TOP = 8     # 1000


def compute_outcode(x, y, window) -> Outcode:
    """Region code of point (x, y) relative to window (xmin, ymin, xmax, ymax)."""
    xmin, ymin, xmax, ymax = window
    code = Outcode.INSIDE
    if x < xmin:
        code |= Outcode.LEFT
    if x > xmax:
        code |= Outcode.RIGHT
    if y < ymin:
        code |= Outcode.BOTTOM
    if y > ymax:
        code |= Outcode.TOP
    return code


def _div(num, den):
    # IEEE quotient: x/0 -> +-inf, 0/0 -> nan
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


# -----------------------------
# Cohen-Sutherland
# -----------------------------
def cohen_sutherland(segment, window):
    """
    Clip segment against window.

    Returns the visible part as (x1, y1, x2, y2), or None when the segment
    lies entirely outside. Only one boundary is resolved per iteration, in
    the order TOP, BOTTOM, RIGHT, LEFT; the first endpoint is moved first
    when both are outside.
    """
    xmin, ymin, xmax, ymax = window
    x1, y1, x2, y2 = segment

    code1 = compute_outcode(x1, y1, window)
    code2 = compute_outcode(x2, y2, window)

    while True:
        if not (code1 | code2):
            return x1, y1, x2, y2
        if code1 & code2:
            logger.debug("reject %s: shared code %s", segment, code1 & code2)
            return None

        move_first = bool(code1)
        code_out = code1 if move_first else code2

        if code_out & Outcode.TOP:
            x = x1 + _div((x2 - x1) * (ymax - y1), y2 - y1)
            y = ymax
        elif code_out & Outcode.BOTTOM:
            x = x1 + _div((x2 - x1) * (ymin - y1), y2 - y1)
            y = ymin
        elif code_out & Outcode.RIGHT:
            y = y1 + _div((y2 - y1) * (xmax - x1), x2 - x1)
            x = xmax
        else:
            y = y1 + _div((y2 - y1) * (xmin - x1), x2 - x1)
            x = xmin

        if move_first:
            x1, y1 = x, y
            code1 = compute_outcode(x1, y1, window)
        else:
            x2, y2 = x, y
            code2 = compute_outcode(x2, y2, window)
        logger.debug("moved endpoint %d to (%r, %r)", 1 if move_first else 2, x, y)


def clip(segment, window):
    """Clip one segment; result coordinates are floats, None if rejected."""
    result = cohen_sutherland(tuple(segment), tuple(window))
    if result is None:
        return None
    return tuple(float(v) for v in result)

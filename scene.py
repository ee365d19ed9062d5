"""
Input parsing and the immutable state the canvas is drawn from.
"""

import dataclasses
import logging
import math
import re

import config
from clipping import clip

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class InputError(ValueError):
    """Malformed input text; the message is meant for the user."""


# -----------------------------
# Parsing
# -----------------------------
def _parse_numbers(line: str):
    try:
        values = [float(tok) for tok in line.split()]
    except ValueError:
        return None
    if len(values) != 4 or not all(math.isfinite(v) for v in values):
        return None
    return tuple(values)


def parse_input(text: str):
    """
    Parse the text block:
      N
      x1 y1 x2 y2    (N lines)
      xmin ymin xmax ymax
    Returns (segments, window). Lines after the window are ignored.
    """
    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise InputError("Некорректный ввод. Убедитесь, что данные включают "
                         "количество отрезков и координаты окна.")

    # leading integer only: "3.0" and "2 segments" both count
    m = _LEADING_INT.match(lines[0])
    n = int(m.group()) if m else 0
    if n <= 0:
        raise InputError("Некорректное количество отрезков. Убедитесь, что "
                         "первая строка содержит положительное число.")

    if len(lines) < n + 2:
        raise InputError("Некорректный ввод. Недостаточно строк для указания "
                         "всех отрезков и окна отсечения.")

    segments = []
    for i in range(1, n + 1):
        coords = _parse_numbers(lines[i])
        if coords is None:
            raise InputError(f"Некорректные координаты в строке {i + 1}. "
                             "Убедитесь, что указаны 4 числа.")
        segments.append(coords)

    window = _parse_numbers(lines[n + 1])
    if window is None:
        raise InputError("Некорректные координаты окна отсечения. "
                         "Убедитесь, что указаны 4 числа.")
    return segments, window


# -----------------------------
# Scene
# -----------------------------
@dataclasses.dataclass(frozen=True)
class Scene:
    segments: tuple = ()
    window: tuple = None
    clipped: tuple = ()

    @property
    def visible_count(self):
        return sum(1 for seg in self.clipped if is_drawable(seg))

    @property
    def rejected_count(self):
        return len(self.segments) - self.visible_count


def clip_all(segments, window):
    """Clip every segment in order; rejected ones are dropped."""
    results = (clip(seg, window) for seg in segments)
    return tuple(r for r in results if r is not None)


def run_algorithm(text: str) -> Scene:
    segments, window = parse_input(text)
    scene = Scene(tuple(segments), window, clip_all(segments, window))
    logger.info("clipped %d segments against %s: %d visible",
                len(segments), window, scene.visible_count)
    return scene


# -----------------------------
# View state
# -----------------------------
def clamp(v, lo, hi):
    return max(lo, min(hi, v))


@dataclasses.dataclass(frozen=True)
class RenderState:
    """Everything draw_scene needs: the scene plus zoom and pan."""
    scene: Scene = Scene()
    scale: float = config.ZOOM_DEFAULT
    offset_x: float = 0.0
    offset_y: float = 0.0

    def to_canvas(self, x, y, width, height):
        """World (x, y), y up, to canvas pixels, y down."""
        return (width / 2 + x * self.scale + self.offset_x,
                height / 2 - y * self.scale + self.offset_y)

    def zoomed(self, scale):
        return dataclasses.replace(self, scale=clamp(scale, config.ZOOM_MIN, config.ZOOM_MAX))

    def panned(self, offset_x, offset_y):
        return dataclasses.replace(self, offset_x=offset_x, offset_y=offset_y)

    def with_scene(self, scene):
        return dataclasses.replace(self, scene=scene)


def grid_lines(state: RenderState, width, height, spacing=config.GRID_SPACING):
    """
    Canvas positions of the vertical and horizontal grid lines.
    Lines start at offset % step so the grid follows panning.
    """
    step = spacing * state.scale
    if step <= 0:
        return [], []
    xs = []
    x = state.offset_x % step
    while x < width:
        xs.append(x)
        x += step
    ys = []
    y = state.offset_y % step
    while y < height:
        ys.append(y)
        y += step
    return xs, ys


def is_drawable(segment):
    return all(math.isfinite(v) for v in segment)

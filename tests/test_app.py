import pytest

pytest.importorskip("tkinter")

from app import draw_scene  # noqa: E402
from scene import RenderState, Scene  # noqa: E402


class RecordingCanvas:
    """Stands in for tk.Canvas; records drawing calls."""

    def __init__(self, width=400, height=300):
        self._size = {"width": str(width), "height": str(height)}
        self.calls = []

    def __getitem__(self, key):
        return self._size[key]

    def delete(self, tag):
        self.calls.append(("delete", tag))

    def create_line(self, *coords, **opts):
        self.calls.append(("line", coords, opts))

    def create_rectangle(self, *coords, **opts):
        self.calls.append(("rect", coords, opts))

    def lines(self, fill):
        return [c for c in self.calls if c[0] == "line" and c[2].get("fill") == fill]


def test_draw_empty_state_draws_grid_and_axes():
    canvas = RecordingCanvas()
    draw_scene(canvas, RenderState())
    assert canvas.calls[0] == ("delete", "all")
    assert len(canvas.lines("#eee")) == 4 + 3
    assert len(canvas.lines("#bbb")) == 2
    assert not [c for c in canvas.calls if c[0] == "rect"]


def test_draw_scene_layers():
    scene = Scene(
        segments=((-5, 5, 15, 5), (20, 20, 30, 30)),
        window=(0, 0, 10, 10),
        clipped=((0, 5, 10, 5),),
    )
    canvas = RecordingCanvas()
    draw_scene(canvas, RenderState(scene=scene))

    rects = [c for c in canvas.calls if c[0] == "rect"]
    assert rects == [("rect", (200, 150, 210, 140), {"outline": "#0078d7", "width": 2})]
    assert len(canvas.lines("black")) == 2
    red = canvas.lines("red")
    assert red == [("line", (200, 145, 210, 145), {"fill": "red", "width": 2})]
    # clipped parts are drawn last
    assert canvas.calls[-1] == red[0]


def test_nan_results_are_not_drawn():
    nan = float("nan")
    scene = Scene(segments=((0, 0, 1, 1),), window=(0, 0, 1, 1), clipped=((nan, nan, 1, 1),))
    canvas = RecordingCanvas()
    draw_scene(canvas, RenderState(scene=scene))
    assert canvas.lines("red") == []

import logging
import tkinter as tk
from tkinter import ttk, messagebox

import config
from scene import InputError, RenderState, grid_lines, is_drawable, run_algorithm

logger = logging.getLogger(__name__)


# =========================
# Rendering
# =========================
def draw_scene(canvas: tk.Canvas, state: RenderState):
    """
    Redraw the whole canvas from state: grid, axes, clip window,
    original segments (black) and clipped parts (red) on top.
    """
    width = int(canvas["width"])
    height = int(canvas["height"])
    canvas.delete("all")

    xs, ys = grid_lines(state, width, height)
    for x in xs:
        canvas.create_line(x, 0, x, height, fill=config.GRID_COLOR, width=config.GRID_WIDTH)
    for y in ys:
        canvas.create_line(0, y, width, y, fill=config.GRID_COLOR, width=config.GRID_WIDTH)

    ox, oy = state.to_canvas(0, 0, width, height)
    canvas.create_line(ox, 0, ox, height, fill=config.AXIS_COLOR, width=config.AXIS_WIDTH)
    canvas.create_line(0, oy, width, oy, fill=config.AXIS_COLOR, width=config.AXIS_WIDTH)

    scene = state.scene
    if scene.window is not None:
        xmin, ymin, xmax, ymax = scene.window
        x0, y0 = state.to_canvas(xmin, ymin, width, height)
        x1, y1 = state.to_canvas(xmax, ymax, width, height)
        canvas.create_rectangle(x0, y0, x1, y1, outline=config.WINDOW_COLOR, width=config.WINDOW_WIDTH)

    for seg in scene.segments:
        _draw_segment(canvas, state, seg, width, height, config.SEGMENT_COLOR, config.SEGMENT_WIDTH)
    for seg in scene.clipped:
        if is_drawable(seg):
            _draw_segment(canvas, state, seg, width, height, config.CLIPPED_COLOR, config.CLIPPED_WIDTH)


def _draw_segment(canvas, state, seg, width, height, color, line_width):
    x1, y1, x2, y2 = seg
    px1, py1 = state.to_canvas(x1, y1, width, height)
    px2, py2 = state.to_canvas(x2, y2, width, height)
    canvas.create_line(px1, py1, px2, py2, fill=color, width=line_width)


# =========================
# UI: Application
# =========================
class ClipApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Cohen-Sutherland line clipping")
        self.render_state = RenderState()
        self._drag_start = None
        self._build_ui()
        self.redraw()

    def _build_ui(self):
        # Left: canvas
        self.canvas = tk.Canvas(self, width=config.CANVAS_WIDTH, height=config.CANVAS_HEIGHT,
                                bg="#ffffff", highlightthickness=1, highlightbackground="#cccccc")
        self.canvas.grid(row=0, column=0, padx=10, pady=10, sticky="nsew")
        self.canvas.bind("<ButtonPress-1>", self.on_press)
        self.canvas.bind("<B1-Motion>", self.on_drag)
        self.canvas.bind("<ButtonRelease-1>", self.on_release)
        self.canvas.bind("<MouseWheel>", self.on_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._wheel_zoom(1))
        self.canvas.bind("<Button-5>", lambda e: self._wheel_zoom(-1))

        # Right: controls
        controls = ttk.Frame(self)
        controls.grid(row=0, column=1, padx=10, pady=10, sticky="ns")

        ttk.Label(controls, text="N, then N lines x1 y1 x2 y2, then xmin ymin xmax ymax").grid(row=0, column=0, sticky="w")
        self.input = tk.Text(controls, width=32, height=16)
        self.input.grid(row=1, column=0, pady=5, sticky="ew")
        self.input.insert("1.0", config.DEFAULT_INPUT)

        btn_frame = ttk.Frame(controls)
        btn_frame.grid(row=2, column=0, pady=5, sticky="ew")
        ttk.Button(btn_frame, text="Run", command=self.on_run).grid(row=0, column=0, padx=5)
        ttk.Button(btn_frame, text="Clear", command=self.on_clear).grid(row=0, column=1, padx=5)
        ttk.Button(btn_frame, text="Reset view", command=self.on_reset_view).grid(row=0, column=2, padx=5)

        zoom_frame = ttk.LabelFrame(controls, text="Zoom")
        zoom_frame.grid(row=3, column=0, pady=5, sticky="ew")
        self.zoom_var = tk.DoubleVar(value=config.ZOOM_DEFAULT)
        ttk.Scale(zoom_frame, from_=config.ZOOM_MIN, to=config.ZOOM_MAX, orient="horizontal",
                  variable=self.zoom_var, command=self.on_zoom).grid(row=0, column=0, sticky="ew", padx=5)
        self.zoom_label = ttk.Label(zoom_frame, text=f"{config.ZOOM_DEFAULT}x", width=6)
        self.zoom_label.grid(row=0, column=1, padx=5)
        zoom_frame.columnconfigure(0, weight=1)

        legend = ttk.LabelFrame(controls, text="Legend")
        legend.grid(row=4, column=0, pady=5, sticky="ew")
        ttk.Label(legend, text="- Blue: clip window\n- Black: original segments\n- Red: visible parts\n- Drag to pan, wheel to zoom").grid(row=0, column=0, sticky="w")

        self.status_var = tk.StringVar(value="Ready.")
        ttk.Label(controls, textvariable=self.status_var, foreground="#2c3e50").grid(row=5, column=0, pady=10, sticky="w")

    def redraw(self):
        draw_scene(self.canvas, self.render_state)

    # ---------- Handlers ----------
    def on_run(self):
        try:
            scene = run_algorithm(self.input.get("1.0", "end"))
        except InputError as e:
            logger.info("input rejected: %s", e)
            self.status_var.set(f"Error: {e}")
            messagebox.showerror("Error", str(e))
            return
        self.render_state = self.render_state.with_scene(scene)
        self.redraw()
        self.status_var.set(f"{len(scene.segments)} segments, {scene.visible_count} visible, "
                            f"{scene.rejected_count} rejected.")

    def on_clear(self):
        self.render_state = RenderState(scale=self.render_state.scale,
                                         offset_x=self.render_state.offset_x, offset_y=self.render_state.offset_y)
        self.redraw()
        self.status_var.set("Cleared.")

    def on_reset_view(self):
        self.render_state = RenderState(scene=self.render_state.scene)
        self.zoom_var.set(self.render_state.scale)
        self.zoom_label.config(text=f"{self.render_state.scale:.1f}x")
        self.redraw()

    def on_zoom(self, value):
        self.render_state = self.render_state.zoomed(float(value))
        self.zoom_label.config(text=f"{self.render_state.scale:.1f}x")
        self.redraw()

    def on_wheel(self, event):
        self._wheel_zoom(1 if event.delta > 0 else -1)

    def _wheel_zoom(self, direction):
        factor = config.WHEEL_ZOOM_FACTOR if direction > 0 else 1 / config.WHEEL_ZOOM_FACTOR
        self.render_state = self.render_state.zoomed(self.render_state.scale * factor)
        self.zoom_var.set(self.render_state.scale)
        self.zoom_label.config(text=f"{self.render_state.scale:.1f}x")
        self.redraw()

    def on_press(self, event):
        # remember the grab point relative to the current offset
        self._drag_start = (event.x - self.render_state.offset_x, event.y - self.render_state.offset_y)

    def on_drag(self, event):
        if self._drag_start is None:
            return
        sx, sy = self._drag_start
        self.render_state = self.render_state.panned(event.x - sx, event.y - sy)
        self.redraw()

    def on_release(self, event):
        self._drag_start = None

    def run(self):
        self.mainloop()

import matplotlib.pyplot as plt

from scene import is_drawable


# -----------------------------
# Визуализация
# -----------------------------
def plot_scene(scene, path=None):
    """Draw window, original and clipped segments; save to path or show."""
    fig, ax = plt.subplots()

    if scene.window is not None:
        xmin, ymin, xmax, ymax = scene.window
        rect_x = [xmin, xmax, xmax, xmin, xmin]
        rect_y = [ymin, ymin, ymax, ymax, ymin]
        ax.plot(rect_x, rect_y, '-', color="#0078d7", label="Окно")

    for i, (x1, y1, x2, y2) in enumerate(scene.segments):
        ax.plot([x1, x2], [y1, y2], 'k--', linewidth=1, label="Исходный" if i == 0 else "")

    for i, seg in enumerate(s for s in scene.clipped if is_drawable(s)):
        cx1, cy1, cx2, cy2 = seg
        ax.plot([cx1, cx2], [cy1, cy2], 'r-', linewidth=2, label="Отсечённый" if i == 0 else "")

    ax.set_aspect('equal')
    ax.grid(True, color="#eee")
    if scene.segments or scene.window is not None:
        ax.legend()

    if path is None:
        plt.show()
    else:
        fig.savefig(path)
        plt.close(fig)
    return fig

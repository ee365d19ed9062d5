import matplotlib.pyplot as plt

from plotting import plot_scene
from scene import Scene, run_algorithm


def test_plot_scene_saves_file(tmp_path):
    scene = run_algorithm("2\n-5 5 15 5\n20 20 30 30\n0 0 10 10\n")
    out = tmp_path / "scene.png"
    fig = plot_scene(scene, out)
    assert out.exists()
    assert out.stat().st_size > 0
    assert not plt.fignum_exists(fig.number)


def test_plot_scene_line_count(tmp_path):
    scene = run_algorithm("2\n-5 5 15 5\n20 20 30 30\n0 0 10 10\n")
    fig = plot_scene(scene, tmp_path / "scene.png")
    ax = fig.axes[0]
    # window outline, two originals, one clipped part
    assert len(ax.lines) == 4


def test_plot_empty_scene(tmp_path):
    fig = plot_scene(Scene(), tmp_path / "empty.png")
    assert len(fig.axes[0].lines) == 0

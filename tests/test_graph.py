import matplotlib.pyplot as plt

from quickhull import graph, hull


def test_map_draws_points_and_hull(square, tmp_path):
    result = hull.convex_hull(square)
    m = graph.Map("square hull")
    m.draw_points(square)
    m.draw_hull(result)
    lines = m.fig.axes[0].get_lines()
    assert len(lines) == 3
    assert list(lines[1].get_xdata()) == [0, 0, 2, 4]
    target = tmp_path / "square.png"
    m.save(str(target), "png")
    assert target.stat().st_size > 0
    plt.close(m.fig)


def test_untitled_maps_get_distinct_figures():
    first, second = graph.Map(), graph.Map()
    assert first.fig.number != second.fig.number
    plt.close(first.fig)
    plt.close(second.fig)


def test_empty_hull_draws_nothing():
    m = graph.Map("empty")
    m.draw_points([])
    m.draw_hull([])
    assert len(m.fig.axes[0].get_lines()) == 0
    plt.close(m.fig)

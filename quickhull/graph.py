import typing as t

import matplotlib.pyplot as plt

from quickhull import data, util


class Map:
    numbers = util.Numbers()
    title: t.Any

    def __init__(self, title=""):
        self.title = title
        self.fig = plt.figure(self.title or self.numbers.next())
        self.draw_background()

    def draw_background(self):
        plt.figure(self.fig.number)
        plt.axis('equal')
        plt.grid(True, linestyle=':', zorder=0)
        if self.title:
            plt.title(self.title)

    def draw_points(
        self,
        points: t.List[data.Point],
        color: str = 'blue',
        markersize: float = 4.0,
        zorder: float = 1,
    ):
        if not points:
            return
        x, y = data.to_array(points).T
        plt.figure(self.fig.number)
        plt.plot(x, y, 'o', markersize=markersize, color=color, zorder=zorder)

    def draw_hull(
        self,
        hull: data.HullResult,
        color: str = 'green',
        linestyles: str = 'solid',
        linewidths: float = 1.0,
        zorder: float = 2,
    ):
        # joined in selection order, not in winding order
        if not hull:
            return
        x, y = data.to_array(hull).T
        plt.figure(self.fig.number)
        plt.plot(x, y, color=color, linestyle=linestyles,
                 linewidth=linewidths, zorder=zorder)
        self.draw_points(hull, color=color, markersize=6.0, zorder=zorder + 1)

    def save(self, file_name="hull.png", file_format="png"):
        plt.figure(self.fig.number)
        self.fig.savefig(file_name, format=file_format)

    @classmethod
    def show(cls):
        plt.show()

import matplotlib
import pytest

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from quickhull import data  # noqa: E402

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]


@pytest.fixture
def square():
    return data.from_coords(SQUARE)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")

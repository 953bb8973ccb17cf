# -*- coding: utf-8 -*-
"""Tests for the conductance scatter matrix."""
import matplotlib.pyplot as plt
import numpy as np
import pytest

from Burstipy.core.analysis.directions import principal_directions
from Burstipy.plotting import plot_scatter_matrix
from Burstipy.shared.error_handling import PlottingError


@pytest.fixture
def population():
    rng = np.random.default_rng(7)
    g = rng.uniform(1.0, 10.0, size=(200, 6))
    return g, principal_directions(g)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_lower_triangle_layout(population):
    g, directions = population
    fig = plot_scatter_matrix(g, directions, maxima=g.max(axis=0), scale_first=1.0, scale_second=1.0)
    axes = np.array(fig.axes).reshape(5, 5)
    visible = np.array([[ax.get_visible() for ax in row] for row in axes])
    np.testing.assert_array_equal(visible, np.tril(np.ones((5, 5), dtype=bool)))
    assert axes[4, 0].get_xlim() == (0.0, g[:, 0].max())
    assert axes[4, 0].get_ylim() == (0.0, g[:, 5].max())


def test_direction_segments(population):
    g, directions = population
    fig = plot_scatter_matrix(g, directions, maxima=g.max(axis=0), scale_first=2.0, scale_second=3.0)
    ax = fig.axes[0]
    solid, dashed = ax.get_lines()
    assert solid.get_linestyle() == "-"
    assert dashed.get_linestyle() == "--"

    value, vector = directions.rank(1)
    mean = g.mean(axis=0)
    np.testing.assert_allclose(solid.get_xdata(), [mean[0] - 2.0 * value * vector[0],
                                                   mean[0] + 2.0 * value * vector[0]])
    np.testing.assert_allclose(solid.get_ydata(), [mean[1] - 2.0 * value * vector[1],
                                                   mean[1] + 2.0 * value * vector[1]])


def test_colour_values_add_colorbar(population):
    g, directions = population
    fig = plot_scatter_matrix(g, directions, maxima=g.max(axis=0), scale_first=1.0, scale_second=1.0,
                              color_values=np.linspace(0, 1, len(g)))
    top_right = np.array(fig.axes).reshape(5, 5)[0, 4]
    assert top_right.get_visible()
    assert len(fig.axes) == 25


def test_labels(population):
    g, directions = population
    fig = plot_scatter_matrix(g, directions, maxima=g.max(axis=0), scale_first=1.0, scale_second=1.0,
                              channel_names=["a", "b", "c", "d", "e", "f"])
    axes = np.array(fig.axes).reshape(5, 5)
    assert axes[0, 0].get_ylabel() == "b"
    assert axes[4, 2].get_xlabel() == "c"


@pytest.mark.parametrize("kwargs", [
    {"maxima": np.ones(3)},
    {"color_values": np.ones(5)},
    {"mean_vec": np.ones(2)},
    {"channel_names": ["a"]},
])
def test_shape_errors(population, kwargs):
    g, directions = population
    call = dict(maxima=g.max(axis=0), scale_first=1.0, scale_second=1.0)
    call.update(kwargs)
    with pytest.raises(PlottingError):
        plot_scatter_matrix(g, directions, **call)

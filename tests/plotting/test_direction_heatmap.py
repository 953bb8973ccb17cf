# -*- coding: utf-8 -*-
"""Tests for the principal direction heatmap."""
import matplotlib.pyplot as plt
import numpy as np
import pytest

from Burstipy.core.analysis.directions import DirectionSet
from Burstipy.plotting import direction_colormap, plot_direction_heatmap
from Burstipy.shared.error_handling import PlottingError


@pytest.fixture
def directions():
    rng = np.random.default_rng(1)
    q, _ = np.linalg.qr(rng.normal(size=(6, 6)))
    return DirectionSet(values=np.array([1e-4, 1e-3, 1e-2, 0.1, 1.0, 10.0]), vectors=q)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_panels_and_labels(directions):
    fig = plot_direction_heatmap(directions)
    axes = fig.axes
    assert len(axes) == 7
    assert axes[0].get_xlabel() == r"$\lambda = 1.00e+01$"
    assert axes[5].get_xlabel() == r"$\lambda = 1.00e-04$"
    assert [t.get_text() for t in axes[0].get_yticklabels()] == ["gNa", "gKd", "gCaL", "gCaN", "gERG", "gleak"]
    assert len(axes[1].get_yticks()) == 0


def test_columns_ordered_largest_first(directions):
    fig = plot_direction_heatmap(directions)
    first = np.asarray(fig.axes[0].images[0].get_array()).ravel()
    np.testing.assert_allclose(first, directions.vectors[:, -1])


def test_second_direction_sign_flipped(directions):
    fig = plot_direction_heatmap(directions)
    second = np.asarray(fig.axes[1].images[0].get_array()).ravel()
    np.testing.assert_allclose(second, -directions.vectors[:, -2])


def test_colour_limits(directions):
    fig = plot_direction_heatmap(directions, n_directions=2)
    assert len(fig.axes) == 3
    assert fig.axes[0].images[0].get_clim() == (-1.0, 1.0)
    assert fig.axes[-1].get_ylim() == (-1.0, 1.0)


def test_colormap_endpoints():
    cmap = direction_colormap()
    np.testing.assert_allclose(cmap(0.0)[:3], np.array([0x18, 0x74, 0xcd]) / 255, atol=1e-2)
    np.testing.assert_allclose(cmap(1.0)[:3], np.array([0xcd, 0x37, 0x00]) / 255, atol=1e-2)


def test_bad_channel_names(directions):
    with pytest.raises(PlottingError):
        plot_direction_heatmap(directions, channel_names=["a", "b"])


def test_bad_direction_count(directions):
    with pytest.raises(PlottingError):
        plot_direction_heatmap(directions, n_directions=0)

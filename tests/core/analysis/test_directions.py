# -*- coding: utf-8 -*-
"""Tests for principal directions of conductance populations."""
import numpy as np
import pandas as pd
import pytest

from Burstipy.core.analysis.directions import DirectionSet, principal_directions
from Burstipy.shared.error_handling import InvalidInputError


@pytest.fixture
def correlated_population():
    """gNa and gKd co-vary strongly, the other channels are small noise."""
    rng = np.random.default_rng(42)
    latent = rng.normal(0.0, 10.0, size=500)
    g = np.column_stack([
        100.0 + latent,
        50.0 + 0.5 * latent,
        rng.normal(1.0, 0.1, 500),
        rng.normal(1.0, 0.1, 500),
        rng.normal(0.5, 0.05, 500),
        rng.normal(0.01, 0.001, 500),
    ])
    return pd.DataFrame(g, columns=["gNa", "gKd", "gCaL", "gCaN", "gERG", "gleak"])


class TestPrincipalDirections:

    def test_ascending_eigenvalues(self, correlated_population):
        directions = principal_directions(correlated_population)
        assert directions.n_channels == 6
        assert np.all(np.diff(directions.values) >= 0)

    def test_dominant_direction(self, correlated_population):
        value, vector = principal_directions(correlated_population).rank(1)
        assert value == pytest.approx(directions_total(correlated_population), rel=0.05)
        # Direction (1, 0.5) normalised, up to sign
        expected = np.array([1.0, 0.5, 0, 0, 0, 0]) / np.sqrt(1.25)
        assert abs(np.dot(vector, expected)) == pytest.approx(1.0, abs=1e-3)

    def test_orthonormal_vectors(self, correlated_population):
        vectors = principal_directions(correlated_population).vectors
        np.testing.assert_allclose(vectors.T @ vectors, np.eye(6), atol=1e-10)

    def test_matches_covariance(self, correlated_population):
        directions = principal_directions(correlated_population)
        cov = np.cov(correlated_population.to_numpy(), rowvar=False)
        for value, vector in directions.ranked():
            np.testing.assert_allclose(cov @ vector, value * vector, atol=1e-8)

    def test_ranked_limit(self, correlated_population):
        ranked = list(principal_directions(correlated_population).ranked(2))
        assert len(ranked) == 2
        assert ranked[0][0] >= ranked[1][0]

    @pytest.mark.parametrize("bad", [
        np.ones(5),
        np.ones((1, 6)),
        np.array([[1.0, np.nan], [2.0, 3.0]]),
    ])
    def test_invalid_input(self, bad):
        with pytest.raises(InvalidInputError):
            principal_directions(bad)


def directions_total(df):
    """Variance of the latent gNa/gKd mode: var(gNa) + var(gKd)."""
    return float(df["gNa"].var() + df["gKd"].var())


class TestDirectionSet:

    def test_shape_mismatch(self):
        with pytest.raises(InvalidInputError):
            DirectionSet(values=np.ones(3), vectors=np.eye(2))

    def test_rank_bounds(self):
        directions = DirectionSet(values=np.array([1.0, 2.0]), vectors=np.eye(2))
        assert directions.rank(1)[0] == 2.0
        np.testing.assert_array_equal(directions.rank(2)[1], [1.0, 0.0])
        with pytest.raises(IndexError):
            directions.rank(3)
        with pytest.raises(IndexError):
            directions.rank(0)

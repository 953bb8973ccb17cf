# src/Burstipy/core/analysis/directions.py
# -*- coding: utf-8 -*-
"""
Principal directions of a conductance parameter population.

Given many conductance sets (one row per model instance, one column per
channel), the eigen decomposition of their covariance gives the directions
along which the population varies most. These are the inputs of the
direction heatmap and scatter matrix figures.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np
from scipy import linalg

from Burstipy.shared.error_handling import InvalidInputError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionSet:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.

    `values` are sorted in ascending order and `vectors[:, i]` is the
    eigenvector of `values[i]`, so the dominant direction is the last column.
    """

    values: np.ndarray
    vectors: np.ndarray

    def __post_init__(self):
        values = np.asarray(self.values, dtype=float)
        vectors = np.asarray(self.vectors, dtype=float)
        if values.ndim != 1 or vectors.ndim != 2 or vectors.shape != (values.size, values.size):
            raise InvalidInputError(
                f"Expected n eigenvalues and an (n, n) eigenvector matrix, got {values.shape} and {vectors.shape}"
            )
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "vectors", vectors)

    @property
    def n_channels(self) -> int:
        return int(self.values.size)

    def rank(self, k: int) -> Tuple[float, np.ndarray]:
        """The k-th largest (1-based) eigenvalue with its eigenvector."""
        if not 1 <= k <= self.n_channels:
            raise IndexError(f"Direction rank must be in [1, {self.n_channels}], got {k}")
        column = self.n_channels - k
        return float(self.values[column]), self.vectors[:, column]

    def ranked(self, k: Optional[int] = None) -> Iterator[Tuple[float, np.ndarray]]:
        """Yield (eigenvalue, eigenvector) pairs from the largest eigenvalue down."""
        k = self.n_channels if k is None else min(k, self.n_channels)
        for rank in range(1, k + 1):
            yield self.rank(rank)


def principal_directions(parameters) -> DirectionSet:
    """
    Eigen decomposition of the covariance of a parameter matrix.

    Args:
        parameters: Array-like of shape (n_samples, n_channels), e.g. a
            pandas DataFrame of maximal conductances.

    Returns:
        DirectionSet with ascending eigenvalues.

    Raises:
        InvalidInputError: If the matrix is not 2-D or has fewer than two rows.
    """
    g_all = np.asarray(parameters, dtype=float)
    if g_all.ndim != 2:
        raise InvalidInputError(f"Parameter matrix must be 2-D, got shape {g_all.shape}")
    if g_all.shape[0] < 2:
        raise InvalidInputError("At least two parameter sets are needed to estimate a covariance")
    if not np.all(np.isfinite(g_all)):
        raise InvalidInputError("Parameter matrix contains NaN or infinite values")

    covariance = np.atleast_2d(np.cov(g_all, rowvar=False))
    values, vectors = linalg.eigh(covariance)
    log.debug(f"Principal directions of {g_all.shape[0]} samples x {g_all.shape[1]} channels: {values}")
    return DirectionSet(values=values, vectors=vectors)

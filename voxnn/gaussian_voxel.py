"""Voxel accumulating the mean and covariance of the points it receives."""

from __future__ import annotations

from typing import Optional

import numpy as np

__all__ = ["GaussianVoxel"]


class GaussianVoxel:
    """Mean/covariance accumulator; until finalized it holds running sums."""

    def __init__(self) -> None:
        self.finalized = False
        self.num_points = 0
        self.mean = np.zeros(4)
        self.cov = np.zeros((4, 4))

    def __len__(self) -> int:
        return 1

    def add(self, transformed_pt, cov, T: Optional[np.ndarray] = None) -> None:
        """Add a transformed point and its covariance, rotated into the voxel frame by ``T``."""
        pt = np.asarray(transformed_pt, dtype=float)
        c = np.asarray(cov, dtype=float)
        if pt.shape != (4,):
            raise ValueError("point must have 4 elements")
        if c.shape != (4, 4):
            raise ValueError("covariance must be 4x4")
        t = np.eye(4) if T is None else np.asarray(T, dtype=float)
        if t.shape != (4, 4):
            raise ValueError("transformation must be 4x4")

        if self.finalized:
            self.finalized = False
            self.mean = self.mean * self.num_points
            self.cov = self.cov * self.num_points

        self.num_points += 1
        self.mean = self.mean + pt
        self.cov = self.cov + t @ c @ t.T

    def finalize(self) -> None:
        """Turn the running sums into mean and covariance."""
        if self.finalized:
            return
        with np.errstate(divide="ignore", invalid="ignore"):
            self.mean = self.mean / self.num_points
            self.cov = self.cov / self.num_points
        self.finalized = True

    def nearest_neighbor_search(self, pt) -> tuple[int, float]:
        """Return ``(0, squared distance to the mean)``."""
        q = np.asarray(pt, dtype=float)
        return 0, float(np.sum((self.mean - q) ** 2))

    def knn_search(self, pt, k: int) -> tuple[list[int], list[float]]:
        """A voxel holds a single Gaussian, so at most one neighbour is returned."""
        index, dist = self.nearest_neighbor_search(pt)
        return [index], [dist]
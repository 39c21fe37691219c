"""Point cloud view with covariances kept in a separate, shared list."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["PointCloudProxy"]


class PointCloudProxy:
    """Reads points from an array and stores covariances in a caller-owned list."""

    def __init__(self, points, covs: list) -> None:
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            arr = arr.reshape(0, 4)
        if arr.ndim != 2 or arr.shape[1] not in (3, 4):
            raise ValueError("points must be Nx3 or Nx4")
        if arr.shape[1] == 3:
            arr = np.hstack([arr, np.ones((arr.shape[0], 1))])
        self.points = arr
        self.covs = covs

    def __len__(self) -> int:
        return self.points.shape[0]

    def has_points(self) -> bool:
        return len(self) > 0

    def has_covs(self) -> bool:
        return len(self.covs) > 0

    def point(self, i: int) -> np.ndarray:
        """The i-th point as a homogeneous 4-vector."""
        return self.points[i].copy()

    def cov(self, i: int) -> np.ndarray:
        return self.covs[i]

    def resize(self, n: int) -> None:
        """Resize the covariance list in place, padding with zero matrices."""
        if n < 0:
            raise ValueError("size must be non-negative")
        current = len(self.covs)
        if n < current:
            del self.covs[n:]
        else:
            self.covs.extend(np.zeros((4, 4)) for _ in range(n - current))

    def set_cov(self, i: int, cov: Sequence) -> None:
        c = np.array(cov, dtype=float)
        if c.shape != (4, 4):
            raise ValueError("covariance must be 4x4")
        self.covs[i] = c
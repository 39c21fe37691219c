"""Pluggable registration pieces: feature points, brute-force search, rejectors and a DoF penalty."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

__all__ = [
    "FeaturePoint",
    "BruteForceSearch",
    "DistanceRejector",
    "FeatureRejector",
    "DofPenaltyFactor",
]

FEATURE_SIZE = 36


def _vector(values, size: int, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have {size} elements")
    return arr


@dataclass
class FeaturePoint:
    """A point with a normal and a fixed-length feature descriptor."""

    point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    features: np.ndarray = field(default_factory=lambda: np.zeros(FEATURE_SIZE))

    def __post_init__(self) -> None:
        self.point = _vector(self.point, 3, "point")
        self.normal = _vector(self.normal, 3, "normal")
        self.features = _vector(self.features, FEATURE_SIZE, "features")

    def homogeneous_point(self) -> np.ndarray:
        """The point as ``[x, y, z, 1]``."""
        return np.append(self.point, 1.0)

    def homogeneous_normal(self) -> np.ndarray:
        """The normal as ``[nx, ny, nz, 0]``."""
        return np.append(self.normal, 0.0)


def _query_xyz(query) -> np.ndarray:
    q = np.asarray(query, dtype=float).reshape(-1)
    if q.shape not in ((3,), (4,)):
        raise ValueError("query must have 3 or 4 elements")
    return q[:3]


class BruteForceSearch:
    """Exhaustive nearest-neighbour search over a list of feature points."""

    def __init__(self, points: Sequence[FeaturePoint]) -> None:
        self.points = list(points)
        if self.points:
            self._coords = np.stack([p.point for p in self.points])
        else:
            self._coords = np.zeros((0, 3))

    def __len__(self) -> int:
        return len(self.points)

    def knn_search(self, query, k: int) -> tuple[list[int], list[float]]:
        """Return indices and ascending squared distances of up to ``k`` neighbours."""
        if k <= 0:
            raise ValueError(f"invalid number of neighbors: {k}")
        q = _query_xyz(query)
        if not self.points:
            return [], []
        sq_dists = np.sum((self._coords - q) ** 2, axis=1)
        order = np.argsort(sq_dists, kind="stable")[:k]
        return [int(i) for i in order], [float(sq_dists[i]) for i in order]

    def nearest_neighbor_search(self, query) -> Optional[tuple[int, float]]:
        """Return ``(index, squared distance)`` of the nearest point, or None when empty."""
        indices, dists = self.knn_search(query, 1)
        if not indices:
            return None
        return indices[0], dists[0]


@dataclass
class DistanceRejector:
    """Rejects correspondences farther apart than a maximum distance."""

    max_dist_sq: float = 1.0

    def set_max_distance(self, dist: float) -> None:
        """Set the maximum correspondence distance."""
        self.max_dist_sq = dist * dist

    def __call__(self, target, source, T, target_index: int, source_index: int, sq_dist: float) -> bool:
        """Return True if the correspondence should be rejected."""
        return sq_dist > self.max_dist_sq


@dataclass
class FeatureRejector:
    """Rejects correspondences by distance and by feature similarity."""

    max_correspondence_dist_sq: float = 1.0
    min_feature_cos_dist: float = 0.9

    def __call__(
        self,
        target: Sequence[FeaturePoint],
        source: Sequence[FeaturePoint],
        T,
        target_index: int,
        source_index: int,
        sq_dist: float,
    ) -> bool:
        """Return True if the correspondence should be rejected."""
        if sq_dist > self.max_correspondence_dist_sq:
            return True
        similarity = float(target[target_index].features @ source[source_index].features)
        return similarity < self.min_feature_cos_dist


@dataclass
class DofPenaltyFactor:
    """Soft constraint fixing chosen degrees of freedom ``[rx, ry, rz, tx, ty, tz]``."""

    lambda_: float = 1e8
    dof_mask: tuple[float, ...] = (1.0, 1.0, 0.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if len(self.dof_mask) != 6:
            raise ValueError("dof_mask must have 6 elements")

    def update_linearized_system(self, target, source, target_tree, T, H, b, e):
        """Return ``(H, b, e)`` with the penalty added to the information matrix."""
        h = np.array(H, dtype=float)
        if h.shape != (6, 6):
            raise ValueError("H must be 6x6")
        h = h + np.diag(np.asarray(self.dof_mask, dtype=float)) * self.lambda_
        return h, np.array(b, dtype=float), float(e)

    def update_error(self, target, source, T, e) -> float:
        """The penalty does not change the error."""
        return float(e)
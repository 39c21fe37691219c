# voxnn

This package provides small building blocks for 3D point cloud registration. It is built on NumPy.

Points use the homogeneous form `[x, y, z, 1.0]`. Covariances are 4x4 matrices.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `voxnn.gaussian_voxel`

`GaussianVoxel` collects the points that fall into one voxel.

- `add(transformed_pt, cov, T=None)` adds a 4-vector point to a running sum. It also adds its 4x4 covariance, rotated as `T @ cov @ T.T`. `T` defaults to the identity.
- `finalize()` divides both sums by the number of points. The voxel then holds a mean and a covariance.
- Calling `add` on a finalized voxel turns it back into sums first, so points can be added again later.
- `nearest_neighbor_search(pt)` returns `(0, squared distance to the mean)`.
- `knn_search(pt, k)` returns that same single neighbour as two lists.
- `len(voxel)` is always 1.

### `voxnn.proxy`

`PointCloudProxy(points, covs)` reads its points from an Nx3 or Nx4 array. Nx3 input gets a homogeneous 1 appended. The covariances are stored in the list you pass in, and the proxy changes that list in place.

The proxy offers:

- `len()`
- `has_points()` and `has_covs()`
- `point(i)`
- `cov(i)`
- `resize(n)`, which truncates the list or pads it with zero matrices
- `set_cov(i, cov)`, which checks that `cov` is 4x4

### `voxnn.custom`

These are extension points for a registration loop:

- `FeaturePoint` holds three fields:
  - `point`: 3 elements
  - `normal`: 3 elements
  - `features`: a descriptor of 36 elements

  `homogeneous_point()` and `homogeneous_normal()` return the point and the normal as 4-vectors.
- `BruteForceSearch(points)` runs an exhaustive search over a list of `FeaturePoint`s.
  - `knn_search(query, k)` returns indices and squared distances in ascending order. `k <= 0` raises `ValueError`.
  - `nearest_neighbor_search(query)` returns `(index, squared distance)`, or `None` for an empty set.
  - The query may have 3 or 4 elements.
- `DistanceRejector` rejects a correspondence when `sq_dist > max_dist_sq`. The default `max_dist_sq` is 1.0. `set_max_distance(dist)` stores `dist * dist`.
- `FeatureRejector` rejects a correspondence in two cases:
  - the distance exceeds `max_correspondence_dist_sq`;
  - the dot product of the two feature vectors is below `min_feature_cos_dist`, which defaults to 0.9.
- `DofPenaltyFactor` adds `diag(dof_mask) * lambda_` to a 6x6 information matrix.
  - The ordering is `[rx, ry, rz, tx, ty, tz]`.
  - The default mask fixes roll and pitch, and the default `lambda_` is 1e8.
  - `update_linearized_system(...)` returns a new `(H, b, e)` tuple.
  - `update_error(...)` returns the error unchanged.

## Example

```python
import numpy as np
from voxnn.custom import BruteForceSearch, DistanceRejector, FeaturePoint
from voxnn.gaussian_voxel import GaussianVoxel

voxel = GaussianVoxel()
for xyz in ([0.0, 0.0, 0.0], [2.0, 0.0, 0.0]):
    voxel.add(np.array([*xyz, 1.0]), np.eye(4) * 0.01)
voxel.finalize()
# voxel.mean == [1, 0, 0, 1]

points = [FeaturePoint(point=[0, 0, 0]), FeaturePoint(point=[1, 0, 0])]
search = BruteForceSearch(points)
index, sq_dist = search.nearest_neighbor_search([0.9, 0.0, 0.0])  # (1, 0.01)

rejector = DistanceRejector()
rejector.set_max_distance(0.5)
rejected = rejector(points, points, np.eye(4), index, 0, sq_dist)  # False
```

## What this package does not do

- It has no spatial index such as a k-d tree or a projective index map. The only search provided is the brute-force `BruteForceSearch`, plus the single-Gaussian search of `GaussianVoxel`.
- It does not run a registration. There is no optimiser, no per-point ICP or GICP factor, and no alignment function. The rejectors and `DofPenaltyFactor` are pieces meant to be called from your own loop.
- It has no command-line tool and no point cloud file reader.
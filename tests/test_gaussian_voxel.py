import numpy as np
import pytest

from voxnn.gaussian_voxel import GaussianVoxel


def _rot_z(angle):
    c, s = np.cos(angle), np.sin(angle)
    t = np.eye(4)
    t[:2, :2] = [[c, -s], [s, c]]
    return t


def _diagonal_sum(matrix):
    return float(np.diagonal(matrix).sum())


def test_mean_of_added_points():
    voxel = GaussianVoxel()
    pts = [np.array([1.0, 2.0, 3.0, 1.0]), np.array([3.0, 0.0, -1.0, 1.0])]
    for p in pts:
        voxel.add(p, np.zeros((4, 4)))
    assert not voxel.finalized
    voxel.finalize()
    assert voxel.finalized
    assert voxel.num_points == 2
    np.testing.assert_allclose(voxel.mean, np.mean(pts, axis=0))


def test_finalize_twice_is_noop():
    voxel = GaussianVoxel()
    voxel.add(np.array([2.0, 2.0, 2.0, 1.0]), np.eye(4))
    voxel.add(np.array([4.0, 4.0, 4.0, 1.0]), np.eye(4))
    voxel.finalize()
    mean = voxel.mean.copy()
    voxel.finalize()
    np.testing.assert_allclose(voxel.mean, mean)


def test_add_after_finalize_restores_sums():
    voxel = GaussianVoxel()
    pts = [np.array([1.0, 0.0, 0.0, 1.0]), np.array([0.0, 1.0, 0.0, 1.0]), np.array([0.0, 0.0, 4.0, 1.0])]
    covs = [np.diag([1.0, 2.0, 3.0, 0.0]), np.diag([2.0, 2.0, 2.0, 0.0]), np.diag([0.5, 0.5, 0.5, 0.0])]
    voxel.add(pts[0], covs[0])
    voxel.add(pts[1], covs[1])
    voxel.finalize()
    voxel.add(pts[2], covs[2])
    assert not voxel.finalized
    voxel.finalize()
    np.testing.assert_allclose(voxel.mean, np.mean(pts, axis=0))
    np.testing.assert_allclose(voxel.cov, np.mean(covs, axis=0))


def test_rotation_preserves_covariance_diagonal_sum():
    cov = np.diag([1.0, 4.0, 9.0, 0.0])
    voxel = GaussianVoxel()
    voxel.add(np.array([0.0, 0.0, 0.0, 1.0]), cov, _rot_z(0.7))
    voxel.finalize()
    assert _diagonal_sum(voxel.cov) == pytest.approx(_diagonal_sum(cov))
    np.testing.assert_allclose(voxel.cov, voxel.cov.T, atol=1e-12)
    assert not np.allclose(voxel.cov, cov)


def test_search_returns_single_voxel():
    voxel = GaussianVoxel()
    voxel.add(np.array([1.0, 1.0, 1.0, 1.0]), np.eye(4))
    voxel.finalize()
    assert voxel.nearest_neighbor_search(voxel.mean) == (0, 0.0)
    indices, dists = voxel.knn_search(voxel.mean + np.array([3.0, 4.0, 0.0, 0.0]), 5)
    assert indices == [0]
    assert dists == [pytest.approx(25.0)]
    assert len(voxel) == 1


def test_bad_shapes_raise():
    voxel = GaussianVoxel()
    with pytest.raises(ValueError):
        voxel.add(np.zeros(3), np.eye(4))
    with pytest.raises(ValueError):
        voxel.add(np.zeros(4), np.eye(3))
    with pytest.raises(ValueError):
        voxel.add(np.zeros(4), np.eye(4), np.eye(3))
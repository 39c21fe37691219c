"""Point cloud building blocks: Gaussian voxels, covariance proxies and registration extension points."""

__version__ = "1.0.0"

__all__ = ["custom", "gaussian_voxel", "proxy"]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxnn"
version = "1.0.0"
description = "Point cloud building blocks: Gaussian voxels, covariance proxies, brute-force search, correspondence rejectors and DoF penalties"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["point cloud", "nearest neighbor", "voxel", "covariance", "registration", "icp", "gicp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["voxnn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

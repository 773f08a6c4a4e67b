[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linakit"
version = "0.1.0"
description = "Vectors, spatial search, statistics and voxel grids for point clouds"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["linear algebra", "kd-tree", "octree", "statistics", "pca", "point cloud", "voxel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["linakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

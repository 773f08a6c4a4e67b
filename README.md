# linakit

A small toolkit for numerical work on vectors and point clouds.

- `linakit.vector`: a `Vector` type with arithmetic, statistics, sorting,
  and outer and cross products, plus `cross_cov`, `cross_corr`, `convolve` and `arange`.
- `linakit.compare`: tolerant comparison of floats, vectors and matrices
  (`float_equal`, `vectors_equal`, `matrices_equal`).
- `linakit.dataio`: random test data and whitespace-separated text I/O
  (`load_3d_matrix`, `load_2d_matrix`, `write_matrix_txt`).
- `linakit.numerical`: central differences (`first_order_diff`) and
  Gauss–Legendre quadrature with 1 to 5 points (`gaussian_quadrature`).
- `linakit.spatial`:
  - `distance`: point, line and plane distances, vector metrics, and directed Hausdorff distance.
  - `knn`: brute-force k-nearest neighbours.
  - `kdtree`: `KDTree` with insert, search, minimum and delete.
  - `octree`: `Octree`, a hash-map octree addressed by 3-bit codes.
  - `normals`: plane-normal fitting (`plane_pca_eigen`, `plane_pca_svd`,
    `plane_linear_solve_weighted`).
- `linakit.stats`:
  - `descriptive`: kernels, mode, variance, covariance, correlation, bin rules and histograms.
  - `mahalanobis`: Mahalanobis distance.
  - `regression`: `simple_linear_regression`.
  - `pca`: `principal_components`.
  - `cca`: `canonical_correlation`.
  - `ica`: `fast_ica`.
- `linakit.mesh`:
  - `points`: point-cloud helpers (`load_points`, `min_xyz`, `max_xyz`, `points_equal`).
  - `grid`: `Grid`, a voxel grid over a point cloud, with per-point voxel ids.
  - `voxel`: `Voxel`, which fits a PCA plane to its points.
  - `sets`: the typed sets `IntSet` and `FloatSet`.

## Installation

```
pip install .
```

## Examples

```python
from linakit.vector import Vector
from linakit.spatial.distance import euclidean_distance
from linakit.stats.descriptive import variance

v = Vector([1, 2, 3])
print(v.dot(Vector([4, 5, 6])))                          # 32.0
print(euclidean_distance(Vector([1, 2, -3]), Vector([5, -8, 6])))
print(variance(Vector([1, 5, 7, 2, 6, 9])))               # 7.666...
```

```python
import math
from linakit.numerical import gaussian_quadrature

print(gaussian_quadrature(math.sin, 0, math.pi, 5))       # close to 2
```

```python
from linakit.mesh.grid import Grid

grid = Grid.from_file("points.txt", 15, 15, 15)
print(grid.cols, grid.rows, grid.depths)
print(grid.voxel_ids().voxel_ids[:10])
```

## What the package does not do

The package has no command-line tool. It provides the parts that per-point
normal estimation is built from: voxel grids, plane fits per voxel,
nearest-neighbour search and plane-normal fitting. It does not provide a
complete pipeline that reads a point file and writes normals, and it has no
mesh triangulation.

## Running the tests

```
pip install .[test]
pytest
```
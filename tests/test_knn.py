import numpy as np

from linakit.dataio import random_matrix, random_vector
from linakit.spatial.distance import euclidean_distance
from linakit.spatial.knn import k_nearest_neighbors, k_nearest_neighbors_with_distance
from linakit.vector import Vector


def test_k_nearest_neighbors_ordering():
    data = random_matrix(10, 3)
    v = random_vector(3)
    knn = k_nearest_neighbors(data, v, 2, euclidean_distance)
    assert knn.shape == (2, 3)
    assert v.sub(Vector(knn[0])).norm() <= v.sub(Vector(knn[1])).norm()


def test_k_nearest_neighbors_with_distance_ordering():
    data = random_matrix(10, 3)
    v = random_vector(3)
    knn = k_nearest_neighbors_with_distance(data, v, 2, euclidean_distance)
    assert knn.shape == (2, 5)
    assert knn[0, -1] <= knn[1, -1]


def test_k_nearest_neighbors_fixed():
    data = [[0, 0], [3, 4], [1, 1]]
    knn = k_nearest_neighbors(data, Vector([0, 0]), 2, euclidean_distance)
    assert knn.tolist() == [[0.0, 0.0], [1.0, 1.0]]


def test_k_clamped_to_rows():
    data = [[0, 0], [3, 4]]
    knn = k_nearest_neighbors(data, [0, 0], 5, euclidean_distance)
    assert knn.shape == (2, 2)


def test_with_distance_columns():
    data = [[0, 0], [3, 4], [1, 1]]
    knn = k_nearest_neighbors_with_distance(data, [0, 0], 3, euclidean_distance)
    assert knn[:, 2].tolist() == [0.0, 2.0, 1.0]
    assert np.allclose(knn[:, 3], [0.0, np.sqrt(2), 5.0])
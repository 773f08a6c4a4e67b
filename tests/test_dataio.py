import numpy as np
import pytest

from linakit.dataio import (
    load_2d_matrix,
    load_3d_matrix,
    random_float,
    random_matrix,
    random_square_matrix,
    random_symmetric_33_matrix,
    random_vector,
    write_matrix_txt,
)


def test_random_float_range():
    for _ in range(100):
        x = random_float()
        assert -1.0 < x < 1.0


def test_random_vector_length_and_range():
    v = random_vector(20)
    assert len(v) == 20
    assert all(-1.0 < x < 1.0 for x in v)


def test_random_symmetric_33_matrix_is_symmetric():
    m = random_symmetric_33_matrix()
    assert m.shape == (3, 3)
    assert np.array_equal(m, m.T)


def test_random_square_matrix_shape():
    assert random_square_matrix(4).shape == (4, 4)


def test_random_matrix_shape():
    m = random_matrix(10, 3)
    assert m.shape == (10, 3)
    assert np.all(np.abs(m) < 1.0)


def test_load_3d_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    mat = random_matrix(10, 3)
    write_matrix_txt(path, mat)
    loaded = load_3d_matrix(path)
    assert loaded.shape == (10, 3)
    assert np.allclose(loaded, mat, atol=1e-6)


def test_load_2d_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    mat = random_matrix(7, 2)
    write_matrix_txt(path, mat)
    loaded = load_2d_matrix(path)
    assert loaded.shape == (7, 2)
    assert np.allclose(loaded, mat, atol=1e-6)


def test_write_matrix_txt_format(tmp_path):
    path = tmp_path / "test.txt"
    write_matrix_txt(path, [[1, 2], [3, 4.5]])
    assert path.read_text() == "1.000000 2.000000 \n3.000000 4.500000 \n"


def test_write_large_matrix_line_count(tmp_path):
    path = tmp_path / "test.txt"
    write_matrix_txt(path, random_matrix(10, 10))
    lines = path.read_text().splitlines()
    assert len(lines) == 10
    assert all(len(line.split()) == 10 for line in lines)


def test_load_stops_at_malformed_line(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3\n4 5 6\n7 8\n9 10 11\n")
    loaded = load_3d_matrix(path)
    assert loaded.tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert load_2d_matrix(path).shape == (0, 2)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_3d_matrix(tmp_path / "missing.txt")